"""
타임존 유틸리티

내부 저장: UTC ISO-8601 (마이크로초 포함) 원칙 준수를 위한 헬퍼 함수
"""

from datetime import datetime, timezone


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def to_iso(dt: datetime) -> str:
    """datetime을 저장용 ISO 문자열로 변환

    naive datetime은 UTC로 간주. 마이크로초를 항상 포함하여
    문자열 정렬 순서가 시간 순서와 일치하도록 함.

    Example:
        >>> to_iso(datetime(2026, 10, 1, tzinfo=timezone.utc))
        '2026-10-01T00:00:00.000000+00:00'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="microseconds")


def from_iso(value: str) -> datetime:
    """저장된 ISO 문자열을 UTC datetime으로 변환"""
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def month_bounds(year: int, month: int) -> tuple[datetime, datetime]:
    """월 구간 [해당 월 1일, 다음 달 1일) 반환 (UTC)

    Args:
        year: 연도
        month: 월 (1-12)

    Returns:
        (시작, 끝) - 끝은 포함하지 않음
    """
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end
