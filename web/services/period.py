"""
월/연도 조회 구간 검증 (예산, 분석 공용)
"""

from typing import Any

from core.constants import Limits
from core.errors import ValidationError


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def validate_period(
    month: Any,
    year: Any,
    month_message: str = "Invalid month",
    year_message: str = "Invalid year",
) -> tuple[int, int]:
    """월/연도 검증

    Args:
        month: 1-12
        year: Limits.MIN_YEAR - Limits.MAX_YEAR

    Returns:
        (month, year) 정수

    Raises:
        ValidationError: 누락 또는 범위 밖
    """
    if month in (None, "") or year in (None, ""):
        raise ValidationError("Month and year are required")

    month_num = _to_int(month)
    if month_num is None or not 1 <= month_num <= 12:
        raise ValidationError(month_message)

    year_num = _to_int(year)
    if year_num is None or not Limits.MIN_YEAR <= year_num <= Limits.MAX_YEAR:
        raise ValidationError(year_message)

    return month_num, year_num
