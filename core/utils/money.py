"""
금액 유틸리티

모든 금액은 Decimal로 다루고 DB에는 문자열로 저장.
반올림은 ROUND_HALF_UP, 소수점 2자리.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from core.constants import Limits
from core.errors import ValidationError


def round_money(value: Decimal) -> Decimal:
    """소수점 2자리 반올림 (ROUND_HALF_UP)

    Example:
        >>> round_money(Decimal("10.005"))
        Decimal('10.01')
    """
    return value.quantize(Limits.AMOUNT_QUANT, rounding=ROUND_HALF_UP)


def parse_amount(value: Any, message: str = "Invalid amount") -> Decimal:
    """입력 금액을 양의 Decimal로 변환

    float은 문자열을 거쳐 변환하여 이진 오차를 피함.
    bool은 숫자로 취급하지 않음.

    Args:
        value: 원본 값 (str, int, float, Decimal)
        message: 검증 실패 시 에러 메시지

    Returns:
        양의 Decimal

    Raises:
        ValidationError: 숫자가 아니거나, 0 이하이거나, 유한하지 않거나,
            Limits.MAX_AMOUNT를 넘는 경우
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(message)

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError(message) from None

    if not amount.is_finite() or amount <= 0 or amount > Limits.MAX_AMOUNT:
        raise ValidationError(message)

    return amount


def to_db(amount: Decimal) -> str:
    """Decimal → DB 저장 문자열"""
    return str(amount)


def from_db(value: str | None) -> Decimal:
    """DB 문자열 → Decimal (NULL은 0)"""
    if value is None:
        return Decimal("0")
    return Decimal(value)


def to_number(amount: Decimal) -> float:
    """API 응답용 숫자 변환 (소수점 2자리 반올림 후 float)"""
    return float(round_money(amount))
