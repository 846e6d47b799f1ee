"""
유틸리티 패키지

타임존 처리, 금액 변환 등 공통 유틸리티
"""

from core.utils.money import (
    from_db,
    parse_amount,
    round_money,
    to_db,
    to_number,
)
from core.utils.timezone import (
    from_iso,
    month_bounds,
    now_utc,
    to_iso,
)

__all__ = [
    "from_db",
    "parse_amount",
    "round_money",
    "to_db",
    "to_number",
    "from_iso",
    "month_bounds",
    "now_utc",
    "to_iso",
]
