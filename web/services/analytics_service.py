"""
Analytics 서비스

월 단위 [해당 월 1일, 다음 달 1일) UTC 구간 집계
- expense_by_category / income_by_category: 카테고리별 합계
- account_analysis: (계좌, 유형)별 합계 (이체 Leg 포함)
"""

from collections import defaultdict
from decimal import Decimal
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger import LedgerStore
from core.types import TransactionType
from core.utils.money import to_number
from core.utils.timezone import month_bounds
from web.services.period import validate_period


class AnalyticsService:
    """Analytics 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.ledger_store = LedgerStore(db)

    async def expense_by_category(self, owner_id: str, month: Any, year: Any) -> list[dict[str, Any]]:
        """카테고리별 지출 합계"""
        return await self._by_category(owner_id, month, year, TransactionType.EXPENSE.value)

    async def income_by_category(self, owner_id: str, month: Any, year: Any) -> list[dict[str, Any]]:
        """카테고리별 수입 합계"""
        return await self._by_category(owner_id, month, year, TransactionType.INCOME.value)

    async def account_analysis(self, owner_id: str, month: Any, year: Any) -> list[dict[str, Any]]:
        """계좌/유형별 합계

        Returns:
            [{account_id, type, amount}] (첫 등장 순)
        """
        month_num, year_num = validate_period(month, year)
        start, end = month_bounds(year_num, month_num)

        transactions = await self.ledger_store.list_transactions_between(owner_id, start, end)

        totals: dict[tuple[str, str], Decimal] = defaultdict(Decimal)
        for tx in transactions:
            totals[(tx.account_id, tx.transaction_type)] += tx.amount

        return [
            {"account_id": account_id, "type": tx_type, "amount": to_number(amount)}
            for (account_id, tx_type), amount in totals.items()
        ]

    async def _by_category(
        self,
        owner_id: str,
        month: Any,
        year: Any,
        transaction_type: str,
    ) -> list[dict[str, Any]]:
        month_num, year_num = validate_period(month, year)
        start, end = month_bounds(year_num, month_num)

        transactions = await self.ledger_store.list_transactions_between(
            owner_id, start, end, transaction_type
        )

        totals: dict[str, Decimal] = defaultdict(Decimal)
        for tx in transactions:
            if tx.category_id:
                totals[tx.category_id] += tx.amount

        return [
            {"category_id": category_id, "amount": to_number(amount)}
            for category_id, amount in totals.items()
        ]
