"""
Dashboard 서비스

총 잔액, 이번 달 수입/지출, 계좌 수, 최근 거래
"""

import logging
from decimal import Decimal
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.constants import Defaults
from core.ledger import BalanceEngine, LedgerStore
from core.storage import AccountStore
from core.types import TransactionType
from core.utils.money import to_number
from core.utils.timezone import month_bounds, now_utc
from web.services.transaction_service import serialize_transaction

logger = logging.getLogger(__name__)


class DashboardService:
    """Dashboard 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.ledger_store = LedgerStore(db)
        self.engine = BalanceEngine(self.ledger_store, AccountStore(db))

    async def get_summary(self, owner_id: str) -> dict[str, Any]:
        """대시보드 요약

        Returns:
            {
                "total_balance": float,
                "month_income": float,
                "month_expense": float,
                "account_count": int,
                "recent_transactions": [...],
            }
        """
        report = await self.engine.get_balances(owner_id)

        now = now_utc()
        start, end = month_bounds(now.year, now.month)
        month_transactions = await self.ledger_store.list_transactions_between(
            owner_id, start, end
        )

        income = Decimal("0")
        expense = Decimal("0")
        for tx in month_transactions:
            if tx.transaction_type == TransactionType.INCOME.value:
                income += tx.amount
            elif tx.transaction_type == TransactionType.EXPENSE.value:
                expense += tx.amount

        recent = await self.ledger_store.list_transactions(
            owner_id,
            newest_first=True,
            limit=Defaults.RECENT_TRANSACTION_COUNT,
        )

        return {
            "total_balance": to_number(report.total),
            "month_income": to_number(income),
            "month_expense": to_number(expense),
            "account_count": len(report.balances),
            "recent_transactions": [serialize_transaction(tx) for tx in recent],
        }
