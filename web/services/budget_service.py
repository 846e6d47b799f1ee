"""
Budget 서비스

월별 카테고리 예산 + 진행률 (spent / remaining / percentage / over_budget)
"""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import NotFoundError, ValidationError
from core.ledger import LedgerStore, ReferenceGuard
from core.models import BudgetRecord
from core.storage import BudgetStore, CategoryStore
from core.types import CategoryType, TransactionType
from core.utils.money import parse_amount, round_money, to_number
from core.utils.timezone import month_bounds
from web.services.period import validate_period

logger = logging.getLogger(__name__)


def budget_progress(amount: Decimal, spent: Decimal) -> dict[str, Any]:
    """예산 진행률 계산

    Args:
        amount: 예산 금액 (> 0)
        spent: 해당 월 지출 합계

    Returns:
        spent, remaining, percentage, over_budget
    """
    remaining = amount - spent
    percentage = spent / amount * 100 if amount > 0 else Decimal("0")
    return {
        "spent": to_number(spent),
        "remaining": to_number(remaining),
        "percentage": float(round_money(percentage)),
        "over_budget": spent > amount,
    }


class BudgetService:
    """Budget 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.budget_store = BudgetStore(db)
        self.category_store = CategoryStore(db)
        self.ledger_store = LedgerStore(db)
        self.guard = ReferenceGuard(db)

    async def create_budget(
        self,
        owner_id: str,
        amount: Any,
        month: Any,
        year: Any,
        category_id: str | None,
    ) -> dict[str, Any]:
        """예산 생성

        Raises:
            ValidationError: 금액/월/연도 오류, 카테고리 누락, 중복 예산
            NotFoundError: expense 카테고리 없음
        """
        parsed_amount = parse_amount(amount, message="Valid amount is required")
        month_num, year_num = validate_period(
            month, year, month_message="Month must be between 1 and 12"
        )

        if not category_id:
            raise ValidationError("Category is required")

        if not await self.guard.category_matches(
            owner_id, category_id, CategoryType.EXPENSE.value
        ):
            raise NotFoundError("Category not found or not an expense category")

        if await self.guard.budget_exists(owner_id, category_id, month_num, year_num):
            raise ValidationError("Budget already exists for this category, month, and year")

        budget = await self.budget_store.create(
            owner_id, category_id, parsed_amount, month_num, year_num
        )
        return self._serialize(budget)

    async def list_budgets(self, owner_id: str, month: Any, year: Any) -> list[dict[str, Any]]:
        """월별 예산 목록 (카테고리 + 진행률 포함)"""
        month_num, year_num = validate_period(month, year)

        budgets = await self.budget_store.list_for_month(owner_id, month_num, year_num)
        if not budgets:
            return []

        categories = await self.category_store.get_many(
            owner_id, [b.category_id for b in budgets]
        )
        spent_by_category = await self._spent_by_category(owner_id, month_num, year_num)

        result = []
        for budget in budgets:
            item = self._serialize(budget)
            category = categories.get(budget.category_id)
            item["category"] = category.to_dict() if category else None
            item.update(
                budget_progress(
                    budget.amount,
                    spent_by_category.get(budget.category_id, Decimal("0")),
                )
            )
            result.append(item)
        return result

    async def delete_budget(self, owner_id: str, budget_id: str) -> None:
        """예산 soft-delete"""
        if not await self.budget_store.soft_delete(owner_id, budget_id):
            raise NotFoundError("Budget not found")

    async def _spent_by_category(
        self,
        owner_id: str,
        month: int,
        year: int,
    ) -> dict[str, Decimal]:
        """해당 월 카테고리별 지출 합계"""
        start, end = month_bounds(year, month)
        expenses = await self.ledger_store.list_transactions_between(
            owner_id, start, end, TransactionType.EXPENSE.value
        )

        totals: dict[str, Decimal] = defaultdict(Decimal)
        for tx in expenses:
            if tx.category_id:
                totals[tx.category_id] += tx.amount
        return totals

    @staticmethod
    def _serialize(budget: BudgetRecord) -> dict[str, Any]:
        return {
            "budget_id": budget.budget_id,
            "category_id": budget.category_id,
            "amount": to_number(budget.amount),
            "month": budget.month,
            "year": budget.year,
            "created_at": budget.created_at,
            "updated_at": budget.updated_at,
        }
