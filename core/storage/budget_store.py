"""
BudgetStore - 월별 예산 저장소

budgets 테이블 CRUD.
(owner, category, month, year) 당 삭제되지 않은 예산은 최대 1건
(중복 검사는 서비스 계층에서 ReferenceGuard.budget_exists로 수행).
"""

import logging
from decimal import Decimal
from uuid import uuid4

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.models import BudgetRecord
from core.utils.money import to_db
from core.utils.timezone import now_utc, to_iso

logger = logging.getLogger(__name__)


class BudgetStore:
    """예산 저장소

    Args:
        db: SQLiteAdapter 인스턴스
    """

    COLUMNS = "budget_id, owner_id, category_id, amount, month, year, is_deleted, created_at, updated_at"

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def create(
        self,
        owner_id: str,
        category_id: str,
        amount: Decimal,
        month: int,
        year: int,
    ) -> BudgetRecord:
        """예산 생성"""
        now = to_iso(now_utc())
        budget = BudgetRecord(
            budget_id=str(uuid4()),
            owner_id=owner_id,
            category_id=category_id,
            amount=amount,
            month=month,
            year=year,
            created_at=now,
            updated_at=now,
        )

        async with self.db.transaction():
            await self.db.execute(
                """
                INSERT INTO budgets (
                    budget_id, owner_id, category_id, amount, month, year,
                    is_deleted, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, 0, ?, ?)
                """,
                (budget.budget_id, owner_id, category_id, to_db(amount), month, year, now, now),
            )

        logger.info(f"Budget created: {budget.budget_id} ({year}-{month:02d})")
        return budget

    async def list_for_month(self, owner_id: str, month: int, year: int) -> list[BudgetRecord]:
        """해당 월의 삭제되지 않은 예산 목록"""
        rows = await self.db.fetchall(
            f"""
            SELECT {self.COLUMNS} FROM budgets
            WHERE owner_id = ? AND month = ? AND year = ? AND is_deleted = 0
            ORDER BY created_at ASC, budget_id ASC
            """,
            (owner_id, month, year),
        )
        return [BudgetRecord.from_row(row) for row in rows]

    async def get(self, owner_id: str, budget_id: str) -> BudgetRecord | None:
        """삭제되지 않은 본인 예산 조회"""
        row = await self.db.fetchone(
            f"""
            SELECT {self.COLUMNS} FROM budgets
            WHERE budget_id = ? AND owner_id = ? AND is_deleted = 0
            """,
            (budget_id, owner_id),
        )
        return BudgetRecord.from_row(row) if row else None

    async def soft_delete(self, owner_id: str, budget_id: str) -> bool:
        """예산 soft-delete"""
        async with self.db.transaction():
            cursor = await self.db.execute(
                """
                UPDATE budgets SET is_deleted = 1, updated_at = ?
                WHERE budget_id = ? AND owner_id = ? AND is_deleted = 0
                """,
                (to_iso(now_utc()), budget_id, owner_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Budget soft-deleted: {budget_id}")
        return deleted
