"""
참조 검증 (Reference Guard)

원장 쓰기 전에 참조 대상(계좌, 카테고리, 예산)이
존재하고, 삭제되지 않았으며, 같은 사용자 소유인지 확인.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter


class ReferenceGuard:
    """참조 존재 여부 조회

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def account_exists(self, owner_id: str, account_id: str) -> bool:
        """삭제되지 않은 본인 계좌인지"""
        row = await self.db.fetchone(
            """
            SELECT 1 FROM accounts
            WHERE account_id = ? AND owner_id = ? AND is_deleted = 0
            """,
            (account_id, owner_id),
        )
        return row is not None

    async def category_exists(self, owner_id: str, category_id: str) -> bool:
        """삭제되지 않은 본인 카테고리인지 (유형 무관)"""
        row = await self.db.fetchone(
            """
            SELECT 1 FROM categories
            WHERE category_id = ? AND owner_id = ? AND is_deleted = 0
            """,
            (category_id, owner_id),
        )
        return row is not None

    async def category_matches(
        self,
        owner_id: str,
        category_id: str,
        expected_type: str,
    ) -> bool:
        """삭제되지 않은 본인 카테고리이며 유형이 일치하는지"""
        row = await self.db.fetchone(
            """
            SELECT 1 FROM categories
            WHERE category_id = ? AND owner_id = ? AND is_deleted = 0
              AND category_type = ?
            """,
            (category_id, owner_id, expected_type),
        )
        return row is not None

    async def budget_exists(
        self,
        owner_id: str,
        category_id: str,
        month: int,
        year: int,
    ) -> bool:
        """해당 월의 카테고리 예산이 이미 있는지"""
        row = await self.db.fetchone(
            """
            SELECT 1 FROM budgets
            WHERE owner_id = ? AND category_id = ? AND month = ? AND year = ?
              AND is_deleted = 0
            """,
            (owner_id, category_id, month, year),
        )
        return row is not None
