"""
CategoryStore - 카테고리 저장소

categories 테이블 CRUD (income / expense).
"""

import logging
from uuid import uuid4

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.models import CategoryRecord
from core.utils.timezone import now_utc, to_iso

logger = logging.getLogger(__name__)


class CategoryStore:
    """카테고리 저장소

    Args:
        db: SQLiteAdapter 인스턴스
    """

    COLUMNS = "category_id, owner_id, name, icon, category_type, is_deleted, created_at, updated_at"

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def create(
        self,
        owner_id: str,
        name: str,
        category_type: str,
        icon: str | None = None,
    ) -> CategoryRecord:
        """카테고리 생성"""
        now = to_iso(now_utc())
        category = CategoryRecord(
            category_id=str(uuid4()),
            owner_id=owner_id,
            name=name,
            icon=icon,
            category_type=category_type,
            created_at=now,
            updated_at=now,
        )

        async with self.db.transaction():
            await self.db.execute(
                """
                INSERT INTO categories (
                    category_id, owner_id, name, icon, category_type,
                    is_deleted, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, 0, ?, ?)
                """,
                (category.category_id, owner_id, name, icon, category_type, now, now),
            )

        logger.info(f"Category created: {category.category_id} ({category_type}:{name})")
        return category

    async def list_categories(
        self,
        owner_id: str,
        category_type: str | None = None,
    ) -> list[CategoryRecord]:
        """삭제되지 않은 카테고리 목록"""
        sql = f"""
            SELECT {self.COLUMNS} FROM categories
            WHERE owner_id = ? AND is_deleted = 0
        """
        params: list[str] = [owner_id]

        if category_type:
            sql += " AND category_type = ?"
            params.append(category_type)

        sql += " ORDER BY created_at ASC, category_id ASC"

        rows = await self.db.fetchall(sql, tuple(params))
        return [CategoryRecord.from_row(row) for row in rows]

    async def get(self, owner_id: str, category_id: str) -> CategoryRecord | None:
        """삭제되지 않은 본인 카테고리 조회"""
        row = await self.db.fetchone(
            f"""
            SELECT {self.COLUMNS} FROM categories
            WHERE category_id = ? AND owner_id = ? AND is_deleted = 0
            """,
            (category_id, owner_id),
        )
        return CategoryRecord.from_row(row) if row else None

    async def get_many(self, owner_id: str, category_ids: list[str]) -> dict[str, CategoryRecord]:
        """카테고리 다건 조회 (삭제 포함, 예산/분석 표시용)"""
        if not category_ids:
            return {}

        placeholders = ", ".join("?" for _ in category_ids)
        rows = await self.db.fetchall(
            f"""
            SELECT {self.COLUMNS} FROM categories
            WHERE owner_id = ? AND category_id IN ({placeholders})
            """,
            (owner_id, *category_ids),
        )
        return {row[0]: CategoryRecord.from_row(row) for row in rows}

    async def soft_delete(self, owner_id: str, category_id: str) -> bool:
        """카테고리 soft-delete"""
        async with self.db.transaction():
            cursor = await self.db.execute(
                """
                UPDATE categories SET is_deleted = 1, updated_at = ?
                WHERE category_id = ? AND owner_id = ? AND is_deleted = 0
                """,
                (to_iso(now_utc()), category_id, owner_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Category soft-deleted: {category_id}")
        return deleted
