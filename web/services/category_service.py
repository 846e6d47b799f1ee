"""
Category 서비스
"""

from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import NotFoundError, ValidationError
from core.storage import CategoryStore
from core.types import CategoryType


class CategoryService:
    """Category 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.category_store = CategoryStore(db)

    async def create_category(
        self,
        owner_id: str,
        name: str | None,
        category_type: str | None,
        icon: str | None = None,
    ) -> dict[str, Any]:
        """카테고리 생성

        Raises:
            ValidationError: 이름 누락, 유형이 income/expense가 아님
        """
        if not name or not name.strip():
            raise ValidationError("Category name is required")

        if category_type not in {t.value for t in CategoryType}:
            raise ValidationError("Category type must be 'income' or 'expense'")

        category = await self.category_store.create(
            owner_id, name.strip(), category_type, icon or None
        )
        return category.to_dict()

    async def list_categories(self, owner_id: str) -> list[dict[str, Any]]:
        """카테고리 목록"""
        categories = await self.category_store.list_categories(owner_id)
        return [c.to_dict() for c in categories]

    async def delete_category(self, owner_id: str, category_id: str) -> None:
        """카테고리 soft-delete"""
        if not await self.category_store.soft_delete(owner_id, category_id):
            raise NotFoundError("Category not found")
