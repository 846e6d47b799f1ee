"""
Category 라우트
"""

from typing import Any

from fastapi import APIRouter, Depends, Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db, get_db_write
from web.models.requests import CategoryCreateRequest
from web.models.responses import CategoryResponse, MessageResponse
from web.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["Categories"])


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    request: CategoryCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, Any]:
    """카테고리 생성"""
    service = CategoryService(db)
    return await service.create_category(user_id, request.name, request.type, request.icon)


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> list[dict[str, Any]]:
    """카테고리 목록"""
    service = CategoryService(db)
    return await service.list_categories(user_id)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: str = Path(..., description="카테고리 ID"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, str]:
    """카테고리 삭제 (soft-delete)"""
    service = CategoryService(db)
    await service.delete_category(user_id, category_id)
    return {"message": "Category deleted"}
