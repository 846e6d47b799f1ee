"""
Budget 라우트
"""

from typing import Any

from fastapi import APIRouter, Depends, Path, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db, get_db_write
from web.models.requests import BudgetCreateRequest
from web.models.responses import BudgetProgressResponse, BudgetResponse, MessageResponse
from web.services.budget_service import BudgetService

router = APIRouter(prefix="/api/budgets", tags=["Budgets"])


@router.post("", response_model=BudgetResponse, status_code=201)
async def create_budget(
    request: BudgetCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, Any]:
    """예산 생성 (expense 카테고리, 월 단위)"""
    service = BudgetService(db)
    return await service.create_budget(
        owner_id=user_id,
        amount=request.amount,
        month=request.month,
        year=request.year,
        category_id=request.category_id,
    )


@router.get("", response_model=list[BudgetProgressResponse])
async def list_budgets(
    month: int | None = Query(default=None, description="월 (1-12)"),
    year: int | None = Query(default=None, description="연도"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> list[dict[str, Any]]:
    """월별 예산 목록 (진행률 포함)"""
    service = BudgetService(db)
    return await service.list_budgets(user_id, month, year)


@router.delete("/{budget_id}", response_model=MessageResponse)
async def delete_budget(
    budget_id: str = Path(..., description="예산 ID"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, str]:
    """예산 삭제 (soft-delete)"""
    service = BudgetService(db)
    await service.delete_budget(user_id, budget_id)
    return {"message": "Budget deleted"}
