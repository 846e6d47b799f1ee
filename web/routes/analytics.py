"""
Analytics 라우트

월 단위 카테고리/계좌별 집계
"""

from typing import Any

from fastapi import APIRouter, Depends, Query

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db
from web.models.responses import AccountTypeTotalResponse, CategoryTotalResponse
from web.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


@router.get("/expense-by-category", response_model=list[CategoryTotalResponse])
async def expense_by_category(
    month: int | None = Query(default=None, description="월 (1-12)"),
    year: int | None = Query(default=None, description="연도"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> list[dict[str, Any]]:
    """카테고리별 지출"""
    service = AnalyticsService(db)
    return await service.expense_by_category(user_id, month, year)


@router.get("/income-by-category", response_model=list[CategoryTotalResponse])
async def income_by_category(
    month: int | None = Query(default=None, description="월 (1-12)"),
    year: int | None = Query(default=None, description="연도"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> list[dict[str, Any]]:
    """카테고리별 수입"""
    service = AnalyticsService(db)
    return await service.income_by_category(user_id, month, year)


@router.get("/account-analysis", response_model=list[AccountTypeTotalResponse])
async def account_analysis(
    month: int | None = Query(default=None, description="월 (1-12)"),
    year: int | None = Query(default=None, description="연도"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> list[dict[str, Any]]:
    """계좌/유형별 합계"""
    service = AnalyticsService(db)
    return await service.account_analysis(user_id, month, year)
