"""
Dashboard 라우트

GET /api/dashboard - 요약 정보
"""

from typing import Any

from fastapi import APIRouter, Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db
from web.models.responses import DashboardResponse
from web.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api", tags=["Dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> dict[str, Any]:
    """대시보드 요약

    총 잔액, 이번 달 수입/지출, 계좌 수, 최근 거래 5건.
    """
    service = DashboardService(db)
    return await service.get_summary(user_id)
