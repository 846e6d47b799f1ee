"""
Auth 라우트

회원가입 / 로그인 API (인증 불필요)
"""

from typing import Any

from fastapi import APIRouter, Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from web.dependencies import get_app_settings, get_db_write
from web.models.requests import LoginRequest, SignupRequest
from web.models.responses import LoginResponse, SignupResponse
from web.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(
    request: SignupRequest,
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """회원가입"""
    service = AuthService(db, settings)
    return await service.signup(request.email, request.password)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
) -> dict[str, Any]:
    """로그인

    Returns:
        Bearer 토큰과 사용자 정보
    """
    service = AuthService(db, settings)
    return await service.login(request.email, request.password)
