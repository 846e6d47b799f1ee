"""
Account 라우트

계좌 생성 / 잔액 포함 목록 / 삭제
"""

from typing import Any

from fastapi import APIRouter, Depends, Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db, get_db_write
from web.models.requests import AccountCreateRequest
from web.models.responses import AccountBalanceResponse, AccountResponse, MessageResponse
from web.services.account_service import AccountService

router = APIRouter(prefix="/api/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
async def create_account(
    request: AccountCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, Any]:
    """계좌 생성"""
    service = AccountService(db)
    return await service.create_account(user_id, request.name, request.icon)


@router.get("", response_model=list[AccountBalanceResponse])
async def list_accounts(
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> list[dict[str, Any]]:
    """계좌 목록 (원장에서 재계산한 잔액 포함)"""
    service = AccountService(db)
    return await service.list_accounts_with_balances(user_id)


@router.delete("/{account_id}", response_model=MessageResponse)
async def delete_account(
    account_id: str = Path(..., description="계좌 ID"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, str]:
    """계좌 삭제 (soft-delete)"""
    service = AccountService(db)
    await service.delete_account(user_id, account_id)
    return {"message": "Account deleted"}
