"""
Transaction 라우트

거래 생성 (income / expense / transfer), 목록, 삭제
"""

from typing import Any

from fastapi import APIRouter, Depends, Path

from adapters.db.sqlite_adapter import SQLiteAdapter
from web.dependencies import get_current_user_id, get_db, get_db_write
from web.models.requests import TransactionCreateRequest, TransferCreateRequest
from web.models.responses import MessageResponse, TransactionResponse, TransferResponse
from web.services.transaction_service import TransactionService

router = APIRouter(prefix="/api/transactions", tags=["Transactions"])


@router.post(
    "",
    response_model=TransactionResponse | TransferResponse,
    status_code=201,
)
async def create_transaction(
    request: TransactionCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, Any]:
    """거래 생성

    type=transfer면 account_id → to_account_id 이체 (Leg 2건).
    """
    service = TransactionService(db)
    return await service.create_transaction(
        owner_id=user_id,
        amount=request.amount,
        transaction_type=request.type,
        account_id=request.account_id,
        category_id=request.category_id,
        note=request.note,
        to_account_id=request.to_account_id,
    )


@router.post("/transfer", response_model=TransferResponse, status_code=201)
async def create_transfer(
    request: TransferCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, Any]:
    """계좌 간 이체"""
    service = TransactionService(db)
    return await service.create_transfer(
        owner_id=user_id,
        amount=request.amount,
        source_account_id=request.source_account_id,
        destination_account_id=request.destination_account_id,
        note=request.note,
    )


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db),
) -> list[dict[str, Any]]:
    """거래 목록 (최신순)"""
    service = TransactionService(db)
    return await service.list_transactions(user_id)


@router.delete("/{transaction_id}", response_model=MessageResponse)
async def delete_transaction(
    transaction_id: str = Path(..., description="거래 ID"),
    user_id: str = Depends(get_current_user_id),
    db: SQLiteAdapter = Depends(get_db_write),
) -> dict[str, str]:
    """거래 삭제 (soft-delete)"""
    service = TransactionService(db)
    await service.delete_transaction(user_id, transaction_id)
    return {"message": "Transaction deleted"}
