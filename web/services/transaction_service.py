"""
Transaction 서비스

income / expense 거래 생성, 이체 위임, 조회, soft-delete
"""

import logging
from typing import Any
from uuid import uuid4

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.errors import NotFoundError, ValidationError
from core.ledger import LedgerStore, ReferenceGuard, TransferPairBuilder
from core.models import LedgerTransaction
from core.types import TransactionType
from core.utils.money import parse_amount, to_number

logger = logging.getLogger(__name__)

VALID_TYPES = frozenset(t.value for t in TransactionType)


def serialize_transaction(tx: LedgerTransaction) -> dict[str, Any]:
    """거래 → API 응답 dict"""
    item = tx.to_dict()
    item["amount"] = to_number(tx.amount)
    return item


class TransactionService:
    """Transaction 서비스

    Args:
        db: SQLite 어댑터
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db
        self.ledger_store = LedgerStore(db)
        self.guard = ReferenceGuard(db)
        self.transfer_builder = TransferPairBuilder(self.ledger_store, self.guard)

    async def create_transaction(
        self,
        owner_id: str,
        amount: Any,
        transaction_type: str | None,
        account_id: str | None,
        category_id: str | None = None,
        note: str | None = None,
        to_account_id: str | None = None,
    ) -> dict[str, Any]:
        """거래 생성

        transfer 유형은 TransferPairBuilder로 위임
        (account_id = 출금, to_account_id = 입금).

        Returns:
            income/expense: 저장된 거래
            transfer: 이체 결과 (group id + Leg id 2개)

        Raises:
            ValidationError: 금액/유형 오류, 계좌/카테고리 누락, 카테고리 유형 불일치
            NotFoundError: 계좌 또는 카테고리 없음
            TransferFailedError: 이체 저장 실패
        """
        parsed_amount = parse_amount(amount)

        if transaction_type not in VALID_TYPES:
            raise ValidationError("Invalid type")

        if transaction_type == TransactionType.TRANSFER.value:
            return await self.create_transfer(
                owner_id=owner_id,
                amount=amount,
                source_account_id=account_id,
                destination_account_id=to_account_id,
                note=note,
            )

        if not account_id:
            raise ValidationError("account_id is required")

        if not category_id:
            raise ValidationError("category_id is required")

        if not await self.guard.account_exists(owner_id, account_id):
            raise NotFoundError("Account not found")

        if not await self.guard.category_exists(owner_id, category_id):
            raise NotFoundError("Category not found")
        if not await self.guard.category_matches(owner_id, category_id, transaction_type):
            raise ValidationError(f"Category type must be {transaction_type}")

        tx = await self.ledger_store.insert_transaction(
            LedgerTransaction(
                transaction_id=str(uuid4()),
                owner_id=owner_id,
                account_id=account_id,
                transaction_type=transaction_type,
                amount=parsed_amount,
                category_id=category_id,
                note=note,
            )
        )

        logger.info(f"Transaction created: {tx.transaction_id} ({transaction_type})")
        return serialize_transaction(tx)

    async def create_transfer(
        self,
        owner_id: str,
        amount: Any,
        source_account_id: str | None,
        destination_account_id: str | None,
        note: str | None = None,
    ) -> dict[str, Any]:
        """계좌 간 이체 (Leg 2건 원자적 저장)"""
        result = await self.transfer_builder.create_transfer(
            owner_id=owner_id,
            amount=amount,
            source_account_id=source_account_id,
            destination_account_id=destination_account_id,
            note=note,
        )

        item = result.to_dict()
        item["amount"] = to_number(result.source_transaction.amount)
        return item

    async def list_transactions(self, owner_id: str) -> list[dict[str, Any]]:
        """삭제되지 않은 거래 목록 (최신순)"""
        transactions = await self.ledger_store.list_transactions(owner_id, newest_first=True)
        return [serialize_transaction(tx) for tx in transactions]

    async def delete_transaction(self, owner_id: str, transaction_id: str) -> None:
        """거래 단건 soft-delete

        이체 Leg 하나만 삭제하면 남은 Leg는 잔액 계산에서 고아 Leg로 처리됨.
        """
        if not await self.ledger_store.soft_delete_transaction(owner_id, transaction_id):
            raise NotFoundError("Transaction not found")
