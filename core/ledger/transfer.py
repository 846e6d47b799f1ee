"""
이체 Leg 생성기

이체 요청 1건을 원장 거래 2건(SOURCE / DESTINATION)으로 변환하고
하나의 DB 트랜잭션으로 저장.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import aiosqlite

from core.errors import NotFoundError, TransferFailedError, ValidationError
from core.models import LedgerTransaction
from core.types import TransactionType, TransferRole
from core.utils.money import parse_amount

if TYPE_CHECKING:
    from core.ledger.guards import ReferenceGuard
    from core.ledger.store import LedgerStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransferResult:
    """이체 생성 결과"""

    transfer_group_id: str
    source_transaction: LedgerTransaction
    destination_transaction: LedgerTransaction

    def to_dict(self) -> dict[str, Any]:
        return {
            "transfer_group_id": self.transfer_group_id,
            "source_transaction_id": self.source_transaction.transaction_id,
            "destination_transaction_id": self.destination_transaction.transaction_id,
            "amount": self.source_transaction.amount,
        }


def build_transfer_legs(
    owner_id: str,
    amount: Decimal,
    source_account_id: str,
    destination_account_id: str,
    note: str | None = None,
    transfer_group_id: str | None = None,
) -> tuple[LedgerTransaction, LedgerTransaction]:
    """이체 Leg 2건 생성 (저장 전)

    두 Leg는 같은 transfer_group_id, 같은 금액을 공유하고
    category_id는 없음. created_at은 저장 시 부여.

    Returns:
        (SOURCE Leg, DESTINATION Leg)
    """
    group_id = transfer_group_id or str(uuid4())

    source_leg = LedgerTransaction(
        transaction_id=str(uuid4()),
        owner_id=owner_id,
        account_id=source_account_id,
        transaction_type=TransactionType.TRANSFER.value,
        amount=amount,
        category_id=None,
        transfer_group_id=group_id,
        transfer_role=TransferRole.SOURCE.value,
        note=note,
    )
    destination_leg = LedgerTransaction(
        transaction_id=str(uuid4()),
        owner_id=owner_id,
        account_id=destination_account_id,
        transaction_type=TransactionType.TRANSFER.value,
        amount=amount,
        category_id=None,
        transfer_group_id=group_id,
        transfer_role=TransferRole.DESTINATION.value,
        note=note,
    )
    return source_leg, destination_leg


class TransferPairBuilder:
    """이체 생성기

    검증 → 계좌 확인 → Leg 생성 → 원자적 저장 순서로 처리.
    호출마다 새 transfer_group_id를 발급하므로 재시도는 별도 이체가 됨.

    Args:
        ledger_store: 원장 저장소
        guard: 참조 검증기
    """

    def __init__(self, ledger_store: LedgerStore, guard: ReferenceGuard):
        self.ledger_store = ledger_store
        self.guard = guard

    async def create_transfer(
        self,
        owner_id: str,
        amount: Any,
        source_account_id: str | None,
        destination_account_id: str | None,
        note: str | None = None,
    ) -> TransferResult:
        """이체 생성

        Args:
            owner_id: 소유 사용자
            amount: 이체 금액 (> 0)
            source_account_id: 출금 계좌
            destination_account_id: 입금 계좌
            note: 메모 (양쪽 Leg에 동일하게 기록)

        Returns:
            TransferResult

        Raises:
            ValidationError: 금액 오류, 계좌 누락, 동일 계좌
            NotFoundError: 출금/입금 계좌 없음
            TransferFailedError: 저장 실패 (저장된 행 없음)
        """
        # 1. 입력 검증 (DB 접근 전)
        parsed_amount = parse_amount(amount)

        if not source_account_id or not destination_account_id:
            raise ValidationError(
                "Both source and destination accounts are required for transfers"
            )

        if source_account_id == destination_account_id:
            raise ValidationError("Cannot transfer to the same account")

        # 2. 계좌 확인
        if not await self.guard.account_exists(owner_id, source_account_id):
            raise NotFoundError("Source account not found")

        if not await self.guard.account_exists(owner_id, destination_account_id):
            raise NotFoundError("Destination account not found")

        # 3. Leg 생성 및 원자적 저장
        source_leg, destination_leg = build_transfer_legs(
            owner_id=owner_id,
            amount=parsed_amount,
            source_account_id=source_account_id,
            destination_account_id=destination_account_id,
            note=note,
        )

        try:
            stored_source, stored_destination = await self.ledger_store.insert_transfer_pair(
                source_leg, destination_leg
            )
        except aiosqlite.Error as e:
            logger.error(
                f"Transfer write failed: group={source_leg.transfer_group_id} error={e}"
            )
            raise TransferFailedError("Transfer failed") from e

        return TransferResult(
            transfer_group_id=stored_source.transfer_group_id or "",
            source_transaction=stored_source,
            destination_transaction=stored_destination,
        )
