"""
Ledger 저장소

거래 원장(transactions 테이블) 저장 및 조회.
원장은 추가 전용이며 soft-delete 플래그 외에는 변경하지 않음.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, Any

from core.models import LedgerTransaction
from core.utils.money import to_db
from core.utils.timezone import now_utc, to_iso

if TYPE_CHECKING:
    from adapters.db.sqlite_adapter import SQLiteAdapter

logger = logging.getLogger(__name__)


class LedgerStore:
    """Ledger 저장소

    거래를 저장하고 조회하는 클래스.
    계좌 잔액은 저장하지 않음 (BalanceEngine이 매번 재계산).

    Args:
        db: SQLite 어댑터
    """

    COLUMNS = """
        transaction_id, owner_id, account_id, transaction_type, amount,
        category_id, transfer_group_id, transfer_role, note,
        is_deleted, created_at
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def _insert(self, tx: LedgerTransaction) -> LedgerTransaction:
        """단건 INSERT (커밋은 호출자 책임)

        created_at은 쓰기 시점에 부여.
        """
        stored = replace(tx, created_at=to_iso(now_utc()), is_deleted=False)

        await self.db.execute(
            """
            INSERT INTO transactions (
                transaction_id, owner_id, account_id, transaction_type, amount,
                category_id, transfer_group_id, transfer_role, note,
                is_deleted, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, 0, ?, ?)
            """,
            (
                stored.transaction_id,
                stored.owner_id,
                stored.account_id,
                stored.transaction_type,
                to_db(stored.amount),
                stored.category_id,
                stored.transfer_group_id,
                stored.transfer_role,
                stored.note,
                stored.created_at,
                stored.created_at,
            ),
        )
        return stored

    async def insert_transaction(self, tx: LedgerTransaction) -> LedgerTransaction:
        """거래 저장 (income / expense)

        Args:
            tx: 저장할 거래 (created_at 미지정)

        Returns:
            created_at이 채워진 저장된 거래
        """
        async with self.db.transaction():
            stored = await self._insert(tx)

        logger.debug(f"Saved transaction: {stored.transaction_id}")
        return stored

    async def insert_transfer_pair(
        self,
        source_leg: LedgerTransaction,
        destination_leg: LedgerTransaction,
    ) -> tuple[LedgerTransaction, LedgerTransaction]:
        """이체 Leg 2건을 하나의 트랜잭션으로 저장

        둘 중 하나라도 실패하면 전체 롤백 (부분 저장 없음).
        source Leg를 먼저 기록.

        Args:
            source_leg: 출금 Leg
            destination_leg: 입금 Leg

        Returns:
            (저장된 source Leg, 저장된 destination Leg)

        Raises:
            aiosqlite.Error: DB 쓰기 실패 (롤백 완료 후 전파)
        """
        async with self.db.transaction():
            stored_source = await self._insert(source_leg)
            stored_destination = await self._insert(destination_leg)

        logger.info(
            f"Saved transfer pair: group={stored_source.transfer_group_id} "
            f"{stored_source.account_id} -> {stored_destination.account_id}"
        )
        return stored_source, stored_destination

    async def list_transactions(
        self,
        owner_id: str,
        include_deleted: bool = False,
        newest_first: bool = False,
        limit: int | None = None,
    ) -> list[LedgerTransaction]:
        """사용자 전체 거래 조회 (날짜 필터 없음)

        Args:
            owner_id: 소유 사용자
            include_deleted: soft-delete 거래 포함 여부
            newest_first: True면 최신순, False면 created_at 오름차순
            limit: 조회 개수 제한 (None이면 전체)

        Returns:
            거래 목록
        """
        sql = f"SELECT {self.COLUMNS} FROM transactions WHERE owner_id = ?"
        params: list[Any] = [owner_id]

        if not include_deleted:
            sql += " AND is_deleted = 0"

        direction = "DESC" if newest_first else "ASC"
        sql += f" ORDER BY created_at {direction}, transaction_id {direction}"

        if limit is not None:
            sql += " LIMIT ?"
            params.append(limit)

        rows = await self.db.fetchall(sql, tuple(params))
        return [LedgerTransaction.from_row(row) for row in rows]

    async def list_transactions_between(
        self,
        owner_id: str,
        start: datetime,
        end: datetime,
        transaction_type: str | None = None,
    ) -> list[LedgerTransaction]:
        """기간 내 거래 조회 [start, end)

        Args:
            owner_id: 소유 사용자
            start: 시작 (포함)
            end: 끝 (미포함)
            transaction_type: 거래 유형 필터 (선택)

        Returns:
            삭제되지 않은 거래 목록 (created_at 오름차순)
        """
        sql = f"""
            SELECT {self.COLUMNS} FROM transactions
            WHERE owner_id = ? AND is_deleted = 0
              AND created_at >= ? AND created_at < ?
        """
        params: list[Any] = [owner_id, to_iso(start), to_iso(end)]

        if transaction_type:
            sql += " AND transaction_type = ?"
            params.append(transaction_type)

        sql += " ORDER BY created_at ASC, transaction_id ASC"

        rows = await self.db.fetchall(sql, tuple(params))
        return [LedgerTransaction.from_row(row) for row in rows]

    async def soft_delete_transaction(
        self,
        owner_id: str,
        transaction_id: str,
    ) -> bool:
        """거래 soft-delete

        물리 삭제하지 않고 is_deleted 플래그만 설정.

        Returns:
            삭제 여부 (없거나 이미 삭제된 경우 False)
        """
        async with self.db.transaction():
            cursor = await self.db.execute(
                """
                UPDATE transactions
                SET is_deleted = 1, updated_at = ?
                WHERE transaction_id = ? AND owner_id = ? AND is_deleted = 0
                """,
                (to_iso(now_utc()), transaction_id, owner_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Soft-deleted transaction: {transaction_id}")
        return deleted

