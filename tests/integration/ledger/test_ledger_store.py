"""LedgerStore 통합 테스트"""

from dataclasses import replace
from decimal import Decimal
from uuid import uuid4

import aiosqlite
import pytest

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.store import LedgerStore
from core.ledger.transfer import build_transfer_legs
from core.models import AccountRecord, LedgerTransaction
from core.types import TransferRole
from core.utils.timezone import month_bounds
from tests.helpers import (
    OTHER_OWNER_ID,
    OWNER_ID,
    count_transactions,
    fetch_transaction,
    fetch_transfer_group,
)


def _income(account_id: str, amount: str, owner_id: str = OWNER_ID) -> LedgerTransaction:
    return LedgerTransaction(
        transaction_id=str(uuid4()),
        owner_id=owner_id,
        account_id=account_id,
        transaction_type="income",
        amount=Decimal(amount),
    )


class TestInsert:
    """거래 저장"""

    @pytest.mark.asyncio
    async def test_insert_assigns_created_at(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        """저장 시점에 created_at 부여"""
        store = LedgerStore(db)

        stored = await store.insert_transaction(_income(cash.account_id, "12.345"))

        assert stored.created_at is not None
        fetched = await fetch_transaction(db, OWNER_ID, stored.transaction_id)
        assert fetched == stored

    @pytest.mark.asyncio
    async def test_amount_precision_preserved(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        """금액은 TEXT로 원래 정밀도 유지"""
        store = LedgerStore(db)

        stored = await store.insert_transaction(_income(cash.account_id, "0.005"))

        fetched = await fetch_transaction(db, OWNER_ID, stored.transaction_id)
        assert fetched is not None
        assert fetched.amount == Decimal("0.005")

    @pytest.mark.asyncio
    async def test_insert_transfer_pair(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        bank: AccountRecord,
    ) -> None:
        """이체 Leg 2건 저장 (role 포함)"""
        store = LedgerStore(db)
        source, destination = build_transfer_legs(
            OWNER_ID, Decimal("40"), cash.account_id, bank.account_id
        )

        await store.insert_transfer_pair(source, destination)

        legs = await fetch_transfer_group(db, OWNER_ID, source.transfer_group_id)
        assert {leg.transfer_role for leg in legs} == {
            TransferRole.SOURCE.value,
            TransferRole.DESTINATION.value,
        }
        assert all(leg.category_id is None for leg in legs)

    @pytest.mark.asyncio
    async def test_transfer_pair_rolls_back_atomically(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
        bank: AccountRecord,
    ) -> None:
        """두 번째 Leg 실패 시 첫 번째 Leg도 남지 않음"""
        store = LedgerStore(db)
        source, destination = build_transfer_legs(
            OWNER_ID, Decimal("40"), cash.account_id, bank.account_id
        )
        # 같은 PK → 두 번째 INSERT에서 IntegrityError
        clash = replace(destination, transaction_id=source.transaction_id)

        with pytest.raises(aiosqlite.IntegrityError):
            await store.insert_transfer_pair(source, clash)

        assert await count_transactions(db, OWNER_ID) == 0


class TestQueries:
    """조회"""

    @pytest.mark.asyncio
    async def test_list_excludes_deleted(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        store = LedgerStore(db)
        kept = await store.insert_transaction(_income(cash.account_id, "10"))
        removed = await store.insert_transaction(_income(cash.account_id, "20"))

        assert await store.soft_delete_transaction(OWNER_ID, removed.transaction_id) is True

        ids = [tx.transaction_id for tx in await store.list_transactions(OWNER_ID)]
        assert ids == [kept.transaction_id]

        all_rows = await store.list_transactions(OWNER_ID, include_deleted=True)
        assert len(all_rows) == 2

    @pytest.mark.asyncio
    async def test_newest_first_with_limit(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        store = LedgerStore(db)
        first = await store.insert_transaction(_income(cash.account_id, "1"))
        second = await store.insert_transaction(_income(cash.account_id, "2"))
        third = await store.insert_transaction(_income(cash.account_id, "3"))

        recent = await store.list_transactions(OWNER_ID, newest_first=True, limit=2)

        assert [tx.transaction_id for tx in recent] == [third.transaction_id, second.transaction_id]
        assert first.transaction_id not in {tx.transaction_id for tx in recent}

    @pytest.mark.asyncio
    async def test_owner_isolation(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        """다른 사용자 거래는 조회/삭제 불가"""
        store = LedgerStore(db)
        tx = await store.insert_transaction(_income(cash.account_id, "10"))

        assert await store.list_transactions(OTHER_OWNER_ID) == []
        assert await fetch_transaction(db, OTHER_OWNER_ID, tx.transaction_id) is None
        assert await store.soft_delete_transaction(OTHER_OWNER_ID, tx.transaction_id) is False

    @pytest.mark.asyncio
    async def test_soft_delete_twice(self, db: SQLiteAdapter, cash: AccountRecord) -> None:
        store = LedgerStore(db)
        tx = await store.insert_transaction(_income(cash.account_id, "10"))

        assert await store.soft_delete_transaction(OWNER_ID, tx.transaction_id) is True
        assert await store.soft_delete_transaction(OWNER_ID, tx.transaction_id) is False

    @pytest.mark.asyncio
    async def test_between_filters_window_and_type(
        self,
        db: SQLiteAdapter,
        cash: AccountRecord,
    ) -> None:
        """월 구간 + 유형 필터"""
        store = LedgerStore(db)
        tx = await store.insert_transaction(_income(cash.account_id, "10"))
        year, month = int(tx.created_at[:4]), int(tx.created_at[5:7])
        start, end = month_bounds(year, month)

        assert len(await store.list_transactions_between(OWNER_ID, start, end)) == 1
        assert await store.list_transactions_between(OWNER_ID, start, end, "expense") == []

        next_start, next_end = month_bounds(year + 1, month)
        assert await store.list_transactions_between(OWNER_ID, next_start, next_end) == []
