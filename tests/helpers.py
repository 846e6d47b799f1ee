"""테스트 공용 상수 및 DB 조회 헬퍼"""

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.ledger.store import LedgerStore
from core.models import LedgerTransaction

OWNER_ID = "user-1"
OTHER_OWNER_ID = "user-2"


async def count_transactions(db: SQLiteAdapter, owner_id: str) -> int:
    """거래 행 수 (soft-delete 포함)"""
    row = await db.fetchone(
        "SELECT COUNT(*) FROM transactions WHERE owner_id = ?", (owner_id,)
    )
    return row[0]


async def fetch_transaction(
    db: SQLiteAdapter,
    owner_id: str,
    transaction_id: str,
) -> LedgerTransaction | None:
    """삭제되지 않은 거래 단건"""
    row = await db.fetchone(
        f"""
        SELECT {LedgerStore.COLUMNS} FROM transactions
        WHERE transaction_id = ? AND owner_id = ? AND is_deleted = 0
        """,
        (transaction_id, owner_id),
    )
    return LedgerTransaction.from_row(row) if row else None


async def fetch_transfer_group(
    db: SQLiteAdapter,
    owner_id: str,
    transfer_group_id: str,
) -> list[LedgerTransaction]:
    """이체 그룹의 Leg (soft-delete 포함)"""
    rows = await db.fetchall(
        f"""
        SELECT {LedgerStore.COLUMNS} FROM transactions
        WHERE owner_id = ? AND transfer_group_id = ?
        ORDER BY created_at ASC, transaction_id ASC
        """,
        (owner_id, transfer_group_id),
    )
    return [LedgerTransaction.from_row(row) for row in rows]


async def table_exists(db: SQLiteAdapter, table_name: str) -> bool:
    row = await db.fetchone(
        "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
        (table_name,),
    )
    return row is not None


async def column_names(db: SQLiteAdapter, table_name: str) -> list[str]:
    rows = await db.fetchall(f"PRAGMA table_info({table_name})")
    return [row[1] for row in rows]
