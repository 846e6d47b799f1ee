"""
SQLite 어댑터

WAL 모드 + busy timeout으로 조회 요청과 쓰기 요청이 동시에 접근 가능.
쓰기는 transaction() 안에서만 수행 (BEGIN IMMEDIATE → commit / rollback).

주의: SQLite alias로 time, count 사용 금지 (예약어)
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)

BUSY_TIMEOUT_MS = 30000


async def create_connection(
    db_path: Path | str,
    readonly: bool = False,
) -> aiosqlite.Connection:
    """SQLite 연결 생성

    Args:
        db_path: DB 파일 경로 (부모 디렉토리 자동 생성)
        readonly: True면 query_only (INSERT/UPDATE/DELETE 거부)

    Returns:
        aiosqlite 연결 객체
    """
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(str(db_path))

    await conn.execute("PRAGMA journal_mode=WAL")
    await conn.execute(f"PRAGMA busy_timeout={BUSY_TIMEOUT_MS}")
    await conn.execute("PRAGMA foreign_keys=ON")

    if readonly:
        await conn.execute("PRAGMA query_only=ON")

    logger.debug(f"SQLite connected: {db_path} (readonly={readonly})")
    return conn


class SQLiteAdapter:
    """요청 단위 SQLite 세션

    Args:
        db_path: DB 파일 경로
        readonly: 조회 전용 세션 여부 (잔액/목록/분석)

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        async with db.transaction() as conn:
            await conn.execute("INSERT INTO transactions ...")
            await conn.execute("INSERT INTO transactions ...")
    ```
    """

    def __init__(self, db_path: Path | str, readonly: bool = False):
        self.db_path = Path(db_path)
        self.readonly = readonly
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected to database")
        return self._conn

    async def connect(self) -> None:
        if self._conn is None:
            self._conn = await create_connection(self.db_path, self.readonly)

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        conn = self._require_conn()
        return await conn.execute(sql, parameters or ())

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        if self._conn is not None:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn is not None:
            await self._conn.rollback()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """쓰기 트랜잭션

        BEGIN IMMEDIATE로 시작 시점에 쓰기 잠금을 잡고,
        블록이 끝나면 커밋, 예외가 나면 블록 안의 모든 쓰기를 롤백.
        이체 Leg 2건은 이 블록 하나로 저장되어 0건 또는 2건만 남음.

        중첩 불가: 커밋되지 않은 쓰기가 남아 있는 상태에서 호출하면
        그 쓰기까지 함께 커밋/롤백되므로 거부.

        Raises:
            RuntimeError: 연결 없음, 읽기 전용 세션, 이미 열린 트랜잭션
        """
        conn = self._require_conn()
        if self.readonly:
            raise RuntimeError("Write transaction on read-only session")
        if conn.in_transaction:
            raise RuntimeError("Transaction already open on this session")

        await conn.execute("BEGIN IMMEDIATE")

        try:
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성)
    
    멱등 실행 (CREATE ... IF NOT EXISTS). Web 시작 시 lifespan에서 호출.
    
    금액은 Decimal 정밀도 보존을 위해 TEXT로 저장.
    잔액 컬럼은 없음 (항상 transactions에서 재계산).
    
    Args:
        adapter: 연결된 SQLiteAdapter
    """
    # users
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS users (
            user_id          TEXT PRIMARY KEY,
            email            TEXT NOT NULL UNIQUE,
            password_hash    TEXT NOT NULL,
            created_at       TEXT NOT NULL
        )
    """)
    
    # accounts
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS accounts (
            account_id       TEXT PRIMARY KEY,
            owner_id         TEXT NOT NULL,
            name             TEXT NOT NULL,
            icon             TEXT,
            is_deleted       INTEGER NOT NULL DEFAULT 0,
            created_at       TEXT NOT NULL,
            updated_at       TEXT NOT NULL,
            
            FOREIGN KEY (owner_id) REFERENCES users(user_id)
        )
    """)
    
    # categories
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS categories (
            category_id      TEXT PRIMARY KEY,
            owner_id         TEXT NOT NULL,
            name             TEXT NOT NULL,
            icon             TEXT,
            category_type    TEXT NOT NULL CHECK (category_type IN ('income', 'expense')),
            is_deleted       INTEGER NOT NULL DEFAULT 0,
            created_at       TEXT NOT NULL,
            updated_at       TEXT NOT NULL,
            
            FOREIGN KEY (owner_id) REFERENCES users(user_id)
        )
    """)
    
    # transactions (원장)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS transactions (
            transaction_id     TEXT PRIMARY KEY,
            owner_id           TEXT NOT NULL,
            account_id         TEXT NOT NULL,
            transaction_type   TEXT NOT NULL CHECK (transaction_type IN ('income', 'expense', 'transfer')),
            amount             TEXT NOT NULL,
            
            category_id        TEXT,
            transfer_group_id  TEXT,
            transfer_role      TEXT CHECK (transfer_role IN ('SOURCE', 'DESTINATION')),
            note               TEXT,
            
            is_deleted         INTEGER NOT NULL DEFAULT 0,
            created_at         TEXT NOT NULL,
            updated_at         TEXT NOT NULL,
            
            FOREIGN KEY (owner_id) REFERENCES users(user_id),
            FOREIGN KEY (account_id) REFERENCES accounts(account_id),
            FOREIGN KEY (category_id) REFERENCES categories(category_id)
        )
    """)
    
    # budgets
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS budgets (
            budget_id        TEXT PRIMARY KEY,
            owner_id         TEXT NOT NULL,
            category_id      TEXT NOT NULL,
            amount           TEXT NOT NULL,
            month            INTEGER NOT NULL CHECK (month BETWEEN 1 AND 12),
            year             INTEGER NOT NULL,
            is_deleted       INTEGER NOT NULL DEFAULT 0,
            created_at       TEXT NOT NULL,
            updated_at       TEXT NOT NULL,
            
            FOREIGN KEY (owner_id) REFERENCES users(user_id),
            FOREIGN KEY (category_id) REFERENCES categories(category_id)
        )
    """)
    
    # 인덱스 생성
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_accounts_owner 
        ON accounts(owner_id, is_deleted)
    """)
    
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_categories_owner 
        ON categories(owner_id, is_deleted)
    """)
    
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_transactions_owner_created 
        ON transactions(owner_id, is_deleted, created_at)
    """)
    
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_transactions_transfer_group 
        ON transactions(transfer_group_id)
    """)
    
    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_budgets_period 
        ON budgets(owner_id, year, month, is_deleted)
    """)
    
    await adapter.commit()
    
    logger.info("스키마 초기화 완료")
