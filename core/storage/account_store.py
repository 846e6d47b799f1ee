"""
AccountStore - 계좌 저장소

accounts 테이블 CRUD. 잔액 컬럼 없음.
삭제는 soft-delete (is_deleted = 1).
"""

import logging
from uuid import uuid4

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.models import AccountRecord
from core.utils.timezone import now_utc, to_iso

logger = logging.getLogger(__name__)


class AccountStore:
    """계좌 저장소

    Args:
        db: SQLiteAdapter 인스턴스
    """

    COLUMNS = "account_id, owner_id, name, icon, is_deleted, created_at, updated_at"

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def create(self, owner_id: str, name: str, icon: str | None = None) -> AccountRecord:
        """계좌 생성

        Args:
            owner_id: 소유 사용자
            name: 계좌 이름 (호출자가 trim/검증)
            icon: 아이콘 (선택)

        Returns:
            생성된 계좌
        """
        now = to_iso(now_utc())
        account = AccountRecord(
            account_id=str(uuid4()),
            owner_id=owner_id,
            name=name,
            icon=icon,
            created_at=now,
            updated_at=now,
        )

        async with self.db.transaction():
            await self.db.execute(
                """
                INSERT INTO accounts (account_id, owner_id, name, icon, is_deleted, created_at, updated_at)
                VALUES (?, ?, ?, ?, 0, ?, ?)
                """,
                (account.account_id, owner_id, name, icon, now, now),
            )

        logger.info(f"Account created: {account.account_id} ({name})")
        return account

    async def list_accounts(self, owner_id: str) -> list[AccountRecord]:
        """삭제되지 않은 계좌 목록 (생성 순)"""
        rows = await self.db.fetchall(
            f"""
            SELECT {self.COLUMNS} FROM accounts
            WHERE owner_id = ? AND is_deleted = 0
            ORDER BY created_at ASC, account_id ASC
            """,
            (owner_id,),
        )
        return [AccountRecord.from_row(row) for row in rows]

    async def get(self, owner_id: str, account_id: str) -> AccountRecord | None:
        """삭제되지 않은 본인 계좌 조회"""
        row = await self.db.fetchone(
            f"""
            SELECT {self.COLUMNS} FROM accounts
            WHERE account_id = ? AND owner_id = ? AND is_deleted = 0
            """,
            (account_id, owner_id),
        )
        return AccountRecord.from_row(row) if row else None

    async def soft_delete(self, owner_id: str, account_id: str) -> bool:
        """계좌 soft-delete

        Returns:
            삭제 여부 (없거나 이미 삭제된 경우 False)
        """
        async with self.db.transaction():
            cursor = await self.db.execute(
                """
                UPDATE accounts SET is_deleted = 1, updated_at = ?
                WHERE account_id = ? AND owner_id = ? AND is_deleted = 0
                """,
                (to_iso(now_utc()), account_id, owner_id),
            )
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info(f"Account soft-deleted: {account_id}")
        return deleted
