"""
UserStore - 사용자 저장소

users 테이블 (이메일 유니크). 비밀번호는 해시만 저장.
"""

import logging
from uuid import uuid4

import aiosqlite

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.models import UserRecord
from core.utils.timezone import now_utc, to_iso

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """이미 가입된 이메일"""

    pass


class UserStore:
    """사용자 저장소

    Args:
        db: SQLiteAdapter 인스턴스
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def create(self, email: str, password_hash: str) -> UserRecord:
        """사용자 생성

        Raises:
            DuplicateEmailError: 이메일 중복 (UNIQUE 제약 위반)
        """
        user = UserRecord(
            user_id=str(uuid4()),
            email=email,
            password_hash=password_hash,
            created_at=to_iso(now_utc()),
        )

        try:
            async with self.db.transaction():
                await self.db.execute(
                    """
                    INSERT INTO users (user_id, email, password_hash, created_at)
                    VALUES (?, ?, ?, ?)
                    """,
                    (user.user_id, user.email, user.password_hash, user.created_at),
                )
        except aiosqlite.IntegrityError as e:
            raise DuplicateEmailError(email) from e

        logger.info(f"User created: {user.user_id}")
        return user

    async def get_by_email(self, email: str) -> UserRecord | None:
        """이메일로 조회"""
        row = await self.db.fetchone(
            "SELECT user_id, email, password_hash, created_at FROM users WHERE email = ?",
            (email,),
        )
        return UserRecord.from_row(row) if row else None

    async def get(self, user_id: str) -> UserRecord | None:
        """ID로 조회"""
        row = await self.db.fetchone(
            "SELECT user_id, email, password_hash, created_at FROM users WHERE user_id = ?",
            (user_id,),
        )
        return UserRecord.from_row(row) if row else None
