"""
Auth 서비스

회원가입 / 로그인 (bcrypt + JWT)
"""

import logging
import re
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings
from core.constants import Limits
from core.errors import AuthenticationError, ValidationError
from core.security import create_access_token, hash_password, verify_password
from core.storage import DuplicateEmailError, UserStore

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class AuthService:
    """Auth 서비스

    Args:
        db: SQLite 어댑터
        settings: 토큰 서명 키/만료 시간 제공
    """

    def __init__(self, db: SQLiteAdapter, settings: Settings):
        self.db = db
        self.settings = settings
        self.user_store = UserStore(db)

    async def signup(self, email: str | None, password: str | None) -> dict[str, Any]:
        """회원가입

        Raises:
            ValidationError: 이메일 형식, 비밀번호 길이, 중복 이메일
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        email = email.strip().lower()
        if not EMAIL_PATTERN.match(email):
            raise ValidationError("Invalid email format")

        if len(password) < Limits.MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {Limits.MIN_PASSWORD_LENGTH} characters"
            )

        if len(password.encode("utf-8")) > Limits.MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {Limits.MAX_PASSWORD_BYTES} bytes"
            )

        if await self.user_store.get_by_email(email):
            raise ValidationError("User already exists")

        try:
            user = await self.user_store.create(email, hash_password(password))
        except DuplicateEmailError:
            raise ValidationError("User already exists") from None

        return {"message": "User created", "user": {"id": user.user_id, "email": user.email}}

    async def login(self, email: str | None, password: str | None) -> dict[str, Any]:
        """로그인

        Returns:
            {"token": JWT, "user": {"id", "email"}}

        Raises:
            AuthenticationError: 이메일 없음 또는 비밀번호 불일치
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self.user_store.get_by_email(email.strip().lower())
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Login rejected")
            raise AuthenticationError("Invalid credentials")

        token = create_access_token(
            user.user_id,
            self.settings.web_secret_key,
            self.settings.token_expire_minutes,
        )
        return {"token": token, "user": {"id": user.user_id, "email": user.email}}
