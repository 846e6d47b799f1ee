"""
인증 유틸리티

- 비밀번호: bcrypt 해시
- 액세스 토큰: HS256 JWT (PyJWT), claim `user_id` + 만료 시간
"""

from datetime import timedelta
from typing import Any

import bcrypt
import jwt

from core.constants import Defaults
from core.errors import AuthenticationError
from core.utils.timezone import now_utc


def hash_password(password: str) -> str:
    """비밀번호 bcrypt 해시"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """비밀번호 검증 (해시 형식이 깨진 경우 False)"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(
    user_id: str,
    secret_key: str,
    expire_minutes: int = Defaults.TOKEN_EXPIRE_MINUTES,
) -> str:
    """액세스 토큰 발급

    Args:
        user_id: 사용자 ID (claim `user_id`)
        secret_key: 서명 키
        expire_minutes: 만료 시간 (분)

    Returns:
        JWT 문자열
    """
    now = now_utc()
    payload: dict[str, Any] = {
        "user_id": user_id,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, secret_key, algorithm=Defaults.TOKEN_ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> str:
    """액세스 토큰 검증 후 user_id 반환

    Raises:
        AuthenticationError: 서명 불일치, 만료, user_id 누락
    """
    try:
        payload = jwt.decode(token, secret_key, algorithms=[Defaults.TOKEN_ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired") from None
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token") from None

    user_id = payload.get("user_id")
    if not user_id or not isinstance(user_id, str):
        raise AuthenticationError("Invalid token")

    return user_id
