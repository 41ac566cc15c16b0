"""Password hashing and access-token helpers.

Passwords go through a passlib ``CryptContext``; access tokens are HS256 JWTs
signed with ``settings.secret_key``. Both are plain functions so routers and
the authentication dependency share one implementation.
"""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from passlib.context import CryptContext

from ..config import settings


pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def get_password_hash(password: str) -> str:
    if not password:
        raise ValueError("password_blank")
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Unrecognised or corrupt hash
        return False


def generate_password(nbytes: int = 16) -> str:
    """Random password for accounts created through federated login."""
    return secrets.token_urlsafe(nbytes)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode: Dict[str, Any] = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"iat": int(now.timestamp()), "exp": int(expire.timestamp())})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def issue_user_token(user) -> str:
    """Signed token identifying ``user``; ``sub`` carries the user id."""
    return create_access_token(
        data={"sub": str(user.id), "email": user.email, "fullName": user.full_name}
    )


def verify_token(token: str) -> Dict[str, Any]:
    """Decode and validate a token, raising ``jwt.InvalidTokenError`` on failure.

    ``jwt.ExpiredSignatureError`` is a subclass, so callers that only care about
    validity can catch the base class.
    """
    if not token:
        raise jwt.InvalidTokenError("token_blank")
    return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
