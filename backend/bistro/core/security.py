"""Password hashing and bearer token helpers."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
from jose import jwt

from bistro.core.config import get_settings


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True when ``plain_password`` matches the stored bcrypt hash."""
    try:
        return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())
    except (ValueError, TypeError):  # malformed hash
        return False


def issue_access_token(
    user_id: uuid.UUID | str, *, role: str, lifetime: timedelta | None = None
) -> str:
    """Sign a token carrying the user id as ``sub`` and the user's role."""
    settings = get_settings()
    issued_at = datetime.now(UTC)
    expires_at = issued_at + (lifetime or timedelta(minutes=settings.access_token_expire_minutes))
    claims: dict[str, Any] = {
        "sub": str(user_id),
        "role": role,
        "iat": issued_at,
        "exp": expires_at,
    }
    return jwt.encode(claims, settings.token_signing_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify and decode a token; raises ``jose.JWTError`` when invalid or expired."""
    settings = get_settings()
    return jwt.decode(token, settings.token_signing_key, algorithms=[settings.jwt_algorithm])
