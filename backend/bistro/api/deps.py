"""Request-scoped dependencies: database sessions and the signed-in user."""

from __future__ import annotations

import uuid
from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from bistro.core.config import get_settings
from bistro.core.security import decode_access_token
from bistro.db.session import get_session
from bistro.models.user import User, UserRole, UserStatus
from bistro.security.permissions import require_roles

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{get_settings().api_v1_prefix}/auth/token")

_UNAUTHORIZED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_session():
        yield session


def _subject_id(token: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(decode_access_token(token)["sub"]))
    except (JWTError, KeyError, ValueError) as exc:
        raise _UNAUTHORIZED from exc


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> User:
    """Resolve the bearer token to an active user or fail with 401."""
    user = await session.get(User, _subject_id(token))
    if user is None or user.status != UserStatus.ACTIVE:
        raise _UNAUTHORIZED
    return user


async def require_admin(
    current_user: Annotated[User, Depends(get_current_user)],
) -> User:
    require_roles(current_user, {UserRole.ADMIN})
    return current_user


SessionDep = Annotated[AsyncSession, Depends(get_db_session)]
CurrentUserDep = Annotated[User, Depends(get_current_user)]
AdminDep = Annotated[User, Depends(require_admin)]
