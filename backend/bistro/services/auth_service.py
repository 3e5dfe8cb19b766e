"""Credential checks and token issuance for back-office users."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bistro.core.security import issue_access_token, verify_password
from bistro.models.user import User, UserStatus
from bistro.security.redact import mask_email
from bistro.services import user_service

logger = logging.getLogger(__name__)


async def authenticate_user(session: AsyncSession, email: str, password: str) -> User | None:
    """Return the active user matching ``email``/``password``, else None."""
    user = await user_service.get_user_by_email(session, email=email)
    if user is None or user.status != UserStatus.ACTIVE or not verify_password(
        password, user.hashed_password
    ):
        logger.info("Failed sign-in for %s", mask_email(email))
        return None
    return user


def create_access_token_for_user(user: User) -> str:
    return issue_access_token(user.id, role=user.role.value)
