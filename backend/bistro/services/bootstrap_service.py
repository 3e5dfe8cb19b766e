"""Create the configured admin account on startup."""

from __future__ import annotations

import logging

from bistro.core.config import get_settings
from bistro.db.session import get_sessionmaker
from bistro.models.user import User, UserRole
from bistro.schemas.user import UserCreate
from bistro.security.redact import mask_email
from bistro.services import user_service

logger = logging.getLogger(__name__)


async def ensure_bootstrap_admin() -> User | None:
    """Create an admin from ``BOOTSTRAP_ADMIN_*`` settings when missing."""
    settings = get_settings()
    email = settings.bootstrap_admin_email
    password = settings.bootstrap_admin_password
    if not email or not password:
        return None

    async with get_sessionmaker()() as session:
        existing = await user_service.get_user_by_email(session, email=email)
        if existing is not None:
            return existing
        user = await user_service.create_user(
            session,
            UserCreate(
                email=email,
                password=password,
                display_name="Administrator",
                role=UserRole.ADMIN,
            ),
        )
    logger.info("Bootstrap admin created: %s", mask_email(user.email))
    return user
