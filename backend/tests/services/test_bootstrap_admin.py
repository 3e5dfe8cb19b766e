"""Startup admin bootstrap."""
from __future__ import annotations

import pytest

from bistro.core.config import get_settings
from bistro.core.security import verify_password
from bistro.db.session import get_sessionmaker
from bistro.models import UserRole
from bistro.services import bootstrap_service, user_service

pytestmark = pytest.mark.asyncio


async def test_bootstrap_admin_is_created_once(
    reset_database: None, db_url: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("BOOTSTRAP_ADMIN_EMAIL", "Chef@Example.com")
    monkeypatch.setenv("BOOTSTRAP_ADMIN_PASSWORD", "kitchen-secret")
    get_settings.cache_clear()

    created = await bootstrap_service.ensure_bootstrap_admin()
    again = await bootstrap_service.ensure_bootstrap_admin()
    assert created is not None and again is not None
    assert created.id == again.id

    async with get_sessionmaker(db_url)() as session:
        user = await user_service.get_user_by_email(session, "chef@example.com")
    assert user is not None
    assert user.role == UserRole.ADMIN
    assert verify_password("kitchen-secret", user.hashed_password)


async def test_bootstrap_is_skipped_without_credentials(
    reset_database: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("BOOTSTRAP_ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("BOOTSTRAP_ADMIN_PASSWORD", raising=False)
    get_settings.cache_clear()
    assert await bootstrap_service.ensure_bootstrap_admin() is None
