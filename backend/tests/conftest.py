"""Test fixtures for the reservation backend."""
from __future__ import annotations

import os
import time
from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")
os.environ.setdefault("RESERVATION_LEAD_DAYS", "0")

from bistro.core.config import get_settings
from bistro.core.security import hash_password
from bistro.db.base import Base
from bistro.db.session import dispose_engine, get_sessionmaker
from bistro.main import app
from bistro.models import User, UserRole, UserStatus
from bistro.services import closure_service


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()
    closure_service.get_rule_cache.cache_clear()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url, future=True)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)
    closure_service.get_rule_cache.cache_clear()
    get_settings.cache_clear()


@pytest_asyncio.fixture()
async def app_context(reset_database: None, db_url: str) -> AsyncIterator[dict[str, object]]:
    """Yield an async client plus admin and staff credentials."""
    sessionmaker = get_sessionmaker(db_url)
    admin_password = "Adm1nPass!"
    staff_password = "Staff1Pass!"

    async with sessionmaker() as session:
        admin = User(
            email="owner@bistro.example",
            hashed_password=hash_password(admin_password),
            display_name="Owner",
            role=UserRole.ADMIN,
            status=UserStatus.ACTIVE,
        )
        staff = User(
            email="server@bistro.example",
            hashed_password=hash_password(staff_password),
            display_name="Server",
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
        )
        session.add_all([admin, staff])
        await session.commit()

    context: dict[str, object] = {
        "admin_email": "owner@bistro.example",
        "admin_password": admin_password,
        "staff_email": "server@bistro.example",
        "staff_password": staff_password,
    }

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        context["client"] = client
        yield context


@pytest.fixture(params=["Asia/Tokyo", "America/New_York"])
def process_timezone(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """Run a test once per process timezone (UTC+9 and UTC-5)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", request.param)
    time.tzset()
    yield request.param
    monkeypatch.undo()
    time.tzset()

