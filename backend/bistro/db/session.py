"""Async engines and sessions, one pair per database URL."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from bistro.core.config import get_settings


@dataclass(slots=True)
class _Database:
    engine: AsyncEngine
    sessionmaker: async_sessionmaker[AsyncSession]


_databases: dict[str, _Database] = {}


def _connect(url: str) -> _Database:
    if make_url(url).get_backend_name() == "sqlite":
        # Availability reads use their own connections while a booking may be writing.
        engine = create_async_engine(url, connect_args={"timeout": 15})
    else:
        engine = create_async_engine(url, pool_pre_ping=True)
    return _Database(engine, async_sessionmaker(engine, expire_on_commit=False))


def get_sessionmaker(database_url: str | None = None) -> async_sessionmaker[AsyncSession]:
    """Return the session factory for ``database_url`` (default: ``DATABASE_URL``)."""
    url = database_url or get_settings().database_url
    database = _databases.get(url)
    if database is None:
        database = _databases[url] = _connect(url)
    return database.sessionmaker


async def get_session() -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped session."""
    async with get_sessionmaker()() as session:
        yield session


@asynccontextmanager
async def open_session() -> AsyncIterator[AsyncSession]:
    """Open a short-lived session for one independent fetch.

    Sessions must not be shared between concurrent awaits, so fetches that
    run side by side each take their own.
    """
    async with get_sessionmaker()() as session:
        yield session


async def dispose_engine(database_url: str | None = None) -> None:
    """Close pooled connections for ``database_url`` and forget its engine."""
    database = _databases.pop(database_url or get_settings().database_url, None)
    if database is not None:
        await database.engine.dispose()
