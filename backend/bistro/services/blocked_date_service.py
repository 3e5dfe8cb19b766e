"""Blocked date persistence helpers."""
from __future__ import annotations

import logging
import uuid
from datetime import date

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bistro.models.blocked_date import BlockedDate
from bistro.schemas.blocked_date import BlockedDateCreate
from bistro.services.closure_service import invalidate_rule_cache

logger = logging.getLogger(__name__)


async def list_blocked_dates(
    session: AsyncSession,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[BlockedDate]:
    stmt = select(BlockedDate).order_by(BlockedDate.blocked_date.asc())
    if start_date is not None:
        stmt = stmt.where(BlockedDate.blocked_date >= start_date)
    if end_date is not None:
        stmt = stmt.where(BlockedDate.blocked_date <= end_date)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_blocked_date(
    session: AsyncSession, blocked_id: uuid.UUID
) -> BlockedDate | None:
    return await session.get(BlockedDate, blocked_id)


async def create_blocked_date(
    session: AsyncSession, payload: BlockedDateCreate
) -> BlockedDate:
    """Block a date; raises ``ValueError`` when it is already blocked."""
    blocked = BlockedDate(blocked_date=payload.blocked_date, reason=payload.reason)
    session.add(blocked)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise ValueError("Date is already blocked") from exc
    await session.refresh(blocked)
    invalidate_rule_cache()
    logger.info("Blocked date added: %s", blocked.blocked_date)
    return blocked


async def delete_blocked_date(session: AsyncSession, *, blocked: BlockedDate) -> None:
    await session.delete(blocked)
    await session.commit()
    invalidate_rule_cache()
