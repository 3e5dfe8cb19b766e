"""Manage weekly closing days and closure periods."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Iterable
from functools import lru_cache
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from bistro import availability
from bistro.core.config import get_settings
from bistro.db.session import open_session
from bistro.models.blocked_date import BlockedDate
from bistro.models.closure import PeriodClosure, RecurringClosedDay
from bistro.schemas.closure import (
    PeriodClosureCreate,
    PeriodClosureUpdate,
    RecurringClosedDayCreate,
    RecurringClosedDayUpdate,
)

logger = logging.getLogger(__name__)


@lru_cache
def get_rule_cache() -> availability.ClosureRuleCache:
    """Return the process-wide closure rule cache."""
    return availability.ClosureRuleCache(get_settings().closure_cache_ttl_seconds)


def invalidate_rule_cache() -> None:
    get_rule_cache().invalidate()


async def list_recurring(session: AsyncSession) -> list[RecurringClosedDay]:
    stmt: Select[tuple[RecurringClosedDay]] = select(RecurringClosedDay).order_by(
        RecurringClosedDay.day_of_week.asc()
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_recurring(
    session: AsyncSession, recurring_id: uuid.UUID
) -> RecurringClosedDay | None:
    return await session.get(RecurringClosedDay, recurring_id)


async def create_recurring(
    session: AsyncSession, payload: RecurringClosedDayCreate
) -> RecurringClosedDay:
    rule = RecurringClosedDay(**payload.model_dump())
    session.add(rule)
    await session.commit()
    await session.refresh(rule)
    invalidate_rule_cache()
    logger.info("Weekly closure added for day %s", rule.day_of_week)
    return rule


async def update_recurring(
    session: AsyncSession, *, rule: RecurringClosedDay, payload: RecurringClosedDayUpdate
) -> RecurringClosedDay:
    for key, value in payload.model_dump(exclude_unset=True).items():
        if key in {"day_of_week", "is_active"} and value is None:
            raise ValueError(f"{key} cannot be null")
        setattr(rule, key, value)
    await session.commit()
    await session.refresh(rule)
    invalidate_rule_cache()
    return rule


async def delete_recurring(session: AsyncSession, *, rule: RecurringClosedDay) -> None:
    await session.delete(rule)
    await session.commit()
    invalidate_rule_cache()


async def list_periods(session: AsyncSession) -> list[PeriodClosure]:
    stmt: Select[tuple[PeriodClosure]] = select(PeriodClosure).order_by(
        PeriodClosure.start_date.asc()
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_period(session: AsyncSession, period_id: uuid.UUID) -> PeriodClosure | None:
    return await session.get(PeriodClosure, period_id)


async def create_period(
    session: AsyncSession, payload: PeriodClosureCreate
) -> PeriodClosure:
    period = PeriodClosure(**payload.model_dump())
    session.add(period)
    await session.commit()
    await session.refresh(period)
    invalidate_rule_cache()
    logger.info("Closure period added: %s to %s", period.start_date, period.end_date)
    return period


async def update_period(
    session: AsyncSession, *, period: PeriodClosure, payload: PeriodClosureUpdate
) -> PeriodClosure:
    data = payload.model_dump(exclude_unset=True)
    for key in ("start_date", "end_date", "reason", "is_active"):
        if key in data and data[key] is None:
            raise ValueError(f"{key} cannot be null")
    start = data.get("start_date", period.start_date)
    end = data.get("end_date", period.end_date)
    if end < start:
        raise ValueError("end_date must be on or after start_date")
    for key, value in data.items():
        setattr(period, key, value)
    await session.commit()
    await session.refresh(period)
    invalidate_rule_cache()
    return period


async def delete_period(session: AsyncSession, *, period: PeriodClosure) -> None:
    await session.delete(period)
    await session.commit()
    invalidate_rule_cache()


def _to_rules(rows: Iterable[Any], build: Callable[[Any], Any], kind: str) -> tuple[Any, ...]:
    """Map stored rows, skipping any the engine refuses."""
    rules = []
    for row in rows:
        try:
            rules.append(build(row))
        except (availability.InvalidRuleError, availability.InvalidDateKeyError):
            logger.exception("Skipping invalid %s rule %s", kind, row.id)
    return tuple(rules)


def _recurring_rule(row: RecurringClosedDay) -> availability.RecurringClosure:
    return availability.RecurringClosure(
        id=row.id,
        day_of_week=row.day_of_week,
        reason=row.reason,
        is_active=row.is_active,
    )


def _period_rule(row: PeriodClosure) -> availability.PeriodClosure:
    return availability.PeriodClosure(
        id=row.id,
        start_date=availability.DateKey.from_native_local_date(row.start_date),
        end_date=availability.DateKey.from_native_local_date(row.end_date),
        reason=row.reason,
        is_active=row.is_active,
    )


def _blocked_rule(row: BlockedDate) -> availability.BlockedDate:
    return availability.BlockedDate(
        id=row.id,
        blocked_date=availability.DateKey.from_native_local_date(row.blocked_date),
        reason=row.reason,
    )


async def load_rule_set(session: AsyncSession) -> availability.ClosureRuleSet:
    """Read all three rule tables into an engine snapshot.

    Rows the engine rejects are logged and left out of the snapshot.
    """
    recurring = await list_recurring(session)
    periods = await list_periods(session)
    blocked = (await session.execute(select(BlockedDate))).scalars().all()
    return availability.ClosureRuleSet(
        recurring=_to_rules(recurring, _recurring_rule, "weekly"),
        periods=_to_rules(periods, _period_rule, "period"),
        blocked=_to_rules(blocked, _blocked_rule, "blocked date"),
    )


async def _load_with_own_session() -> availability.ClosureRuleSet:
    async with open_session() as session:
        return await load_rule_set(session)


async def get_cached_rule_set() -> availability.ClosureRuleSet:
    """Return the current rule snapshot, reading the database when the cache is cold."""
    return await get_rule_cache().get(_load_with_own_session)
