"""Wire the availability engine to the database and serve the named RPCs."""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from bistro.availability import (
    AvailabilityOutcome,
    AvailabilityWindow,
    AvailabilityWindowBuilder,
    CapacityLedger,
    CapacityPolicy,
    DateKey,
    InvalidDateKeyError,
    is_business_day as rules_allow_business,
)
from bistro.core.config import get_settings
from bistro.core.timezones import restaurant_today
from bistro.db.session import open_session
from bistro.services import closure_service, reservation_service

logger = logging.getLogger(__name__)


class UnknownRpcError(LookupError):
    """Raised when an RPC name is not registered."""


async def _fetch_count_rows(start: DateKey, end: DateKey) -> Iterable[Mapping[str, Any]]:
    async with open_session() as session:
        return await reservation_service.count_reservations_by_date(
            session, start_date=start.to_date(), end_date=end.to_date()
        )


def capacity_ledger() -> CapacityLedger:
    return CapacityLedger(_fetch_count_rows)


def get_window_builder() -> AvailabilityWindowBuilder:
    """Build the engine from current settings; cheap enough to do per request."""
    settings = get_settings()
    return AvailabilityWindowBuilder(
        load_rules=closure_service.get_cached_rule_set,
        ledger=capacity_ledger(),
        lead_days=settings.reservation_lead_days,
        policy=CapacityPolicy(settings.reservation_daily_capacity),
    )


async def get_window(
    *, horizon_days: int | None = None, today: DateKey | None = None
) -> AvailabilityWindow:
    if horizon_days is None:
        horizon_days = get_settings().availability_horizon_days
    return await get_window_builder().build(today or restaurant_today(), horizon_days)


async def check_date(day: DateKey, *, today: DateKey | None = None) -> AvailabilityOutcome:
    """Resolve a single date against freshly fetched rules and counts."""
    return await get_window_builder().resolve_date(day, today or restaurant_today())


async def is_business_day(day: DateKey) -> bool:
    rules = await closure_service.get_cached_rule_set()
    return rules_allow_business(day, rules)


async def is_reservation_available(day: DateKey) -> bool:
    return (await check_date(day)).available


async def reservation_counts(start: DateKey, end: DateKey) -> dict[DateKey, int]:
    return await capacity_ledger().counts_by_range(start, end)


def _date_arg(args: Mapping[str, Any], name: str) -> DateKey:
    raw = args.get(name)
    if not isinstance(raw, str):
        raise InvalidDateKeyError(f"{name} must be a YYYY-MM-DD string")
    return DateKey.normalize_stored_value(raw)


async def _rpc_reservation_counts(args: Mapping[str, Any]) -> list[dict[str, Any]]:
    counts = await reservation_counts(_date_arg(args, "start_date"), _date_arg(args, "end_date"))
    return [
        {"reservation_date": day.to_canonical_string(), "reservation_count": counts[day]}
        for day in sorted(counts)
    ]


async def _rpc_is_business_day(args: Mapping[str, Any]) -> bool:
    return await is_business_day(_date_arg(args, "check_date"))


async def _rpc_is_reservation_available(args: Mapping[str, Any]) -> bool:
    return await is_reservation_available(_date_arg(args, "check_date"))


RpcHandler = Callable[[Mapping[str, Any]], Awaitable[Any]]

RPC_HANDLERS: dict[str, RpcHandler] = {
    "get_reservation_counts_by_date": _rpc_reservation_counts,
    "is_business_day": _rpc_is_business_day,
    "is_reservation_available": _rpc_is_reservation_available,
}


async def call_rpc(name: str, args: Mapping[str, Any]) -> Any:
    """Dispatch a named RPC; bad arguments raise ``ValueError`` subclasses."""
    handler = RPC_HANDLERS.get(name)
    if handler is None:
        raise UnknownRpcError(name)
    logger.debug("RPC %s called", name)
    return await handler(args)
