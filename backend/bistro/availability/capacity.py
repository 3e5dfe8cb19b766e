"""Per-date reservation counts checked against the daily capacity."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any

from bistro.availability.date_key import DateKey
from bistro.availability.errors import AvailabilityFetchError, InvalidRuleError

logger = logging.getLogger(__name__)

DEFAULT_MAX_PER_DAY = 8

ReservationCounts = Mapping[DateKey, int]
CountRowsFetcher = Callable[[DateKey, DateKey], Awaitable[Iterable[Mapping[str, Any]]]]


@dataclass(slots=True, frozen=True)
class CapacityPolicy:
    """Maximum non-cancelled reservations accepted for one date."""

    max_per_day: int = DEFAULT_MAX_PER_DAY

    def __post_init__(self) -> None:
        if isinstance(self.max_per_day, bool) or not isinstance(self.max_per_day, int):
            raise InvalidRuleError("max_per_day must be an integer")
        if self.max_per_day < 0:
            raise InvalidRuleError("max_per_day cannot be negative")


def _stored_date_key(value: Any) -> DateKey:
    if isinstance(value, date):
        return DateKey.from_native_local_date(value)
    return DateKey.normalize_stored_value(value)


class CapacityLedger:
    """Aggregates reservation counts for a date range in one fetch.

    ``fetch_rows`` receives the inclusive range and returns rows shaped like
    ``{"reservation_date": ..., "reservation_count": ...}`` covering only
    non-cancelled reservations.
    """

    def __init__(self, fetch_rows: CountRowsFetcher) -> None:
        self._fetch_rows = fetch_rows

    async def counts_by_range(self, start: DateKey, end: DateKey) -> dict[DateKey, int]:
        """Return non-cancelled reservation counts keyed by date for ``start..end``."""
        if end < start:
            raise InvalidRuleError("end must be on or after start")
        try:
            rows = await self._fetch_rows(start, end)
        except AvailabilityFetchError:
            raise
        except Exception as exc:
            logger.error("Reservation count fetch failed for %s..%s: %s", start, end, exc)
            raise AvailabilityFetchError("Unable to load reservation counts") from exc

        counts: dict[DateKey, int] = {}
        for row in rows:
            key = _stored_date_key(row["reservation_date"])
            counts[key] = counts.get(key, 0) + int(row["reservation_count"])
        return counts


def is_at_capacity(day: DateKey, counts: ReservationCounts, policy: CapacityPolicy) -> bool:
    """Return True when ``day`` already holds ``policy.max_per_day`` reservations."""
    return counts.get(day, 0) >= policy.max_per_day


__all__ = [
    "DEFAULT_MAX_PER_DAY",
    "CapacityLedger",
    "CapacityPolicy",
    "ReservationCounts",
    "is_at_capacity",
]
