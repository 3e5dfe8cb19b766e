"""Rolling availability window for calendar rendering."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from bistro.availability.capacity import CapacityLedger, CapacityPolicy
from bistro.availability.closures import ClosureRuleSet
from bistro.availability.date_key import DateKey
from bistro.availability.errors import AvailabilityFetchError, InvalidRuleError
from bistro.availability.resolver import (
    AvailabilityOutcome,
    AvailabilityState,
    ResolutionContext,
    resolve,
)

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_DAYS = 90

RuleLoader = Callable[[], Awaitable[ClosureRuleSet]]
Resolver = Callable[[DateKey, ResolutionContext], AvailabilityOutcome]


@dataclass(slots=True, frozen=True)
class AvailabilityWindow:
    """Resolved outcomes for ``[start, start + horizon_days)``."""

    start: DateKey
    horizon_days: int
    outcomes: tuple[AvailabilityOutcome, ...]
    available: frozenset[str]

    @property
    def end(self) -> DateKey:
        """Exclusive end of the window."""
        return self.start.add_days(self.horizon_days)

    def is_available(self, day: DateKey) -> bool:
        return day.to_canonical_string() in self.available

    def available_dates(self) -> list[DateKey]:
        return [outcome.date for outcome in self.outcomes if outcome.available]


class AvailabilityWindowBuilder:
    """Resolve every day of a window with one rule fetch and one count fetch.

    The builder holds no state between calls; callers re-invoke it after rule
    mutations, reservation changes or a change of day.
    """

    def __init__(
        self,
        *,
        load_rules: RuleLoader,
        ledger: CapacityLedger,
        lead_days: int,
        policy: CapacityPolicy,
        resolver: Resolver = resolve,
    ) -> None:
        self._load_rules = load_rules
        self._ledger = ledger
        self._lead_days = lead_days
        self._policy = policy
        self._resolver = resolver

    async def _fetch_rules(self) -> ClosureRuleSet:
        try:
            return await self._load_rules()
        except AvailabilityFetchError:
            raise
        except Exception as exc:
            logger.error("Closure rule fetch failed: %s", exc)
            raise AvailabilityFetchError("Unable to load closure rules") from exc

    async def _context(self, today: DateKey, start: DateKey, end: DateKey) -> ResolutionContext:
        # A partial rule set could only under-close dates, so both fetches must finish.
        rules, counts = await asyncio.gather(
            self._fetch_rules(),
            self._ledger.counts_by_range(start, end),
            return_exceptions=True,
        )
        for result in (rules, counts):
            if isinstance(result, BaseException):
                raise result
        return ResolutionContext(
            today=today,
            lead_days=self._lead_days,
            rules=rules,
            counts=counts,
            policy=self._policy,
        )

    async def build(
        self, today: DateKey, horizon_days: int = DEFAULT_HORIZON_DAYS
    ) -> AvailabilityWindow:
        """Resolve ``[today, today + horizon_days)``.

        Fetch failures propagate as :class:`AvailabilityFetchError`; a failure
        while resolving a single date marks only that date unavailable.
        """
        if horizon_days < 0:
            raise InvalidRuleError("horizon_days cannot be negative")

        ctx = await self._context(today, today, today.add_days(horizon_days))

        outcomes: list[AvailabilityOutcome] = []
        for offset in range(horizon_days):
            day = today.add_days(offset)
            try:
                outcome = self._resolver(day, ctx)
            except Exception:
                logger.exception("Availability resolution failed for %s", day)
                outcome = AvailabilityOutcome(day, AvailabilityState.UNRESOLVED)
            outcomes.append(outcome)

        available = frozenset(
            outcome.date.to_canonical_string() for outcome in outcomes if outcome.available
        )
        logger.debug(
            "Availability window from %s: %d of %d days available",
            today,
            len(available),
            horizon_days,
        )
        return AvailabilityWindow(
            start=today,
            horizon_days=horizon_days,
            outcomes=tuple(outcomes),
            available=available,
        )

    async def resolve_date(self, day: DateKey, today: DateKey) -> AvailabilityOutcome:
        """Resolve one date with fresh inputs, e.g. when a booking is submitted."""
        ctx = await self._context(today, day, day)
        return self._resolver(day, ctx)


__all__ = [
    "DEFAULT_HORIZON_DAYS",
    "AvailabilityWindow",
    "AvailabilityWindowBuilder",
]
