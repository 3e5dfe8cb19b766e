"""Single-date availability decision."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field

from bistro.availability.capacity import CapacityPolicy, is_at_capacity
from bistro.availability.closures import ClosureRuleSet, ClosureSource, check_closures
from bistro.availability.date_key import DateKey
from bistro.availability.errors import InvalidRuleError


class AvailabilityState(str, enum.Enum):
    """Terminal states a date resolves to, in evaluation order."""

    PAST_DATE = "past_date"
    IN_LEAD_WINDOW = "in_lead_window"
    CLOSED_BY_RULE = "closed_by_rule"
    AT_CAPACITY = "at_capacity"
    AVAILABLE = "available"
    UNRESOLVED = "unresolved"


@dataclass(slots=True, frozen=True)
class AvailabilityOutcome:
    date: DateKey
    state: AvailabilityState
    reason: str | None = None
    closure_source: ClosureSource | None = None

    @property
    def available(self) -> bool:
        return self.state is AvailabilityState.AVAILABLE


@dataclass(slots=True, frozen=True)
class ResolutionContext:
    """Pre-fetched inputs for :func:`resolve`.

    ``lead_days`` of 0 allows same-day online booking.
    """

    today: DateKey
    lead_days: int
    rules: ClosureRuleSet = field(default_factory=ClosureRuleSet)
    counts: Mapping[DateKey, int] = field(default_factory=dict)
    policy: CapacityPolicy = field(default_factory=CapacityPolicy)

    def __post_init__(self) -> None:
        if isinstance(self.lead_days, bool) or not isinstance(self.lead_days, int):
            raise InvalidRuleError("lead_days must be an integer")
        if self.lead_days < 0:
            raise InvalidRuleError("lead_days cannot be negative")


def resolve(day: DateKey, ctx: ResolutionContext) -> AvailabilityOutcome:
    """Resolve ``day`` to exactly one state; the first matching check wins."""
    if not isinstance(day, DateKey):
        raise TypeError(f"resolve() expects a DateKey, got {type(day).__name__}")

    offset = day.days_since(ctx.today)
    if offset < 0:
        return AvailabilityOutcome(day, AvailabilityState.PAST_DATE)
    if offset < ctx.lead_days:
        return AvailabilityOutcome(
            day,
            AvailabilityState.IN_LEAD_WINDOW,
            reason="Online booking closes before this date; please call the restaurant",
        )

    closure = check_closures(day, ctx.rules)
    if closure.closed:
        return AvailabilityOutcome(
            day,
            AvailabilityState.CLOSED_BY_RULE,
            reason=closure.reason,
            closure_source=closure.source,
        )

    if is_at_capacity(day, ctx.counts, ctx.policy):
        return AvailabilityOutcome(
            day, AvailabilityState.AT_CAPACITY, reason="Fully booked"
        )

    return AvailabilityOutcome(day, AvailabilityState.AVAILABLE)


__all__ = [
    "AvailabilityOutcome",
    "AvailabilityState",
    "ResolutionContext",
    "resolve",
]
