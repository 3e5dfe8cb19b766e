"""Closure rules and the pure checks evaluated against them."""

from __future__ import annotations

import enum
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

from bistro.availability.date_key import DateKey
from bistro.availability.errors import InvalidRuleError


class ClosureSource(str, enum.Enum):
    """Which rule set closed a date."""

    BLOCKED = "blocked"
    PERIOD = "period"
    WEEKDAY = "weekday"


@dataclass(slots=True, frozen=True)
class RecurringClosure:
    """Weekly closure evaluated by weekday only (0 = Sunday)."""

    id: uuid.UUID
    day_of_week: int
    reason: str | None = None
    is_active: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.day_of_week, bool) or not isinstance(self.day_of_week, int):
            raise InvalidRuleError("day_of_week must be an integer")
        if not 0 <= self.day_of_week <= 6:
            raise InvalidRuleError("day_of_week must be between 0 (Sunday) and 6 (Saturday)")


@dataclass(slots=True, frozen=True)
class PeriodClosure:
    """Contiguous closure, inclusive on both ends."""

    id: uuid.UUID
    start_date: DateKey
    end_date: DateKey
    reason: str
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.end_date < self.start_date:
            raise InvalidRuleError("end_date must be on or after start_date")
        if not self.reason or not self.reason.strip():
            raise InvalidRuleError("Period closures require a reason")

    def covers(self, day: DateKey) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(slots=True, frozen=True)
class BlockedDate:
    """Single ad-hoc closed date."""

    id: uuid.UUID
    blocked_date: DateKey
    reason: str | None = None


@dataclass(slots=True, frozen=True)
class ClosureRuleSet:
    """Snapshot of the three independently administered rule sets."""

    recurring: tuple[RecurringClosure, ...] = field(default_factory=tuple)
    periods: tuple[PeriodClosure, ...] = field(default_factory=tuple)
    blocked: tuple[BlockedDate, ...] = field(default_factory=tuple)


class ClosureCheck(NamedTuple):
    closed: bool
    reason: str | None = None
    source: ClosureSource | None = None


_OPEN = ClosureCheck(False)


def is_closed_by_weekday(day: DateKey, rules: Iterable[RecurringClosure]) -> bool:
    """Return True when an active weekly rule matches the weekday of ``day``."""
    weekday = day.day_of_week
    return any(rule.is_active and rule.day_of_week == weekday for rule in rules)


def _weekday_check(day: DateKey, rules: Iterable[RecurringClosure]) -> ClosureCheck:
    weekday = day.day_of_week
    for rule in rules:
        if rule.is_active and rule.day_of_week == weekday:
            return ClosureCheck(True, rule.reason, ClosureSource.WEEKDAY)
    return _OPEN


def is_closed_by_period(day: DateKey, rules: Iterable[PeriodClosure]) -> ClosureCheck:
    """Return the first active period that covers ``day``."""
    for rule in rules:
        if rule.is_active and rule.covers(day):
            return ClosureCheck(True, rule.reason, ClosureSource.PERIOD)
    return _OPEN


def is_blocked(day: DateKey, rules: Iterable[BlockedDate]) -> ClosureCheck:
    """Return the blocked-date entry for ``day`` if one exists."""
    for rule in rules:
        if rule.blocked_date == day:
            return ClosureCheck(True, rule.reason, ClosureSource.BLOCKED)
    return _OPEN


def check_closures(day: DateKey, rules: ClosureRuleSet) -> ClosureCheck:
    """Combine all rule sets; the reason comes from blocked, then period, then weekday."""
    for check in (
        is_blocked(day, rules.blocked),
        is_closed_by_period(day, rules.periods),
        _weekday_check(day, rules.recurring),
    ):
        if check.closed:
            return check
    return _OPEN


def is_business_day(day: DateKey, rules: ClosureRuleSet) -> bool:
    """Return True unless a weekly or period closure applies.

    Blocked dates stop reservations but do not close the restaurant.
    """
    if is_closed_by_period(day, rules.periods).closed:
        return False
    return not is_closed_by_weekday(day, rules.recurring)


__all__ = [
    "BlockedDate",
    "ClosureCheck",
    "ClosureRuleSet",
    "ClosureSource",
    "PeriodClosure",
    "RecurringClosure",
    "check_closures",
    "is_blocked",
    "is_business_day",
    "is_closed_by_period",
    "is_closed_by_weekday",
]
