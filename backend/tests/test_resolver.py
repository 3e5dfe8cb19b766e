"""Single-date resolution order."""
from __future__ import annotations

import uuid

import pytest

from bistro.availability import (
    AvailabilityState,
    BlockedDate,
    CapacityPolicy,
    ClosureRuleSet,
    ClosureSource,
    DateKey,
    InvalidRuleError,
    PeriodClosure,
    RecurringClosure,
    ResolutionContext,
    resolve,
)

TODAY = DateKey(2025, 6, 10)


def _ctx(**overrides) -> ResolutionContext:
    values = {"today": TODAY, "lead_days": 0}
    values.update(overrides)
    return ResolutionContext(**values)


@pytest.mark.parametrize("offset", [-1, -30, -365])
def test_past_dates_are_never_available(offset: int) -> None:
    outcome = resolve(TODAY.add_days(offset), _ctx())
    assert outcome.state is AvailabilityState.PAST_DATE
    assert not outcome.available


def test_today_is_available_when_same_day_booking_allowed() -> None:
    assert resolve(TODAY, _ctx()).available


def test_lead_window_boundary() -> None:
    ctx = _ctx(lead_days=3)
    for day in (DateKey(2025, 6, 10), DateKey(2025, 6, 11), DateKey(2025, 6, 12)):
        outcome = resolve(day, ctx)
        assert outcome.state is AvailabilityState.IN_LEAD_WINDOW
        assert outcome.reason
    assert resolve(DateKey(2025, 6, 13), ctx).state is AvailabilityState.AVAILABLE


def test_past_check_wins_over_lead_window() -> None:
    assert resolve(DateKey(2025, 6, 9), _ctx(lead_days=3)).state is AvailabilityState.PAST_DATE


def test_lead_window_wins_over_closures() -> None:
    rules = ClosureRuleSet(blocked=(BlockedDate(uuid.uuid4(), DateKey(2025, 6, 11)),))
    outcome = resolve(DateKey(2025, 6, 11), _ctx(lead_days=3, rules=rules))
    assert outcome.state is AvailabilityState.IN_LEAD_WINDOW


def test_weekday_closure_resolves_closed_by_rule() -> None:
    day = DateKey(2025, 6, 17)  # Tuesday
    rules = ClosureRuleSet(recurring=(RecurringClosure(uuid.uuid4(), 2, "Closed Tuesdays"),))
    outcome = resolve(day, _ctx(rules=rules))
    assert outcome.state is AvailabilityState.CLOSED_BY_RULE
    assert outcome.reason == "Closed Tuesdays"
    assert outcome.closure_source is ClosureSource.WEEKDAY


def test_closure_wins_over_capacity() -> None:
    day = DateKey(2025, 6, 20)
    rules = ClosureRuleSet(
        periods=(PeriodClosure(uuid.uuid4(), day, day.add_days(2), "Summer break"),)
    )
    outcome = resolve(day, _ctx(rules=rules, counts={day: 99}))
    assert outcome.state is AvailabilityState.CLOSED_BY_RULE
    assert outcome.closure_source is ClosureSource.PERIOD


def test_capacity_boundary_with_eight_per_day() -> None:
    day = DateKey(2025, 6, 20)
    policy = CapacityPolicy(max_per_day=8)
    assert resolve(day, _ctx(counts={day: 7}, policy=policy)).available
    full = resolve(day, _ctx(counts={day: 8}, policy=policy))
    assert full.state is AvailabilityState.AT_CAPACITY
    assert full.reason == "Fully booked"


@pytest.mark.parametrize("lead_days", [-1, True, "3"])
def test_context_rejects_invalid_lead_days(lead_days) -> None:
    with pytest.raises(InvalidRuleError):
        _ctx(lead_days=lead_days)


def test_resolve_requires_a_date_key() -> None:
    with pytest.raises(TypeError):
        resolve("2025-06-20", _ctx())  # type: ignore[arg-type]
