"""Closure rule checks."""
from __future__ import annotations

import uuid

import pytest

from bistro.availability import (
    BlockedDate,
    ClosureRuleSet,
    ClosureSource,
    DateKey,
    InvalidRuleError,
    PeriodClosure,
    RecurringClosure,
    check_closures,
    is_blocked,
    is_business_day,
    is_closed_by_period,
    is_closed_by_weekday,
)

TUESDAY = DateKey(2025, 3, 4)
WEDNESDAY = DateKey(2025, 3, 5)


def _weekly(day_of_week: int, *, active: bool = True, reason: str | None = "Regular holiday") -> RecurringClosure:
    return RecurringClosure(id=uuid.uuid4(), day_of_week=day_of_week, reason=reason, is_active=active)


def _period(start: DateKey, end: DateKey, *, active: bool = True, reason: str = "Renovation") -> PeriodClosure:
    return PeriodClosure(id=uuid.uuid4(), start_date=start, end_date=end, reason=reason, is_active=active)


def _blocked(day: DateKey, reason: str | None = "Private event") -> BlockedDate:
    return BlockedDate(id=uuid.uuid4(), blocked_date=day, reason=reason)


def test_weekday_rule_matches_only_its_weekday() -> None:
    rules = [_weekly(2)]
    assert is_closed_by_weekday(TUESDAY, rules)
    assert is_closed_by_weekday(TUESDAY.add_days(7), rules)
    assert not is_closed_by_weekday(WEDNESDAY, rules)


def test_inactive_weekday_rule_is_ignored() -> None:
    assert not is_closed_by_weekday(TUESDAY, [_weekly(2, active=False)])


def test_period_is_inclusive_on_both_ends() -> None:
    rules = [_period(DateKey(2024, 12, 30), DateKey(2025, 1, 3), reason="New Year")]
    assert is_closed_by_period(DateKey(2024, 12, 30), rules).closed
    assert is_closed_by_period(DateKey(2025, 1, 3), rules) == (True, "New Year", ClosureSource.PERIOD)
    assert not is_closed_by_period(DateKey(2024, 12, 29), rules).closed
    assert not is_closed_by_period(DateKey(2025, 1, 4), rules).closed


def test_inactive_period_is_ignored() -> None:
    rules = [_period(TUESDAY, WEDNESDAY, active=False)]
    assert not is_closed_by_period(TUESDAY, rules).closed


def test_blocked_date_reports_reason() -> None:
    check = is_blocked(WEDNESDAY, [_blocked(WEDNESDAY, "Staff training")])
    assert check.closed
    assert check.reason == "Staff training"
    assert check.source is ClosureSource.BLOCKED
    assert not is_blocked(TUESDAY, [_blocked(WEDNESDAY)]).closed


def test_reason_priority_is_blocked_then_period_then_weekday() -> None:
    rules = ClosureRuleSet(
        recurring=(_weekly(2, reason="Weekly"),),
        periods=(_period(TUESDAY, TUESDAY, reason="Period"),),
        blocked=(_blocked(TUESDAY, "Blocked"),),
    )
    assert check_closures(TUESDAY, rules).reason == "Blocked"

    without_block = ClosureRuleSet(recurring=rules.recurring, periods=rules.periods)
    assert check_closures(TUESDAY, without_block).reason == "Period"

    weekly_only = ClosureRuleSet(recurring=rules.recurring)
    check = check_closures(TUESDAY, weekly_only)
    assert check.reason == "Weekly"
    assert check.source is ClosureSource.WEEKDAY


def test_deactivated_weekday_rule_still_closed_by_block() -> None:
    rules = ClosureRuleSet(recurring=(_weekly(2, active=False),), blocked=(_blocked(TUESDAY),))
    assert check_closures(TUESDAY, rules).closed


def test_open_date_reports_no_source() -> None:
    check = check_closures(WEDNESDAY, ClosureRuleSet(recurring=(_weekly(2),)))
    assert check == (False, None, None)


def test_business_day_ignores_blocked_dates() -> None:
    rules = ClosureRuleSet(recurring=(_weekly(2),), blocked=(_blocked(WEDNESDAY),))
    assert not is_business_day(TUESDAY, rules)
    assert is_business_day(WEDNESDAY, rules)


@pytest.mark.parametrize("value", [-1, 7, True])
def test_recurring_rule_rejects_bad_weekday(value: int) -> None:
    with pytest.raises(InvalidRuleError):
        _weekly(value)


def test_period_rejects_reversed_range() -> None:
    with pytest.raises(InvalidRuleError):
        _period(WEDNESDAY, TUESDAY)


def test_period_requires_reason() -> None:
    with pytest.raises(InvalidRuleError):
        _period(TUESDAY, WEDNESDAY, reason="  ")
