"""Reservation availability engine."""

from bistro.availability.cache import ClosureRuleCache
from bistro.availability.capacity import (
    DEFAULT_MAX_PER_DAY,
    CapacityLedger,
    CapacityPolicy,
    is_at_capacity,
)
from bistro.availability.closures import (
    BlockedDate,
    ClosureCheck,
    ClosureRuleSet,
    ClosureSource,
    PeriodClosure,
    RecurringClosure,
    check_closures,
    is_blocked,
    is_business_day,
    is_closed_by_period,
    is_closed_by_weekday,
)
from bistro.availability.date_key import DateKey
from bistro.availability.errors import (
    AvailabilityError,
    AvailabilityFetchError,
    InvalidDateKeyError,
    InvalidRuleError,
)
from bistro.availability.resolver import (
    AvailabilityOutcome,
    AvailabilityState,
    ResolutionContext,
    resolve,
)
from bistro.availability.window import (
    DEFAULT_HORIZON_DAYS,
    AvailabilityWindow,
    AvailabilityWindowBuilder,
)

__all__ = [
    "DEFAULT_HORIZON_DAYS",
    "DEFAULT_MAX_PER_DAY",
    "AvailabilityError",
    "AvailabilityFetchError",
    "AvailabilityOutcome",
    "AvailabilityState",
    "AvailabilityWindow",
    "AvailabilityWindowBuilder",
    "BlockedDate",
    "CapacityLedger",
    "CapacityPolicy",
    "ClosureCheck",
    "ClosureRuleCache",
    "ClosureRuleSet",
    "ClosureSource",
    "DateKey",
    "InvalidDateKeyError",
    "InvalidRuleError",
    "PeriodClosure",
    "RecurringClosure",
    "ResolutionContext",
    "check_closures",
    "is_at_capacity",
    "is_blocked",
    "is_business_day",
    "is_closed_by_period",
    "is_closed_by_weekday",
    "resolve",
]
