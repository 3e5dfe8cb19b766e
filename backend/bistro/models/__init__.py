"""ORM models package export."""

from bistro.models.blocked_date import BlockedDate
from bistro.models.closure import PeriodClosure, RecurringClosedDay
from bistro.models.reservation import Reservation, ReservationStatus
from bistro.models.user import User, UserRole, UserStatus

__all__ = [
    "BlockedDate",
    "PeriodClosure",
    "RecurringClosedDay",
    "Reservation",
    "ReservationStatus",
    "User",
    "UserRole",
    "UserStatus",
]
