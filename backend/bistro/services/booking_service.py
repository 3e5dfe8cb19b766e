"""Self-service booking submission."""
from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from bistro.availability import AvailabilityOutcome, DateKey
from bistro.models.reservation import Reservation
from bistro.schemas.reservation import ReservationCreate
from bistro.security.redact import mask_email
from bistro.services import availability_service, reservation_service

logger = logging.getLogger(__name__)


class DateUnavailableError(ValueError):
    """Raised when a submission targets a date that is not bookable online."""

    def __init__(self, outcome: AvailabilityOutcome) -> None:
        super().__init__(outcome.reason or "Date is not available for online booking")
        self.outcome = outcome


async def submit_reservation(
    session: AsyncSession, payload: ReservationCreate, *, today: DateKey | None = None
) -> Reservation:
    """Re-check the requested date and insert a pending reservation.

    The check and the insert are not serialized against concurrent
    submissions, so two requests racing for the last slot on a date can
    both succeed.
    """
    day = DateKey.from_native_local_date(payload.reservation_date)
    outcome = await availability_service.check_date(day, today=today)
    if not outcome.available:
        logger.warning(
            "Booking rejected for %s on %s: %s",
            mask_email(str(payload.customer_email)),
            day,
            outcome.state.value,
        )
        raise DateUnavailableError(outcome)
    return await reservation_service.create_reservation(session, payload)
