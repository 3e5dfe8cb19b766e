"""Availability endpoints for calendar rendering and date checks."""

from __future__ import annotations

from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from bistro.availability import AvailabilityFetchError, DateKey
from bistro.core.config import get_settings
from bistro.schemas.availability import AvailabilityWindowRead, DateAvailabilityRead
from bistro.services import availability_service

router = APIRouter(prefix="/availability")


def fetch_unavailable() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Availability data is temporarily unavailable",
    )


@router.get("", response_model=AvailabilityWindowRead, summary="Bookable dates in the rolling window")
async def get_availability_window(
    horizon_days: Annotated[int | None, Query(ge=1, le=366)] = None,
) -> AvailabilityWindowRead:
    try:
        window = await availability_service.get_window(horizon_days=horizon_days)
    except AvailabilityFetchError as exc:
        raise fetch_unavailable() from exc
    return AvailabilityWindowRead.from_window(
        window, lead_days=get_settings().reservation_lead_days
    )


@router.get("/{check_date}", response_model=DateAvailabilityRead, summary="Check one date")
async def get_date_availability(check_date: date) -> DateAvailabilityRead:
    try:
        outcome = await availability_service.check_date(DateKey.from_native_local_date(check_date))
    except AvailabilityFetchError as exc:
        raise fetch_unavailable() from exc
    return DateAvailabilityRead.from_outcome(outcome)
