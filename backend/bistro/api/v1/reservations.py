"""Reservation endpoints: public booking plus admin management."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, HTTPException, Query, status

from bistro.api.deps import AdminDep, SessionDep
from bistro.api.rate_limit import BOOKING_RATE_DEP
from bistro.api.v1.availability import fetch_unavailable
from bistro.availability import AvailabilityFetchError
from bistro.models.reservation import Reservation, ReservationStatus
from bistro.schemas.reservation import (
    ManualReservationCreate,
    ReservationCreate,
    ReservationRead,
    ReservationStatusUpdate,
    ReservationUpdate,
)
from bistro.services import booking_service, reservation_service

router = APIRouter(prefix="/reservations")


async def _get_or_404(session: SessionDep, reservation_id: uuid.UUID) -> Reservation:
    reservation = await reservation_service.get_reservation(session, reservation_id)
    if reservation is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    return reservation


@router.post(
    "",
    response_model=ReservationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an online reservation",
    dependencies=[BOOKING_RATE_DEP],
)
async def submit_reservation(payload: ReservationCreate, session: SessionDep) -> ReservationRead:
    try:
        reservation = await booking_service.submit_reservation(session, payload)
    except booking_service.DateUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": "Selected date is not available for online booking",
                "state": exc.outcome.state.value,
                "reason": exc.outcome.reason,
            },
        ) from exc
    except AvailabilityFetchError as exc:
        raise fetch_unavailable() from exc
    return ReservationRead.model_validate(reservation)


@router.get("", response_model=list[ReservationRead], summary="List reservations")
async def list_reservations(
    session: SessionDep,
    _: AdminDep,
    start_date: date | None = None,
    end_date: date | None = None,
    status_filter: ReservationStatus | None = Query(default=None, alias="status"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=500),
) -> list[ReservationRead]:
    reservations = await reservation_service.list_reservations(
        session,
        start_date=start_date,
        end_date=end_date,
        status=status_filter,
        skip=skip,
        limit=limit,
    )
    return [ReservationRead.model_validate(item) for item in reservations]


@router.post(
    "/manual",
    response_model=ReservationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record a reservation taken by phone",
)
async def create_manual_reservation(
    payload: ManualReservationCreate, session: SessionDep, _: AdminDep
) -> ReservationRead:
    reservation = await reservation_service.create_reservation(session, payload)
    return ReservationRead.model_validate(reservation)


@router.get("/{reservation_id}", response_model=ReservationRead, summary="Get reservation")
async def get_reservation(
    reservation_id: uuid.UUID, session: SessionDep, _: AdminDep
) -> ReservationRead:
    return ReservationRead.model_validate(await _get_or_404(session, reservation_id))


@router.patch("/{reservation_id}", response_model=ReservationRead, summary="Edit reservation")
async def update_reservation(
    reservation_id: uuid.UUID,
    payload: ReservationUpdate,
    session: SessionDep,
    _: AdminDep,
) -> ReservationRead:
    reservation = await _get_or_404(session, reservation_id)
    try:
        reservation = await reservation_service.update_reservation(
            session, reservation=reservation, payload=payload
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ReservationRead.model_validate(reservation)


@router.patch(
    "/{reservation_id}/status",
    response_model=ReservationRead,
    summary="Approve, cancel or reopen a reservation",
)
async def update_reservation_status(
    reservation_id: uuid.UUID,
    payload: ReservationStatusUpdate,
    session: SessionDep,
    _: AdminDep,
) -> ReservationRead:
    reservation = await _get_or_404(session, reservation_id)
    reservation = await reservation_service.update_status(
        session, reservation=reservation, status=payload.status
    )
    return ReservationRead.model_validate(reservation)


@router.delete(
    "/{reservation_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete reservation"
)
async def delete_reservation(reservation_id: uuid.UUID, session: SessionDep, _: AdminDep) -> None:
    reservation = await _get_or_404(session, reservation_id)
    await reservation_service.delete_reservation(session, reservation=reservation)
