"""Reservation persistence and per-date counting."""
from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bistro.models.reservation import Reservation, ReservationStatus
from bistro.schemas.reservation import (
    ManualReservationCreate,
    ReservationCreate,
    ReservationUpdate,
)
from bistro.security.redact import mask_email

logger = logging.getLogger(__name__)


async def count_reservations_by_date(
    session: AsyncSession, *, start_date: date, end_date: date
) -> list[dict[str, Any]]:
    """Return non-cancelled reservation counts per date for an inclusive range."""
    stmt = (
        select(
            Reservation.reservation_date,
            func.count(Reservation.id).label("reservation_count"),
        )
        .where(
            Reservation.reservation_date >= start_date,
            Reservation.reservation_date <= end_date,
            Reservation.status != ReservationStatus.CANCELLED,
        )
        .group_by(Reservation.reservation_date)
        .order_by(Reservation.reservation_date.asc())
    )
    result = await session.execute(stmt)
    return [
        {"reservation_date": row.reservation_date, "reservation_count": row.reservation_count}
        for row in result
    ]


async def list_reservations(
    session: AsyncSession,
    *,
    start_date: date | None = None,
    end_date: date | None = None,
    status: ReservationStatus | None = None,
    skip: int = 0,
    limit: int = 100,
) -> list[Reservation]:
    """Return reservations ordered by date and time."""
    stmt: Select[tuple[Reservation]] = select(Reservation)
    if start_date is not None:
        stmt = stmt.where(Reservation.reservation_date >= start_date)
    if end_date is not None:
        stmt = stmt.where(Reservation.reservation_date <= end_date)
    if status is not None:
        stmt = stmt.where(Reservation.status == status)
    stmt = (
        stmt.order_by(
            Reservation.reservation_date.asc(), Reservation.reservation_time.asc()
        )
        .offset(skip)
        .limit(limit)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_reservation(
    session: AsyncSession, reservation_id: uuid.UUID
) -> Reservation | None:
    return await session.get(Reservation, reservation_id)


async def create_reservation(
    session: AsyncSession,
    payload: ReservationCreate | ManualReservationCreate,
) -> Reservation:
    """Insert a reservation as given; availability is the caller's concern."""
    data = payload.model_dump()
    data["customer_email"] = str(data["customer_email"]).lower()
    reservation = Reservation(**data)
    session.add(reservation)
    await session.commit()
    await session.refresh(reservation)
    logger.info(
        "Reservation %s created for %s on %s %s (party of %s)",
        reservation.id,
        mask_email(reservation.customer_email),
        reservation.reservation_date,
        reservation.reservation_time,
        reservation.party_size,
    )
    return reservation


async def update_reservation(
    session: AsyncSession, *, reservation: Reservation, payload: ReservationUpdate
) -> Reservation:
    data = payload.model_dump(exclude_unset=True)
    for key in ("customer_name", "customer_email", "reservation_date", "reservation_time", "party_size"):
        if key in data and data[key] is None:
            raise ValueError(f"{key} cannot be null")
    if "customer_email" in data:
        data["customer_email"] = str(data["customer_email"]).lower()
    for key, value in data.items():
        setattr(reservation, key, value)
    await session.commit()
    await session.refresh(reservation)
    return reservation


async def update_status(
    session: AsyncSession, *, reservation: Reservation, status: ReservationStatus
) -> Reservation:
    previous = reservation.status
    reservation.status = status
    await session.commit()
    await session.refresh(reservation)
    logger.info(
        "Reservation %s status %s -> %s", reservation.id, previous.value, status.value
    )
    return reservation


async def delete_reservation(session: AsyncSession, *, reservation: Reservation) -> None:
    await session.delete(reservation)
    await session.commit()
