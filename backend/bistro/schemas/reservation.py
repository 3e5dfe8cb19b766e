"""Reservation request and response schemas."""
from __future__ import annotations

import re
import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from bistro.models.reservation import ReservationStatus

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _validate_time(value: str) -> str:
    value = value.strip()
    if not _TIME_PATTERN.match(value):
        raise ValueError("reservation_time must be HH:MM (00:00-23:59)")
    return value


class ReservationBase(BaseModel):
    """Fields shared by online and back-office bookings."""

    customer_name: str = Field(min_length=1, max_length=255)
    customer_email: EmailStr
    customer_phone: str | None = Field(default=None, max_length=32)
    reservation_date: date
    reservation_time: str
    party_size: int = Field(gt=0)
    special_requests: str | None = Field(default=None, max_length=1024)

    @field_validator("reservation_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        return _validate_time(value)


class ReservationCreate(ReservationBase):
    """Self-service booking; always starts pending."""


class ManualReservationCreate(ReservationBase):
    """Booking taken by staff, e.g. over the phone."""

    status: ReservationStatus = ReservationStatus.APPROVED


class ReservationUpdate(BaseModel):
    """Editable reservation fields."""

    customer_name: str | None = Field(default=None, min_length=1, max_length=255)
    customer_email: EmailStr | None = None
    customer_phone: str | None = Field(default=None, max_length=32)
    reservation_date: date | None = None
    reservation_time: str | None = None
    party_size: int | None = Field(default=None, gt=0)
    special_requests: str | None = Field(default=None, max_length=1024)

    @field_validator("reservation_time")
    @classmethod
    def _check_time(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return _validate_time(value)


class ReservationStatusUpdate(BaseModel):
    status: ReservationStatus


class ReservationRead(ReservationBase):
    """Serialized reservation."""

    id: uuid.UUID
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
