"""Schemas for weekly closing days and closure periods."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _require_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value:
        raise ValueError("reason must not be blank")
    return value


class RecurringClosedDayCreate(BaseModel):
    day_of_week: int = Field(ge=0, le=6, description="0 = Sunday … 6 = Saturday")
    reason: str | None = Field(default=None, max_length=255)
    is_active: bool = True


class RecurringClosedDayUpdate(BaseModel):
    day_of_week: int | None = Field(default=None, ge=0, le=6)
    reason: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None


class RecurringClosedDayRead(RecurringClosedDayCreate):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PeriodClosureCreate(BaseModel):
    start_date: date
    end_date: date
    reason: str = Field(min_length=1, max_length=255)
    is_active: bool = True

    @field_validator("reason")
    @classmethod
    def _reason_has_text(cls, value: str | None) -> str | None:
        return _require_text(value)

    @model_validator(mode="after")
    def _check_range(self) -> "PeriodClosureCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class PeriodClosureUpdate(BaseModel):
    start_date: date | None = None
    end_date: date | None = None
    reason: str | None = Field(default=None, min_length=1, max_length=255)
    is_active: bool | None = None

    @field_validator("reason")
    @classmethod
    def _reason_has_text(cls, value: str | None) -> str | None:
        return _require_text(value)


class PeriodClosureRead(BaseModel):
    id: uuid.UUID
    start_date: date
    end_date: date
    reason: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
