"""Schemas for availability queries and named RPC calls."""

from __future__ import annotations

import datetime
from typing import Any

from pydantic import BaseModel, Field

from bistro.availability import AvailabilityOutcome, AvailabilityState, AvailabilityWindow, ClosureSource


class DateAvailabilityRead(BaseModel):
    date: datetime.date
    state: AvailabilityState
    available: bool
    reason: str | None = None
    closure_source: ClosureSource | None = None

    @classmethod
    def from_outcome(cls, outcome: AvailabilityOutcome) -> "DateAvailabilityRead":
        return cls(
            date=outcome.date.to_date(),
            state=outcome.state,
            available=outcome.available,
            reason=outcome.reason,
            closure_source=outcome.closure_source,
        )


class AvailabilityWindowRead(BaseModel):
    start_date: datetime.date
    end_date: datetime.date = Field(description="Exclusive end of the window")
    horizon_days: int
    lead_days: int
    available_dates: list[datetime.date]

    @classmethod
    def from_window(cls, window: AvailabilityWindow, *, lead_days: int) -> "AvailabilityWindowRead":
        return cls(
            start_date=window.start.to_date(),
            end_date=window.end.to_date(),
            horizon_days=window.horizon_days,
            lead_days=lead_days,
            available_dates=[day.to_date() for day in window.available_dates()],
        )


class ReservationCountRead(BaseModel):
    reservation_date: datetime.date
    reservation_count: int


class RpcRequest(BaseModel):
    args: dict[str, Any] = Field(default_factory=dict)


class RpcResponse(BaseModel):
    name: str
    result: Any
