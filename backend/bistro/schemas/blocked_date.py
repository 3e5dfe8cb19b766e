"""Schemas for blocked dates."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class BlockedDateCreate(BaseModel):
    blocked_date: date
    reason: str | None = Field(default=None, max_length=255)


class BlockedDateRead(BlockedDateCreate):
    id: uuid.UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
