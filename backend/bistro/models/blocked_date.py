"""Single dates closed to reservations."""
from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from bistro.db.base import Base
from bistro.models.mixins import TimestampMixin


class BlockedDate(TimestampMixin, Base):
    """Ad-hoc date on which no reservations are taken."""

    __tablename__ = "blocked_dates"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    blocked_date: Mapped[date] = mapped_column(Date, nullable=False, unique=True)
    reason: Mapped[str | None] = mapped_column(String(255))
