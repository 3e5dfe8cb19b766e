"""Weekly closing days and closure periods."""
from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import Boolean, CheckConstraint, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bistro.db.base import Base
from bistro.models.mixins import TimestampMixin


class RecurringClosedDay(TimestampMixin, Base):
    """A weekday the restaurant is closed every week (0 = Sunday)."""

    __tablename__ = "recurring_closed_days"
    __table_args__ = (
        CheckConstraint(
            "day_of_week >= 0 AND day_of_week <= 6", name="ck_recurring_day_of_week"
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    reason: Mapped[str | None] = mapped_column(String(255))
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class PeriodClosure(TimestampMixin, Base):
    """Closed date range, inclusive on both ends."""

    __tablename__ = "period_closures"
    __table_args__ = (
        CheckConstraint("end_date >= start_date", name="ck_period_closure_range"),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    reason: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
