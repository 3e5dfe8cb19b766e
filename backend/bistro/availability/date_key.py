"""Timezone-free calendar date keys.

A ``DateKey`` is the only value the availability engine compares dates with.
It is built from local calendar parts, from a native ``date``/``datetime``
read in its own wall-clock calendar, or from a value returned by the store.
Stored values are never round-tripped through a timezone-aware parse: the
date portion is cut from the serialized string as-is, because the store may
hand back ``DATE`` columns already shifted to a UTC-midnight timestamp.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from bistro.availability.errors import InvalidDateKeyError

_CANONICAL_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(slots=True, frozen=True, order=True)
class DateKey:
    """Calendar date with no time of day or timezone."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        try:
            date(self.year, self.month, self.day)
        except (TypeError, ValueError) as exc:
            raise InvalidDateKeyError(
                f"Invalid calendar date: {self.year!r}-{self.month!r}-{self.day!r}"
            ) from exc

    @classmethod
    def from_local_parts(cls, year: int, month: int, day: int) -> DateKey:
        """Build a key from local year, month (1-12) and day."""
        return cls(year, month, day)

    @classmethod
    def from_native_local_date(
        cls, value: date | datetime, tz: tzinfo | None = None
    ) -> DateKey:
        """Build a key from the local calendar fields of a native value.

        Naive values are read as-is. Aware datetimes are read in their own
        offset, or converted to ``tz`` first when one is given.
        """
        if isinstance(value, datetime) and tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        if not isinstance(value, date):
            raise InvalidDateKeyError(f"Expected a date or datetime, got {type(value).__name__}")
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls, tz: tzinfo | None = None) -> DateKey:
        """Return the current calendar date in ``tz`` (process local time when omitted)."""
        return cls.from_native_local_date(datetime.now(tz))

    @classmethod
    def normalize_stored_value(cls, raw: str) -> DateKey:
        """Interpret a date value returned by the store.

        Accepts ``YYYY-MM-DD`` or an ISO timestamp whose date portion precedes
        ``T``; anything else is a storage contract violation.
        """
        if not isinstance(raw, str):
            raise InvalidDateKeyError(f"Stored date must be a string, got {type(raw).__name__}")
        candidate = raw
        if not _CANONICAL_PATTERN.fullmatch(candidate):
            head, separator, _ = raw.partition("T")
            if not separator or not _CANONICAL_PATTERN.fullmatch(head):
                raise InvalidDateKeyError(f"Unrecognized stored date value: {raw!r}")
            candidate = head
        return cls(int(candidate[0:4]), int(candidate[5:7]), int(candidate[8:10]))

    def to_canonical_string(self) -> str:
        """Return the zero-padded ``YYYY-MM-DD`` form."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def day_of_week(self) -> int:
        """Weekday number with 0 = Sunday through 6 = Saturday."""
        return (self.to_date().weekday() + 1) % 7

    def add_days(self, days: int) -> DateKey:
        shifted = self.to_date() + timedelta(days=days)
        return DateKey(shifted.year, shifted.month, shifted.day)

    def days_since(self, other: DateKey) -> int:
        """Return the signed number of days from ``other`` to this date."""
        return (self.to_date() - other.to_date()).days

    def __str__(self) -> str:
        return self.to_canonical_string()


__all__ = ["DateKey"]
