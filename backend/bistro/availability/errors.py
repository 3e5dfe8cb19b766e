"""Errors raised by the availability engine."""

from __future__ import annotations


class AvailabilityError(Exception):
    """Base class for availability engine failures."""


class InvalidDateKeyError(AvailabilityError, ValueError):
    """A value could not be interpreted as a calendar date."""


class InvalidRuleError(AvailabilityError, ValueError):
    """A closure rule or capacity policy violates its invariants."""


class AvailabilityFetchError(AvailabilityError):
    """Rule or reservation data could not be loaded from the store."""


__all__ = [
    "AvailabilityError",
    "AvailabilityFetchError",
    "InvalidDateKeyError",
    "InvalidRuleError",
]
