"""Restaurant-local calendar helpers."""

from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from bistro.availability import DateKey
from bistro.core.config import get_settings

logger = logging.getLogger(__name__)


def restaurant_timezone() -> ZoneInfo:
    """Return the configured restaurant zone, falling back to UTC."""
    name = get_settings().restaurant_timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown restaurant timezone %r; using UTC", name)
        return ZoneInfo("UTC")


def restaurant_today() -> DateKey:
    """Return today's date on the restaurant's calendar."""
    return DateKey.today(restaurant_timezone())
