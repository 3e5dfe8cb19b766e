"""Per-route rate limits backed by fastapi-limiter."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, Request, Response
from fastapi_limiter import FastAPILimiter
from fastapi_limiter.depends import RateLimiter

from bistro.core.config import get_settings

_WINDOW_SECONDS = {"second": 1, "minute": 60, "hour": 3600, "day": 86400}


@dataclass(slots=True, frozen=True)
class RateLimit:
    times: int
    seconds: int

    @classmethod
    def parse(cls, value: str, *, fallback: RateLimit) -> RateLimit:
        """Parse ``"10/minute"``; malformed settings fall back instead of failing startup."""
        count, _, window = value.partition("/")
        seconds = _WINDOW_SECONDS.get(window.strip().lower().rstrip("s"))
        if seconds is None or not count.strip().isdigit():
            return fallback
        return cls(int(count), seconds)


def limit_dependency(limit: RateLimit):
    """Enforce ``limit`` per client once the limiter is connected to redis."""

    async def _check(request: Request, response: Response) -> None:
        if FastAPILimiter.redis is None:
            return
        await RateLimiter(times=limit.times, seconds=limit.seconds)(request, response)

    return Depends(_check)


_settings = get_settings()

LOGIN_RATE_DEP = limit_dependency(RateLimit.parse(_settings.rate_limit_login, fallback=RateLimit(10, 60)))
BOOKING_RATE_DEP = limit_dependency(RateLimit.parse(_settings.rate_limit_booking, fallback=RateLimit(5, 60)))
DEFAULT_RATE_DEP = limit_dependency(RateLimit.parse(_settings.rate_limit_default, fallback=RateLimit(100, 60)))
