"""Short-lived cache for closure rule snapshots."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from bistro.availability.closures import ClosureRuleSet
from bistro.availability.window import RuleLoader

logger = logging.getLogger(__name__)


class ClosureRuleCache:
    """Keep the last loaded :class:`ClosureRuleSet` for ``ttl_seconds``.

    Admin mutations call :meth:`invalidate` so edits show up immediately;
    the TTL bounds staleness for writers in other processes. A load that was
    already running when :meth:`invalidate` fired is returned to its caller
    but never stored.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._rules: ClosureRuleSet | None = None
        self._expires_at = 0.0
        self._generation = 0
        self._lock = asyncio.Lock()

    def _fresh(self) -> ClosureRuleSet | None:
        if self._rules is not None and self._clock() < self._expires_at:
            return self._rules
        return None

    async def get(self, loader: RuleLoader) -> ClosureRuleSet:
        cached = self._fresh()
        if cached is not None:
            return cached
        # concurrent misses share one load
        async with self._lock:
            cached = self._fresh()
            if cached is not None:
                return cached
            generation = self._generation
            rules = await loader()
            if self.ttl_seconds > 0 and generation == self._generation:
                self._rules = rules
                self._expires_at = self._clock() + self.ttl_seconds
            return rules

    def invalidate(self) -> None:
        if self._rules is not None:
            logger.debug("Closure rule cache invalidated")
        self._generation += 1
        self._rules = None
        self._expires_at = 0.0


__all__ = ["ClosureRuleCache"]
