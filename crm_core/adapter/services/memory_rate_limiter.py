"""
In-memory fixed-window rate limiter.

Counters live in this process only: they reset on restart and are not shared
between server instances.
"""

import logging
import time
from dataclasses import dataclass
from threading import Lock
from typing import Callable, Dict

from crm_core.app.services.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


@dataclass
class RateLimitEntry:
    """Attempts admitted in the current window"""

    count: int
    reset_at: float


class InMemoryRateLimiter(RateLimiter):
    """Fixed-window counter. Rejected attempts count against the window too."""

    def __init__(
        self,
        max_attempts: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_attempts = max_attempts
        self.window_seconds = window_seconds
        self._clock = clock
        self._entries: Dict[str, RateLimitEntry] = {}
        self._lock = Lock()
        self._next_sweep = clock() + window_seconds

    def allow(self, key: str) -> bool:
        now = self._clock()

        with self._lock:
            if now >= self._next_sweep:
                self._prune(now)

            entry = self._entries.get(key)

            if entry is None or now > entry.reset_at:
                self._entries[key] = RateLimitEntry(
                    count=1, reset_at=now + self.window_seconds
                )
                return True

            # Every attempt counts, including rejected ones
            entry.count += 1
            return entry.count <= self.max_attempts

    def _prune(self, now: float) -> None:
        """Drop expired windows. Caller holds the lock."""
        expired = [key for key, entry in self._entries.items() if now > entry.reset_at]
        for key in expired:
            del self._entries[key]
        self._next_sweep = now + self.window_seconds
        if expired:
            logger.debug("Pruned %d expired rate limit entries", len(expired))


def build_rate_limiter(max_attempts: int, window_minutes: int) -> InMemoryRateLimiter:
    logger.info(
        "In-memory rate limiter: %d attempts per %d minutes", max_attempts, window_minutes
    )
    return InMemoryRateLimiter(max_attempts=max_attempts, window_seconds=window_minutes * 60)
