"""
Paces outgoing requests so a full sync does not trip the site's throttling.
"""

import asyncio
import logging
import time

log = logging.getLogger(__name__)


class RateLimiter:
    """
    Enforces a minimum interval between calls and backs off on 429 responses.
    """

    def __init__(self, calls_per_second: float = 8.0, min_calls_per_second: float = 1.0):
        """
        Args:
            calls_per_second: The starting rate of calls per second.
            min_calls_per_second: The floor the rate never drops below.
        """
        self._rate = calls_per_second
        self._min_rate = min_calls_per_second
        self._last_call_time = 0.0
        self._lock = asyncio.Lock()

    @property
    def rate(self) -> float:
        return self._rate

    async def on_429(self) -> None:
        """Halves the current request rate."""
        async with self._lock:
            self._rate = max(self._min_rate, self._rate * 0.5)
            log.warning(
                f"[yellow]Rate limit hit. New rate: {self._rate:.1f} calls/s[/yellow]"
            )

    async def acquire(self) -> None:
        """Waits until the next call is allowed to go out."""
        async with self._lock:
            min_interval = 1.0 / self._rate
            elapsed = time.monotonic() - self._last_call_time
            if elapsed < min_interval:
                await asyncio.sleep(min_interval - elapsed)
            self._last_call_time = time.monotonic()
