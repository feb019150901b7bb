# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#              github.com/dedalus-labs/bravesearch-mcp-python/LICENSE
# ==============================================================================

"""Request admission for the Brave API.

The free Brave plan allows one request per second and a fixed number of
requests per calendar month. :class:`RateLimiter` enforces both locally so the
server refuses a call before spending quota on a request the API would reject.
It is the only state shared between concurrent tool invocations.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
import time

import anyio

from .errors import QuotaExceeded, RateLimitExceeded


DEFAULT_MIN_INTERVAL = 1.0
DEFAULT_MONTHLY_QUOTA = 15_000

Period = tuple[int, int]


def current_month() -> Period:
    now = datetime.now(timezone.utc)
    return now.year, now.month


@dataclass(frozen=True, slots=True)
class RateLimiterState:
    """Snapshot of the limiter counters."""

    last_call: float | None
    monthly_count: int
    period: Period


class RateLimiter:
    """Fixed-interval gate plus a per-month counter behind one lock.

    Args:
        min_interval: Minimum number of seconds between two accepted calls.
        monthly_quota: Accepted calls allowed per calendar month.
        clock: Monotonic time source in seconds.
        calendar: Returns the current ``(year, month)``; the monthly counter
            resets whenever this value changes.
    """

    def __init__(
        self,
        min_interval: float = DEFAULT_MIN_INTERVAL,
        monthly_quota: int = DEFAULT_MONTHLY_QUOTA,
        *,
        clock: Callable[[], float] = time.monotonic,
        calendar: Callable[[], Period] = current_month,
    ) -> None:
        if min_interval < 0:
            raise ValueError("min_interval must be >= 0")
        if monthly_quota < 0:
            raise ValueError("monthly_quota must be >= 0")
        self.min_interval = min_interval
        self.monthly_quota = monthly_quota
        self._clock = clock
        self._calendar = calendar
        self._lock = anyio.Lock()
        self._last_call: float | None = None
        self._monthly_count = 0
        self._period = calendar()

    async def check_and_record(self) -> None:
        """Admit one call or raise.

        Raises:
            RateLimitExceeded: The previous accepted call was less than
                ``min_interval`` seconds ago.
            QuotaExceeded: ``monthly_quota`` calls were already accepted this
                month.
        """
        async with self._lock:
            now = self._clock()
            period = self._calendar()
            if period != self._period:
                self._period = period
                self._monthly_count = 0

            if self._last_call is not None:
                elapsed = now - self._last_call
                if elapsed < self.min_interval:
                    raise RateLimitExceeded(self.min_interval - elapsed)

            if self._monthly_count >= self.monthly_quota:
                raise QuotaExceeded(self.monthly_quota)

            self._monthly_count += 1
            self._last_call = now

    def state(self) -> RateLimiterState:
        return RateLimiterState(
            last_call=self._last_call,
            monthly_count=self._monthly_count,
            period=self._period,
        )


__all__ = [
    "DEFAULT_MIN_INTERVAL",
    "DEFAULT_MONTHLY_QUOTA",
    "RateLimiter",
    "RateLimiterState",
    "current_month",
]
