"""Injectable time source.

Domain logic never reads the wall clock itself: handlers ask the clock
held by their context, and tests substitute a FixedClock.
Timestamps are whole Unix seconds.
"""

from __future__ import annotations

import time
from typing import Protocol

SECONDS_PER_DAY = 86400


class Clock(Protocol):

    def now(self) -> int:
        """Return the current Unix timestamp in seconds."""
        ...  # pragma: no cover


class SystemClock:
    """Production clock backed by the system time."""

    def now(self) -> int:
        return int(time.time())


class FixedClock:
    """Test clock that only moves when told to."""

    def __init__(self, timestamp: int) -> None:
        self._timestamp = timestamp

    def now(self) -> int:
        return self._timestamp

    def advance(self, seconds: int) -> None:
        self._timestamp += seconds

    def advance_days(self, days: int) -> None:
        self.advance(days * SECONDS_PER_DAY)
