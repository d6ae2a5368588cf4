"""
Time sources for the cache.

A clock is any zero-argument callable returning the current time in
seconds as a float. The cache reads the same clock when computing a
deadline and when checking it.
"""

import time
from typing import Callable

Clock = Callable[[], float]

system_clock: Clock = time.monotonic


class ManualClock:
    """
    A clock that only moves when told to.

    Usage:
        clock = ManualClock()
        cache = Cache(clock=clock)
        cache.insert("key", "value", ttl=30)
        clock.advance(30)
        cache.get("key")  # None
    """

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        """Move the clock forward and return the new time."""
        if seconds < 0:
            raise ValueError("cannot move a clock backwards")
        self.now += seconds
        return self.now

    def set(self, timestamp: float) -> None:
        self.now = float(timestamp)
