"""Identifier sequences for notes, participants and inline interviews."""
import time
from typing import Optional


class IdSequence:
    """Time-seeded id generator that never hands out the same value twice.

    Ids start at the current epoch milliseconds and only move forward, so
    two ids requested within the same millisecond still differ.
    """

    def __init__(self, floor: int = 0):
        self._last = floor

    def next(self, now_ms: Optional[int] = None) -> int:
        candidate = now_ms if now_ms is not None else int(time.time() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last

    def observe(self, value: int) -> None:
        """Make sure later ids are greater than an id loaded from fixtures."""
        if value > self._last:
            self._last = value
