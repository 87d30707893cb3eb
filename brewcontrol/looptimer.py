"""Interval timer driven by a millisecond clock."""

from __future__ import annotations

import time
from typing import Callable

_START = time.monotonic()


def millis() -> int:
    """Milliseconds elapsed since the module was loaded."""
    return int((time.monotonic() - _START) * 1000)


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class LoopTimer:
    """Reports when more than ``interval`` milliseconds have passed since reset."""

    def __init__(self, interval: int, clock: Callable[[], int] = millis) -> None:
        self.interval = interval
        self.loop_counter = 0
        self._clock = clock
        self._start = 0
        self.reset()

    @property
    def time_passed(self) -> int:
        """Milliseconds since the last reset, as a 32-bit magnitude."""
        return abs(_int32(self._clock() - self._start))

    def has_expired(self) -> bool:
        """True once the interval has passed; each such call counts one loop."""
        if self.time_passed > self.interval:
            self.loop_counter += 1
            return True
        return False

    def reset(self) -> None:
        """Start measuring from the current time."""
        self._start = self._clock()