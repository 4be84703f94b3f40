"""An interval timer driven by a millisecond clock."""

from __future__ import annotations

import time
from typing import Callable

_START = time.monotonic()


def _ticks_ms() -> int:
    """Milliseconds elapsed since this module was loaded."""
    return int((time.monotonic() - _START) * 1000)


class Timer:
    """Reports when at least ``interval_ms`` milliseconds have passed."""

    def __init__(self, interval_ms: int, clock: Callable[[], int] = _ticks_ms) -> None:
        self._interval = interval_ms
        self._clock = clock
        self._last_update = 0

    def should_update(self) -> bool:
        """Return True, and restart the interval, once it has elapsed."""
        now = self._clock()
        if now - self._last_update >= self._interval:
            self._last_update = now
            return True
        return False

    def reset(self) -> None:
        """Forget the last update so the interval counts from time zero."""
        self._last_update = 0