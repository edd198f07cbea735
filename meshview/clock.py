"""Frame clock measuring elapsed time between calls."""

from __future__ import annotations

import time as _time
from typing import Callable, Optional


class Clock:
    """Tracks time from a time source and reports the delta between frames."""

    def __init__(self, time_source: Optional[Callable[[], float]] = None) -> None:
        self._time_source = time_source or _time.perf_counter
        self._last_time = self.time()

    def time(self) -> float:
        """Current time in seconds as given by the time source."""
        return float(self._time_source())

    def delta(self) -> float:
        """Seconds since the previous call (or since construction)."""
        current = self.time()
        elapsed = current - self._last_time
        self._last_time = current
        return elapsed