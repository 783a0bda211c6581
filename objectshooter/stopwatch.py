"""A minimal stopwatch for timing requests."""

from __future__ import annotations

import time
from datetime import timedelta


class StopWatch:
    """Measures time elapsed since the last call to start()."""

    def __init__(self) -> None:
        self._started: float | None = None

    def start(self) -> None:
        self._started = time.perf_counter()

    def elapsed(self, unit: float | timedelta = 1.0) -> float:
        """Return the elapsed time expressed in multiples of unit (seconds or a timedelta)."""
        if self._started is None:
            raise RuntimeError("stopwatch has not been started")
        seconds = unit.total_seconds() if isinstance(unit, timedelta) else float(unit)
        if seconds <= 0:
            raise ValueError("unit must be positive")
        return (time.perf_counter() - self._started) / seconds