"""Frame timer with pause support and a simple stopwatch."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]

_NANOSECONDS_PER_SECOND = 1_000_000_000


def _seconds_per_count(counts_per_second: int) -> float:
    if counts_per_second <= 0:
        raise ValueError("counts_per_second must be positive")
    return 1.0 / counts_per_second


class HighResolutionTimer:
    """Measures total running time and per-frame intervals, excluding paused time."""

    def __init__(
        self,
        clock: Clock = time.perf_counter_ns,
        counts_per_second: int = _NANOSECONDS_PER_SECOND,
    ) -> None:
        self._clock = clock
        self._seconds_per_count = _seconds_per_count(counts_per_second)
        self._delta_time = -1.0
        self._paused_time = 0
        self._stop_time = 0
        self._stopped = False
        self._this_time = clock()
        self._base_time = self._this_time
        self._last_time = self._this_time

    @property
    def stopped(self) -> bool:
        return self._stopped

    def time_stamp(self) -> float:
        """Seconds elapsed since reset, not counting time spent stopped."""
        end = self._stop_time if self._stopped else self._this_time
        return ((end - self._paused_time) - self._base_time) * self._seconds_per_count

    def time_interval(self) -> float:
        """Seconds between the last two ticks."""
        return self._delta_time

    def reset(self) -> None:
        self._this_time = self._clock()
        self._base_time = self._this_time
        self._last_time = self._this_time
        self._stop_time = 0
        self._stopped = False

    def start(self) -> None:
        """Resume after a stop, accumulating the paused span."""
        start_time = self._clock()
        if self._stopped:
            self._paused_time += start_time - self._stop_time
            self._last_time = start_time
            self._stop_time = 0
            self._stopped = False

    def stop(self) -> None:
        if not self._stopped:
            self._stop_time = self._clock()
            self._stopped = True

    def tick(self) -> None:
        """Advance one frame."""
        if self._stopped:
            self._delta_time = 0.0
            return
        self._this_time = self._clock()
        self._delta_time = (self._this_time - self._last_time) * self._seconds_per_count
        self._last_time = self._this_time
        # The counter can appear to run backwards across power-state or CPU changes.
        if self._delta_time < 0.0:
            self._delta_time = 0.0


class Benchmark:
    """Stopwatch measuring seconds between begin() and end()."""

    def __init__(
        self,
        clock: Clock = time.perf_counter_ns,
        counts_per_second: int = _NANOSECONDS_PER_SECOND,
    ) -> None:
        self._clock = clock
        self._seconds_per_count = _seconds_per_count(counts_per_second)
        self._start = clock()

    def begin(self) -> None:
        self._start = self._clock()

    def end(self) -> float:
        return (self._clock() - self._start) * self._seconds_per_count