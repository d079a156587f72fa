"""Manually started/stopped interval timer.

A `Chronometer` measures the time between a `start()` and a `stop()` call
using a monotonic `Clock`. Only the most recently completed interval is
kept; there is no history.

Instances are meant to be owned by a single thread. Concurrent calls on the
same instance are not guarded.
"""

from __future__ import annotations

from datetime import timedelta
from enum import Enum
from types import TracebackType
from typing import TYPE_CHECKING

from filterbench.adapters.clocks import MonotonicClock
from filterbench.errors import ChronometerNotRunningError, NoCompletedIntervalError

if TYPE_CHECKING:
    from filterbench.interfaces.clock import Clock

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000


class ChronometerState(Enum):
    """States of a chronometer."""

    IDLE = "idle"
    RUNNING = "running"


class Chronometer:
    """Interval timer with explicit start/stop.

    Example:
        ```py
        chrono = Chronometer()
        chrono.start()
        do_work()
        chrono.stop()
        logger.info("took %.1f ms", chrono.duration_ms)
        ```

    Args:
        clock: Time source; defaults to a `MonotonicClock`. Inject a
            `ManualClock` to control time in tests.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or MonotonicClock()
        self._start_ns = 0
        self._finish_ns = 0
        self._state = ChronometerState.IDLE
        self._last_interval_ns: int | None = None

    @property
    def state(self) -> ChronometerState:
        """Current state of the chronometer."""
        return self._state

    @property
    def running(self) -> bool:
        """True between `start()` and `stop()`."""
        return self._state is ChronometerState.RUNNING

    def start(self) -> None:
        """Start a new interval.

        Calling this while already running restarts the interval from now.
        """
        self._start_ns = self._clock.now_ns()
        self._state = ChronometerState.RUNNING

    def stop(self) -> None:
        """Finish the current interval.

        Raises:
            ChronometerNotRunningError: If `start()` was not called since the
                last `stop()` (or ever).
        """
        if self._state is not ChronometerState.RUNNING:
            raise ChronometerNotRunningError
        self._finish_ns = self._clock.now_ns()
        self._state = ChronometerState.IDLE
        self._last_interval_ns = self._finish_ns - self._start_ns

    @property
    def duration_ns(self) -> int:
        """Length of the last completed interval in nanoseconds.

        Raises:
            NoCompletedIntervalError: If no interval has completed yet.
        """
        if self._last_interval_ns is None:
            raise NoCompletedIntervalError
        return self._last_interval_ns

    @property
    def duration(self) -> timedelta:
        """Length of the last completed interval.

        `timedelta` only holds microseconds; use `duration_ns` for the
        full clock precision.
        """
        return timedelta(microseconds=self.duration_ns / NANOS_PER_MICRO)

    @property
    def duration_ms(self) -> float:
        """Length of the last completed interval in milliseconds."""
        return self.duration_ns / NANOS_PER_MILLI

    def get_duration(self) -> timedelta:
        """Return the last completed interval (alias of `duration`)."""
        return self.duration

    def __enter__(self) -> Chronometer:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        # the block may have stopped the chronometer itself
        if self.running:
            self.stop()

    def __repr__(self) -> str:
        return f"Chronometer(state={self._state.value}, last_ns={self._last_interval_ns})"
