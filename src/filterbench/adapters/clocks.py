"""Clock implementations for FILTERBENCH."""

import time

from filterbench.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class MonotonicClock(Clock):
    """Monotonic high-resolution clock.

    Backed by `time.perf_counter_ns`, which is unaffected by wall-clock
    adjustments and has the highest resolution available on the host.
    """

    def now_ns(self) -> int:
        """Return the performance counter in nanoseconds."""
        return time.perf_counter_ns()


class ManualClock(Clock):
    """A clock that only moves when told to.

    Note:
        Not thread-safe; primarily for testing and demos.
    """

    def __init__(self, start_ns: int = 0) -> None:
        self._now_ns = start_ns

    def now_ns(self) -> int:
        """Return the current manual instant."""
        return self._now_ns

    def advance(self, ns: int) -> None:
        """Move the clock forward by `ns` nanoseconds."""
        if ns < 0:
            raise ValueError(f"cannot move a monotonic clock backwards ({ns} ns)")
        self._now_ns += ns
