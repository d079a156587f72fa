"""Interface for time sources."""

import abc

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Contract for a monotonic time source."""

    @abc.abstractmethod
    def now_ns(self) -> int:
        """Return the current instant in nanoseconds.

        Values are only meaningful relative to each other and must never
        decrease between successive calls.
        """
