"""Error definitions for FILTERBENCH."""

# ============================================================================
#                           General errors
# ============================================================================


class FilterBenchError(Exception):
    """Base class for all FILTERBENCH errors."""


# ============================================================================
#                           Chronometer errors
# ============================================================================


class ChronometerError(FilterBenchError):
    """Base class for chronometer errors."""


class ChronometerNotRunningError(ChronometerError):
    """Raised when a chronometer is stopped without a matching start."""

    def __init__(self) -> None:
        super().__init__("Chronometer is not running; call start() before stop().")


class NoCompletedIntervalError(ChronometerError):
    """Raised when a duration is requested before any interval has completed."""

    def __init__(self) -> None:
        super().__init__("No completed interval; call start() and stop() first.")


# ============================================================================
#                           Input validation errors
# ============================================================================


class InvalidLengthError(FilterBenchError, ValueError):
    """Raised when a negative length or count is requested."""

    def __init__(self, length: int, what: str = "length") -> None:
        super().__init__(f"{what} must be non-negative, got {length}.")
        self.length = length
        self.what = what


class InvalidParallelismError(FilterBenchError, ValueError):
    """Raised when a worker count or chunk size is not a positive integer."""

    def __init__(self, name: str, value: int) -> None:
        super().__init__(f"{name} must be a positive integer, got {value!r}.")
        self.name = name
        self.value = value


class InvalidWorkerSettingError(FilterBenchError):
    """Raised when FILTERBENCH_WORKERS is set to something other than a positive integer."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"FILTERBENCH_WORKERS must be a positive integer, got {value!r}."
        )
        self.value = value


# ============================================================================
#                           Benchmark errors
# ============================================================================


class ResultMismatchError(FilterBenchError):
    """Raised when sequential and parallel filtering disagree."""

    def __init__(self, sequential_count: int, parallel_count: int) -> None:
        super().__init__(
            f"Sequential filter kept {sequential_count} strings but parallel "
            f"filter kept {parallel_count}, or the results differ."
        )
        self.sequential_count = sequential_count
        self.parallel_count = parallel_count
