"""Configuration utilities for FILTERBENCH.

This module centralizes small helpers and constants related to runtime configuration.
"""

import os

from filterbench.errors import InvalidWorkerSettingError

WORKERS_ENV_VAR = "FILTERBENCH_WORKERS"  # pragma: no mutate

DEFAULT_COUNT = 100_000
DEFAULT_LENGTH = 100
DEFAULT_REQUIRED = ("a", "b", "g", "h", "w", "z")


def get_default_workers() -> int:
    """Get the default number of workers for parallel traversal.

    Returns:
        The value of the `FILTERBENCH_WORKERS` environment variable when set,
        otherwise the number of CPUs (or 1 if that cannot be determined).

    Raises:
        InvalidWorkerSettingError: If `FILTERBENCH_WORKERS` is set but is not
            a positive integer.
    """
    if not (raw := os.environ.get(WORKERS_ENV_VAR, "").strip()):
        return os.cpu_count() or 1
    try:
        workers = int(raw)
    except ValueError as e:
        raise InvalidWorkerSettingError(raw) from e
    if workers < 1:
        raise InvalidWorkerSettingError(raw)
    return workers


def describe_default_workers() -> str:
    """Describe the default worker count and where it comes from.

    Used for startup diagnostics, so an invalid `FILTERBENCH_WORKERS` is
    reported rather than raised; commands that need the value still fail.
    """
    try:
        workers = get_default_workers()
    except InvalidWorkerSettingError as e:
        return f"invalid ({e})"
    source = WORKERS_ENV_VAR if os.environ.get(WORKERS_ENV_VAR, "").strip() else "cpu count"
    return f"{workers} (from {source})"
