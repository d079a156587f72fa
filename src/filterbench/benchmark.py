"""Sequential versus parallel filtering benchmark.

The scenario:

1. generate `count` random lowercase strings of `length` characters,
   optionally across a worker pool;
2. keep the strings containing every required substring, single-threaded;
3. do the same again with `parallel_filter`;
4. check that both passes kept exactly the same strings.

Each phase is timed with its own `Chronometer` interval and logged in
milliseconds.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import timedelta
from functools import partial
from typing import TYPE_CHECKING, Any

from filterbench import config
from filterbench.chronometer import Chronometer
from filterbench.errors import (
    InvalidLengthError,
    InvalidParallelismError,
    ResultMismatchError,
)
from filterbench.filters import contains_all, require_all
from filterbench.parallel import ExecutorKind, parallel_filter, parallel_map
from filterbench.random_chars import random_char_string

if TYPE_CHECKING:
    from filterbench.interfaces.clock import Clock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkSettings:
    """Workload and parallelism settings for one benchmark run."""

    count: int = config.DEFAULT_COUNT
    length: int = config.DEFAULT_LENGTH
    required: tuple[str, ...] = config.DEFAULT_REQUIRED
    workers: int | None = None
    chunk_size: int | None = None
    executor: ExecutorKind = ExecutorKind.THREAD
    parallel_generation: bool = True

    def __post_init__(self) -> None:
        if self.count < 0:
            raise InvalidLengthError(self.count, "count")
        if self.length < 0:
            raise InvalidLengthError(self.length, "length")
        for name in ("workers", "chunk_size"):
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidParallelismError(name, value)


@dataclass(frozen=True)
class BenchmarkReport:  # pylint: disable=too-many-instance-attributes
    """Outcome of a benchmark run."""

    settings: BenchmarkSettings
    generated: int
    sequential_matches: int
    parallel_matches: int
    generate_duration: timedelta
    sequential_duration: timedelta
    parallel_duration: timedelta
    results_match: bool
    workers: int = 1

    @property
    def speedup(self) -> float | None:
        """Sequential duration divided by parallel duration (None if unmeasurable)."""
        if self.parallel_duration <= timedelta(0):
            return None
        return self.sequential_duration / self.parallel_duration

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the report."""
        settings = asdict(self.settings)
        settings["executor"] = self.settings.executor.value
        settings["required"] = list(self.settings.required)
        settings["workers"] = self.workers
        return {
            "settings": settings,
            "generated": self.generated,
            "sequential_matches": self.sequential_matches,
            "parallel_matches": self.parallel_matches,
            "generate_ms": _ms(self.generate_duration),
            "sequential_ms": _ms(self.sequential_duration),
            "parallel_ms": _ms(self.parallel_duration),
            "speedup": self.speedup,
            "results_match": self.results_match,
        }


def _ms(delta: timedelta) -> float:
    return delta / timedelta(milliseconds=1)


def _random_string_at(length: int, _index: int) -> str:
    return random_char_string(length)


def generate_strings(settings: BenchmarkSettings, workers: int) -> list[str]:
    """Generate the benchmark input according to `settings`."""
    if settings.parallel_generation:
        return parallel_map(
            partial(_random_string_at, settings.length),
            range(settings.count),
            workers=workers,
            chunk_size=settings.chunk_size,
            executor=settings.executor,
        )
    return [random_char_string(settings.length) for _ in range(settings.count)]


def run_benchmark(
    settings: BenchmarkSettings | None = None, *, clock: Clock | None = None
) -> BenchmarkReport:
    """Run the generate / filter / filter-in-parallel scenario.

    Args:
        settings: Workload settings; defaults to `BenchmarkSettings()`.
        clock: Time source for the chronometer; defaults to a monotonic clock.

    Returns:
        BenchmarkReport: Counts, phase durations and whether both filtering
        strategies agreed.
    """
    settings = settings or BenchmarkSettings()
    workers = (
        settings.workers
        if settings.workers is not None
        else config.get_default_workers()
    )
    chrono = Chronometer(clock)

    logger.debug("Benchmark settings: %s (workers=%d)", settings, workers)

    chrono.start()
    strings = generate_strings(settings, workers)
    chrono.stop()
    generate_duration = chrono.duration
    logger.info(
        "Generate random strings, duration in milliseconds: %.3f", chrono.duration_ms
    )

    chrono.start()
    sequential = [s for s in strings if contains_all(s, settings.required)]
    chrono.stop()
    sequential_duration = chrono.duration
    logger.info(
        "Single-threaded filter, duration in milliseconds: %.3f", chrono.duration_ms
    )

    chrono.start()
    parallel = parallel_filter(
        require_all(*settings.required),
        strings,
        workers=workers,
        chunk_size=settings.chunk_size,
        executor=settings.executor,
    )
    chrono.stop()
    parallel_duration = chrono.duration
    logger.info(
        "Parallel filter (%s), duration in milliseconds: %.3f",
        settings.executor.value,
        chrono.duration_ms,
    )

    results_match = sequential == parallel and set(sequential) == set(parallel)
    if not results_match:
        logger.warning(
            "Filter results differ: sequential kept %d, parallel kept %d",
            len(sequential),
            len(parallel),
        )

    return BenchmarkReport(
        settings=settings,
        generated=len(strings),
        sequential_matches=len(sequential),
        parallel_matches=len(parallel),
        generate_duration=generate_duration,
        sequential_duration=sequential_duration,
        parallel_duration=parallel_duration,
        results_match=results_match,
        workers=workers,
    )


def verify_report(report: BenchmarkReport) -> None:
    """Raise if the sequential and parallel passes disagreed.

    Raises:
        ResultMismatchError: If `report.results_match` is False.
    """
    if not report.results_match:
        raise ResultMismatchError(report.sequential_matches, report.parallel_matches)
