"""Data-parallel map and filter over in-memory sequences.

The input is split into contiguous chunks which are processed on a
`concurrent.futures` pool (threads or processes); the partial results are
then concatenated in chunk order. Results therefore always come back in
input encounter order, so a parallel pass compares equal, element for
element, with its sequential counterpart.

Callables handed to a process pool must be picklable: module-level
functions or `functools.partial` objects over them.
"""

from __future__ import annotations

import concurrent.futures as cf
import logging
import math
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from functools import partial
from typing import TypeVar

from filterbench import config
from filterbench.errors import InvalidParallelismError

T = TypeVar("T")
R = TypeVar("R")

logger = logging.getLogger(__name__)

CHUNKS_PER_WORKER = 4


class ExecutorKind(Enum):
    """Kind of worker pool used for a parallel pass."""

    THREAD = "thread"
    PROCESS = "process"


def _resolve(
    total: int, workers: int | None, chunk_size: int | None
) -> tuple[int, int]:
    if workers is None:
        workers = config.get_default_workers()
    if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
        raise InvalidParallelismError("workers", workers)
    if chunk_size is None:
        chunk_size = max(1, math.ceil(total / (workers * CHUNKS_PER_WORKER)))
    if (
        isinstance(chunk_size, bool)
        or not isinstance(chunk_size, int)
        or chunk_size < 1
    ):
        raise InvalidParallelismError("chunk_size", chunk_size)
    return workers, chunk_size


def chunked(items: Sequence[T], size: int) -> list[Sequence[T]]:
    """Split `items` into contiguous slices of at most `size` elements."""
    return [items[i : i + size] for i in range(0, len(items), size)]


def _make_executor(kind: ExecutorKind, workers: int) -> cf.Executor:
    match kind:
        case ExecutorKind.THREAD:
            return cf.ThreadPoolExecutor(
                max_workers=workers, thread_name_prefix="filterbench"
            )
        case ExecutorKind.PROCESS:
            return cf.ProcessPoolExecutor(max_workers=workers)
        case _:
            raise ValueError(f"unknown executor kind: {kind}")


def _map_chunk(func: Callable[[T], R], chunk: Sequence[T]) -> list[R]:
    return [func(item) for item in chunk]


def _filter_chunk(predicate: Callable[[T], bool], chunk: Sequence[T]) -> list[T]:
    return [item for item in chunk if predicate(item)]


def _fan_out(
    chunk_func: Callable[[Sequence[T]], list[R]],
    items: Sequence[T] | Iterable[T],
    workers: int | None,
    chunk_size: int | None,
    executor: ExecutorKind,
) -> list[R]:
    if not isinstance(items, Sequence):
        items = list(items)
    workers, chunk_size = _resolve(len(items), workers, chunk_size)
    if not items:
        return []
    chunks = chunked(items, chunk_size)
    logger.debug(
        "Fan-out: %d items, %d chunks of <= %d, %d %s workers",
        len(items),
        len(chunks),
        chunk_size,
        workers,
        executor.value,
    )
    results: list[R] = []
    with _make_executor(executor, min(workers, len(chunks))) as pool:
        # Executor.map yields in submission order regardless of completion order
        for part in pool.map(chunk_func, chunks):
            results.extend(part)
    return results


def parallel_map(
    func: Callable[[T], R],
    items: Sequence[T] | Iterable[T],
    *,
    workers: int | None = None,
    chunk_size: int | None = None,
    executor: ExecutorKind = ExecutorKind.THREAD,
) -> list[R]:
    """Apply `func` to every item across a worker pool.

    Args:
        func: Callable applied to each item.
        items: Input items; non-sequences are materialized first.
        workers: Pool size; defaults to `config.get_default_workers()`.
        chunk_size: Items per task; defaults to spreading the input over
            about four chunks per worker.
        executor: Thread or process pool.

    Returns:
        list: ``[func(x) for x in items]``, in input order.

    Raises:
        InvalidParallelismError: If `workers` or `chunk_size` is not positive.
    """
    return _fan_out(partial(_map_chunk, func), items, workers, chunk_size, executor)


def parallel_filter(
    predicate: Callable[[T], bool],
    items: Sequence[T] | Iterable[T],
    *,
    workers: int | None = None,
    chunk_size: int | None = None,
    executor: ExecutorKind = ExecutorKind.THREAD,
) -> list[T]:
    """Keep the items for which `predicate` holds, evaluated across a worker pool.

    Takes the same tuning arguments as `parallel_map`.

    Returns:
        list: ``[x for x in items if predicate(x)]``, in input order.
    """
    return _fan_out(
        partial(_filter_chunk, predicate), items, workers, chunk_size, executor
    )
