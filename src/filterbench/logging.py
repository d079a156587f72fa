"""Logging setup for the FILTERBENCH CLI.

Console records are rendered by Rich on stderr, at a level chosen with
``-v``/``-q``. Independently, a bounded in-memory "flight recorder" keeps the
most recent DEBUG records of every logger and writes them to a file once a
WARNING is seen (or on exit when asked to). Benchmark runs log their phase
timings at INFO, so a recorder dump always shows the last timings even when
the console is quiet.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from filterbench import config
from filterbench.benchmark import BenchmarkSettings

PACKAGE = "filterbench"

CONSOLE_FORMAT = "%(origin)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


def verbosity_to_level(verbose: int, quiet: int) -> int:
    """Map ``-v``/``-q`` repetitions to a console level.

    Starts from WARNING; each ``-v`` lowers and each ``-q`` raises it by one
    level, clamped to DEBUG..CRITICAL.
    """
    level = logging.WARNING + 10 * (quiet - verbose)
    return min(max(level, logging.DEBUG), logging.CRITICAL)


@dataclass(frozen=True)
class LogSettings:  # pylint: disable=too-many-instance-attributes
    """Everything needed to set up console and flight-recorder logging.

    A `recorder_path` of None disables the flight recorder.
    """

    level: int = logging.WARNING
    debug: bool = False
    color: bool = True
    recorder_path: Path | None = None
    recorder_capacity: int = 2000
    recorder_flush_on_exit: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def recorder_enabled(self) -> bool:
        return self.recorder_path is not None

    @property
    def console_level(self) -> int:
        return logging.DEBUG if self.debug else self.level


def tag_origin(record: logging.LogRecord) -> bool:
    """Set `record.origin` to "[top]" for loggers outside the package.

    Worker pools log through ``concurrent.futures``; tagging those records
    keeps them distinguishable from the benchmark's own lines.
    """
    top = record.name.partition(".")[0]
    record.origin = "" if top == PACKAGE else f"[{top}]"
    return True


def console_handler(settings: LogSettings) -> RichHandler:
    """Return a Rich handler on stderr honouring level, color and debug mode."""
    console = Console(color_system="auto" if settings.color else None, stderr=True)
    handler = RichHandler(
        level=settings.console_level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(tag_origin)
    return handler


def flight_recorder(settings: LogSettings) -> MemoryHandler:
    """Return the buffering handler writing to `settings.recorder_path`.

    The file is opened (and truncated) on the first flush only, so runs
    without warnings and without force-flush leave no file behind.
    """
    if settings.recorder_path is None:
        raise ValueError("flight recorder requested without a path")
    target = logging.FileHandler(
        settings.recorder_path, mode="w", encoding="utf-8", delay=True
    )
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=settings.recorder_capacity,
        flushLevel=logging.WARNING,
        target=target,
        flushOnClose=settings.recorder_flush_on_exit,
    )


def configure_logging(settings: LogSettings) -> list[logging.Handler]:
    """Install the handlers on the root logger and apply per-logger levels.

    The root logger passes everything through; each handler applies its own
    threshold. Returns the installed handlers.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.recorder_enabled:
        handlers.append(flight_recorder(settings))

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def log_startup(
    logger: logging.Logger,
    app_version: str,
    settings: LogSettings,
    handlers: list[logging.Handler],
) -> None:
    """Log a one-line summary and DEBUG diagnostics for a CLI invocation.

    The summary names the version, the console level, the flight-recorder
    state and the worker count parallel passes default to. DEBUG lines add
    the interpreter, process and benchmark defaults, so a recorder dump from
    a slow run says what it ran with.
    """
    workers = config.describe_default_workers()
    logger.info(
        "FILTERBENCH %s: console=%s, flight-recorder=%s, workers=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        "ON" if settings.recorder_enabled else "OFF",
        workers,
    )

    defaults = BenchmarkSettings()
    logger.debug("Python: %s (%s)", sys.version.split()[0], sys.implementation.name)
    logger.debug("PID: %s, CPUs: %s", os.getpid(), os.cpu_count())
    logger.debug(
        "Benchmark defaults: count=%d, length=%d, required=%s, executor=%s",
        defaults.count,
        defaults.length,
        ",".join(defaults.required),
        defaults.executor.value,
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if settings.recorder_enabled:
        logger.debug(
            "Flight recorder: path=%s, capacity=%d, flush_on_exit=%s",
            settings.recorder_path,
            settings.recorder_capacity,
            settings.recorder_flush_on_exit,
        )
    logger.debug(
        "Per-logger levels: %s",
        {name: logging.getLevelName(lvl) for name, lvl in settings.logger_levels.items()}
        or "<none>",
    )
