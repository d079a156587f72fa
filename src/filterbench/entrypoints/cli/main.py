"""FILTERBENCH CLI entry point.

Defines the top-level ``filterbench`` command (via Click-Extra), configures
logging for every subcommand, and registers the benchmark commands.

Currently available commands
- ``filterbench run``: time sequential vs parallel filtering of random strings.
- ``filterbench generate``: print random lowercase strings.

Examples
    $ filterbench --version
    $ filterbench -v run --count 1000000 --executor process
    $ filterbench generate -n 3 -l 20
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from filterbench import __version__
from filterbench.logging import (
    LogSettings,
    configure_logging,
    log_startup,
    verbosity_to_level,
)

from .bench import generate as generate_command
from .bench import run as run_command
from .helpers import parse_log_level

logger = logging.getLogger(__name__)


HELP = """FILTERBENCH command-line interface.

    FILTERBENCH generates a large list of random lowercase strings and keeps the
    ones containing every required substring, once single-threaded and once across
    a pool of workers. It reports how long each pass took and checks that both
    passes kept exactly the same strings.
    """


DEFAULT_LOG_PATH = (
    Path(user_log_dir("filterbench", appauthor=False, ensure_exists=True)) / "latest.log"
)
RECORDER_HELP = (
    "Buffer recent DEBUG records of every logger (regardless of -v/-q) and "
    "write them to --log-path once a WARNING is logged."
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose", "-v", "verbose_count", count=True, default=0,
    help="Show more on the console: -v for INFO (phase timings), -vv for DEBUG.",
)  # fmt: skip
@click.option(
    "--quiet", "-q", "quiet_count", count=True, default=0,
    help="Show less on the console: -q for ERROR only, -qq for CRITICAL only.",
)  # fmt: skip
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Console lines carry timestamps, logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="FILTERBENCH_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to; replaced on every dump.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    help="Number of records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=RECORDER_HELP,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_envvar=True,
    help="Also write the flight recorder on a clean exit, e.g. to keep a run's timings.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("asyncio=WARNING", "concurrent=WARNING"),
    show_default=True,
    help=(
        "NAME=LEVEL threshold for one logger, applied to console and flight "
        "recorder alike. Repeatable, e.g. -L filterbench.parallel=DEBUG."
    ),
)
@clickx.pass_context
def filterbench(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """FILTERBENCH command-line interface."""
    settings = LogSettings(
        level=verbosity_to_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None means "let Rich decide"
        recorder_path=log_path if flight_recorder else None,
        recorder_capacity=flight_recorder_capacity,
        recorder_flush_on_exit=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, __version__, settings, handlers)
    ctx.call_on_close(logging.shutdown)


filterbench.add_command(run_command)
filterbench.add_command(generate_command)
