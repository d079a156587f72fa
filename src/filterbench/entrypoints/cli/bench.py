"""FILTERBENCH benchmark commands.

Behavior
- ``run`` executes the generate / sequential filter / parallel filter
  scenario and reports the phase durations. Human-oriented notices go to
  **stderr**; the report goes to **stdout** (as JSON with ``--json``).
- ``generate`` prints random lowercase strings, one per line.

Failure modes
- Invalid settings (e.g. a malformed ``FILTERBENCH_WORKERS``) → ``ClickException``.
- Sequential and parallel results disagree → ``ClickException`` (exit code 1).
"""

from __future__ import annotations

import json

import click

from filterbench import config, random_chars
from filterbench.benchmark import (
    BenchmarkReport,
    BenchmarkSettings,
    run_benchmark,
    verify_report,
)
from filterbench.errors import FilterBenchError, ResultMismatchError
from filterbench.parallel import ExecutorKind

from .helpers import error, success, warn

SEED_HELP = (
    "Seed the random source of the main thread. Only the sequential "
    "generation path is reproducible; pool workers keep their own sources."
)


def _format_report(report: BenchmarkReport) -> str:
    settings = report.settings
    speedup = f"{report.speedup:.2f}x" if report.speedup is not None else "n/a"
    lines = [
        f"strings        : {report.generated} x {settings.length} chars",
        f"required       : {', '.join(settings.required) or '<none>'}",
        f"executor       : {settings.executor.value} ({report.workers} workers)",
        f"generate       : {report.generate_duration.total_seconds() * 1000:.3f} ms",
        f"single-threaded: {report.sequential_duration.total_seconds() * 1000:.3f} ms"
        f" ({report.sequential_matches} kept)",
        f"parallel       : {report.parallel_duration.total_seconds() * 1000:.3f} ms"
        f" ({report.parallel_matches} kept)",
        f"speedup        : {speedup}",
    ]
    return "\n".join(lines)


@click.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=0),
    default=config.DEFAULT_COUNT,
    show_default=True,
    help="Number of random strings to generate.",
)
@click.option(
    "--length",
    "-l",
    type=click.IntRange(min=0),
    default=config.DEFAULT_LENGTH,
    show_default=True,
    help="Length of each random string.",
)
@click.option(
    "--require",
    "-r",
    "required",
    multiple=True,
    default=config.DEFAULT_REQUIRED,
    show_default=True,
    help="Substring every kept string must contain. Repeatable.",
)
@click.option(
    "--workers",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help=f"Worker count for parallel passes (default: ${config.WORKERS_ENV_VAR} or CPU count).",
)
@click.option(
    "--chunk-size",
    type=click.IntRange(min=1),
    default=None,
    help="Items per parallel task (default: about four chunks per worker).",
)
@click.option(
    "--executor",
    type=click.Choice([kind.value for kind in ExecutorKind], case_sensitive=False),
    default=ExecutorKind.THREAD.value,
    show_default=True,
    help="Worker pool used for parallel passes.",
)
@click.option(
    "--parallel-generation/--sequential-generation",
    default=True,
    show_default=True,
    help="Generate the input strings across the worker pool.",
)
@click.option("--seed", type=int, default=None, help=SEED_HELP)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON.")
def run(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    count: int,
    length: int,
    required: tuple[str, ...],
    workers: int | None,
    chunk_size: int | None,
    executor: str,
    parallel_generation: bool,
    seed: int | None,
    as_json: bool,
) -> None:
    """Compare single-threaded and parallel filtering of random strings."""
    if seed is not None:
        random_chars.seed(seed)
        if parallel_generation:
            warn(
                "--seed only makes --sequential-generation reproducible; "
                "pool workers draw from their own random sources."
            )
    try:
        settings = BenchmarkSettings(
            count=count,
            length=length,
            required=tuple(required),
            workers=workers,
            chunk_size=chunk_size,
            executor=ExecutorKind(executor.lower()),
            parallel_generation=parallel_generation,
        )
        report = run_benchmark(settings)
    except FilterBenchError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        click.echo(_format_report(report))

    try:
        verify_report(report)
    except ResultMismatchError as e:
        error("Sequential and parallel results differ.")
        raise click.ClickException(str(e)) from e
    success("Sequential and parallel results match.")


@click.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=0),
    default=10,
    show_default=True,
    help="Number of strings to print.",
)
@click.option(
    "--length",
    "-l",
    type=click.IntRange(min=0),
    default=config.DEFAULT_LENGTH,
    show_default=True,
    help="Length of each string.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
def generate(count: int, length: int, seed: int | None) -> None:
    """Print random lowercase strings, one per line."""
    if seed is not None:
        random_chars.seed(seed)
    for line in random_chars.random_strings(count, length):
        click.echo(line)
