"""Functional tests for the `run` and `generate` commands."""

from __future__ import annotations

import json
import re
from datetime import timedelta

import pytest
from click.testing import CliRunner

from filterbench.benchmark import BenchmarkReport, BenchmarkSettings
from filterbench.entrypoints.cli import bench
from filterbench.entrypoints.cli.main import filterbench
from filterbench.random_chars import ALPHABET

# pylint: disable=redefined-outer-name

JSON_RE = re.compile(r"^\{.*^\}", re.DOTALL | re.MULTILINE)
BASE_ARGS = ["--no-flight-recorder"]


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner."""
    return CliRunner()


def _json_from(output: str) -> dict:
    """Extract the JSON report from mixed stdout/stderr output."""
    match = JSON_RE.search(output)
    assert match, f"no JSON object in output:\n{output}"
    return json.loads(match.group(0))


class TestRun:
    """A user benchmarks sequential vs parallel filtering."""

    @staticmethod
    def test_human_report(runner: CliRunner) -> None:
        """The default report lists each phase and confirms agreement."""
        result = runner.invoke(
            filterbench, BASE_ARGS + ["run", "-n", "500", "-l", "20", "-w", "2"]
        )
        assert result.exit_code == 0, result.output
        for label in ("generate", "single-threaded", "parallel", "speedup"):
            assert label in result.output
        assert "results match" in result.output

    @staticmethod
    def test_json_report(runner: CliRunner) -> None:
        """--json prints a machine-readable report."""
        result = runner.invoke(
            filterbench,
            BASE_ARGS
            + ["run", "-n", "300", "-l", "20", "-r", "a", "-r", "b", "-w", "3", "--json"],
        )
        assert result.exit_code == 0, result.output
        data = _json_from(result.output)
        assert data["generated"] == 300
        assert data["settings"]["required"] == ["a", "b"]
        assert data["settings"]["workers"] == 3
        assert data["sequential_matches"] == data["parallel_matches"]
        assert data["results_match"] is True

    @staticmethod
    def test_sequential_generation_with_seed_is_reproducible(runner: CliRunner) -> None:
        """A seeded run with sequential generation keeps the same number of strings."""
        args = BASE_ARGS + [
            "run", "-n", "200", "-l", "15", "-w", "2", "--seed", "7",
            "--sequential-generation", "--json",
        ]  # fmt: skip
        first = _json_from(runner.invoke(filterbench, args).output)
        second = _json_from(runner.invoke(filterbench, args).output)
        assert first["sequential_matches"] == second["sequential_matches"]

    @staticmethod
    def test_seed_with_parallel_generation_warns(runner: CliRunner) -> None:
        """Seeding a run that generates in the pool tells the user it is not reproducible."""
        result = runner.invoke(
            filterbench, BASE_ARGS + ["run", "-n", "50", "-l", "10", "-w", "2", "--seed", "3"]
        )
        assert result.exit_code == 0, result.output
        assert "--seed only makes --sequential-generation reproducible" in result.output

    @staticmethod
    def test_seed_with_sequential_generation_does_not_warn(runner: CliRunner) -> None:
        """No warning when the seeded path is the reproducible one."""
        result = runner.invoke(
            filterbench,
            BASE_ARGS
            + ["run", "-n", "50", "-l", "10", "-w", "2", "--seed", "3", "--sequential-generation"],
        )
        assert result.exit_code == 0, result.output
        assert "--seed only makes" not in result.output

    @staticmethod
    def test_invalid_count_is_rejected(runner: CliRunner) -> None:
        """Click rejects negative counts before anything runs."""
        result = runner.invoke(filterbench, BASE_ARGS + ["run", "--count=-1"])
        assert result.exit_code == 2
        assert "-1" in result.output

    @staticmethod
    def test_bad_workers_env_is_reported(runner: CliRunner) -> None:
        """A malformed FILTERBENCH_WORKERS turns into a clean error."""
        result = runner.invoke(
            filterbench,
            BASE_ARGS + ["run", "-n", "10"],
            env={"FILTERBENCH_WORKERS": "lots"},
        )
        assert result.exit_code == 1
        assert "FILTERBENCH_WORKERS" in result.output

    @staticmethod
    def test_mismatch_exits_non_zero(runner: CliRunner, monkeypatch) -> None:
        """If the strategies ever disagree the command fails."""
        report = BenchmarkReport(
            settings=BenchmarkSettings(count=4, length=2),
            generated=4,
            sequential_matches=2,
            parallel_matches=1,
            generate_duration=timedelta(milliseconds=1),
            sequential_duration=timedelta(milliseconds=1),
            parallel_duration=timedelta(milliseconds=1),
            results_match=False,
        )
        monkeypatch.setattr(bench, "run_benchmark", lambda settings: report)
        result = runner.invoke(filterbench, BASE_ARGS + ["run"])
        assert result.exit_code == 1
        assert "results differ" in result.output


class TestGenerate:
    """A user asks for some random strings."""

    @staticmethod
    def test_prints_count_lines_of_length(runner: CliRunner) -> None:
        """generate prints one string per line."""
        result = runner.invoke(filterbench, BASE_ARGS + ["generate", "-n", "5", "-l", "12"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 5
        assert all(len(line) == 12 and set(line) <= set(ALPHABET) for line in lines)

    @staticmethod
    def test_seed_reproduces_output(runner: CliRunner) -> None:
        """The same seed prints the same strings."""
        args = BASE_ARGS + ["generate", "-n", "3", "--seed", "99"]
        assert runner.invoke(filterbench, args).output == runner.invoke(filterbench, args).output

    @staticmethod
    def test_zero_length_prints_empty_lines(runner: CliRunner) -> None:
        """A zero length prints empty strings."""
        result = runner.invoke(filterbench, BASE_ARGS + ["generate", "-n", "2", "-l", "0"])
        assert result.exit_code == 0
        assert result.output == "\n\n"
