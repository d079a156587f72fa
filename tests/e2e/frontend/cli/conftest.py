"""Fixtures for end-to-end CLI logging tests.

Provides a test-only `log-demo` command emitting messages at every level on a
project logger and on a third-party logger, plus fixtures to register it, get
a CliRunner, and run inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from filterbench.entrypoints.cli.main import filterbench

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'filterbench.demo' and a few on 'some.thirdparty'."""
    logger = logging.getLogger("filterbench.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _unregister(group: click.Group, name: str) -> None:
    """Remove `name` from the group and from any help sections Click-Extra keeps."""
    group.commands.pop(name, None)
    for section in [getattr(group, "_default_section", None), *getattr(group, "_sections", [])]:
        if section is not None:
            getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' on the top-level group for the duration of a test."""
    filterbench.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _unregister(filterbench, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side effects (log files) to a temporary directory."""
    with runner.isolated_filesystem():
        yield
