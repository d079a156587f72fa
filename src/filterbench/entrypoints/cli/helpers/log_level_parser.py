"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values arrive either as repeated CLI flags or as one comma/space separated
string (e.g. from an environment variable). Levels may be given by name
(case-insensitive) or as a plain integer.
"""

import logging
import re

import click

# Libraries that are noisy at DEBUG while a pool spins up
DEFAULT_LIB_LEVELS = {"asyncio": logging.WARNING, "concurrent": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the raw option value into individual ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _to_level(text: str) -> int | None:
    """Translate a level name or number to its numeric value, or None if unknown."""
    text = text.strip()
    if text.isdigit():
        return int(text)
    return logging.getLevelNamesMapping().get(text.upper())


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a logger->level mapping.

    Starts from `DEFAULT_LIB_LEVELS`; later items override earlier ones.

    Returns:
        dict[str, int]: Logger names mapped to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        if (level := _to_level(level_text)) is None:
            raise click.BadParameter(f"Invalid log level: {level_text}")
        levels[name.strip()] = level
    return levels
