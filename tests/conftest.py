"""Global pytest configuration for FILTERBENCH.

Every test is marked after the top-level folder it lives in (``unit``,
``contract``, ``integration``, ``functional``, ``e2e``) unless it already
carries that marker.
"""

from __future__ import annotations

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "contract", "integration", "functional", "e2e")

pytest_plugins = [
    "tests.fixtures.clocks",
    "tests.fixtures.environment",
]


def _folder_marker(path: Path) -> str | None:
    try:
        top = path.resolve().relative_to(TESTS_ROOT).parts[0]
    except (ValueError, IndexError):
        return None
    return top if top in FOLDER_MARKERS else None


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default marker to each collected item."""
    for item in items:
        if (name := _folder_marker(item.path)) is None:
            continue
        if not any(marker.name == name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, name))
