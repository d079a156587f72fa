"""Fixtures for clock contract tests."""

from collections.abc import Iterable

import pytest

from filterbench.adapters.clocks import ManualClock, MonotonicClock
from filterbench.interfaces.clock import Clock


@pytest.fixture(params=["monotonic", "manual"])
def clock(request: pytest.FixtureRequest) -> Iterable[Clock]:
    """Return a fresh Clock instance for the requested backend.

    Supported params:
      - `"monotonic"` → MonotonicClock
      - `"manual"` → ManualClock

    Extend by adding new identifiers to `params` and branching below.
    """
    match request.param:
        case "monotonic":
            yield MonotonicClock()
        case "manual":
            yield ManualClock()
        case _:
            raise ValueError(f"unknown clock type: {request.param}")
