"""Contract tests.

Purpose
- Define behavior/invariants once and run them against every implementation
  of a port (clocks) or every concurrency mode (random generation).

Guidelines
- Parametrize implementations via fixtures.
- Assert only the public contract (inputs/outputs/effects), not internals.
"""
