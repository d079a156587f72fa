"""Integration tests.

Purpose
- Run the full benchmark scenario on real thread and process pools.

Guidelines
- Keep workloads small enough for CI but large enough to split into many chunks.
- Assert observable results (membership, order, counts), not timings.
"""
