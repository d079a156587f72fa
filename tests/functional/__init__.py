"""Functional tests.

Purpose
- Validate user-visible behavior at the CLI boundary.

Guidelines
- Treat the CLI as a black box; check messages, output and exit codes.
- Keep workloads tiny so each flow runs in well under a second.
"""
