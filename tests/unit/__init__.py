"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- Drive time with ManualClock instead of sleeping.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
