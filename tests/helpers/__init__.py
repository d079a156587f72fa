"""Shared assertion helpers."""
