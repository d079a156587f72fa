"""FILTERBENCH

A small benchmark comparing sequential and data-parallel filtering of
randomly generated strings. It ships a monotonic interval timer and a
thread-safe random string generator used to drive the workload.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
