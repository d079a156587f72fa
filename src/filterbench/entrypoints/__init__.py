"""Entrypoints (inbound adapters) for FILTERBENCH.

Expose the benchmark to the outside world through the command line. Parse and
validate inputs, call the benchmark driver, and present results.
"""
