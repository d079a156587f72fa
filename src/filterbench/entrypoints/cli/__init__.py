"""Command-line interface for FILTERBENCH."""
