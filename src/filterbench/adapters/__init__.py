"""Concrete implementations of the FILTERBENCH interfaces."""
