"""Ports (abstract contracts) used by FILTERBENCH components."""
