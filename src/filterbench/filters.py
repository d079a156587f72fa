"""Substring predicates used by the filtering benchmark."""

from collections.abc import Callable, Iterable
from functools import partial


def contains_all(text: str, substrings: Iterable[str]) -> bool:
    """Return True if every one of `substrings` occurs in `text`.

    An empty collection of substrings matches any text.
    """
    return all(sub in text for sub in substrings)


def require_all(*substrings: str) -> Callable[[str], bool]:
    """Build a predicate keeping strings that contain all `substrings`.

    The predicate is a `functools.partial` over a module-level function, so
    it can be shipped to process-pool workers.
    """
    return partial(_contains_all_of, tuple(substrings))


def _contains_all_of(substrings: tuple[str, ...], text: str) -> bool:
    return contains_all(text, substrings)
