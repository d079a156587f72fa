"""Random lowercase letters and strings.

All functions are safe to call from many threads at once without external
locking: every thread draws from its own `random.Random` instance, created
lazily and seeded from OS entropy on first use in that thread.

After ``fork()`` the child discards the per-thread sources it inherited, so
process-pool workers never replay the parent's sequence.
"""

import os
import random
import threading

from filterbench.errors import InvalidLengthError

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_local = threading.local()


def _reset_after_fork() -> None:
    global _local  # pylint: disable=global-statement
    _local = threading.local()


if hasattr(os, "register_at_fork"):
    os.register_at_fork(after_in_child=_reset_after_fork)


def _rng() -> random.Random:
    """Return the calling thread's random source, creating it if needed."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()  # seeded from os.urandom
        _local.rng = rng
    return rng


def _check_count(value: int, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidLengthError(value, what)


def seed(value: int | str | bytes | None = None) -> None:
    """Reseed the calling thread's random source.

    Other threads keep their own sources and are unaffected. Passing ``None``
    reseeds from OS entropy.
    """
    _rng().seed(value)


def _draw(rng: random.Random) -> str:
    return ALPHABET[rng.randrange(len(ALPHABET))]


def random_char() -> str:
    """Return one letter drawn uniformly from `ALPHABET`."""
    return _draw(_rng())


def random_char_string(length: int) -> str:
    """Return a string of `length` independently drawn random letters.

    Args:
        length: Number of characters; ``0`` yields ``""``.

    Raises:
        InvalidLengthError: If `length` is negative.
        TypeError: If `length` is not an integer.
    """
    _check_count(length, "length")
    rng = _rng()
    return "".join(_draw(rng) for _ in range(length))


def random_strings(count: int, length: int) -> list[str]:
    """Return `count` random strings of `length` letters each."""
    _check_count(count, "count")
    _check_count(length, "length")
    return [random_char_string(length) for _ in range(count)]
