"""Status lines for the FILTERBENCH CLI.

Each message is prefixed with a glyph (emoji when stderr can encode it,
ASCII otherwise) and written to stderr, keeping stdout free for benchmark
output such as ``--json``.
"""

from typing import NamedTuple

import click


class Glyph(NamedTuple):
    """An emoji and the ASCII text used when the emoji cannot be encoded."""

    emoji: str
    fallback: str


CAUTION = Glyph("⚠️", "[!]")  # pragma: no mutate
SUCCESS = Glyph("✅", "[OK]")  # pragma: no mutate
ERROR = Glyph("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call so redirected or patched streams
    are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def render(glyph: Glyph) -> str:
    """Return the emoji of `glyph` if stderr supports it, else its fallback."""
    return glyph.emoji if _supports_character(glyph.emoji) else glyph.fallback


def _emit(glyph: Glyph, msg: str, color: str) -> None:
    click.secho(f"{render(glyph)}  {msg}", fg=color, bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**."""
    _emit(CAUTION, msg, "yellow")


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Sequential and parallel results match.``
    """
    _emit(SUCCESS, msg, "green")


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**."""
    _emit(ERROR, msg, "red")
