"""Terminal message helpers for the Unitcraft CLI.

Status lines (warnings and successes) go to **stderr** so that command
results on stdout stay pipeable. Each line starts with an emoji glyph, or an
ASCII stand-in when stderr cannot encode the emoji.
"""

from typing import NamedTuple

import click


class Glyph(NamedTuple):
    """An emoji marker and its ASCII fallback."""

    emoji: str
    fallback: str


CAUTION = Glyph("⚠️", "[!]")  # pragma: no mutate
SUCCESS = Glyph("✅", "[OK]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call, so a redirected or patched stderr
    is honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def render_glyph(glyph: Glyph) -> str:
    """Return the emoji of ``glyph`` if stderr supports it, else its fallback."""
    if _supports_character(glyph.emoji):
        return glyph.emoji
    return glyph.fallback


def caution_glyph() -> str:
    """Warning marker: "⚠️" or "[!]"."""
    return render_glyph(CAUTION)


def success_glyph() -> str:
    """Success marker: "✅" or "[OK]"."""
    return render_glyph(SUCCESS)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  --force-flush has no effect with --no-flight-recorder.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Actor performed 3 action(s).``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)
