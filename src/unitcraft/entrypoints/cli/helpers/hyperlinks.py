"""OSC-8 hyperlink utilities for the Unitcraft CLI.

Used to render the "See Also" links in the top-level help epilog. Links fall
back to plain text whenever the stream is unlikely to understand OSC-8.
"""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole")
OSC8_ENV_MARKERS = ("WT_SESSION", "VTE_VERSION")  # Windows Terminal, VTE family


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Guess whether ``stream`` renders OSC-8 hyperlinks.

    Args:
        stream: Text stream to probe; defaults to ``sys.stdout``.

    Returns:
        bool: False for non-TTY streams; otherwise True when the environment
        identifies a terminal known to support OSC-8.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if any(os.getenv(marker) for marker in OSC8_ENV_MARKERS):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, stream: TextIO | None = None) -> str:
    """Return ``url`` wrapped in a BEL-terminated OSC-8 sequence when supported.

    Args:
        url: Target URL, also used as the link text.
        stream: Stream the link will be written to; defaults to ``sys.stdout``.

    Returns:
        str: The wrapped link, or the bare URL.
    """
    if not supports_osc8(stream):
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
