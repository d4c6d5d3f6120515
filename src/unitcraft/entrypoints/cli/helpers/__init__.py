"""CLI helpers for UNITCRAFT.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, message emitters that write to stderr with emoji→ASCII fallbacks,
and the NAME=LEVEL logger-level option parser.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import success, warn

__all__ = ["hyperlink", "parse_log_level", "success", "warn"]
