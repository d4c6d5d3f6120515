"""Configuration utilities for UNITCRAFT.

This module centralizes small helpers and constants related to application configuration.
Settings come from CLI options with ``UNITCRAFT_*`` environment fallbacks; there is no
configuration file.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "unitcraft"
ENVVAR_PREFIX = "UNITCRAFT"

LOG_FILENAME = "latest.log"  # pragma: no mutate
DEFAULT_FLIGHT_RECORDER_CAPACITY = 2000

DEFAULT_CONSOLE_LEVEL = logging.WARNING
LEVEL_STEP = 10  # distance between adjacent stdlib levels


def envvar(name: str) -> str:
    """Return the environment variable name for setting ``name``.

    Example:
        ``envvar("log_path")`` -> ``"UNITCRAFT_LOG_PATH"``
    """
    return f"{ENVVAR_PREFIX}_{name.upper()}"


def env_overrides(environ: Mapping[str, str] | None = None) -> list[str]:
    """Return the sorted names of the ``UNITCRAFT_*`` variables that are set."""
    if environ is None:
        environ = os.environ
    return sorted(name for name in environ if name.startswith(f"{ENVVAR_PREFIX}_"))


def default_log_path() -> Path:
    """Return the default flight-recorder file path.

    The per-user log directory is created if it does not exist yet.

    Returns:
        ``<user log dir>/latest.log`` as reported by platformdirs.
    """
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / LOG_FILENAME


@dataclass(frozen=True)
class LoggingSettings:  # pylint: disable=too-many-instance-attributes
    """Logging options of the root ``unitcraft`` command.

    Attributes:
        log_path: File the flight recorder writes to.
        verbose: Number of ``-v`` flags.
        quiet: Number of ``-q`` flags.
        debug: Developer mode; forces the console down to DEBUG.
        color: Whether the console may use color.
        flight_recorder: Whether the flight recorder is installed at all.
        flight_recorder_capacity: Records kept in memory before a forced flush.
        force_flush: Write the flight recorder on exit even without a WARNING.
        logger_levels: Per-logger minimum levels (``-L NAME=LEVEL``).
    """

    log_path: Path
    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    color: bool = True
    flight_recorder: bool = True
    flight_recorder_capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING moved one level per ``-v``/``-q``; DEBUG in debug mode."""
        if self.debug:
            return logging.DEBUG
        level = DEFAULT_CONSOLE_LEVEL + LEVEL_STEP * (self.quiet - self.verbose)
        return max(logging.DEBUG, min(logging.CRITICAL, level))
