"""Helpers for parsing logger-level CLI options.

The ``-L/--logger-level`` option accepts NAME=LEVEL pairs, either repeated on
the command line or as a comma/space separated list in
``UNITCRAFT_LOGGER_LEVELS``. Level names are case-insensitive.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten a Click option value into non-empty NAME=LEVEL fragments.

    Args:
        value: A single string (possibly holding several items) or a sequence
            of strings as produced by a repeatable option.

    Returns:
        list[str]: The individual items, in order.
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _parse_level(level_str: str) -> int:
    level = logging.getLevelName(level_str.strip().upper())
    if not isinstance(level, int):
        raise click.BadParameter(f"Invalid log level: {level_str}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Starts from ``DEFAULT_LIB_LEVELS``; later items override earlier ones for
    the same logger name.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _parse_level(level_str)
    return levels
