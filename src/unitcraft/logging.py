"""Logging setup for the unitcraft CLI.

The root logger passes every record on; two handlers decide what is kept:

* a Rich console handler on stderr, whose level follows ``-v``/``-q``;
* the *flight recorder*, a ``MemoryHandler`` holding recent records at DEBUG
  that is dumped to the log file when a WARNING arrives, when it fills up,
  or on exit with ``--force-flush``.
"""

from __future__ import annotations

import logging
from logging.handlers import MemoryHandler
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from unitcraft.config import DEFAULT_FLIGHT_RECORDER_CAPACITY, env_overrides

if TYPE_CHECKING:
    from pathlib import Path

    from unitcraft.config import LoggingSettings

PROJECT_PACKAGE = "unitcraft"

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d  %(message)s"
RECORDER_FLUSH_LEVEL = logging.WARNING


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other packages with ``[package]``.

    Records from unitcraft itself get an empty tag so ``CONSOLE_FORMAT``
    always has a ``prefix`` to fill in.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PACKAGE else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return the stderr console handler.

    ``debug_mode`` lowers the level to DEBUG and shows logger names and
    source locations instead of the third-party tag.
    """
    console = Console(stderr=True, color_system="auto" if color else None)
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_RECORDER_CAPACITY,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a flight recorder buffering up to ``capacity`` records for ``path``.

    The file is opened lazily, on the first flush, and truncated then.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=RECORDER_FLUSH_LEVEL,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(settings: LoggingSettings) -> list[logging.Handler]:
    """Install the handlers described by ``settings`` on the root logger.

    Any previous root configuration is replaced. Per-logger levels are applied
    afterwards, so they bind both the console and the flight recorder.

    Returns:
        list[logging.Handler]: The installed handlers, console first.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=settings.console_level,
            debug_mode=settings.debug,
            color=settings.color,
        )
    ]
    if settings.flight_recorder:
        handlers.append(
            config_flight_recorder(
                settings.log_path,
                capacity=settings.flight_recorder_capacity,
                flush_on_close=settings.force_flush,
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def describe_recorder(settings: LoggingSettings) -> str:
    """Short summary of the flight recorder, e.g. ``2000 -> /tmp/latest.log``."""
    if not settings.flight_recorder:
        return "off"
    summary = f"{settings.flight_recorder_capacity} -> {settings.log_path}"
    if settings.force_flush:
        summary += " (flushed on exit)"
    return summary


def log_startup(
    logger: logging.Logger, settings: LoggingSettings, app_version: str
) -> None:
    """Report the logging settings the run ended up with.

    The INFO line reaches the console from ``-v`` on; the DEBUG lines mostly
    end up in the flight recorder.
    """
    logger.info(
        "unitcraft %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(settings.console_level),
        describe_recorder(settings),
    )
    logger.debug(
        "Verbosity flags: -v x%d, -q x%d, debug=%s",
        settings.verbose,
        settings.quiet,
        settings.debug,
    )
    overrides = ", ".join(
        f"{name}={logging.getLevelName(level)}"
        for name, level in sorted(settings.logger_levels.items())
    )
    logger.debug("Logger levels: %s", overrides or "<none>")
    logger.debug("Environment: %s", ", ".join(env_overrides()) or "<none>")
