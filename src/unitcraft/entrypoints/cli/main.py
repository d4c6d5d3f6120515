"""Unitcraft CLI entry point.

Defines the top-level ``unitcraft`` command (via Click-Extra). The root
command owns logging: it turns its options into a
:class:`~unitcraft.config.LoggingSettings` and installs the handlers before
any subcommand runs.

Subcommands
- ``unitcraft classify``: classify a weight into a tier or a code into a size.
- ``unitcraft sequence``: reverse or sort a list of integers.
- ``unitcraft complexity``: drive a complexity tracker.
- ``unitcraft act``: drive the bootstrapped actor caller.

Examples
    $ unitcraft --version
    $ unitcraft -v classify weight 42
    $ UNITCRAFT_LOGGER_LEVELS="unitcraft=DEBUG" unitcraft --force-flush act -t 3
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from unitcraft import __version__, config
from unitcraft.logging import configure_logging, log_startup

from .act import act as act_command
from .classify import classify as classify_group
from .complexity import complexity as complexity_command
from .helpers import hyperlink, warn
from .helpers.log_level_parser import parse_log_level
from .sequence import sequence as sequence_group

logger = logging.getLogger(__name__)


HELP = """UNITCRAFT command-line interface.

    UNITCRAFT is a small library of example domain objects (a complexity tracker,
    weighted entries with weight tiers, a size-code classifier and an actor caller)
    whose test suite shows how to structure, name and scope unit tests. This CLI
    lets you try each component by hand.
    """

DOCS_URL = "https://unitcraft.readthedocs.io/"
ISSUES_URL = "https://github.com/unitcraft/unitcraft/issues"

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  Docs  : " + hyperlink(DOCS_URL),
        "  Issues: " + hyperlink(ISSUES_URL),
    ]
)

RECORDER_HELP = (
    "Keep the most recent log records in memory at DEBUG, whatever -v/-q say, "
    "and write them to --log-path once a WARNING is logged. The buffer size is "
    f"read from {config.envvar('flight_recorder_capacity')}."
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "-v",
    "--verbose",
    "verbose_count",
    count=True,
    help="Show one more level of console logging per repetition (default WARNING).",
)
@click.option(
    "-q",
    "--quiet",
    "quiet_count",
    count=True,
    help="Show one less level of console logging per repetition.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Log everything to the console, with logger names and source locations.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=config.default_log_path,
    show_default="per-user log directory",
    envvar=config.envvar("log_path"),
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=config.DEFAULT_FLIGHT_RECORDER_CAPACITY,
    envvar=config.envvar("flight_recorder_capacity"),
    hidden=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    envvar=config.envvar("flight_recorder"),
    show_envvar=True,
    help=RECORDER_HELP,
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    show_default=True,
    envvar=config.envvar("force_flush"),
    show_envvar=True,
    help="Also write the flight recorder when the command ends without a WARNING.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("click_extra=WARNING",),
    show_default=True,
    envvar=config.envvar("logger_levels"),
    show_envvar=True,
    help=(
        "Minimum level of one logger, as NAME=LEVEL, for console and flight "
        "recorder alike. Repeatable, e.g. -L unitcraft.adapters=DEBUG; the "
        "environment variable takes a comma or space separated list."
    ),
)
@clickx.pass_context
def unitcraft(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """UNITCRAFT command-line interface."""
    settings = config.LoggingSettings(
        log_path=log_path,
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        color=ctx.color is not False,
        flight_recorder=flight_recorder,
        flight_recorder_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    configure_logging(settings)
    log_startup(logger, settings, app_version=__version__)

    if force_flush and not flight_recorder:
        warn("--force-flush has no effect with --no-flight-recorder.")

    ctx.call_on_close(logging.shutdown)


unitcraft.add_command(classify_group)
unitcraft.add_command(sequence_group)
unitcraft.add_command(complexity_command)
unitcraft.add_command(act_command)
