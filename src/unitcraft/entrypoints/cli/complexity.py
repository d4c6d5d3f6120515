"""UNITCRAFT complexity CLI."""

import logging

import click

from unitcraft.domain.complexity import ComplexityTracker

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--increments",
    "-n",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Number of times to increment a fresh tracker.",
)
def complexity(increments: int) -> None:
    """Increment a fresh complexity tracker and print its state.

    Output format: ``complexity=<n> changed=<true|false>``.
    """
    tracker = ComplexityTracker()
    for _ in range(increments):
        tracker.increment()
    logger.debug("Tracker after %d increment(s): %r", increments, tracker)
    click.echo(
        f"complexity={tracker.complexity} changed={str(tracker.changed).lower()}"
    )
