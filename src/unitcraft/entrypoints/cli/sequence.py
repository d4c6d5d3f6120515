"""UNITCRAFT sequence CLI: reverse or sort integers.

Both commands print the resulting integers to **stdout**, separated by single
spaces. With no NUMBERS an empty line is printed.
"""

import logging

import click

from unitcraft.domain.weighted_entry import reverse_sequence, sort_sequence

logger = logging.getLogger(__name__)


def _echo_numbers(numbers: list[int]) -> None:
    click.echo(" ".join(str(n) for n in numbers))


@click.group()
def sequence() -> None:
    """Sequence commands."""


@sequence.command()
@click.argument("numbers", nargs=-1, type=int)
def reverse(numbers: tuple[int, ...]) -> None:
    """Print NUMBERS in reverse order."""
    logger.debug("Reversing %d number(s)", len(numbers))
    _echo_numbers(reverse_sequence(numbers))


@sequence.command(name="sort")
@click.argument("numbers", nargs=-1, type=int)
def sort_numbers(numbers: tuple[int, ...]) -> None:
    """Print NUMBERS in ascending order."""
    logger.debug("Sorting %d number(s)", len(numbers))
    _echo_numbers(sort_sequence(numbers))
