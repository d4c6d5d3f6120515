"""UNITCRAFT classify CLI: weight tiers and size codes.

Results are printed to **stdout** as the lowercase enum value (``light``,
``medium``, ``heavy`` / ``small``, ``medium``, ``large``). Rejected input is
reported as a usage error (exit code 2) carrying the domain message.

Notes
- Negative weights must follow ``--`` so Click does not read them as options:
  ``unitcraft classify weight -- -1``.
"""

import logging

import click

from unitcraft.domain.errors import InvalidArgumentError
from unitcraft.domain.size import classify_code
from unitcraft.domain.weighted_entry import classify_weight

logger = logging.getLogger(__name__)


@click.group()
def classify() -> None:
    """Classification commands."""


@classify.command()
@click.argument("weight", type=int)
def weight(weight: int) -> None:  # pylint: disable=redefined-outer-name
    """Print the weight tier of WEIGHT."""
    try:
        level = classify_weight(weight)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e), param_hint="'WEIGHT'") from e
    logger.debug("Weight %d classified as %s", weight, level.name)
    click.echo(level.value)


@classify.command()
@click.argument("code")
def size(code: str) -> None:
    """Print the size category of CODE (one of s, m, l)."""
    try:
        category = classify_code(code)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e), param_hint="'CODE'") from e
    logger.debug("Code %r classified as %s", code, category.name)
    click.echo(category.value)
