"""UNITCRAFT act CLI: drive the bootstrapped actor caller.

Each result is printed to **stdout** on its own line, followed by a final
``status=<n>`` line with the actor's status. A summary goes to **stderr**.
"""

import logging

import click

from unitcraft.bootstrap import bootstrap

from .helpers import success

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--times",
    "-t",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of times to act.",
)
def act(times: int) -> None:
    """Let the actor caller act TIMES times and print each result."""
    container = bootstrap()
    caller = container.actor_caller
    for _ in range(times):
        click.echo(caller.act())
    logger.info("Actor caller acted %d time(s)", caller.act_counter)
    click.echo(f"status={container.actor.status}")
    success(f"Actor performed {caller.act_counter} action(s).")
