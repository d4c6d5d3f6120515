"""Actors for Unitcraft."""

import logging

from unitcraft.interfaces.actor import Actor

logger = logging.getLogger(__name__)


class CountingActor(Actor):
    """Actor that numbers its actions.

    Each primary action returns its 1-based sequence number. The status is
    the number of primary actions performed so far; secondary actions are
    counted separately and do not affect it.
    """

    def __init__(self) -> None:
        self._actions = 0
        self._secondary_actions = 0

    def perform_action(self) -> int:
        """Perform the next action and return its sequence number."""
        self._actions += 1
        logger.debug("Performed action #%d", self._actions)
        return self._actions

    def perform_secondary_action(self) -> None:
        """Record a secondary action."""
        self._secondary_actions += 1
        logger.debug("Performed secondary action #%d", self._secondary_actions)

    @property
    def status(self) -> int:
        """Number of primary actions performed."""
        return self._actions

    @property
    def secondary_actions(self) -> int:
        """Number of secondary actions performed."""
        return self._secondary_actions
