"""Caller that drives an injected :class:`~unitcraft.interfaces.actor.Actor`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import ActorNotConfiguredError

if TYPE_CHECKING:
    from unitcraft.interfaces.actor import Actor

logger = logging.getLogger(__name__)


class ActorCaller:
    """Delegates to an actor and keeps track of how often it did so.

    The actor may be passed to the constructor or assigned to :attr:`actor`
    afterwards (manual wiring, or a test double).
    """

    def __init__(self, actor: Actor | None = None) -> None:
        self.actor = actor
        self._acted = False
        self._act_counter = 0

    @property
    def acted(self) -> bool:
        """Whether :meth:`act` has delegated to the actor at least once."""
        return self._acted

    @property
    def act_counter(self) -> int:
        """Number of successful delegations to the actor."""
        return self._act_counter

    def act(self) -> int:
        """Record the call and return the actor's result unchanged.

        Returns:
            int: The exact object returned by ``actor.perform_action()``.

        Raises:
            ActorNotConfiguredError: If no actor has been wired.
        """
        if self.actor is None:
            raise ActorNotConfiguredError()
        self._acted = True
        self._act_counter += 1
        logger.debug(
            "Delegating call #%d to %s", self._act_counter, type(self.actor).__name__
        )
        return self.actor.perform_action()
