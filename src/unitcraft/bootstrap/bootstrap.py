"""Bootstrap the actor caller with its actor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from unitcraft.adapters.actors import CountingActor
from unitcraft.service_layer.actor_caller import ActorCaller

if TYPE_CHECKING:
    from unitcraft.interfaces.actor import Actor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    actor: Actor
    actor_caller: ActorCaller


def build_actor_caller(actor: Actor) -> ActorCaller:
    """Build an actor caller with the given actor injected."""
    return ActorCaller(actor=actor)


def bootstrap(actor: Actor | None = None) -> AppContainer:
    """Wire an actor caller to ``actor``, or to a fresh :class:`CountingActor`.

    Every call returns new instances; nothing is cached between calls.
    """
    if actor is None:
        actor = CountingActor()
    logger.debug("Bootstrapping with actor %s", type(actor).__name__)
    return AppContainer(actor=actor, actor_caller=build_actor_caller(actor))
