"""Interface for actors."""

import abc


class Actor(abc.ABC):
    """Contract for an actor driven by an ActorCaller.

    Implementations are supplied from outside (bootstrap or tests); callers
    never construct or dispose of them.
    """

    @abc.abstractmethod
    def perform_action(self) -> int:
        """Perform the primary action and return its result code."""

    @abc.abstractmethod
    def perform_secondary_action(self) -> None:
        """Perform the secondary action."""

    @property
    @abc.abstractmethod
    def status(self) -> int:
        """Current status code of the actor."""
