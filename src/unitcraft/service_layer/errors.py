"""Service-layer error definitions."""

from unitcraft.domain.errors import DomainError


class ActorNotConfiguredError(DomainError):
    """Raised when an actor caller is asked to act before an actor is wired."""

    def __init__(self) -> None:
        super().__init__("No actor has been configured for this caller.")
