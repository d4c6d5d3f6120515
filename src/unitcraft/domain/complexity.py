"""Complexity tracker.

A counter with a sticky "changed" flag. The tracker also carries two tiny
packing helpers that turn varargs into a list or a tuple.
"""


class ComplexityTracker:
    """Counts increments and remembers whether any happened.

    Invariant: ``changed`` is True iff ``increment`` has been called at least
    once since construction.
    """

    def __init__(self) -> None:
        self._complexity = 0
        self._changed = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(complexity={self._complexity}, "
            f"changed={self._changed})"
        )

    @property
    def complexity(self) -> int:
        """Number of increments since construction."""
        return self._complexity

    @property
    def changed(self) -> bool:
        """Whether ``increment`` was ever called."""
        return self._changed

    def increment(self) -> None:
        """Increase the complexity by one and mark the tracker as changed."""
        self._complexity += 1
        self._changed = True

    @staticmethod
    def to_list(*items: str) -> list[str]:
        """Return ``items`` as a new list, in order."""
        return list(items)

    @staticmethod
    def to_array(*items: str) -> tuple[str, ...]:
        """Return ``items`` as a fixed-size tuple, in order."""
        return tuple(items)
