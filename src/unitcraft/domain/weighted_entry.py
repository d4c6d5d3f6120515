"""Weighted key/value entries and the weight-tier classification.

Tier boundaries (inclusive):

| weight    | tier   |
|-----------|--------|
| < 0       | error  |
| 0 .. 10   | LIGHT  |
| 11 .. 100 | MEDIUM |
| >= 101    | HEAVY  |
"""

from collections.abc import Iterable

from .errors import NegativeWeightError
from .value_objects import WeightLevel

LIGHT_MAX = 10
MEDIUM_MAX = 100


def classify_weight(weight: int) -> WeightLevel:
    """Classify ``weight`` into a weight tier.

    Args:
        weight: A non-negative integer.

    Returns:
        WeightLevel: LIGHT for 0..10, MEDIUM for 11..100, HEAVY above 100.

    Raises:
        NegativeWeightError: If ``weight`` is below zero.
    """
    if weight < 0:
        raise NegativeWeightError(weight)
    if weight > MEDIUM_MAX:
        return WeightLevel.HEAVY
    if weight > LIGHT_MAX:
        return WeightLevel.MEDIUM
    return WeightLevel.LIGHT


def reverse_sequence(numbers: Iterable[int]) -> list[int]:
    """Return a new list with the elements of ``numbers`` in reverse order."""
    return list(numbers)[::-1]


def sort_sequence(numbers: Iterable[int]) -> list[int]:
    """Return a new, ascending list of ``numbers`` (stable for duplicates)."""
    return sorted(numbers)


class WeightedEntry:
    """A key/value pair whose value falls into a weight tier.

    The key is fixed at construction; the value may be reassigned. The tier
    is derived from the current value on every read.
    """

    classify_weight = staticmethod(classify_weight)
    reverse_sequence = staticmethod(reverse_sequence)
    sort_sequence = staticmethod(sort_sequence)

    def __init__(self, key: int, value: int) -> None:
        self._key = key
        self._value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, value={self._value!r})"

    @property
    def key(self) -> int:
        """The entry key (read-only)."""
        return self._key

    @property
    def value(self) -> int:
        """The entry value."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value

    @property
    def weight_level(self) -> WeightLevel:
        """Weight tier of the current value.

        Raises:
            NegativeWeightError: If the current value is below zero.
        """
        return classify_weight(self._value)
