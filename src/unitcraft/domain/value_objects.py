"""Module including value objects used across the domain layer."""

from enum import Enum


class WeightLevel(Enum):
    """Enumeration of weight tiers"""

    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class Size(Enum):
    """Enumeration of size categories"""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
