"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidArgumentError(DomainError, ValueError):
    """Raised when an operation receives an argument outside its domain.

    Also a ``ValueError`` so callers that only know the standard library
    can still catch it.
    """

    def __init__(self, argument: str, value: object, message: str) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value


# ============================================================================
#                       WeightedEntry related errors
# ============================================================================


class NegativeWeightError(InvalidArgumentError):
    """Raised when a weight below zero is classified."""

    def __init__(self, weight: int) -> None:
        super().__init__(
            "weight", weight, f"Weight must not be negative, got {weight}."
        )


# ============================================================================
#                       Size classification errors
# ============================================================================

ABSENT_CODE_PLACEHOLDER = "null"


def render_code(code: str | None) -> str:
    """Return a printable rendering of a size code.

    ``None`` renders as the fixed placeholder ``null``; strings render with
    ``repr`` so that empty and whitespace codes remain visible.
    """
    if code is None:
        return ABSENT_CODE_PLACEHOLDER
    return repr(code)


class UnknownSizeCodeError(InvalidArgumentError):
    """Raised when a size code is not one of the known codes."""

    def __init__(
        self, code: str | None, known: tuple[str, ...] = ("s", "m", "l")
    ) -> None:
        expected = ", ".join(repr(k) for k in known)
        super().__init__(
            "code",
            code,
            f"Unknown size code: {render_code(code)} (expected one of {expected}).",
        )
        self.known = known
