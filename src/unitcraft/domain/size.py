"""Size-code classification.

Codes are matched exactly: no case folding and no trimming.
"""

from types import MappingProxyType

from .errors import UnknownSizeCodeError
from .value_objects import Size

SIZE_CODES = MappingProxyType(
    {
        "s": Size.SMALL,
        "m": Size.MEDIUM,
        "l": Size.LARGE,
    }
)


def classify_code(code: str | None) -> Size:
    """Map a one-character size code to a :class:`Size`.

    Args:
        code: ``"s"``, ``"m"`` or ``"l"``.

    Returns:
        Size: The matching size category.

    Raises:
        UnknownSizeCodeError: For any other input, including ``None`` and
            the empty string. The message contains the rendered code.
    """
    try:
        return SIZE_CODES[code]  # type: ignore[index]
    except (KeyError, TypeError) as e:
        raise UnknownSizeCodeError(code, known=tuple(SIZE_CODES)) from e
