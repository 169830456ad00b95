"""Name type parameters and render parameter lists."""

import logging

logger = logging.getLogger(__name__)

# Names are single letters, so only 26 parameters can be named.
MAX_PARAMETERS = 26


class UnsupportedParameterCount(Exception):
    """A parameter index has no single-letter name."""

    def __init__(self, message: str, index: int):
        super().__init__(message)
        self.index = index


def arg_name(index: int) -> str:
    """Return the type parameter name for a zero-based index.

    Args:
        index: Parameter position, 0 being "A"

    Returns:
        A single uppercase letter

    Raises:
        UnsupportedParameterCount: If the index is outside 0-25
    """
    if index < 0 or index >= MAX_PARAMETERS:
        logger.error(f"Cannot name parameter at index {index}")
        raise UnsupportedParameterCount(
            f"Parameter index {index} is outside 0-{MAX_PARAMETERS - 1}", index
        )
    return chr(ord("A") + index)


def arg_value_name(index: int) -> str:
    """Return the lower-case name used for example values."""
    return arg_name(index).lower()


def arg_list(start: int, end: int) -> list[str]:
    """Return the names for the half-open range [start, end)."""
    return [arg_name(i) for i in range(start, end)]


def arg_list_string(start: int, end: int) -> str:
    """Return the names for [start, end) joined with commas.

    An empty range renders as an empty string; callers must drop any
    separator that would have followed it.
    """
    return ", ".join(arg_list(start, end))
