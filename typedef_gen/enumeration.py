"""Enumerate the arities and split points a generator covers."""

import logging

from typedef_gen.models import SplitPoint

logger = logging.getLogger(__name__)


class InvalidArity(Exception):
    """The requested maximum arity is negative."""

    def __init__(self, message: str, max_arity: int):
        super().__init__(message)
        self.max_arity = max_arity


def arities(max_arity: int) -> range:
    """Return the arities [0, max_arity) in ascending order.

    Raises:
        InvalidArity: If max_arity is negative
    """
    if max_arity < 0:
        logger.error(f"Invalid maximum arity: {max_arity}")
        raise InvalidArity(f"Maximum arity must be >= 0, got {max_arity}", max_arity)
    return range(0, max_arity)


def split_points(arity: int) -> list[SplitPoint]:
    """Return every split of an arity-parameter function.

    The bound count runs down from arity to 1 as the counter goes up, so the
    list is reversed to put the fewest pre-bound arguments first.
    """
    points = [SplitPoint(arity=arity, bound=arity - perm) for perm in range(arity)]
    points.reverse()
    return points


def partial_split_points(max_arity: int) -> list[SplitPoint]:
    """Return the split points of every arity below max_arity, in output order."""
    points: list[SplitPoint] = []
    for arity in arities(max_arity):
        points.extend(split_points(arity))
    logger.debug(f"Enumerated {len(points)} split points below arity {max_arity}")
    return points
