"""Generate the overload intersection for partial application."""

import logging

from typedef_gen.enumeration import partial_split_points
from typedef_gen.models import CompoundDeclaration, Fragment, SplitPoint
from typedef_gen.naming import arg_list, arg_list_string
from typedef_gen.targets import FLOW, Target

logger = logging.getLogger(__name__)


def generate_partial_member(point: SplitPoint, target: Target = FLOW) -> str:
    """Generate one call signature of the intersection.

    Args:
        point: The arity and pre-bound argument count to describe
        target: Type system syntax to render

    Returns:
        The call signature as a string
    """
    ret = target.return_type_param
    type_params = ", ".join(arg_list(0, point.arity) + [ret])

    return target.partial_member_template.format(
        type_params=type_params,
        all_params=arg_list_string(0, point.arity),
        bound_params=arg_list_string(0, point.bound),
        remaining_params=target.callable_params(arg_list(point.bound, point.arity)),
        ret=ret,
    )


def generate_partial_declaration(
    max_arity: int, target: Target = FLOW
) -> CompoundDeclaration:
    """Generate the intersection of partial application signatures.

    Args:
        max_arity: Functions of up to max_arity - 1 parameters are covered
        target: Type system syntax to render

    Returns:
        CompoundDeclaration with one fragment per (arity, split) pair
    """
    fragments = [
        Fragment(
            arity=point.arity,
            bound=point.bound,
            text=generate_partial_member(point, target),
        )
        for point in partial_split_points(max_arity)
    ]
    logger.info(f"Generated {len(fragments)} partial signatures for {target.name}")

    return CompoundDeclaration(
        kind="partial",
        target=target.name,
        max_arity=max_arity,
        separator=target.intersection_separator,
        fragments=tuple(fragments),
    )
