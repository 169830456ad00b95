"""Generate one `complement` declaration per arity."""

import logging

from typedef_gen.enumeration import arities
from typedef_gen.models import CompoundDeclaration, Fragment
from typedef_gen.naming import arg_list
from typedef_gen.targets import FLOW, Target

logger = logging.getLogger(__name__)


def generate_complement_declaration(arity: int, target: Target = FLOW) -> str:
    """Generate the declaration of `complement` for one arity.

    The predicate type parameter is bounded by a function of the letter
    parameters returning boolean, and the declaration returns it unchanged.

    Args:
        arity: Number of parameters the predicate takes
        target: Type system syntax to render

    Returns:
        The declaration as a string
    """
    names = arg_list(0, arity)
    fn = target.predicate_type_param
    predicate = f"({target.callable_params(names)}) => boolean"

    # Zero args means no comma before the predicate parameter.
    type_params = ", ".join(names + [target.bound(fn, predicate)])

    return target.complement_declaration_template.format(
        type_params=type_params, fn=fn
    )


def generate_complement_declarations(
    max_arity: int, target: Target = FLOW
) -> CompoundDeclaration:
    """Generate `complement` declarations for arities [0, max_arity).

    Args:
        max_arity: One past the largest arity to declare
        target: Type system syntax to render

    Returns:
        CompoundDeclaration with one fragment per arity
    """
    fragments = [
        Fragment(arity=a, text=generate_complement_declaration(a, target))
        for a in arities(max_arity)
    ]
    logger.info(f"Generated {len(fragments)} complement declarations")

    return CompoundDeclaration(
        kind="complement",
        target=target.name,
        max_arity=max_arity,
        separator=target.declaration_separator,
        fragments=tuple(fragments),
    )
