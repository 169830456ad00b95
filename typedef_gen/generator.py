"""Dispatch a generator run by kind."""

import logging

from typedef_gen.complement import (
    generate_complement_declarations,
    generate_complement_tests,
)
from typedef_gen.models import CompoundDeclaration, GeneratorConfig
from typedef_gen.partial import generate_partial_declaration

logger = logging.getLogger(__name__)

GENERATORS = {
    "partial": generate_partial_declaration,
    "complement": generate_complement_declarations,
    "complement-tests": generate_complement_tests,
}

DEFAULT_MAX_ARITY = {
    "partial": 10,
    "complement": 11,
    "complement-tests": 11,
}


def generate(kind: str, config: GeneratorConfig) -> CompoundDeclaration:
    """Run the generator for kind with the given settings.

    Args:
        kind: One of the GENERATORS keys
        config: Maximum arity and target syntax

    Returns:
        The complete CompoundDeclaration

    Raises:
        ValueError: If kind is not a known generator
    """
    if kind not in GENERATORS:
        raise ValueError(f"Unknown generator: {kind}")

    logger.info(
        f"Generating {kind} for {config.target.name} up to arity {config.max_arity}"
    )
    return GENERATORS[kind](config.max_arity, config.target)
