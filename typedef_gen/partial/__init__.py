"""Type declarations for curried partial application."""

from typedef_gen.partial.generator import (
    generate_partial_declaration,
    generate_partial_member,
)

__all__ = [
    "generate_partial_member",
    "generate_partial_declaration",
]
