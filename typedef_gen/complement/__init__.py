"""Type declarations and type tests for predicate complement."""

from typedef_gen.complement.declaration_generator import (
    generate_complement_declaration,
    generate_complement_declarations,
)
from typedef_gen.complement.test_generator import (
    generate_complement_test,
    generate_complement_tests,
)

__all__ = [
    # Declarations
    "generate_complement_declaration",
    "generate_complement_declarations",
    # Tests
    "generate_complement_test",
    "generate_complement_tests",
]
