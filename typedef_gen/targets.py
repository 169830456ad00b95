"""Syntax templates for the type systems declarations are generated for."""

from dataclasses import dataclass

PARTIAL_MEMBER_TEMPLATE = """\
(<{type_params}>(
  (...r: [{all_params}]) => {ret},
  args: [{bound_params}],
) => (({remaining_params}) => {ret}))"""

COMPLEMENT_DECLARATION_TEMPLATE = """
declare function complement<{type_params}>(
  f: {fn}
): {fn};"""

COMPLEMENT_TEST_TEMPLATE = """\
it('returns a function whose parameters match the input function ({index})', () => {{
  const fn = complement(({predicate_params}) => true)
  fn({call_args})
{negative_case}
}})
"""


class UnknownTarget(Exception):
    """No target is registered under the requested name."""

    def __init__(self, message: str, name: str):
        super().__init__(message)
        self.name = name


@dataclass(frozen=True)
class Target:
    """Syntax of one static type system.

    Templates are filled with ``str.format``. ``bound_template`` takes
    ``name`` and ``bound``; ``callable_param_template`` takes ``value`` (a
    lower-case identifier) and ``type``.
    """

    name: str
    display_name: str
    bound_template: str
    callable_param_template: str
    comment_prefix: str = "//"
    intersection_separator: str = " &\n"
    declaration_separator: str = "\n"
    test_separator: str = "\n"
    return_type_param: str = "R"
    predicate_type_param: str = "Fn"
    expect_error: str = "// $ExpectError"
    trailing_comma: bool = False  # after the last literal in test cases
    no_negative_case: str = (
        "// Extra arguments are discarded, so there is no negative case here."
    )
    partial_member_template: str = PARTIAL_MEMBER_TEMPLATE
    complement_declaration_template: str = COMPLEMENT_DECLARATION_TEMPLATE
    complement_test_template: str = COMPLEMENT_TEST_TEMPLATE

    def bound(self, name: str, bound: str) -> str:
        """Render a type parameter constrained by ``bound``."""
        return self.bound_template.format(name=name, bound=bound)

    def literal_list(self, items: list[str]) -> str:
        """Join literal arguments, adding the trailing comma if the target uses one."""
        joined = ", ".join(items)
        if items and self.trailing_comma:
            return joined + ","
        return joined

    def callable_params(self, names: list[str]) -> str:
        """Render the parameter list of a function type."""
        return ", ".join(
            self.callable_param_template.format(value=n.lower(), type=n)
            for n in names
        )


FLOW = Target(
    name="flow",
    display_name="Flow",
    bound_template="{name}: {bound}",
    callable_param_template="{type}",
    trailing_comma=True,
)

# TypeScript function types need parameter names and use `extends` bounds.
TYPESCRIPT = Target(
    name="typescript",
    display_name="TypeScript",
    bound_template="{name} extends {bound}",
    callable_param_template="{value}: {type}",
    expect_error="// @ts-expect-error",
)

TARGETS = {target.name: target for target in (FLOW, TYPESCRIPT)}


def get_target(name: str) -> Target:
    """Look up a target by name.

    Raises:
        UnknownTarget: If no target has that name
    """
    try:
        return TARGETS[name]
    except KeyError:
        raise UnknownTarget(
            f"Unknown target '{name}', expected one of: {', '.join(TARGETS)}", name
        ) from None
