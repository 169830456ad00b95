"""Tests for target syntax configuration."""

import pytest

from typedef_gen.targets import FLOW, TYPESCRIPT, UnknownTarget, get_target


class TestTarget:
    def test_flow_bound(self):
        assert FLOW.bound("Fn", "() => boolean") == "Fn: () => boolean"

    def test_typescript_bound(self):
        assert TYPESCRIPT.bound("Fn", "() => boolean") == "Fn extends () => boolean"

    def test_flow_callable_params_are_bare_types(self):
        assert FLOW.callable_params(["A", "B"]) == "A, B"

    def test_typescript_callable_params_are_named(self):
        assert TYPESCRIPT.callable_params(["A", "B"]) == "a: A, b: B"

    def test_empty_callable_params(self):
        assert TYPESCRIPT.callable_params([]) == ""

    def test_flow_literal_list_has_trailing_comma(self):
        assert FLOW.literal_list(["'a'", "'b'"]) == "'a', 'b',"

    def test_typescript_literal_list_has_no_trailing_comma(self):
        assert TYPESCRIPT.literal_list(["'a'", "'b'"]) == "'a', 'b'"

    def test_empty_literal_list_has_no_comma(self):
        assert FLOW.literal_list([]) == ""

    def test_expected_error_annotations(self):
        assert FLOW.expect_error == "// $ExpectError"
        assert TYPESCRIPT.expect_error == "// @ts-expect-error"


class TestGetTarget:
    def test_finds_registered_targets(self):
        assert get_target("flow") is FLOW
        assert get_target("typescript") is TYPESCRIPT

    def test_rejects_unknown(self):
        with pytest.raises(UnknownTarget) as exc_info:
            get_target("haskell")

        assert exc_info.value.name == "haskell"
        assert "flow" in str(exc_info.value)
