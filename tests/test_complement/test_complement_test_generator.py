"""Tests for the complement test case generator."""

from typedef_gen.complement import generate_complement_test, generate_complement_tests
from typedef_gen.targets import TYPESCRIPT


class TestGenerateComplementTest:
    """Tests for generate_complement_test function."""

    def test_arity_zero_explains_missing_negative_case(self):
        """A nullary predicate gets the discard comment instead of an error."""
        code = generate_complement_test(0, 0)

        assert "const fn = complement(() => true)" in code
        assert "  fn()\n" in code
        assert "Extra arguments are discarded" in code
        assert "$ExpectError" not in code

    def test_arity_two(self):
        """Two literal parameters and a numeric negative case."""
        code = generate_complement_test(2, 2)

        assert code == (
            "it('returns a function whose parameters match the input function (2)', () => {\n"
            "  const fn = complement((a: 'a', b: 'b',) => true)\n"
            "  fn('a', 'b',)\n"
            "  // $ExpectError\n"
            "  fn(0, 1)\n"
            "})\n"
        )

    def test_negative_case_has_arity_arguments(self):
        code = generate_complement_test(4, 4)

        assert "  fn(0, 1, 2, 3)" in code

    def test_typescript_expects_error_with_ts_annotation(self):
        """TypeScript marks the badly typed call with @ts-expect-error."""
        code = generate_complement_test(1, 1, TYPESCRIPT)

        assert "  // @ts-expect-error\n  fn(0)" in code
        assert "$ExpectError" not in code

    def test_typescript_has_no_trailing_comma(self):
        code = generate_complement_test(2, 2, TYPESCRIPT)

        assert "complement((a: 'a', b: 'b') => true)" in code
        assert "  fn('a', 'b')\n" in code


class TestGenerateComplementTests:
    """Tests for generate_complement_tests function."""

    def test_one_block_per_arity(self):
        declaration = generate_complement_tests(11)
        text = declaration.to_text()

        assert len(declaration.fragments) == 11
        assert text.count("it('returns a function") == 11
        assert text.count("// $ExpectError") == 10

    def test_names_tests_by_index(self):
        text = generate_complement_tests(3).to_text()

        assert "input function (0)" in text
        assert "input function (2)" in text
        assert "input function (3)" not in text

    def test_is_deterministic(self):
        assert (
            generate_complement_tests(11).to_text()
            == generate_complement_tests(11).to_text()
        )
