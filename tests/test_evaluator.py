import math

import pytest

from expressions.dsl import Evaluator, compile_line, CompilerError, Diagnostic


def evaluate(line):
    return Evaluator().eval(compile_line(line, 1))


@pytest.mark.parametrize("line, expected", [
    ("1", 1),
    ("2.5", 2.5),
    ("2 + 3", 5),
    ("1 + 1", 2),
    ("2 / 2", 1),
    ("1 + 2 * 3", 7),
    ("10 - 2 / 4", -8),
    ("3 - 10", 7),
    ("2 * 3 - 4", 2),
    ("1.5 * 2", 3.0),
])
def test_right_to_left_evaluation(line, expected):
    assert evaluate(line) == expected


def test_blank_line_is_none_not_zero():
    assert evaluate("   ") is None


def test_integer_literals_stay_integers():
    assert isinstance(evaluate("2 + 3"), int)


def test_diagnostic_evaluates_to_message():
    diagnostic = Diagnostic(CompilerError.MULTIPLE_EXPRESSIONS, "a single token", "1, 2", 4)
    assert Evaluator().eval(diagnostic) == (
        "[COMPILATION ERROR]: Multiple expressions on a single line => "
        "expected a single token, got '1, 2' on line 4"
    )


def test_evaluation_is_repeatable():
    result = compile_line("4 * 3 - 1", 1)
    evaluator = Evaluator()
    assert evaluator.eval(result) == evaluator.eval(result) == -8


class TestDivisionByZero:
    def test_positive_over_zero(self):
        assert evaluate("0 / 5") == math.inf

    def test_negative_over_zero(self):
        # (0 - 5) / 0
        assert evaluate("0 / 5 - 0") == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(evaluate("0 / 0"))


def test_rejects_non_parse_results():
    with pytest.raises(TypeError):
        Evaluator().eval("1 + 1")


class TestLargeNumbers:
    def test_huge_literal_saturates_to_infinity(self):
        result = compile_line("1" + "0" * 5000, 1)
        assert Evaluator().eval(result) == math.inf

    def test_division_by_huge_literal(self):
        # (1e400 / 2)
        assert evaluate("2 / 1" + "0" * 400) == math.inf

    def test_fraction_plus_huge_literal(self):
        assert evaluate("1.5 + 1" + "0" * 400) == math.inf

    def test_large_literal_within_float_range_is_float(self):
        value = evaluate("1" + "0" * 300)
        assert isinstance(value, float)
        assert value == 1e300

    def test_overflowing_product_saturates(self):
        assert evaluate(" * ".join(["1" + "0" * 200] * 3)) == math.inf

    def test_integral_division_of_integers_is_int(self):
        assert evaluate("2 / 8") == 4
        assert isinstance(evaluate("2 / 8"), int)

    def test_fractional_division_stays_float(self):
        assert evaluate("2 / 1") == 0.5
