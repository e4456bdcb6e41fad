"""
Tests for expression evaluation.
"""

from types import MappingProxyType

import pytest

from smartcalc.expr import (
    DivisionByZero,
    EvaluationContext,
    Evaluator,
    ExponentTooLarge,
    ExpressionLimits,
    InvalidExpression,
    NegativeExponent,
    Token,
    TokenType,
    UnknownVariable,
    evaluate,
    try_evaluate,
)


def number(value: str) -> Token:
    return Token(TokenType.NUMBER, value)


def operator(symbol: str) -> Token:
    return Token(TokenType.OPERATOR, symbol)


class TestArithmetic:
    """Tests for arithmetic evaluation."""

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("2 + 3 * 4", 14),
            ("(2 + 3) * 4", 20),
            ("8 - 2 - 3", 3),
            ("2 ^ 2 ^ 3", 256),
            ("(2 ^ 2) ^ 3", 64),
            ("100 / 10 / 5", 2),
            ("-2 ^ 2", -4),
            ("(-2) ^ 2", 4),
            ("2 * -3", -6),
            ("2 ^ 0", 1),
            ("0 ^ 0", 1),
            ("7", 7),
            ("(((7)))", 7),
            ("3 + 8 * ((4 + 3) * 2 + 1) - 6 / (2 + 1)", 121),
        ],
    )
    def test_evaluates(self, expression, expected):
        assert evaluate(expression) == expected

    @pytest.mark.parametrize(
        "expression, expected",
        [
            ("--5", 5),
            ("+-5", -5),
            ("-+5", -5),
            ("---5", -5),
            ("3 --- 2", 1),
            ("3 ++ 2", 5),
            ("-(-5)", 5),
            ("-(2 + 3)", -5),
            ("2 -+- 3", 5),
        ],
    )
    def test_sign_runs(self, expression, expected):
        assert evaluate(expression) == expected

    def test_division_truncates_toward_zero(self):
        for a in range(-12, 13):
            for b in range(-5, 6):
                if b == 0:
                    continue
                expected = abs(a) // abs(b)
                if (a < 0) != (b < 0):
                    expected = -expected
                assert evaluate("a / b", {"a": a, "b": b}) == expected

    def test_whitespace_inside_numbers_is_removed(self):
        assert evaluate("1 2 + 3") == 15


class TestBigIntegers:
    """Tests for arbitrary-precision values."""

    def test_literal_beyond_machine_word(self):
        assert evaluate("123456789012345678901234567890") == 123456789012345678901234567890

    def test_very_long_literal(self):
        literal = "9" * 5000
        assert evaluate(literal) == 10**5000 - 1

    def test_long_literal_in_expression(self):
        literal = "1" + "0" * 4200
        assert evaluate(literal) == 10**4200
        assert evaluate(f"{literal} - 1") == 10**4200 - 1

    def test_big_arithmetic(self):
        assert evaluate("2 ^ 100 - 2 ^ 100 + 1") == 1
        assert evaluate("2 ^ 64 * 2 ^ 64") == 2**128
        assert evaluate("-(10 ^ 30) / 7") == -(10**30 // 7)


class TestVariables:
    """Tests for variable lookup."""

    def test_known_variable(self):
        assert evaluate("x + 1", {"x": 5}) == 6

    def test_unknown_variable(self):
        with pytest.raises(UnknownVariable) as exc_info:
            evaluate("y + 1", {})
        assert exc_info.value.name == "y"
        assert exc_info.value.message == "Unknown variable"

    def test_variables_are_case_sensitive(self):
        with pytest.raises(UnknownVariable):
            evaluate("X", {"x": 1})

    def test_negated_variable(self):
        assert evaluate("-a * -b", {"a": 3, "b": 4}) == 12

    def test_read_only_environment(self):
        environment = MappingProxyType({"a": 2, "b": 10})
        assert evaluate("a ^ b", environment) == 1024

    def test_evaluation_is_idempotent(self):
        environment = {"a": 7, "b": -3}
        snapshot = dict(environment)
        first = evaluate("a * (b - 1) / 2", environment)
        second = evaluate("a * (b - 1) / 2", environment)
        assert first == second == -14
        assert environment == snapshot

    def test_failed_evaluation_leaves_environment_untouched(self):
        environment = {"a": 1}
        with pytest.raises(DivisionByZero):
            evaluate("a / (a - 1)", environment)
        assert environment == {"a": 1}


class TestErrors:
    """Tests for evaluation failures."""

    @pytest.mark.parametrize("expression", ["5 / 0", "0 / 0", "1 / (2 - 2)"])
    def test_division_by_zero(self, expression):
        with pytest.raises(DivisionByZero):
            evaluate(expression)

    @pytest.mark.parametrize("expression", ["2 ^ -1", "2 ^ (0 - 1)", "0 ^ -2"])
    def test_negative_exponent(self, expression):
        with pytest.raises(NegativeExponent):
            evaluate(expression)

    def test_exponent_too_large(self):
        with pytest.raises(ExponentTooLarge):
            evaluate("2 ^ 2147483647")

    def test_configured_exponent_limit(self):
        limits = ExpressionLimits(max_exponent=10)
        assert evaluate("2 ^ 10", limits=limits) == 1024
        with pytest.raises(ExponentTooLarge):
            evaluate("2 ^ 11", limits=limits)

    @pytest.mark.parametrize(
        "expression",
        ["(1 + 2", "1 + 2)", "1 +", "", "   ", "a2 + 1", "2 % 3", "4 5 )", "2 (3)"],
    )
    def test_invalid_expression(self, expression):
        with pytest.raises(InvalidExpression) as exc_info:
            evaluate(expression)
        assert exc_info.value.message == "Invalid expression"


class TestEvaluator:
    """Tests for postfix evaluation on hand-built sequences."""

    def test_evaluates_postfix(self):
        evaluator = Evaluator(EvaluationContext())
        postfix = [number("8"), number("2"), operator("-"), number("3"), operator("-")]
        assert evaluator.evaluate(postfix) == 3

    def test_second_popped_is_left_operand(self):
        evaluator = Evaluator(EvaluationContext())
        assert evaluator.evaluate([number("2"), number("3"), operator("^")]) == 8
        assert evaluator.evaluate([number("9"), number("3"), operator("/")]) == 3

    def test_empty_sequence(self):
        with pytest.raises(InvalidExpression):
            Evaluator(EvaluationContext()).evaluate([])

    def test_stack_underflow(self):
        with pytest.raises(InvalidExpression):
            Evaluator(EvaluationContext()).evaluate([number("1"), operator("+")])
        with pytest.raises(InvalidExpression):
            Evaluator(EvaluationContext()).evaluate([operator("~")])

    def test_leftover_values(self):
        with pytest.raises(InvalidExpression):
            Evaluator(EvaluationContext()).evaluate([number("1"), number("2")])

    def test_uses_context_environment(self):
        context = EvaluationContext(environment={"n": 41})
        tokens = [Token(TokenType.IDENTIFIER, "n"), number("1"), operator("+")]
        assert Evaluator(context).evaluate(tokens) == 42


class TestTryEvaluate:
    """Tests for the non-raising entry point."""

    def test_success(self):
        result = try_evaluate("6 * 7")
        assert result.success is True
        assert result.value == 42
        assert result.error is None

    def test_failure(self):
        result = try_evaluate("1 / 0")
        assert result.success is False
        assert result.value is None
        assert isinstance(result.error, DivisionByZero)
