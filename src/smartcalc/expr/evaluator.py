"""
Postfix evaluator.

Evaluates a postfix token sequence against a variable environment and
returns an arbitrary-precision integer.

The environment is only read. Callers write new bindings after an
evaluation succeeds, so a failed evaluation never changes it.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from .converter import convert
from .errors import ExpressionError, InvalidExpression, UnknownVariable
from .integers import parse_integer
from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits
from .operators import OperatorContext, get_operator
from .tokenizer import Token, TokenType, tokenize

logger = logging.getLogger(__name__)

Environment = Mapping[str, int]


@dataclass
class EvaluationContext:
    """Evaluation context with variable bindings."""

    environment: Environment = field(default_factory=dict)
    """Variable bindings available to expressions."""

    limits: Optional[ExpressionLimits] = None
    """Expression limits."""


@dataclass
class EvaluationResult:
    """Result of expression evaluation."""

    value: Optional[int]
    """The evaluated value."""

    success: bool
    """Whether evaluation succeeded."""

    error: Optional[ExpressionError] = None
    """The error if evaluation failed."""


class Evaluator:
    """Evaluates postfix token sequences."""

    def __init__(self, context: EvaluationContext):
        self._context = context
        self._limits = context.limits or DEFAULT_EXPRESSION_LIMITS
        self._operator_context = OperatorContext(self._limits)

    def evaluate(self, postfix: Sequence[Token]) -> int:
        """Evaluates a postfix token sequence and returns the value."""
        stack: List[int] = []

        for token in postfix:
            if token.type == TokenType.OPERATOR:
                operator = get_operator(token.value)
                arity = operator.arity.value
                if len(stack) < arity:
                    raise InvalidExpression(f"Missing operand for {token.value}")
                operands = stack[-arity:]
                del stack[-arity:]
                stack.append(operator.apply(operands, self._operator_context))

            elif token.type == TokenType.NUMBER:
                stack.append(parse_integer(token.value))

            elif token.type == TokenType.IDENTIFIER:
                stack.append(self._evaluate_identifier(token.value))

            else:
                raise InvalidExpression(f"Unexpected token in postfix: {token.value}")

        if len(stack) != 1:
            raise InvalidExpression(f"Expected one result, got {len(stack)}")
        return stack[0]

    def _evaluate_identifier(self, name: str) -> int:
        """Evaluates a variable reference."""
        environment = self._context.environment
        if name not in environment:
            raise UnknownVariable(name)
        return environment[name]


def evaluate(
    expression: str,
    environment: Optional[Environment] = None,
    limits: Optional[ExpressionLimits] = None,
) -> int:
    """
    Evaluates an expression string.

    Args:
        expression: The infix expression, e.g. "2 ^ (x - 1)"
        environment: Variable bindings, read only
        limits: Optional expression limits

    Returns:
        The value of the expression

    Raises:
        InvalidExpression: If the expression is malformed
        UnknownVariable: If a variable has no binding
        DivisionByZero: If a divisor is zero
        NegativeExponent: If an exponent is negative
        ExponentTooLarge: If an exponent exceeds the configured limit
    """
    tokens = tokenize(expression, limits)
    postfix = convert(tokens)
    context = EvaluationContext(
        environment=environment if environment is not None else {},
        limits=limits,
    )
    return Evaluator(context).evaluate(postfix)


def try_evaluate(
    expression: str,
    environment: Optional[Environment] = None,
    limits: Optional[ExpressionLimits] = None,
) -> EvaluationResult:
    """
    Evaluates an expression string without raising.

    Returns:
        The evaluation result with value and success status
    """
    try:
        value = evaluate(expression, environment, limits)
        return EvaluationResult(value=value, success=True)
    except ExpressionError as error:
        logger.debug(
            "expression_rejected",
            extra={"expression": expression, "error": type(error).__name__},
        )
        return EvaluationResult(value=None, success=False, error=error)
