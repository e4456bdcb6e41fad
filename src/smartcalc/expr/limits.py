"""
Resource limits for expression evaluation.

These limits protect against resource exhaustion from overly long
expressions and from exponentiations whose result cannot be computed
in practical time or memory.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import ExponentTooLarge, LimitExceededError


@dataclass(frozen=True)
class ExpressionLimits:
    """Expression limits configuration."""

    # Maximum expression string length in characters; None means unbounded
    max_expression_length: Optional[int] = None

    # Largest exponent accepted by '^'. The default keeps the exponent
    # strictly below the maximum of a signed 32-bit counter.
    max_exponent: int = 2**31 - 2


# Default expression limits.
DEFAULT_EXPRESSION_LIMITS = ExpressionLimits()


def check_expression_length(
    expression: str, limits: Optional[ExpressionLimits] = None
) -> None:
    """Validates that expression length is within limits."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if limits.max_expression_length is None:
        return
    if len(expression) > limits.max_expression_length:
        raise LimitExceededError(
            "max_expression_length", limits.max_expression_length, len(expression)
        )


def check_exponent(exponent: int, limits: Optional[ExpressionLimits] = None) -> None:
    """Validates that an exponent is small enough to be computed."""
    limits = limits or DEFAULT_EXPRESSION_LIMITS
    if exponent > limits.max_exponent:
        raise ExponentTooLarge()
