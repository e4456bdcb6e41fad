"""
Integer expression engine.

This module provides a deterministic, side-effect-free evaluation engine
for arithmetic expressions over arbitrary-precision integers:
tokenize -> convert to postfix -> evaluate.
"""

# Converter
from .converter import (
    ConversionResult,
    Converter,
    convert,
    to_postfix,
)
from .errors import (
    CalculatorError,
    DivisionByZero,
    ExponentTooLarge,
    ExpressionError,
    InvalidAssignment,
    InvalidExpression,
    InvalidIdentifier,
    LimitExceededError,
    NegativeExponent,
    UnknownCommand,
    UnknownVariable,
)

# Evaluator
from .evaluator import (
    Environment,
    EvaluationContext,
    EvaluationResult,
    Evaluator,
    evaluate,
    try_evaluate,
)
from .integers import format_integer, parse_integer
from .limits import (
    DEFAULT_EXPRESSION_LIMITS,
    ExpressionLimits,
    check_exponent,
    check_expression_length,
)

# Operators
from .operators import (
    NEGATE_SYMBOL,
    OPERATOR_SYMBOLS,
    OPERATORS,
    USER_OPERATOR_SYMBOLS,
    Arity,
    Associativity,
    OperatorContext,
    OperatorDescriptor,
    get_operator,
    is_operator,
)

# Tokenizer
from .tokenizer import (
    Token,
    Tokenizer,
    TokenType,
    classify,
    normalize,
    tokenize,
    validate,
)

__all__ = [
    # Errors
    "CalculatorError",
    "ExpressionError",
    "InvalidExpression",
    "LimitExceededError",
    "UnknownVariable",
    "DivisionByZero",
    "NegativeExponent",
    "ExponentTooLarge",
    "InvalidIdentifier",
    "InvalidAssignment",
    "UnknownCommand",
    # Limits
    "ExpressionLimits",
    "DEFAULT_EXPRESSION_LIMITS",
    "check_expression_length",
    "check_exponent",
    # Integers
    "parse_integer",
    "format_integer",
    # Operators
    "Arity",
    "Associativity",
    "OperatorContext",
    "OperatorDescriptor",
    "OPERATORS",
    "OPERATOR_SYMBOLS",
    "USER_OPERATOR_SYMBOLS",
    "NEGATE_SYMBOL",
    "get_operator",
    "is_operator",
    # Tokenizer
    "Token",
    "TokenType",
    "Tokenizer",
    "validate",
    "normalize",
    "classify",
    "tokenize",
    # Converter
    "ConversionResult",
    "Converter",
    "to_postfix",
    "convert",
    # Evaluator
    "Environment",
    "EvaluationContext",
    "EvaluationResult",
    "Evaluator",
    "evaluate",
    "try_evaluate",
]
