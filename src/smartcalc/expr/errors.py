"""
Error types for the calculator.

All calculator errors extend CalculatorError and carry a single-line message
that is shown to the user verbatim. Errors raised by the expression engine
itself extend ExpressionError.
"""

from typing import Optional


class CalculatorError(Exception):
    """
    Base error class for all calculator errors.
    """

    default_message = "Calculator error"

    def __init__(self, message: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message


class ExpressionError(CalculatorError):
    """
    Base error class for errors raised while evaluating an expression.
    """

    default_message = "Invalid expression"


class InvalidExpression(ExpressionError):
    """
    Error thrown when the expression is malformed: illegal characters,
    unbalanced parentheses, missing operands or misplaced operators.

    The user-facing message is always generic; the structural rule that
    failed is kept in `reason` for logging.
    """

    default_message = "Invalid expression"

    def __init__(self, reason: Optional[str] = None):
        super().__init__()
        self.reason = reason


class LimitExceededError(InvalidExpression):
    """
    Error thrown when expression limits are exceeded.
    """

    def __init__(self, limit_name: str, limit: int, actual: int):
        message = f"Limit exceeded: {limit_name} (limit: {limit}, actual: {actual})"
        CalculatorError.__init__(self, message)
        self.reason = message
        self.limit_name = limit_name
        self.limit = limit
        self.actual = actual


class UnknownVariable(ExpressionError):
    """
    Error thrown when an identifier has no binding in the environment.
    """

    default_message = "Unknown variable"

    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(message)
        self.name = name


class DivisionByZero(ExpressionError):
    default_message = "Division by zero"


class NegativeExponent(ExpressionError):
    default_message = "Negative exponent"


class ExponentTooLarge(ExpressionError):
    default_message = "Exponent is too big"


class InvalidIdentifier(CalculatorError):
    """
    Error thrown when the left-hand side of an assignment is not a valid
    variable name.
    """

    default_message = "Invalid identifier"


class InvalidAssignment(CalculatorError):
    """
    Error thrown when the right-hand side of an assignment fails to evaluate.
    """

    default_message = "Invalid assignment"


class UnknownCommand(CalculatorError):
    default_message = "Unknown command"
