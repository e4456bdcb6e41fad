"""
Calculator session.

A session owns the variable environment and turns input lines into output
text. Each line is one of:

- a command: "/exit" or "/help"
- an assignment: "name = expression"
- an expression, whose value is printed

Variables are written only after the right-hand side of an assignment has
evaluated successfully, so failed lines never change the environment.
"""

import logging
import re
from typing import Dict, Optional

from smartcalc.expr import (
    DEFAULT_EXPRESSION_LIMITS,
    CalculatorError,
    ExpressionError,
    ExpressionLimits,
    InvalidAssignment,
    InvalidIdentifier,
    UnknownCommand,
    UnknownVariable,
    evaluate,
    format_integer,
)

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "This program is a smart calculator.\n"
    "You can use big integers, +, -, *, /, ^, parentheses and variables."
)
EXIT_TEXT = "Bye!"

_IDENTIFIER = re.compile(r"[a-zA-Z]+")
_ASSIGNMENT_SPLIT = re.compile(r"\s*=\s*")


class Session:
    """Interactive calculator session with its own variables."""

    def __init__(self, limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS):
        self.limits = limits
        self.variables: Dict[str, int] = {}
        self.running = True

    def handle(self, line: str) -> Optional[str]:
        """Executes a line and returns the text to print, including errors."""
        try:
            return self.execute(line)
        except CalculatorError as error:
            logger.debug(
                "line_rejected",
                extra={"line": line, "error": type(error).__name__},
            )
            return error.message

    def execute(self, line: str) -> Optional[str]:
        """
        Executes a line.

        Returns:
            The text to print, or None if there is nothing to print

        Raises:
            CalculatorError: If the line is an invalid command, assignment
                or expression
        """
        if not line.strip():
            return None
        if line.startswith("/"):
            return self._execute_command(line)
        if "=" in line:
            self._execute_assignment(line)
            return None
        return format_integer(evaluate(line, self.variables, self.limits))

    def _execute_command(self, command: str) -> str:
        if command == "/exit":
            self.running = False
            return EXIT_TEXT
        if command == "/help":
            return HELP_TEXT
        raise UnknownCommand()

    def _execute_assignment(self, assignment: str) -> None:
        name, expression = _ASSIGNMENT_SPLIT.split(assignment.strip(), maxsplit=1)
        if not _IDENTIFIER.fullmatch(name):
            raise InvalidIdentifier()

        try:
            value = evaluate(expression, self.variables, self.limits)
        except UnknownVariable:
            raise
        except ExpressionError as error:
            raise InvalidAssignment() from error

        self.variables[name] = value
        logger.debug("variable_assigned", extra={"variable": name})
