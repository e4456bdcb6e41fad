"""
Infix to postfix converter.

Reorders an infix token list into postfix (Reverse Polish) order using the
shunting-yard algorithm. Operator precedence, associativity and arity come
from the operator table.

Structural rules checked while converting:
- '(' and values may not follow a complete operand.
- ')' must follow a complete operand and close an open '('.
- Binary operators need a left operand, unary operators must not have one.
- The expression must end with a complete operand and leave no '(' open.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .errors import InvalidExpression
from .operators import get_operator
from .tokenizer import Token, TokenType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Result of infix to postfix conversion."""

    tokens: Tuple[Token, ...]
    """Postfix tokens. Empty when conversion failed."""

    success: bool
    """Whether the infix expression was well formed."""

    error: Optional[str] = None
    """Rule that was violated if conversion failed."""


class Converter:
    """Converts an infix token list to postfix order."""

    def __init__(self, tokens: Sequence[Token]):
        self._tokens = tokens
        self._stack: List[Token] = []
        self._output: List[Token] = []
        self._has_left_operand = False

    def convert(self) -> Tuple[Token, ...]:
        """
        Runs the conversion.

        Raises:
            InvalidExpression: If the infix expression is malformed
        """
        for token in self._tokens:
            self._convert_token(token)
            self._has_left_operand = token.type in (
                TokenType.NUMBER,
                TokenType.IDENTIFIER,
                TokenType.RPAREN,
            )

        if not self._has_left_operand:
            raise InvalidExpression("Expression does not end with an operand")

        while self._stack:
            token = self._stack.pop()
            if token.type == TokenType.LPAREN:
                raise InvalidExpression("Unbalanced '('")
            self._output.append(token)

        return tuple(self._output)

    def _convert_token(self, token: Token) -> None:
        if token.type == TokenType.LPAREN:
            self._require(not self._has_left_operand, "Unexpected '('")
            self._stack.append(token)

        elif token.type == TokenType.RPAREN:
            self._require(self._has_left_operand, "Unexpected ')'")
            while self._stack and self._stack[-1].type != TokenType.LPAREN:
                self._output.append(self._stack.pop())
            self._require(bool(self._stack), "Unbalanced ')'")
            self._stack.pop()

        elif token.type == TokenType.OPERATOR:
            self._convert_operator(token)

        else:
            self._require(not self._has_left_operand, f"Unexpected value: {token.value}")
            self._output.append(token)

    def _convert_operator(self, token: Token) -> None:
        current = get_operator(token.value)
        # Unary operators take no left operand, binary operators need one
        self._require(
            current.is_unary != self._has_left_operand,
            f"Misplaced operator: {token.value}",
        )

        while self._stack and self._stack[-1].type == TokenType.OPERATOR:
            top = get_operator(self._stack[-1].value)
            if top.precedence < current.precedence:
                break
            if top.precedence == current.precedence and current.is_right_associative:
                break
            self._output.append(self._stack.pop())

        self._stack.append(token)

    @staticmethod
    def _require(condition: bool, reason: str) -> None:
        if not condition:
            raise InvalidExpression(reason)


def to_postfix(tokens: Sequence[Token]) -> ConversionResult:
    """
    Converts infix tokens to postfix order.

    Args:
        tokens: Infix tokens produced by the tokenizer

    Returns:
        The conversion result. On failure no partial output is kept.
    """
    try:
        postfix = Converter(tokens).convert()
    except InvalidExpression as error:
        logger.debug("conversion_failed", extra={"reason": error.reason})
        return ConversionResult(tokens=(), success=False, error=error.reason)

    logger.debug(
        "conversion_succeeded",
        extra={"postfix": [token.value for token in postfix]},
    )
    return ConversionResult(tokens=postfix, success=True)


def convert(tokens: Sequence[Token]) -> Tuple[Token, ...]:
    """
    Converts infix tokens to postfix order.

    Raises:
        InvalidExpression: If the infix expression is malformed
    """
    result = to_postfix(tokens)
    if not result.success:
        raise InvalidExpression(result.error)
    return result.tokens
