"""
Tokenizer (lexer) for the expression language.

Converts expression strings into a list of tokens for the converter in
three steps:

1. validate: reject characters outside the expression alphabet.
2. normalize: strip whitespace, fold sign runs and rewrite unary minus
   to the negation operator '~'.
3. classify: turn each sub-token into a typed Token.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .errors import InvalidExpression
from .limits import ExpressionLimits, check_expression_length
from .operators import NEGATE_SYMBOL, USER_OPERATOR_SYMBOLS, is_operator

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types produced by the tokenizer."""

    NUMBER = "NUMBER"
    IDENTIFIER = "IDENTIFIER"
    OPERATOR = "OPERATOR"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"


@dataclass(frozen=True)
class Token:
    """A token produced by the tokenizer."""

    type: TokenType
    value: str


_ALLOWED_CHARACTERS = re.compile(
    r"[A-Za-z0-9\s()" + re.escape("".join(USER_OPERATOR_SYMBOLS)) + r"]+",
    re.ASCII,
)
_WHITESPACE = re.compile(r"\s+", re.ASCII)
_NON_WORD = re.compile(r"[^A-Za-z0-9]")
_NUMBER = re.compile(r"[0-9]+")
_IDENTIFIER = re.compile(r"[a-zA-Z]+")

# Characters after which a sign is unary
_UNARY_CONTEXT = frozenset(USER_OPERATOR_SYMBOLS) | {"(", NEGATE_SYMBOL}


def validate(source: str, limits: Optional[ExpressionLimits] = None) -> None:
    """
    Checks that an expression only uses characters of the expression alphabet.

    Structure (balance, arity) is not checked here.

    Raises:
        LimitExceededError: If the expression is too long
        InvalidExpression: If the expression is empty or has illegal characters
    """
    check_expression_length(source, limits)
    if not _ALLOWED_CHARACTERS.fullmatch(source):
        raise InvalidExpression("Expression contains illegal characters")


def normalize(source: str) -> List[str]:
    """
    Rewrites a validated expression into a flat list of sub-tokens.

    Examples:
        "-(2 + --3)"  -> ["~", "(", "2", "+", "3", ")"]
        "x * +-y"     -> ["x", "*", "~", "y"]
    """
    text = _WHITESPACE.sub("", source)
    text = text.replace("--", "+")
    text = _remove_unary_plus(text)
    text = _mark_unary_minus(text)
    return _NON_WORD.sub(r" \g<0> ", text).split()


def _remove_unary_plus(text: str) -> str:
    kept = []
    for index, ch in enumerate(text):
        if ch == "+":
            previous = text[index - 1] if index > 0 else ""
            following = text[index + 1] if index + 1 < len(text) else ""
            if not previous or previous in _UNARY_CONTEXT or following == "-":
                continue
        kept.append(ch)
    return "".join(kept)


def _mark_unary_minus(text: str) -> str:
    marked = []
    for index, ch in enumerate(text):
        if ch == "-" and (index == 0 or text[index - 1] in _UNARY_CONTEXT):
            ch = NEGATE_SYMBOL
        marked.append(ch)
    return "".join(marked)


def classify(part: str) -> Token:
    """
    Classifies a normalized sub-token.

    Raises:
        InvalidExpression: If the sub-token is neither a number, an identifier,
            an operator nor a parenthesis (e.g. "a2")
    """
    if part == "(":
        return Token(TokenType.LPAREN, part)
    if part == ")":
        return Token(TokenType.RPAREN, part)
    if is_operator(part):
        return Token(TokenType.OPERATOR, part)
    if _NUMBER.fullmatch(part):
        return Token(TokenType.NUMBER, part)
    if _IDENTIFIER.fullmatch(part):
        return Token(TokenType.IDENTIFIER, part)
    raise InvalidExpression(f"Unexpected token: {part}")


class Tokenizer:
    """Tokenizer for expression strings."""

    def __init__(self, source: str, limits: Optional[ExpressionLimits] = None):
        self._source = source
        self._limits = limits

    def tokenize(self) -> List[Token]:
        """Validates, normalizes and classifies the source expression."""
        validate(self._source, self._limits)
        parts = normalize(self._source)
        logger.debug(
            "expression_normalized",
            extra={"source": self._source, "parts": parts},
        )
        return [classify(part) for part in parts]


def tokenize(source: str, limits: Optional[ExpressionLimits] = None) -> List[Token]:
    """
    Tokenizes an expression string into tokens.

    Args:
        source: The expression string to tokenize
        limits: Optional expression limits

    Returns:
        List of tokens in infix order

    Raises:
        InvalidExpression: If the expression contains invalid characters or tokens
    """
    tokenizer = Tokenizer(source, limits)
    return tokenizer.tokenize()
