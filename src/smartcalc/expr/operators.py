"""
Operator table for the expression language.

The operator set is closed: each symbol maps to one immutable descriptor
carrying its precedence, associativity, arity and semantics. The table is
consulted by the tokenizer (character set), the converter (precedence and
arity) and the evaluator (semantics).

Precedence (lowest to highest):
0. Additive: -, +
1. Multiplicative: *, /
2. Power and negation: ^, ~ (both right-associative)

The symbol '~' is the unary negation operator. Users never type it; the
normalizer rewrites every unary '-' to '~'.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Sequence, Tuple

from .errors import DivisionByZero, InvalidExpression, NegativeExponent
from .limits import DEFAULT_EXPRESSION_LIMITS, ExpressionLimits, check_exponent


class Associativity(Enum):
    """Operator associativity."""

    LEFT = "left"
    RIGHT = "right"


class Arity(Enum):
    """Number of operands taken by an operator."""

    UNARY = 1
    BINARY = 2


class OperatorContext:
    """Context passed to operator functions."""

    def __init__(self, limits: ExpressionLimits = DEFAULT_EXPRESSION_LIMITS):
        self.limits = limits


# Signature of an operator function.
OperatorFunction = Callable[[Sequence[int], OperatorContext], int]


@dataclass(frozen=True)
class OperatorDescriptor:
    """Immutable metadata and semantics of one operator."""

    symbol: str
    precedence: int
    associativity: Associativity
    arity: Arity
    function: OperatorFunction

    @property
    def is_unary(self) -> bool:
        return self.arity is Arity.UNARY

    @property
    def is_right_associative(self) -> bool:
        return self.associativity is Associativity.RIGHT

    def apply(self, operands: Sequence[int], context: OperatorContext) -> int:
        """Applies the operator to its operands, left operand first."""
        if len(operands) != self.arity.value:
            raise InvalidExpression(
                f"Operator '{self.symbol}' expects {self.arity.value} operand(s), "
                f"got {len(operands)}"
            )
        return self.function(operands, context)


# ============================================================
# Operator Functions
# ============================================================


def _subtract(operands: Sequence[int], _context: OperatorContext) -> int:
    left, right = operands
    return left - right


def _add(operands: Sequence[int], _context: OperatorContext) -> int:
    left, right = operands
    return left + right


def _multiply(operands: Sequence[int], _context: OperatorContext) -> int:
    left, right = operands
    return left * right


def _divide(operands: Sequence[int], _context: OperatorContext) -> int:
    """Integer division truncating toward zero."""
    left, right = operands
    if right == 0:
        raise DivisionByZero()
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def _power(operands: Sequence[int], context: OperatorContext) -> int:
    base, exponent = operands
    if exponent < 0:
        raise NegativeExponent()
    check_exponent(exponent, context.limits)
    return base**exponent


def _negate(operands: Sequence[int], _context: OperatorContext) -> int:
    (value,) = operands
    return -value


# ============================================================
# Operator Table
# ============================================================

NEGATE_SYMBOL = "~"

_OPERATOR_LIST: Tuple[OperatorDescriptor, ...] = (
    OperatorDescriptor("-", 0, Associativity.LEFT, Arity.BINARY, _subtract),
    OperatorDescriptor("+", 0, Associativity.LEFT, Arity.BINARY, _add),
    OperatorDescriptor("*", 1, Associativity.LEFT, Arity.BINARY, _multiply),
    OperatorDescriptor("/", 1, Associativity.LEFT, Arity.BINARY, _divide),
    OperatorDescriptor("^", 2, Associativity.RIGHT, Arity.BINARY, _power),
    OperatorDescriptor(NEGATE_SYMBOL, 2, Associativity.RIGHT, Arity.UNARY, _negate),
)

OPERATORS: Mapping[str, OperatorDescriptor] = MappingProxyType(
    {op.symbol: op for op in _OPERATOR_LIST}
)

# All recognized operator symbols, in table order
OPERATOR_SYMBOLS: Tuple[str, ...] = tuple(op.symbol for op in _OPERATOR_LIST)

# Operator symbols a user may type
USER_OPERATOR_SYMBOLS: Tuple[str, ...] = tuple(
    symbol for symbol in OPERATOR_SYMBOLS if symbol != NEGATE_SYMBOL
)


def is_operator(symbol: str) -> bool:
    """Checks if a symbol is a recognized operator."""
    return symbol in OPERATORS


def get_operator(symbol: str) -> OperatorDescriptor:
    """
    Looks up an operator descriptor by symbol.

    Raises:
        InvalidExpression: If the symbol is not an operator
    """
    descriptor = OPERATORS.get(symbol)
    if descriptor is None:
        raise InvalidExpression(f"Unknown operator: {symbol}")
    return descriptor
