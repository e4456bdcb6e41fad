"""
Conversions between decimal strings and arbitrary-precision integers.

Recent interpreters refuse int/str conversions beyond a fixed number of
digits. Literals and results here may be of any length, so conversions go
through fixed-size chunks that always stay below that limit.
"""

_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def parse_integer(digits: str) -> int:
    """Parses a string of decimal digits of any length."""
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"Not a decimal integer literal: {digits[:32]!r}")

    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_integer(value: int) -> str:
    """Formats an integer of any size as a decimal string."""
    if value < 0:
        return "-" + format_integer(-value)

    chunks = []
    while value >= _CHUNK_BASE:
        value, remainder = divmod(value, _CHUNK_BASE)
        chunks.append(str(remainder).zfill(_CHUNK_DIGITS))
    chunks.append(str(value))
    return "".join(reversed(chunks))
