"""
Tests for decimal conversions of arbitrary-precision integers.
"""

import pytest

from smartcalc.expr import format_integer, parse_integer


class TestParseInteger:
    def test_small_values(self):
        assert parse_integer("0") == 0
        assert parse_integer("42") == 42
        assert parse_integer("007") == 7

    def test_longer_than_conversion_limit(self):
        digits = "1" + "0" * 4999
        assert parse_integer(digits) == 10**4999

    @pytest.mark.parametrize("text", ["", "-1", "+1", "1a", " 1", "1.0"])
    def test_rejects_non_digits(self, text):
        with pytest.raises(ValueError):
            parse_integer(text)


class TestFormatInteger:
    def test_small_values(self):
        assert format_integer(0) == "0"
        assert format_integer(42) == "42"
        assert format_integer(-42) == "-42"

    def test_chunk_boundaries(self):
        assert format_integer(10**1000) == "1" + "0" * 1000
        assert format_integer(10**1000 - 1) == "9" * 1000
        assert format_integer(-(10**2001 + 7)) == "-1" + "0" * 1997 + "0007"

    def test_long_literal_survives_parse_and_format(self):
        digits = "123456789" * 700
        assert format_integer(parse_integer(digits)) == digits
