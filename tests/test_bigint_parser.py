#!/usr/bin/env python3
"""
Test: Big-integer text parsing and formatting

Test Cases:
1. Decimal and 0x/0X hex inputs parse to the right value
2. Whitespace and underscores are ignored anywhere in the input
3. Empty input (or input that is empty after cleaning) -> "value cannot be empty"
4. Invalid digits, signs, bare prefixes -> "failed to parse big integer"
5. Hex output is even-length uppercase and round-trips through the parser
6. Decimal output round-trips through the parser
7. Built-in hex literal decoding; a corrupt literal is a programming error
8. Decimal values beyond 4300 digits parse and render
9. Only Unicode White_Space is ignored, not the U+001C..U+001F separators

Usage:
    python3 tests/test_bigint_parser.py
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dhkeygen.common.utils import (
    ParseError,
    parse_biguint,
    parse_hex_literal,
    to_decimal,
    to_even_hex,
)
from dhkeygen.crypto.groups import MODP14

HEX_CHARS = set("0123456789ABCDEF")


@pytest.mark.parametrize("text, expected", [
    ("0", 0),
    ("11", 11),
    ("0x1A", 26),
    ("0X1a", 26),
    ("0xff", 255),
    ("000123", 123),
])
def test_parse_decimal_and_hex(text, expected):
    assert parse_biguint(text) == expected


def test_underscores_and_whitespace_ignored():
    assert parse_biguint("1_000") == parse_biguint("1000") == 1000
    assert parse_biguint(" 0x1A ") == 26
    assert parse_biguint("0x FF_FF\n00\t01") == 0xFFFF0001
    assert parse_biguint("1 2 3") == 123


def test_large_value():
    value = 2 ** 4096 - 1
    assert parse_biguint(str(value)) == value
    assert parse_biguint("0x" + "F" * 1024) == value


def test_decimal_beyond_str_digit_limit():
    repunit = (10 ** 5000 - 1) // 9
    assert parse_biguint("1" * 5000) == repunit
    assert to_decimal(10 ** 5000) == "1" + "0" * 5000
    assert parse_biguint(to_decimal(repunit)) == repunit


def test_unicode_whitespace_ignored():
    assert parse_biguint("1\u30000") == 10
    assert parse_biguint("1\xa00") == 10
    assert parse_biguint("0x1\u20290") == 16


@pytest.mark.parametrize("text", ["1\x1f0", "1\x1c0", "0x1\x1e0"])
def test_information_separators_are_not_whitespace(text):
    with pytest.raises(ParseError, match="failed to parse big integer"):
        parse_biguint(text)


@pytest.mark.parametrize("text", ["", "   ", "___", " _\t_ \n"])
def test_empty_input_rejected(text):
    with pytest.raises(ParseError, match="value cannot be empty"):
        parse_biguint(text)


@pytest.mark.parametrize("text", [
    "12a",      # hex digit without prefix
    "0xG1",     # not a hex digit
    "0x",       # prefix only
    "-5",       # no sign handling
    "+5",
    "0x0x10",   # doubled prefix
    "1.5",
    "١٢",  # non-ASCII digits
])
def test_invalid_digits_rejected(text):
    with pytest.raises(ParseError, match="failed to parse big integer"):
        parse_biguint(text)


@pytest.mark.parametrize("value, expected", [
    (0, "00"),
    (7, "07"),
    (255, "FF"),
    (256, "0100"),
    (0xABCDE, "0ABCDE"),
])
def test_even_hex(value, expected):
    assert to_even_hex(value) == expected


def test_hex_and_decimal_round_trip():
    for value in (2, 9, 4095, 2 ** 64 + 1, parse_hex_literal(MODP14.prime_hex) - 2):
        hex_text = to_even_hex(value)
        assert len(hex_text) % 2 == 0
        assert set(hex_text) <= HEX_CHARS
        assert parse_biguint("0x" + hex_text) == value
        assert parse_biguint(to_decimal(value)) == value


def test_decimal_is_plain_digits():
    assert to_decimal(1234567890123) == "1234567890123"


def test_hex_literal():
    prime = parse_hex_literal(MODP14.prime_hex)
    assert prime.bit_length() == 2048
    assert parse_hex_literal("ff ff\n") == 0xFFFF


def test_corrupt_hex_literal_is_programming_error():
    with pytest.raises(RuntimeError):
        parse_hex_literal("FFZZ")


def main():
    """Main test function."""
    print("=" * 80)
    print("BIG-INTEGER PARSER / FORMATTER TESTS")
    print("=" * 80)
    return pytest.main([__file__, "-q"]) == 0


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
