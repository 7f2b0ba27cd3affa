"""Big-integer text helpers: parse_biguint, parse_hex_literal, to_even_hex, to_decimal."""

import string
import sys
from typing import List

from .models import KeyPair, OutputFormat


DEC_DIGITS = frozenset(string.digits)
HEX_DIGITS = frozenset(string.hexdigits)

# Unicode White_Space; str.isspace() also matches the \x1c-\x1f separators
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Python 3.11+ caps decimal int<->str conversion at 4300 digits
if hasattr(sys, "set_int_max_str_digits"):
    sys.set_int_max_str_digits(0)


class ParseError(Exception):
    """Raised when numeric text cannot be parsed."""
    pass


def _clean(text: str, drop: str = "") -> str:
    return "".join(ch for ch in text if ch not in WHITESPACE and ch not in drop)


def parse_biguint(text: str) -> int:
    """
    Parse a non-negative integer from decimal or 0x-prefixed hex text.

    Whitespace and underscores are ignored anywhere in the input, so
    grouped literals such as "1_000" or "FFFF FFFF" are accepted.

    Args:
        text: decimal digits, or hex digits after a 0x/0X prefix

    Returns:
        parsed integer

    Raises:
        ParseError if the value is empty or has an invalid digit
    """
    cleaned = _clean(text, "_")
    if not cleaned:
        raise ParseError("value cannot be empty")

    if cleaned[:2] in ("0x", "0X"):
        digits, allowed, base = cleaned[2:], HEX_DIGITS, 16
    else:
        digits, allowed, base = cleaned, DEC_DIGITS, 10

    # int() also accepts signs, prefixes and non-ASCII digits
    if not digits or not set(digits) <= allowed:
        raise ParseError("failed to parse big integer")
    return int(digits, base)


def parse_hex_literal(text: str) -> int:
    """Decode a built-in hex constant. A failure here is a programming error."""
    try:
        return int(_clean(text), 16)
    except ValueError as e:
        raise RuntimeError(f"invalid built-in hex literal: {e}") from e


def to_even_hex(value: int) -> str:
    """Uppercase hex without prefix, zero-padded to an even number of digits."""
    digits = format(value, "X")
    if len(digits) % 2:
        digits = "0" + digits
    return digits


def to_decimal(value: int) -> str:
    """Plain base-10 digits."""
    return str(value)


def render_report(keypair: KeyPair, output_format: OutputFormat) -> List[str]:
    """
    Render a generated key pair as key=value output lines.

    Args:
        keypair: KeyPair model
        output_format: OutputFormat selecting the private key encoding

    Returns:
        list of lines, without trailing newlines
    """
    params = keypair.parameters
    lines = [
        f"prime_bits={params.prime_bits}",
        f"generator={to_decimal(params.generator)}",
    ]
    if output_format in (OutputFormat.HEX, OutputFormat.BOTH):
        lines.append(f"private_key_hex={to_even_hex(keypair.private_key)}")
    if output_format in (OutputFormat.DECIMAL, OutputFormat.BOTH):
        lines.append(f"private_key_dec={to_decimal(keypair.private_key)}")
    lines.append(f"public_key_hex={to_even_hex(keypair.public_key)}")
    return lines
