"""Common models and big-integer text helpers."""

from .utils import (
    parse_biguint,
    parse_hex_literal,
    to_even_hex,
    to_decimal,
    render_report,
    ParseError,
)
from .models import (
    OutputFormat,
    NamedGroup,
    DHParameters,
    KeyPair,
)

__all__ = [
    "parse_biguint",
    "parse_hex_literal",
    "to_even_hex",
    "to_decimal",
    "render_report",
    "ParseError",
    "OutputFormat",
    "NamedGroup",
    "DHParameters",
    "KeyPair",
]
