"""Pydantic models for DH groups, resolved parameters and generated key pairs."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class OutputFormat(str, Enum):
    """Encoding used for the private key on stdout."""
    HEX = "hex"
    DECIMAL = "decimal"
    BOTH = "both"


class NamedGroup(BaseModel):
    """Standardized (prime, generator) pair, stored as text literals."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    prime_hex: str  # hex digits, whitespace allowed, no 0x prefix
    generator: str  # decimal literal


class DHParameters(BaseModel):
    """Validated modulus and generator."""
    model_config = ConfigDict(frozen=True)

    prime: int
    generator: int
    group: Optional[str] = None  # None for a user-supplied prime

    @property
    def prime_bits(self) -> int:
        return self.prime.bit_length()


class KeyPair(BaseModel):
    """Private exponent x and public value g^x mod p."""
    model_config = ConfigDict(frozen=True)

    parameters: DHParameters
    private_key: int = Field(repr=False)
    public_key: int
