"""DH parameter resolution: named group or custom text, then range checks."""

import logging
from typing import Optional, Union

from dhkeygen.common.models import DHParameters, NamedGroup
from dhkeygen.common.utils import parse_biguint, parse_hex_literal
from .groups import GROUPS

logger = logging.getLogger(__name__)


class InvalidParameter(Exception):
    """Raised when a modulus or generator violates a domain constraint."""
    pass


def get_group(name: str) -> NamedGroup:
    """Look up a built-in group by identifier."""
    try:
        return GROUPS[name]
    except KeyError:
        raise InvalidParameter(f"unknown group: {name}")


def resolve_parameters(
    group: Union[str, NamedGroup],
    prime_text: Optional[str] = None,
    generator_text: Optional[str] = None,
) -> DHParameters:
    """
    Select and validate the prime modulus and generator.

    A user-supplied prime replaces the group's prime; the group still
    provides the default generator. The prime is never tested for
    primality: custom parameters are trusted to form a valid DH group.

    Args:
        group: group identifier or NamedGroup
        prime_text: optional decimal or 0x-hex modulus
        generator_text: optional decimal or 0x-hex generator

    Returns:
        validated DHParameters

    Raises:
        ParseError if prime_text or generator_text is malformed
        InvalidParameter if a value is out of range or the group is unknown
    """
    if isinstance(group, str):
        group = get_group(group)

    if prime_text is not None:
        prime = parse_biguint(prime_text)
        source = None
    else:
        prime = parse_hex_literal(group.prime_hex)
        source = group.name

    if prime <= 3:
        raise InvalidParameter("prime modulus must be greater than 3")
    if prime % 2 == 0:
        raise InvalidParameter("prime modulus must be odd")

    if generator_text is not None:
        generator = parse_biguint(generator_text)
    else:
        generator = parse_biguint(group.generator)

    if generator <= 1:
        raise InvalidParameter("generator must be greater than 1")
    if generator >= prime:
        raise InvalidParameter("generator must be less than the prime modulus")

    logger.debug(
        "Resolved %s prime (%d bits), generator %d",
        source or "custom", prime.bit_length(), generator,
    )
    return DHParameters(prime=prime, generator=generator, group=source)
