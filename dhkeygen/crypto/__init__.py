"""DH groups, parameter resolution and key generation."""

from .dh import RandomSource, generate_private_key, derive_public_key, generate_keypair
from .groups import GROUPS, DEFAULT_GROUP
from .params import resolve_parameters, get_group, InvalidParameter

__all__ = [
    "RandomSource",
    "generate_private_key",
    "derive_public_key",
    "generate_keypair",
    "GROUPS",
    "DEFAULT_GROUP",
    "resolve_parameters",
    "get_group",
    "InvalidParameter",
]
