"""Classic DH key generation: uniform private exponent + g^x mod p."""

import logging
import random
from typing import Optional, Protocol

from dhkeygen.common.models import DHParameters, KeyPair

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that returns k uniformly random bits as an int."""

    def getrandbits(self, k: int) -> int: ...


# os.urandom-backed
_system_rng: RandomSource = random.SystemRandom()


def generate_private_key(prime: int, rng: Optional[RandomSource] = None) -> int:
    """
    Generate a random DH private exponent x with 2 <= x <= p-2.

    Uses rejection sampling over the exact range size, so the result is
    uniform for moduli of any size.

    Args:
        prime: prime modulus p (> 3)
        rng: random source exposing getrandbits(); defaults to OS entropy

    Returns:
        private exponent x
    """
    if prime <= 3:
        raise ValueError("prime modulus must be greater than 3")
    if rng is None:
        rng = _system_rng

    span = prime - 3  # number of values in [2, p-2]
    bits = (span - 1).bit_length()
    while True:
        candidate = rng.getrandbits(bits)
        if candidate < span:
            return candidate + 2


def derive_public_key(generator: int, private_key: int, prime: int) -> int:
    """
    Compute DH public value: y = g^x mod p.

    Not constant-time.

    Args:
        generator: generator g
        private_key: private exponent x
        prime: prime modulus p

    Returns:
        public value y
    """
    return pow(generator, private_key, prime)


def generate_keypair(params: DHParameters, rng: Optional[RandomSource] = None) -> KeyPair:
    """Generate a private key for params and derive its public key."""
    private_key = generate_private_key(params.prime, rng)
    public_key = derive_public_key(params.generator, private_key, params.prime)
    logger.info("Generated key pair for %d-bit prime", params.prime_bits)
    return KeyPair(parameters=params, private_key=private_key, public_key=public_key)
