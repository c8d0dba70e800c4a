"""
Hash-to-Prime Conversion for Accumulators

Converts arbitrary byte data (like public keys) to prime numbers
suitable as accumulator elements.
"""

import hashlib
from typing import Optional

from .config import get_settings
from .logging_config import get_logger
from .primality import next_probable_prime

logger = get_logger(__name__)


def hash_to_prime(data: bytes, *, min_bits: int = 256, max_attempts: Optional[int] = None) -> int:
    """
    Convert bytes to a prime using SHA-256 and the Baillie-PSW test.

    The digest is read as a big-endian integer, its bit (min_bits - 1) is
    set if it is shorter, and it is made odd. Odd candidates from there
    upward are tested until one is a probable prime.

    Args:
        data: The input bytes to convert (e.g., Ed25519 public key)
        min_bits: Minimum bit length for the prime (default: 256)
        max_attempts: Candidates to test (default: settings.hash_to_prime_max_attempts)

    Returns:
        int: A probable prime derived deterministically from data

    Raises:
        TypeError: If data is not bytes
        ValueError: If data is empty, a limit is invalid, or no prime is
            found within max_attempts

    Example:
        >>> prime = hash_to_prime(b"\\x12\\x34\\x56\\x78" * 8)
        >>> assert prime % 2 == 1
    """
    if not isinstance(data, bytes):
        raise TypeError("Input must be bytes")
    if not data:
        raise ValueError("Input cannot be empty")
    if max_attempts is None:
        max_attempts = get_settings().hash_to_prime_max_attempts
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")
    if min_bits < 64:
        raise ValueError("min_bits should be >= 64")

    base = int.from_bytes(hashlib.sha256(data).digest(), "big")
    if base.bit_length() < min_bits:
        base |= (1 << (min_bits - 1))
    if base % 2 == 0:
        base += 1

    prime = next_probable_prime(base, max_attempts=max_attempts)
    logger.debug("hash_to_prime found %d-bit prime, %d above the digest start",
                 prime.bit_length(), prime - base)
    return prime
