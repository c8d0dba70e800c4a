"""
Baillie-PSW Probable Prime Test

Decides whether a candidate accumulator element is a probable prime:
1. Filter composites with small divisors.
2. Miller-Rabin with base 2.
3. Filter perfect squares.
4. Strong Lucas test with Selfridge parameters.
"""

import math
from typing import Optional

from .logging_config import get_logger
from .lucas import choose_discriminant, lucas_parameters, passes_strong_lucas
from .tables import BAD_255, LARGEST_SMALL_PRIME, SMALL_PRIMES

logger = get_logger(__name__)

_SMALL_PRIME_SET = frozenset(SMALL_PRIMES)


def has_small_prime_factor(n: int) -> bool:
    """
    Check whether n is divisible by a prime from SMALL_PRIMES.

    Only primes p <= n are tried, so a table prime reports itself as a
    factor. is_probable_prime() handles that case before calling here.

    Example:
        >>> has_small_prime_factor(50621)  # 223 * 227
        True
        >>> has_small_prime_factor(104927)  # 317 * 331
        False
    """
    for divisor in SMALL_PRIMES:
        if divisor > n:
            break
        if n % divisor == 0:
            return True
    return False


def passes_miller_rabin_base_2(n: int) -> bool:
    """
    Single-base Miller-Rabin witness test with a = 2.

    Args:
        n: Odd integer >= 3

    Returns:
        bool: True if n is a strong probable prime to base 2

    Raises:
        ValueError: If n is even or smaller than 3
    """
    if n < 3 or n % 2 == 0:
        raise ValueError("n must be an odd integer >= 3")

    # n - 1 = 2^r * d
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1

    x = pow(2, d, n)
    if x == 1 or x == n - 1:
        return True

    for _ in range(r - 1):
        x = pow(x, 2, n)
        if x == 1:
            return False
        if x == n - 1:
            return True

    return False


def _fold_mod_255(n: int) -> int:
    # 2^8 = 1 (mod 255): summing chunks preserves the residue
    residue = n
    for width in (32, 16, 8):
        mask = (1 << width) - 1
        while residue > mask:
            residue = (residue & mask) + (residue >> width)
    return residue


def looks_like_square(n: int) -> bool:
    """
    Decide whether n is a perfect square.

    Cheap bit tests reject most non-squares: the low bits, a residue
    modulo 255 checked against BAD_255, and the odd part modulo 8. What
    survives is confirmed with math.isqrt, so the answer is exact.

    Args:
        n: Non-negative integer

    Returns:
        bool: True if n is a perfect square
    """
    if n < 0:
        return False

    # Squares are 0, 1, 4 or 9 mod 16
    if n & 2 or n & 7 == 5 or n & 11 == 8:
        return False
    if n == 0:
        return True

    if BAD_255[_fold_mod_255(n)]:
        return False

    # Remove 4^k; the odd part of a square is 1 mod 8
    x = n
    for shift in (32, 16, 8, 4, 2):
        mask = (1 << shift) - 1
        while x & mask == 0:
            x >>= shift
    if x & 7 != 1:
        return False

    root = math.isqrt(n)
    return root * root == n


def is_probable_prime(n: int) -> bool:
    """
    Baillie-PSW probabilistic primality test.

    Stages run cheapest first and short-circuit on the first rejection.
    The result is deterministic for a given n; no composite is known to
    pass all four stages.

    Args:
        n: Non-negative integer candidate

    Returns:
        bool: True if n is a probable prime

    Raises:
        TypeError: If n is not an int
        ValueError: If n is negative

    Example:
        >>> is_probable_prime(233)
        True
        >>> is_probable_prime(1373653)  # strong pseudoprime to base 2
        False
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("Candidate must be an int")
    if n < 0:
        raise ValueError("Candidate must be non-negative")

    if n < 2:
        return False
    if n <= LARGEST_SMALL_PRIME:
        return n in _SMALL_PRIME_SET

    if has_small_prime_factor(n):
        logger.debug("Rejected %d-bit candidate: small prime factor", n.bit_length())
        return False

    if not passes_miller_rabin_base_2(n):
        logger.debug("Rejected %d-bit candidate: Miller-Rabin base 2", n.bit_length())
        return False

    if looks_like_square(n):
        logger.debug("Rejected %d-bit candidate: perfect square", n.bit_length())
        return False

    d = choose_discriminant(n)
    p, q = lucas_parameters(d)
    if not passes_strong_lucas(n, d, p, q):
        logger.debug("Rejected %d-bit candidate: strong Lucas (D=%d)", n.bit_length(), d)
        return False

    return True


def next_probable_prime(n: int, max_attempts: Optional[int] = None) -> int:
    """
    Smallest probable prime greater than or equal to n.

    Args:
        n: Lower bound of the search
        max_attempts: Odd candidates to test before giving up (default: no limit)

    Returns:
        int: The first probable prime >= n

    Raises:
        ValueError: If max_attempts is not positive, or no prime is found
            within max_attempts

    Example:
        >>> next_probable_prime(230)
        233
    """
    if max_attempts is not None and max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    if n <= 2:
        return 2

    candidate = n | 1
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        if is_probable_prime(candidate):
            return candidate
        candidate += 2
        attempts += 1

    raise ValueError("Could not find prime within max_attempts")
