"""
Lucas Sequence Primitives

Jacobi symbol, Selfridge discriminant selection and the strong Lucas
probable-prime test that closes the Baillie-PSW pipeline.
"""

from typing import Optional, Tuple

from .config import get_settings
from .errors import DiscriminantSearchError
from .logging_config import get_logger

logger = get_logger(__name__)


def jacobi_symbol(a: int, n: int) -> int:
    """
    Compute the Jacobi symbol (a/n).

    Args:
        a: Any integer, negative values allowed
        n: Odd positive modulus

    Returns:
        int: -1, 0 or 1

    Raises:
        ValueError: If n is not odd and positive

    Example:
        >>> jacobi_symbol(2, 7)
        1
        >>> jacobi_symbol(2, 3)
        -1
    """
    if n <= 0 or n % 2 == 0:
        raise ValueError("Modulus n must be odd and positive")

    result = 1

    # (-1/n) = (-1)^((n-1)/2)
    if a < 0:
        a = -a
        if n % 4 == 3:
            result = -result

    a %= n
    while a != 0:
        # (2/n) = -1 exactly when n = 3, 5 (mod 8)
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result

        # Quadratic reciprocity for odd a, n
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n

    return result if n == 1 else 0


def choose_discriminant(n: int, max_attempts: Optional[int] = None) -> int:
    """
    Find the first D in 5, -7, 9, -11, ... with jacobi(D, n) = -1.

    The search never ends for perfect squares, so callers must filter
    them out first. The number of candidates tried is capped.

    Args:
        n: Odd non-square candidate, at least 3
        max_attempts: Candidates to try (default: settings.max_discriminant_attempts)

    Returns:
        int: The discriminant D

    Raises:
        ValueError: If n is even or smaller than 3
        DiscriminantSearchError: If no D is found within max_attempts
    """
    if n < 3 or n % 2 == 0:
        raise ValueError("n must be an odd integer >= 3")

    if max_attempts is None:
        max_attempts = get_settings().max_discriminant_attempts
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    d = 5
    for attempt in range(max_attempts):
        if jacobi_symbol(d, n) == -1:
            logger.debug("Selected discriminant D=%d after %d attempts", d, attempt + 1)
            return d
        d = -(d + 2) if d > 0 else -d + 2

    logger.warning("Discriminant search exhausted after %d attempts", max_attempts)
    raise DiscriminantSearchError(n, max_attempts)


def lucas_parameters(d: int) -> Tuple[int, int]:
    """Selfridge parameters (P, Q) = (1, (1 - D) / 4) for discriminant D."""
    if d % 4 != 1:
        raise ValueError("Discriminant D must be congruent to 1 mod 4")
    return 1, (1 - d) // 4


def passes_strong_lucas(n: int, d: int, p: int = 1, q: Optional[int] = None) -> bool:
    """
    Strong Lucas probable-prime test.

    Writes n + 1 = k * 2^s with k odd and computes U_k, V_k mod n with the
    doubling formulas. n passes when U_k = 0 or V_(k * 2^r) = 0 for some
    0 <= r < s.

    Args:
        n: Odd candidate, at least 3
        d: Discriminant, D = P^2 - 4Q
        p: Lucas parameter P
        q: Lucas parameter Q (default: (P^2 - D) / 4)

    Returns:
        bool: True if n is a strong Lucas probable prime for (P, Q)

    Raises:
        ValueError: If n is even or too small, or (D, P, Q) are inconsistent
    """
    if n < 3 or n % 2 == 0:
        raise ValueError("n must be an odd integer >= 3")
    if q is None:
        if (p * p - d) % 4 != 0:
            raise ValueError("P^2 - D must be divisible by 4")
        q = (p * p - d) // 4
    if p * p - 4 * q != d:
        raise ValueError("Parameters must satisfy D = P^2 - 4Q")

    k, s = n + 1, 0
    while k % 2 == 0:
        k //= 2
        s += 1

    # 1/2 mod n
    half = (n + 1) // 2

    u, v, qk = 1, p % n, q % n
    for bit in bin(k)[3:]:
        # index j -> 2j
        u = (u * v) % n
        v = (v * v - 2 * qk) % n
        qk = (qk * qk) % n
        if bit == "1":
            # index j -> j + 1
            u, v = ((p * u + v) * half) % n, ((d * u + p * v) * half) % n
            qk = (qk * q) % n

    if u == 0:
        return True

    for _ in range(s):
        if v == 0:
            return True
        v = (v * v - 2 * qk) % n
        qk = (qk * qk) % n

    return False
