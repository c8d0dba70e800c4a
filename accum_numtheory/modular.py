"""
Modular Arithmetic for Accumulator Proofs

Extended Euclid, Shamir's trick for combining roots of co-prime degree,
and a linear congruence solver.
"""

from typing import TYPE_CHECKING, Any, Optional, Tuple

from .errors import NoSolutionToLinearCongruence

if TYPE_CHECKING:
    from .group import Group


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Computes gcd(a, b) and coefficients x, y such that ax + by = gcd(a, b).
    The gcd is returned non-negative.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple[int, int, int]: (gcd, x, y) where ax + by = gcd

    Example:
        >>> gcd, x, y = extended_gcd(35, 15)
        >>> assert gcd == 5
        >>> assert 35 * x + 15 * y == 5
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y

    if old_r < 0:
        return -old_r, -old_x, -old_y
    return old_r, old_x, old_y


def modular_inverse(a: int, m: int) -> Optional[int]:
    """
    Compute modular inverse of a modulo m.

    Finds x such that (a * x) = 1 (mod m), if it exists.

    Args:
        a: Number to find inverse for
        m: Modulus

    Returns:
        Optional[int]: Modular inverse in [0, m) if it exists, None otherwise

    Raises:
        ValueError: If m is not positive

    Example:
        >>> inv = modular_inverse(3, 7)
        >>> assert (3 * inv) % 7 == 1
    """
    if m <= 0:
        raise ValueError("Modulus m must be positive")

    gcd, x, _ = extended_gcd(a % m, m)
    if gcd != 1:
        return None

    return x % m


def _truncated_mod(value: int, m: int) -> int:
    # Remainder carrying the sign of the dividend
    remainder = abs(value) % abs(m)
    return -remainder if value < 0 else remainder


def shamir_trick(group: "Group", xth_root: Any, yth_root: Any, x: int, y: int) -> Optional[Any]:
    """
    Compute the (xy)-th root of g from its x-th and y-th roots.

    With a*x + b*y = 1, the result is xth_root^b * yth_root^a.

    Args:
        group: Group providing exp() and op()
        xth_root: Element w with w^x = g
        yth_root: Element v with v^y = g
        x: Degree of xth_root
        y: Degree of yth_root, co-prime to x

    Returns:
        Optional[Any]: The (xy)-th root of g, or None if the roots are not
        roots of the same element or x and y are not co-prime

    Example:
        >>> group = RsaGroup(209)
        >>> g = 4
        >>> shamir_trick(group, pow(g, 5, 209), pow(g, 3, 209), 3, 5) == g
        True
    """
    if group.exp(xth_root, x) != group.exp(yth_root, y):
        return None

    gcd, a, b = extended_gcd(x, y)
    if gcd != 1:
        return None

    return group.op(group.exp(xth_root, b), group.exp(yth_root, a))


def solve_linear_congruence(a: int, b: int, m: int) -> Tuple[int, int]:
    """
    Solve ax = b (mod m).

    The solutions are x = mu + k * nu for any integer k.

    Args:
        a: Coefficient
        b: Right-hand side
        m: Modulus, non-zero

    Returns:
        Tuple[int, int]: (mu, nu). mu is reduced modulo m keeping the sign
        of the product it comes from, so it can be negative.

    Raises:
        ValueError: If m is zero
        NoSolutionToLinearCongruence: If gcd(a, m) does not divide b

    Example:
        >>> solve_linear_congruence(230, 1081, 12167)
        (2491, 529)
    """
    if m == 0:
        raise ValueError("Modulus m must be non-zero")

    # g = gcd(a, m) = d*a + e*m
    g, d, _ = extended_gcd(a, m)

    q, r = divmod(b, g)
    if r != 0:
        raise NoSolutionToLinearCongruence(a, b, m, g)

    mu = _truncated_mod(q * d, m)
    nu = m // g
    return mu, nu
