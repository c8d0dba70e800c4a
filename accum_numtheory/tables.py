"""
Precomputed Tables for Primality Testing

Process-wide read-only constants used by the trial-division stage and
the perfect-square filter.
"""

from typing import Tuple

# First 50 primes. Candidates with a factor in this table are rejected
# before any modular exponentiation happens.
SMALL_PRIMES: Tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29,
    31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113,
    127, 131, 137, 139, 149, 151, 157, 163, 167, 173,
    179, 181, 191, 193, 197, 199, 211, 223, 227, 229,
)

LARGEST_SMALL_PRIME: int = SMALL_PRIMES[-1]


def _build_bad_255() -> Tuple[bool, ...]:
    """
    Build the residue table for squares modulo 255.

    Entry r is True when r cannot be the residue of a perfect square
    modulo 255. Index 255 stands for residue 0 (folding can land there).
    """
    residues = {(i * i) % 255 for i in range(255)}
    return tuple((r % 255) not in residues for r in range(256))


BAD_255: Tuple[bool, ...] = _build_bad_255()
