"""
Number Theory Engine for Cryptographic Accumulators

This package provides the primality test used to map values into an
accumulator group and the modular arithmetic used to build and merge
membership proofs.
"""

__version__ = "0.2.1"

from .errors import DiscriminantSearchError, NoSolutionToLinearCongruence, NumberTheoryError
from .group import Group, Rsa2048, RsaGroup, load_rsa_group, validate_modulus
from .hash_to_prime import hash_to_prime
from .lucas import choose_discriminant, jacobi_symbol, lucas_parameters, passes_strong_lucas
from .modular import extended_gcd, modular_inverse, shamir_trick, solve_linear_congruence
from .primality import (
    has_small_prime_factor,
    is_probable_prime,
    looks_like_square,
    next_probable_prime,
    passes_miller_rabin_base_2,
)

__all__ = [
    "is_probable_prime",
    "next_probable_prime",
    "has_small_prime_factor",
    "passes_miller_rabin_base_2",
    "looks_like_square",
    "jacobi_symbol",
    "choose_discriminant",
    "lucas_parameters",
    "passes_strong_lucas",
    "extended_gcd",
    "modular_inverse",
    "shamir_trick",
    "solve_linear_congruence",
    "Group",
    "RsaGroup",
    "Rsa2048",
    "load_rsa_group",
    "validate_modulus",
    "hash_to_prime",
    "NumberTheoryError",
    "NoSolutionToLinearCongruence",
    "DiscriminantSearchError",
]
