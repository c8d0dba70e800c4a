"""
Unit Tests for the Baillie-PSW Primality Module

Tests each stage of the pipeline and the composed predicate.
"""

import math

import pytest

from accum_numtheory.primality import (
    has_small_prime_factor,
    is_probable_prime,
    looks_like_square,
    next_probable_prime,
    passes_miller_rabin_base_2,
)
from accum_numtheory.tables import SMALL_PRIMES
from accum_numtheory.tests.helpers import is_prime_simple


class TestSmallPrimeFactor:
    """Test the trial-division stage."""

    def test_prime_beyond_table(self):
        """Test that 233 has no table factor."""
        assert not has_small_prime_factor(233)

    def test_product_of_table_primes(self):
        """Test a product of the two largest table primes."""
        assert 50621 == 223 * 227
        assert has_small_prime_factor(50621)

    def test_product_of_primes_beyond_table(self):
        """Test a product of primes above the table."""
        assert 104927 == 317 * 331
        assert not has_small_prime_factor(104927)

    def test_table_prime_reports_itself(self):
        """Test that a table prime reports itself as a factor."""
        assert has_small_prime_factor(229)

    def test_stops_at_candidate(self):
        """Test that 1 has no table factor."""
        assert not has_small_prime_factor(1)


class TestMillerRabinBase2:
    """Test the base-2 strong probable prime stage."""

    def test_known_values(self):
        """Test a prime and a composite."""
        assert passes_miller_rabin_base_2(13)
        assert not passes_miller_rabin_base_2(65)

    def test_strong_pseudoprimes_pass(self):
        """Test that base-2 strong pseudoprimes pass this stage."""
        # Composites that fool base 2 and must be caught later
        for n in (2047, 3277, 4033, 1373653, 25326001, 1194649):
            assert passes_miller_rabin_base_2(n)

    def test_primes_pass(self):
        """Test that odd primes below 2000 pass."""
        for p in range(3, 2000, 2):
            if is_prime_simple(p):
                assert passes_miller_rabin_base_2(p)

    def test_invalid_input(self):
        """Test that even candidates and 1 are rejected."""
        with pytest.raises(ValueError, match="odd integer"):
            passes_miller_rabin_base_2(10)
        with pytest.raises(ValueError, match="odd integer"):
            passes_miller_rabin_base_2(1)


class TestLooksLikeSquare:
    """Test the perfect-square filter."""

    def test_matches_isqrt_below_200(self):
        """Test agreement with isqrt for small n."""
        for n in range(200):
            root = math.isqrt(n)
            assert looks_like_square(n) == (root * root == n), n

    def test_large_squares(self):
        """Test large squares and their neighbours."""
        for root in (2**61 - 1, 2**127 - 1, 3 * 2**40, 10**30 + 7):
            assert looks_like_square(root * root)
            assert not looks_like_square(root * root + 1)
            assert not looks_like_square(root * root - 1)

    def test_powers_of_two(self):
        """Test even and odd powers of two."""
        assert looks_like_square(2**64)
        assert looks_like_square(2**200)
        assert not looks_like_square(2**65)
        assert not looks_like_square(2**201)

    def test_wide_range(self):
        """Test agreement with isqrt over a wider range."""
        for n in range(10000, 12000):
            root = math.isqrt(n)
            assert looks_like_square(n) == (root * root == n), n

    def test_negative_is_not_square(self):
        """Test that negative values are never squares."""
        assert not looks_like_square(-4)


class TestIsProbablePrime:
    """Test the composed Baillie-PSW predicate."""

    def test_small_table_primes(self):
        """Test that every table prime is prime."""
        for p in SMALL_PRIMES:
            assert is_probable_prime(p), p

    def test_composites_with_small_factors(self):
        """Test that multiples of table primes are composite."""
        for p in SMALL_PRIMES:
            for q in (2, 3, 229, 233, 104729):
                assert not is_probable_prime(p * q)

    def test_zero_and_one(self):
        """Test that 0 and 1 are not prime."""
        assert not is_probable_prime(0)
        assert not is_probable_prime(1)

    def test_matches_trial_division(self):
        """Test agreement with trial division below 3000."""
        for n in range(3000):
            assert is_probable_prime(n) == is_prime_simple(n), n

    def test_base_2_pseudoprimes_rejected(self):
        """Test that base-2 pseudoprimes are caught by later stages."""
        # 1194649 = 1093^2 is caught by the square filter, the rest by Lucas
        for n in (1373653, 25326001, 3215031751, 1194649, 2**128 + 1):
            assert not is_probable_prime(n), n

    def test_mersenne_primes(self):
        """Test known Mersenne primes."""
        for e in (31, 61, 89, 107, 127, 521):
            assert is_probable_prime(2**e - 1)

    def test_mersenne_composites(self):
        """Test known Mersenne composites."""
        for e in (67, 101, 257):
            assert not is_probable_prime(2**e - 1)

    def test_type_validation(self):
        """Test that non-int and bool inputs raise TypeError."""
        with pytest.raises(TypeError, match="must be an int"):
            is_probable_prime("7")
        with pytest.raises(TypeError, match="must be an int"):
            is_probable_prime(7.0)
        with pytest.raises(TypeError, match="must be an int"):
            is_probable_prime(True)

    def test_negative_rejected(self):
        """Test that negative inputs raise ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            is_probable_prime(-7)


class TestNextProbablePrime:
    """Test the upward prime search."""

    def test_known_values(self):
        """Test the search from small starting points."""
        assert next_probable_prime(0) == 2
        assert next_probable_prime(2) == 2
        assert next_probable_prime(3) == 3
        assert next_probable_prime(14) == 17
        assert next_probable_prime(230) == 233

    def test_large(self):
        """Test the search from large starting points."""
        assert next_probable_prime(2**127 - 1) == 2**127 - 1
        p = next_probable_prime(2**256)
        assert p > 2**256
        assert is_probable_prime(p)

    def test_attempt_budget(self):
        """Test that the search stops after max_attempts odd candidates."""
        assert next_probable_prime(230, max_attempts=2) == 233
        with pytest.raises(ValueError, match="Could not find prime"):
            next_probable_prime(230, max_attempts=1)

    def test_invalid_attempt_budget(self):
        """Test that a non-positive budget is rejected."""
        with pytest.raises(ValueError, match="max_attempts must be positive"):
            next_probable_prime(230, max_attempts=0)
