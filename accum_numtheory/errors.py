"""
Exceptions raised by the number-theory routines.
"""


class NumberTheoryError(Exception):
    """Base class for errors reported by accum_numtheory."""


class NoSolutionToLinearCongruence(NumberTheoryError, ValueError):
    """Raised when ax = b (mod m) has no integer solution."""

    def __init__(self, a: int, b: int, m: int, g: int):
        self.a = a
        self.b = b
        self.m = m
        self.gcd = g
        super().__init__(
            f"No solution to {a}x = {b} (mod {m}): gcd({a}, {m}) = {g} does not divide {b}"
        )


class DiscriminantSearchError(NumberTheoryError, RuntimeError):
    """Raised when no Lucas discriminant is found within the attempt bound."""

    def __init__(self, n: int, attempts: int):
        self.n = n
        self.attempts = attempts
        super().__init__(
            f"No discriminant D with jacobi(D, n) = -1 found in {attempts} attempts"
        )
