"""
Groups for Accumulator Arithmetic

The Group protocol is the capability set Shamir's trick relies on, and
RsaGroup is its multiplicative-group-mod-N implementation with 2048-bit
demo parameters.
"""

from functools import lru_cache
from typing import Any, Optional, Protocol

from .config import get_settings
from .modular import modular_inverse

# Demo 2048-bit RSA modulus (product of two large primes)
DEMO_MODULUS_HEX = (
    "0xc09f09d858a2037ca76e7b1c52543a002213c8f1086a587f41f9616ac4fd8d6ecbec8852fd95adaec50c34cde7f0e676059896c2be9f2e479297a7507f1d1e58afe26be99489b798a704f1627b8e6b09b9a88b01ce697c4197bbeec134bb41aac0579c8026deec542c6965b0b8d39e77405a65110af3774f88cd463c6c304483c6f0a802f288c8ba4f071b6afcefa2b9395e2fe71aaea8e277c06b5d2724153c4a20209c06f2e0f523fb96b576a37937fb340478e86bbbfa8914c50f0f33a8948836caf99ca5f7f6983787a25e091d9591204dbb8c14e473d172f4e7a0b5164cf9ee97f838ded82fd2357a51a6f495850ef268009e7ecc19047f8e99a91a4d9b"
)


class Group(Protocol):
    """Operations a group must offer to combine accumulator witnesses."""

    def exp(self, elem: Any, n: int) -> Any:
        ...

    def op(self, a: Any, b: Any) -> Any:
        ...


class RsaGroup:
    """
    Multiplicative group of integers modulo an RSA modulus N.

    Elements are ints in [0, N). Negative exponents go through the
    modular inverse, so exp() works on any element coprime to N.
    """

    def __init__(self, modulus: int):
        if modulus <= 2:
            raise ValueError("RSA modulus N must be greater than 2")
        self.modulus = modulus

    def __repr__(self) -> str:
        return f"RsaGroup({self.modulus.bit_length()}-bit)"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RsaGroup) and other.modulus == self.modulus

    def __hash__(self) -> int:
        return hash(self.modulus)

    def op(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def inv(self, elem: int) -> int:
        """
        Inverse of elem modulo N.

        Raises:
            ValueError: If elem shares a factor with N
        """
        inverse = modular_inverse(elem, self.modulus)
        if inverse is None:
            raise ValueError("Element is not invertible modulo N")
        return inverse

    def exp(self, elem: int, n: int) -> int:
        if n < 0:
            return pow(self.inv(elem), -n, self.modulus)
        return pow(elem, n, self.modulus)

    def unknown_order_elem(self) -> int:
        """An element whose order is not publicly known (2, as for RSA-2048)."""
        return 2


def validate_modulus(N: int) -> None:
    """
    Check that N is usable as an accumulator modulus.

    The modulus must be odd, so the unknown-order element 2 is invertible,
    and at least 1024 bits long.

    Args:
        N: RSA modulus

    Raises:
        ValueError: If N is not positive, is even, or is too small
    """
    if N <= 0:
        raise ValueError("RSA modulus N must be positive")

    if N % 2 == 0:
        raise ValueError("RSA modulus N must be odd")

    if N.bit_length() < 1024:
        raise ValueError("RSA modulus N must be at least 1024 bits")


@lru_cache(maxsize=None)
def _rsa_group(modulus_hex: str) -> RsaGroup:
    N = int(modulus_hex, 16)
    validate_modulus(N)
    return RsaGroup(N)


def load_rsa_group(modulus_hex: Optional[str] = None) -> RsaGroup:
    """
    Load the RSA group used for accumulator arithmetic.

    Args:
        modulus_hex: Hex modulus; defaults to settings.rsa_modulus_hex and
            then to the built-in 2048-bit demo modulus

    Raises:
        ValueError: If the modulus is too small or even
    """
    if modulus_hex is None:
        modulus_hex = get_settings().rsa_modulus_hex or DEMO_MODULUS_HEX
    return _rsa_group(modulus_hex)


# Shared group over the built-in demo modulus
Rsa2048 = _rsa_group(DEMO_MODULUS_HEX)
