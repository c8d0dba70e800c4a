"""
Shared fixtures for number-theory tests.
"""

import pytest

from accum_numtheory.config import reset_settings
from accum_numtheory.group import RsaGroup, load_rsa_group


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: slow tests (large primes or wide ranges)")


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def rsa2048() -> RsaGroup:
    """The 2048-bit demo RSA group."""
    return load_rsa_group()


@pytest.fixture
def toy_group() -> RsaGroup:
    """Small RSA group: N = 11 * 19 = 209."""
    return RsaGroup(209)
