"""Pytest configuration and shared fixtures."""

import pytest
from solders.pubkey import Pubkey

from sen_sdk import RATIO_PRECISION, Pool, PoolState, create_strict_keypair

FEE = 2_500_000  # 0.25%
TAX = 500_000  # 0.05%


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (run offline)")


def pytest_collection_modifyitems(config, items):
    """Mark every test as a unit test; the suite never touches the network."""
    for item in items:
        item.add_marker(pytest.mark.unit)


@pytest.fixture
def pool_address() -> Pubkey:
    """A pool key that can seed a treasurer of the default program."""
    return create_strict_keypair().pubkey()


def _make_pool(
    reserve_a: int = 5_000_000_000_000,
    reserve_b: int = 200_000_000_000,
    lp_supply: int = 10**9,
    fee_ratio: int = FEE,
    tax_ratio: int = TAX,
    state: PoolState = PoolState.INITIALIZED,
) -> Pool:
    """Build a Pool record for testing."""
    assert fee_ratio < RATIO_PRECISION and tax_ratio < RATIO_PRECISION
    return Pool(
        owner=Pubkey.new_unique(),
        state=state,
        mint_lpt=Pubkey.new_unique(),
        taxman=Pubkey.new_unique(),
        mint_a=Pubkey.new_unique(),
        treasury_a=Pubkey.new_unique(),
        reserve_a=reserve_a,
        mint_b=Pubkey.new_unique(),
        treasury_b=Pubkey.new_unique(),
        reserve_b=reserve_b,
        fee_ratio=fee_ratio,
        tax_ratio=tax_ratio,
        lp_supply=lp_supply,
    )


@pytest.fixture
def make_pool():
    """Factory for Pool records."""
    return _make_pool
