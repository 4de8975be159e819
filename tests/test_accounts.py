"""Tests for account deserialization."""

import struct
from typing import Optional

import pytest
from solders.pubkey import Pubkey

from sen_sdk import (
    MINT_SIZE,
    POOL_SIZE,
    InvalidAccountDataError,
    PoolState,
    deserialize_mint,
    deserialize_pool,
    serialize_pool,
)


def build_pool_data(
    owner: Pubkey,
    state: int,
    mint_lpt: Pubkey,
    taxman: Pubkey,
    mint_a: Pubkey,
    treasury_a: Pubkey,
    reserve_a: int,
    mint_b: Pubkey,
    treasury_b: Pubkey,
    reserve_b: int,
    fee_ratio: int,
    tax_ratio: int,
) -> bytes:
    """Build Pool account data for testing."""
    data = bytearray()
    data.extend(bytes(owner))
    data.append(state)
    data.extend(bytes(mint_lpt))
    data.extend(bytes(taxman))
    data.extend(bytes(mint_a))
    data.extend(bytes(treasury_a))
    data.extend(struct.pack("<Q", reserve_a))
    data.extend(bytes(mint_b))
    data.extend(bytes(treasury_b))
    data.extend(struct.pack("<Q", reserve_b))
    data.extend(struct.pack("<Q", fee_ratio))
    data.extend(struct.pack("<Q", tax_ratio))
    return bytes(data)


def build_mint_data(
    mint_authority: Optional[Pubkey],
    supply: int,
    decimals: int,
    freeze_authority: Optional[Pubkey],
    is_initialized: bool = True,
) -> bytes:
    """Build SPL Mint account data for testing."""
    data = bytearray()
    data.extend(struct.pack("<I", 0 if mint_authority is None else 1))
    data.extend(bytes(mint_authority) if mint_authority else bytes(32))
    data.extend(struct.pack("<Q", supply))
    data.append(decimals)
    data.append(1 if is_initialized else 0)
    data.extend(struct.pack("<I", 0 if freeze_authority is None else 1))
    data.extend(bytes(freeze_authority) if freeze_authority else bytes(32))
    return bytes(data)


def _pool_keys():
    return {
        "owner": Pubkey.new_unique(),
        "mint_lpt": Pubkey.new_unique(),
        "taxman": Pubkey.new_unique(),
        "mint_a": Pubkey.new_unique(),
        "treasury_a": Pubkey.new_unique(),
        "mint_b": Pubkey.new_unique(),
        "treasury_b": Pubkey.new_unique(),
    }


class TestDeserializePool:
    def test_valid_data(self):
        keys = _pool_keys()
        data = build_pool_data(
            state=1,
            reserve_a=5_000_000_000_000,
            reserve_b=200_000_000_000,
            fee_ratio=2_500_000,
            tax_ratio=500_000,
            **keys,
        )

        pool = deserialize_pool(data)

        assert pool.owner == keys["owner"]
        assert pool.state == PoolState.INITIALIZED
        assert pool.mint_lpt == keys["mint_lpt"]
        assert pool.taxman == keys["taxman"]
        assert pool.mint_a == keys["mint_a"]
        assert pool.treasury_a == keys["treasury_a"]
        assert pool.reserve_a == 5_000_000_000_000
        assert pool.mint_b == keys["mint_b"]
        assert pool.treasury_b == keys["treasury_b"]
        assert pool.reserve_b == 200_000_000_000
        assert pool.fee_ratio == 2_500_000
        assert pool.tax_ratio == 500_000
        assert pool.lp_supply == 0

    def test_frozen_state(self):
        data = build_pool_data(
            state=2, reserve_a=1, reserve_b=1, fee_ratio=0, tax_ratio=0, **_pool_keys()
        )
        assert deserialize_pool(data).state == PoolState.FROZEN

    def test_unknown_state(self):
        data = build_pool_data(
            state=3, reserve_a=1, reserve_b=1, fee_ratio=0, tax_ratio=0, **_pool_keys()
        )
        with pytest.raises(InvalidAccountDataError):
            deserialize_pool(data)

    def test_short_data(self):
        with pytest.raises(InvalidAccountDataError):
            deserialize_pool(bytes(POOL_SIZE - 1))

    def test_long_data(self):
        with pytest.raises(InvalidAccountDataError):
            deserialize_pool(bytes(POOL_SIZE + 1))


class TestSerializePool:
    def test_layout_size(self, make_pool):
        assert len(serialize_pool(make_pool())) == POOL_SIZE == 257

    def test_matches_hand_built_layout(self, make_pool):
        pool = make_pool()
        expected = build_pool_data(
            owner=pool.owner,
            state=int(pool.state),
            mint_lpt=pool.mint_lpt,
            taxman=pool.taxman,
            mint_a=pool.mint_a,
            treasury_a=pool.treasury_a,
            reserve_a=pool.reserve_a,
            mint_b=pool.mint_b,
            treasury_b=pool.treasury_b,
            reserve_b=pool.reserve_b,
            fee_ratio=pool.fee_ratio,
            tax_ratio=pool.tax_ratio,
        )
        assert serialize_pool(pool) == expected

    def test_decodes_back_without_lp_supply(self, make_pool):
        pool = make_pool(lp_supply=0)
        assert deserialize_pool(serialize_pool(pool)) == pool

    def test_reserve_above_u64_raises(self, make_pool):
        with pytest.raises(ValueError):
            serialize_pool(make_pool(reserve_a=2**64))


class TestDeserializeMint:
    def test_lp_mint(self):
        authority = Pubkey.new_unique()
        freeze = Pubkey.new_unique()
        data = build_mint_data(authority, 1_000_400_000, 9, freeze)

        mint = deserialize_mint(data)

        assert len(data) == MINT_SIZE
        assert mint.mint_authority == authority
        assert mint.supply == 1_000_400_000
        assert mint.decimals == 9
        assert mint.is_initialized is True
        assert mint.freeze_authority == freeze

    def test_missing_authorities(self):
        mint = deserialize_mint(build_mint_data(None, 42, 6, None))

        assert mint.mint_authority is None
        assert mint.freeze_authority is None
        assert mint.supply == 42

    def test_trailing_bytes_ignored(self):
        data = build_mint_data(None, 1, 0, None) + bytes(83)
        assert deserialize_mint(data).supply == 1

    def test_short_data(self):
        with pytest.raises(InvalidAccountDataError):
            deserialize_mint(bytes(MINT_SIZE - 1))
