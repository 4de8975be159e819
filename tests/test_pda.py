"""Tests for pool identity derivation."""

import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from sen_sdk import (
    SWAP_PROGRAM_ID,
    InvalidAddressError,
    NoMatchError,
    create_strict_keypair,
    derive_pool_address,
    derive_proof_address,
    find_pool_address_or_raise,
    find_treasury,
    get_associated_token_address,
    get_treasurer,
    get_treasury_addresses,
    try_get_treasurer,
)
from sen_sdk.program.utils import xor_pubkeys


def _key_without_treasurer(program_id: Pubkey = SWAP_PROGRAM_ID) -> Pubkey:
    for _ in range(256):
        key = Keypair().pubkey()
        if try_get_treasurer(key, program_id) is None:
            return key
    pytest.fail("every random key seeded a treasurer")


class TestXorPubkeys:
    def test_self_inverse(self):
        a = Pubkey.new_unique()
        b = Pubkey.new_unique()

        assert xor_pubkeys(xor_pubkeys(a, b), b) == a

    def test_with_itself_is_zero(self):
        a = Pubkey.new_unique()
        assert xor_pubkeys(a, a) == Pubkey.default()

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError):
            xor_pubkeys(Pubkey.new_unique(), b"\x01" * 31)


class TestGetTreasurer:
    def test_derives_program_address(self, pool_address):
        treasurer = get_treasurer(pool_address)

        assert isinstance(treasurer, Pubkey)
        assert treasurer == Pubkey.create_program_address(
            [bytes(pool_address)], SWAP_PROGRAM_ID
        )
        assert not treasurer.is_on_curve()

    def test_consistent_derivation(self, pool_address):
        assert get_treasurer(pool_address) == get_treasurer(pool_address)

    def test_differs_per_pool(self):
        a = create_strict_keypair().pubkey()
        b = create_strict_keypair().pubkey()

        assert get_treasurer(a) != get_treasurer(b)

    def test_unusable_key_raises(self):
        key = _key_without_treasurer()

        assert try_get_treasurer(key) is None
        with pytest.raises(InvalidAddressError):
            get_treasurer(key)


class TestProofAddress:
    def test_is_xor_of_program_pool_and_treasurer(self, pool_address):
        treasurer = get_treasurer(pool_address)
        proof = derive_proof_address(pool_address)

        assert proof == xor_pubkeys(SWAP_PROGRAM_ID, pool_address, treasurer)

    def test_explicit_treasurer_matches_derived(self, pool_address):
        treasurer = get_treasurer(pool_address)

        assert derive_proof_address(pool_address, treasurer) == derive_proof_address(
            pool_address
        )


class TestDerivePoolAddress:
    def test_recovers_pool_from_mint_authorities(self, pool_address):
        treasurer = get_treasurer(pool_address)
        proof = derive_proof_address(pool_address)

        assert derive_pool_address(treasurer, proof) == pool_address
        assert find_pool_address_or_raise(treasurer, proof) == pool_address

    def test_unrelated_authorities_match_nothing(self):
        mint_authority = Pubkey.new_unique()
        freeze_authority = Pubkey.new_unique()

        assert derive_pool_address(mint_authority, freeze_authority) is None
        with pytest.raises(NoMatchError):
            find_pool_address_or_raise(mint_authority, freeze_authority)

    def test_swapped_authorities_match_nothing(self, pool_address):
        treasurer = get_treasurer(pool_address)
        proof = derive_proof_address(pool_address)

        assert derive_pool_address(proof, treasurer) is None

    def test_other_program_does_not_match(self, pool_address):
        other_program = Pubkey.new_unique()
        treasurer = get_treasurer(pool_address)
        proof = derive_proof_address(pool_address)

        assert derive_pool_address(treasurer, proof, other_program) is None

    def test_custom_program_round_trip(self):
        program_id = Pubkey.new_unique()
        pool = create_strict_keypair(program_id).pubkey()
        treasurer = get_treasurer(pool, program_id)
        proof = derive_proof_address(pool, program_id=program_id)

        assert derive_pool_address(treasurer, proof, program_id) == pool


class TestTreasuries:
    def test_treasury_addresses_are_associated_accounts(self, pool_address):
        treasurer = get_treasurer(pool_address)
        mints = [Pubkey.new_unique(), Pubkey.new_unique()]

        treasuries = get_treasury_addresses(treasurer, mints)

        assert treasuries == [
            get_associated_token_address(treasurer, mint) for mint in mints
        ]
        assert treasuries[0] != treasuries[1]

    def test_find_treasury_by_mint(self, make_pool):
        pool = make_pool()

        assert find_treasury(pool.mint_a, pool) == pool.treasury_a
        assert find_treasury(pool.mint_b, pool) == pool.treasury_b

    def test_find_treasury_unknown_mint_raises(self, make_pool):
        with pytest.raises(InvalidAddressError):
            find_treasury(Pubkey.new_unique(), make_pool())


class TestCreateStrictKeypair:
    def test_key_seeds_a_treasurer(self):
        keypair = create_strict_keypair()
        assert try_get_treasurer(keypair.pubkey()) is not None

    def test_custom_program(self):
        program_id = Pubkey.new_unique()
        keypair = create_strict_keypair(program_id)
        assert try_get_treasurer(keypair.pubkey(), program_id) is not None

    def test_gives_up_after_max_attempts(self):
        with pytest.raises(RuntimeError):
            create_strict_keypair(max_attempts=0)
