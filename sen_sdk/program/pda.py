"""Pool identity derivation for the Sen swap program.

A pool's treasurer is a bump-less program address seeded by the pool key
alone. The LP mint of a pool carries the treasurer as mint authority and a
"proof" address as freeze authority, where

    proof = program_id XOR pool XOR treasurer

so the pool can be recovered from the mint's authorities without an index.
"""

import logging
from typing import List, Optional

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from .constants import MAX_STRICT_KEYPAIR_ATTEMPTS, SWAP_PROGRAM_ID
from .errors import InvalidAddressError, NoMatchError
from .types import Pool
from .utils import get_associated_token_address, xor_pubkeys

logger = logging.getLogger(__name__)


def try_get_treasurer(
    pool: Pubkey,
    program_id: Pubkey = SWAP_PROGRAM_ID,
) -> Optional[Pubkey]:
    """Derive the treasurer of a pool, or None if the pool key cannot seed one.

    Seeds: [pool] (no bump)
    """
    try:
        return Pubkey.create_program_address([bytes(pool)], program_id)
    except Exception:
        return None


def get_treasurer(
    pool: Pubkey,
    program_id: Pubkey = SWAP_PROGRAM_ID,
) -> Pubkey:
    """Derive the treasurer of a pool.

    Seeds: [pool] (no bump)

    Raises:
        InvalidAddressError: If the derived address falls on the ed25519 curve,
            meaning the key was never a valid pool of this program.
    """
    treasurer = try_get_treasurer(pool, program_id)
    if treasurer is None:
        raise InvalidAddressError(str(pool), "cannot seed a treasurer")
    return treasurer


def derive_proof_address(
    pool: Pubkey,
    treasurer: Optional[Pubkey] = None,
    program_id: Pubkey = SWAP_PROGRAM_ID,
) -> Pubkey:
    """Derive the proof address installed as the LP mint's freeze authority."""
    if treasurer is None:
        treasurer = get_treasurer(pool, program_id)
    return xor_pubkeys(program_id, pool, treasurer)


def derive_pool_address(
    mint_authority: Pubkey,
    freeze_authority: Pubkey,
    program_id: Pubkey = SWAP_PROGRAM_ID,
) -> Optional[Pubkey]:
    """Recover the pool behind an LP mint from the mint's authorities.

    Returns None when the authorities do not belong to a pool of this
    program.
    """
    candidate = xor_pubkeys(program_id, freeze_authority, mint_authority)
    treasurer = try_get_treasurer(candidate, program_id)
    if treasurer is None or treasurer != mint_authority:
        logger.debug(f"No pool for mint authority {mint_authority}")
        return None
    return candidate


def find_pool_address_or_raise(
    mint_authority: Pubkey,
    freeze_authority: Pubkey,
    program_id: Pubkey = SWAP_PROGRAM_ID,
) -> Pubkey:
    """Like derive_pool_address, but raises NoMatchError on a miss."""
    pool = derive_pool_address(mint_authority, freeze_authority, program_id)
    if pool is None:
        raise NoMatchError(str(mint_authority), str(freeze_authority))
    return pool


def get_treasury_addresses(
    treasurer: Pubkey,
    mints: List[Pubkey],
) -> List[Pubkey]:
    """Derive the treasury token accounts of a treasurer, one per mint."""
    return [get_associated_token_address(treasurer, mint) for mint in mints]


def find_treasury(mint: Pubkey, pool: Pool) -> Pubkey:
    """Pick the pool treasury that holds the given mint.

    Raises:
        InvalidAddressError: If the mint is neither side of the pool
    """
    if mint == pool.mint_a:
        return pool.treasury_a
    if mint == pool.mint_b:
        return pool.treasury_b
    raise InvalidAddressError(str(mint), "no treasury matches this mint")


def create_strict_keypair(
    program_id: Pubkey = SWAP_PROGRAM_ID,
    max_attempts: int = MAX_STRICT_KEYPAIR_ATTEMPTS,
) -> Keypair:
    """Generate a keypair whose public key can seed a treasurer.

    New pools must be created with such a key, otherwise the program
    cannot derive their treasurer.

    Raises:
        RuntimeError: If no usable keypair is found within max_attempts
    """
    for attempt in range(max_attempts):
        keypair = Keypair()
        if try_get_treasurer(keypair.pubkey(), program_id) is not None:
            logger.debug(f"Found strict keypair after {attempt + 1} attempt(s)")
            return keypair
    raise RuntimeError(f"No strict keypair found in {max_attempts} attempts")
