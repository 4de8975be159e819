"""Type definitions for the Sen program module."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from solders.pubkey import Pubkey


class PoolState(IntEnum):
    """State of a swap pool."""

    UNINITIALIZED = 0
    INITIALIZED = 1
    FROZEN = 2


@dataclass
class Pool:
    """Pool account data.

    `lp_supply` is not stored in the pool account. It is the supply of the
    `mint_lpt` mint and is filled in by the caller (or the client).
    """

    owner: Pubkey
    state: PoolState
    mint_lpt: Pubkey
    taxman: Pubkey
    mint_a: Pubkey
    treasury_a: Pubkey
    reserve_a: int
    mint_b: Pubkey
    treasury_b: Pubkey
    reserve_b: int
    fee_ratio: int
    tax_ratio: int
    lp_supply: int = 0


@dataclass
class Mint:
    """SPL token mint account data."""

    mint_authority: Optional[Pubkey]
    supply: int
    decimals: int
    is_initialized: bool
    freeze_authority: Optional[Pubkey]


# Oracle results


@dataclass(frozen=True)
class FeeResult:
    """Split of a gross ask amount into what the bidder gets, fee and tax."""

    amount: int
    fee: int
    tax: int


@dataclass(frozen=True)
class SwapResult:
    """Outcome of a constant-product swap."""

    ask_amount: int
    tax: int
    new_reserve_bid: int
    new_reserve_ask: int


@dataclass(frozen=True)
class DepositResult:
    """Outcome of a liquidity deposit.

    For sided deposits `accepted_a`/`accepted_b` are the net amounts drawn
    from the depositor; a negative value is swap output handed back.
    """

    accepted_a: int
    accepted_b: int
    minted_lp: int
    new_reserve_a: int
    new_reserve_b: int
    new_lp_supply: int


@dataclass(frozen=True)
class WithdrawResult:
    """Outcome of burning LP tokens."""

    delta_a: int
    delta_b: int
    new_reserve_a: int
    new_reserve_b: int


@dataclass(frozen=True)
class TriDepositResult:
    """Outcome of a deposit into a legacy three-asset (S/A/B) pool."""

    accepted_s: int
    accepted_a: int
    accepted_b: int
    minted_lp: int
    new_reserve_s: int
    new_reserve_a: int
    new_reserve_b: int
    new_lp_supply: int
