"""On-chain program interaction module for Sen swap.

This module provides the pool account codec, the pool identity derivers
and a read-only client for the Sen swap program on Solana.
"""

from .accounts import MINT_SIZE, deserialize_mint, deserialize_pool, serialize_pool
from .client import SenSwapClient
from .constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    MAX_STRICT_KEYPAIR_ATTEMPTS,
    MAX_U128,
    MAX_U64,
    POOL_SIZE,
    RAKE_MAX_ITERATIONS,
    RATIO_PRECISION,
    SWAP_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    WSOL_MINT,
)
from .errors import (
    AccountNotFoundError,
    ArithmeticOverflowError,
    InvalidAccountDataError,
    InvalidAddressError,
    InvalidReservesError,
    NoMatchError,
    OverdrawError,
    PoolNotInitializedError,
    SenError,
    ZeroAmountError,
)
from .pda import (
    create_strict_keypair,
    derive_pool_address,
    derive_proof_address,
    find_pool_address_or_raise,
    find_treasury,
    get_treasurer,
    get_treasury_addresses,
    try_get_treasurer,
)
from .types import (
    DepositResult,
    FeeResult,
    Mint,
    Pool,
    PoolState,
    SwapResult,
    TriDepositResult,
    WithdrawResult,
)
from .utils import get_associated_token_address, xor_pubkeys

__all__ = [
    # Client
    "SenSwapClient",
    # Constants
    "SWAP_PROGRAM_ID",
    "TOKEN_PROGRAM_ID",
    "ASSOCIATED_TOKEN_PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "WSOL_MINT",
    "RATIO_PRECISION",
    "MAX_U64",
    "MAX_U128",
    "RAKE_MAX_ITERATIONS",
    "POOL_SIZE",
    "MINT_SIZE",
    "MAX_STRICT_KEYPAIR_ATTEMPTS",
    # Account Deserialization
    "deserialize_pool",
    "serialize_pool",
    "deserialize_mint",
    # PDA Functions
    "get_treasurer",
    "try_get_treasurer",
    "derive_proof_address",
    "derive_pool_address",
    "find_pool_address_or_raise",
    "get_treasury_addresses",
    "find_treasury",
    "create_strict_keypair",
    "get_associated_token_address",
    "xor_pubkeys",
    # Types
    "PoolState",
    "Pool",
    "Mint",
    "FeeResult",
    "SwapResult",
    "DepositResult",
    "WithdrawResult",
    "TriDepositResult",
    # Errors
    "SenError",
    "ZeroAmountError",
    "InvalidReservesError",
    "OverdrawError",
    "ArithmeticOverflowError",
    "NoMatchError",
    "PoolNotInitializedError",
    "InvalidAccountDataError",
    "InvalidAddressError",
    "AccountNotFoundError",
]
