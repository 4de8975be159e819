"""Sen SDK - Python SDK for the Sen swap program on Solana.

This SDK provides three modules:
- `oracle`: Constant-product pricing and liquidity math (pure, no I/O)
- `program`: Pool accounts, pool identity derivation and a read-only client
- `shared`: Conversions between human amounts and raw token units

Example:
    from sen_sdk import swap, RATIO_PRECISION

    quote = swap(1_000_000_000, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
    if quote.ask_amount < limit:
        ...  # re-quote or abort before sending the transaction
"""

__version__ = "0.1.0"

# ============================================================================
# MODULE IMPORTS
# ============================================================================

from . import oracle
from . import program
from . import shared

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM ORACLE MODULE
# ============================================================================

from .oracle import (
    OracleConfig,
    deposit,
    extract,
    fee,
    icbrt,
    inverse_swap,
    isqrt,
    orient,
    quote_deposit,
    quote_inverse_swap,
    quote_sided_deposit,
    quote_slippage,
    quote_swap,
    quote_withdraw,
    rake,
    sided_deposit,
    slippage,
    swap,
    tri_deposit,
    tri_extract,
    withdraw,
)

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM PROGRAM MODULE
# ============================================================================

from .program import (
    SenSwapClient,
    # Constants
    SWAP_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    ASSOCIATED_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    WSOL_MINT,
    RATIO_PRECISION,
    MAX_U64,
    MAX_U128,
    RAKE_MAX_ITERATIONS,
    POOL_SIZE,
    MINT_SIZE,
    # Account Deserialization
    deserialize_pool,
    serialize_pool,
    deserialize_mint,
    # PDA Functions
    get_treasurer,
    try_get_treasurer,
    derive_proof_address,
    derive_pool_address,
    find_pool_address_or_raise,
    get_treasury_addresses,
    find_treasury,
    create_strict_keypair,
    get_associated_token_address,
    # Types
    PoolState,
    Pool,
    Mint,
    FeeResult,
    SwapResult,
    DepositResult,
    WithdrawResult,
    TriDepositResult,
    # Errors
    SenError,
    ZeroAmountError,
    InvalidReservesError,
    OverdrawError,
    ArithmeticOverflowError,
    NoMatchError,
    PoolNotInitializedError,
    InvalidAccountDataError,
    InvalidAddressError,
    AccountNotFoundError,
)

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM SHARED MODULE
# ============================================================================

from .shared import ScalingError, decimalize, div, undecimalize

__all__ = [
    # Version
    "__version__",
    # Modules
    "oracle",
    "program",
    "shared",
    # Oracle
    "isqrt",
    "icbrt",
    "fee",
    "swap",
    "inverse_swap",
    "slippage",
    "extract",
    "deposit",
    "withdraw",
    "rake",
    "sided_deposit",
    "tri_extract",
    "tri_deposit",
    "OracleConfig",
    "orient",
    "quote_swap",
    "quote_inverse_swap",
    "quote_slippage",
    "quote_deposit",
    "quote_sided_deposit",
    "quote_withdraw",
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
    # Shared
    "ScalingError",
    "decimalize",
    "undecimalize",
    "div",
]
