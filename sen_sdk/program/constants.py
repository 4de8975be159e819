"""Program addresses and numeric constants for the Sen SDK."""

from solders.pubkey import Pubkey

# ============================================================================
# PROGRAM IDS
# ============================================================================

SWAP_PROGRAM_ID = Pubkey.from_string("D8UuF1jPr5gtxHvnVz3HpxP2UkgtxLs9vwz7ecaTkrGy")

TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")

ASSOCIATED_TOKEN_PROGRAM_ID = Pubkey.from_string(
    "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
)

SYSTEM_PROGRAM_ID = Pubkey.from_string("11111111111111111111111111111111")

WSOL_MINT = Pubkey.from_string("So11111111111111111111111111111111111111112")

# ============================================================================
# ORACLE
# ============================================================================

# Fee and tax ratios are fixed-point fractions of this base (10^9)
RATIO_PRECISION = 1_000_000_000

MAX_U64 = 2**64 - 1
MAX_U128 = 2**128 - 1

# One halving step per bit of a u64 amount
RAKE_MAX_ITERATIONS = 64

# ============================================================================
# ACCOUNT SIZES
# ============================================================================

PUBKEY_SIZE = 32

# owner | state | mint_lpt | taxman | mint_a | treasury_a | reserve_a |
# mint_b | treasury_b | reserve_b | fee_ratio | tax_ratio
POOL_SIZE = 32 + 1 + 32 + 32 + 32 + 32 + 8 + 32 + 32 + 8 + 8 + 8

# ============================================================================
# STRICT KEYPAIR SEARCH
# ============================================================================

# Roughly half of all random keys seed a valid bump-less PDA
MAX_STRICT_KEYPAIR_ATTEMPTS = 256
