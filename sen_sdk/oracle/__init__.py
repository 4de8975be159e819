"""Constant-product pricing and liquidity engine for Sen swap pools.

Pure integer functions over caller-supplied reserve snapshots. Quotes match
the on-chain program unit for unit; they are only as fresh as the snapshot.
"""

from .curve import fee, inverse_swap, slippage, swap
from .fixed_point import icbrt, isqrt
from .legacy import tri_deposit, tri_extract
from .liquidity import deposit, extract, rake, sided_deposit, withdraw
from .quote import (
    OracleConfig,
    orient,
    quote_deposit,
    quote_inverse_swap,
    quote_sided_deposit,
    quote_slippage,
    quote_swap,
    quote_withdraw,
)

__all__ = [
    # Fixed point
    "isqrt",
    "icbrt",
    # Curve
    "fee",
    "swap",
    "inverse_swap",
    "slippage",
    # Liquidity
    "extract",
    "deposit",
    "withdraw",
    "rake",
    "sided_deposit",
    # Legacy S/A/B pools
    "tri_extract",
    "tri_deposit",
    # Pool-level quoting
    "OracleConfig",
    "orient",
    "quote_swap",
    "quote_inverse_swap",
    "quote_slippage",
    "quote_deposit",
    "quote_sided_deposit",
    "quote_withdraw",
]
