"""Quoting against a decoded Pool record.

These helpers read reserves and ratios off a `Pool`, orient the trade by
mint, and refuse to quote trades the program would reject because of the
pool's state. The pool itself is never modified.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from solders.pubkey import Pubkey

from ..program.constants import RAKE_MAX_ITERATIONS
from ..program.errors import InvalidAddressError, PoolNotInitializedError
from ..program.types import DepositResult, Pool, PoolState, SwapResult, WithdrawResult
from . import curve, liquidity


@dataclass
class OracleConfig:
    """Configuration for pool-level quoting."""

    rake_max_iterations: int = RAKE_MAX_ITERATIONS
    strict_state: bool = True  # reject pools that are not Initialized

    @classmethod
    def default(cls) -> "OracleConfig":
        """Create default config."""
        return cls()

    def with_rake_max_iterations(self, iterations: int) -> "OracleConfig":
        """Set the rake search cap."""
        if iterations < 1:
            raise ValueError(
                f"rake_max_iterations must be positive, got {iterations}"
            )
        self.rake_max_iterations = iterations
        return self

    def with_strict_state(self, strict: bool) -> "OracleConfig":
        """Toggle the pool state check."""
        self.strict_state = strict
        return self


def _require_initialized(pool: Pool, config: Optional[OracleConfig]) -> None:
    config = config or OracleConfig.default()
    if config.strict_state and pool.state != PoolState.INITIALIZED:
        try:
            state = PoolState(pool.state).name
        except ValueError:
            state = str(pool.state)
        raise PoolNotInitializedError(state)


def orient(pool: Pool, bid_mint: Pubkey, ask_mint: Pubkey) -> Tuple[int, int]:
    """Return (reserve_bid, reserve_ask) for a trade from bid_mint to ask_mint.

    Raises:
        InvalidAddressError: If the mints are not the two sides of the pool
    """
    if bid_mint == pool.mint_a and ask_mint == pool.mint_b:
        return pool.reserve_a, pool.reserve_b
    if bid_mint == pool.mint_b and ask_mint == pool.mint_a:
        return pool.reserve_b, pool.reserve_a
    raise InvalidAddressError(
        f"{bid_mint} -> {ask_mint}", "mints do not match the pool"
    )


def quote_swap(
    pool: Pool,
    bid_mint: Pubkey,
    ask_mint: Pubkey,
    bid_amount: int,
    config: Optional[OracleConfig] = None,
) -> SwapResult:
    """Quote a swap of bid_amount of bid_mint into ask_mint."""
    _require_initialized(pool, config)
    reserve_bid, reserve_ask = orient(pool, bid_mint, ask_mint)
    return curve.swap(
        bid_amount, reserve_bid, reserve_ask, pool.fee_ratio, pool.tax_ratio
    )


def quote_inverse_swap(
    pool: Pool,
    bid_mint: Pubkey,
    ask_mint: Pubkey,
    ask_amount: int,
    config: Optional[OracleConfig] = None,
) -> int:
    """Bid amount of bid_mint needed to receive ask_amount of ask_mint."""
    _require_initialized(pool, config)
    reserve_bid, reserve_ask = orient(pool, bid_mint, ask_mint)
    return curve.inverse_swap(
        ask_amount, reserve_bid, reserve_ask, pool.fee_ratio, pool.tax_ratio
    )


def quote_slippage(
    pool: Pool,
    bid_mint: Pubkey,
    ask_mint: Pubkey,
    bid_amount: int,
) -> int:
    """Price impact of a swap, scaled by RATIO_PRECISION.

    Read-only, so it is allowed on pools in any state.
    """
    reserve_bid, reserve_ask = orient(pool, bid_mint, ask_mint)
    return curve.slippage(
        bid_amount, reserve_bid, reserve_ask, pool.fee_ratio, pool.tax_ratio
    )


def quote_deposit(
    pool: Pool,
    delta_a: int,
    delta_b: int,
    config: Optional[OracleConfig] = None,
) -> DepositResult:
    """Quote a proportional deposit into the pool."""
    _require_initialized(pool, config)
    return liquidity.deposit(
        delta_a, delta_b, pool.reserve_a, pool.reserve_b, pool.lp_supply
    )


def quote_sided_deposit(
    pool: Pool,
    delta_a: int,
    delta_b: int,
    config: Optional[OracleConfig] = None,
) -> DepositResult:
    """Quote a deposit of any A:B mix, raking the excess side."""
    config = config or OracleConfig.default()
    _require_initialized(pool, config)
    return liquidity.sided_deposit(
        delta_a,
        delta_b,
        pool.reserve_a,
        pool.reserve_b,
        pool.lp_supply,
        pool.fee_ratio,
        pool.tax_ratio,
        max_iterations=config.rake_max_iterations,
    )


def quote_withdraw(pool: Pool, lpt: int) -> WithdrawResult:
    """Quote burning lpt LP tokens.

    The pool state is not checked; the program decides whether a frozen
    pool may be drained.
    """
    return liquidity.withdraw(lpt, pool.lp_supply, pool.reserve_a, pool.reserve_b)
