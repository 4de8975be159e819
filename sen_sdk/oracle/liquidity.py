"""Liquidity accounting: proportional deposit, withdrawal and sided deposit.

Every division floors, so rounding always favours the pool: depositors are
minted no more LP than their share and withdrawers receive no more than
theirs.
"""

import logging
from typing import Tuple

from ..program.constants import RAKE_MAX_ITERATIONS
from ..program.errors import InvalidReservesError, OverdrawError, ZeroAmountError
from ..program.types import DepositResult, WithdrawResult
from ..program.utils import check_u64, checked_mul, require_amount
from .curve import _swap, require_ratio
from .fixed_point import isqrt

logger = logging.getLogger(__name__)


def extract(
    delta_a: int,
    delta_b: int,
    reserve_a: int,
    reserve_b: int,
) -> Tuple[int, int]:
    """Largest pair not above (delta_a, delta_b) in the ratio reserve_a:reserve_b.

    Returns (0, 0) when either delta is zero.

    Raises:
        InvalidReservesError: If either reserve is zero
    """
    if reserve_a == 0 or reserve_b == 0:
        raise InvalidReservesError(
            f"reserve_a={reserve_a}, reserve_b={reserve_b}"
        )
    if delta_a == 0 or delta_b == 0:
        return 0, 0
    left = checked_mul("delta_a * reserve_b", delta_a, reserve_b)
    right = checked_mul("delta_b * reserve_a", delta_b, reserve_a)
    if left > right:
        return right // reserve_b, delta_b
    if left < right:
        return delta_a, left // reserve_a
    return delta_a, delta_b


def deposit(
    delta_a: int,
    delta_b: int,
    reserve_a: int,
    reserve_b: int,
    lp_supply: int,
) -> DepositResult:
    """Deposit in the pool's current ratio; any excess is left unspent.

    The first deposit into an empty pool is accepted in full and mints
    isqrt(delta_a * delta_b) LP, which fixes the initial price.

    Raises:
        ZeroAmountError: If both deltas are zero, or either is zero on an
            empty pool
        InvalidReservesError: If exactly one reserve is zero, or the pool
            has reserves but no LP supply
        ArithmeticOverflowError: If a result leaves the u64 range
    """
    require_amount("delta_a", delta_a)
    require_amount("delta_b", delta_b)
    require_amount("reserve_a", reserve_a)
    require_amount("reserve_b", reserve_b)
    require_amount("lp_supply", lp_supply)
    if delta_a == 0 and delta_b == 0:
        raise ZeroAmountError("delta_a and delta_b")

    if reserve_a == 0 and reserve_b == 0:
        if delta_a == 0 or delta_b == 0:
            raise ZeroAmountError("delta_a" if delta_a == 0 else "delta_b")
        minted_lp = isqrt(checked_mul("delta_a * delta_b", delta_a, delta_b))
        return DepositResult(
            accepted_a=delta_a,
            accepted_b=delta_b,
            minted_lp=minted_lp,
            new_reserve_a=delta_a,
            new_reserve_b=delta_b,
            new_lp_supply=check_u64("new_lp_supply", lp_supply + minted_lp),
        )

    if reserve_a == 0 or reserve_b == 0:
        raise InvalidReservesError(
            f"reserve_a={reserve_a}, reserve_b={reserve_b}"
        )
    if lp_supply == 0:
        raise InvalidReservesError("pool has reserves but no LP supply")

    accepted_a, accepted_b = extract(delta_a, delta_b, reserve_a, reserve_b)
    minted_lp = (
        checked_mul("accepted_a * lp_supply", accepted_a, lp_supply) // reserve_a
    )
    return DepositResult(
        accepted_a=accepted_a,
        accepted_b=accepted_b,
        minted_lp=minted_lp,
        new_reserve_a=check_u64("new_reserve_a", reserve_a + accepted_a),
        new_reserve_b=check_u64("new_reserve_b", reserve_b + accepted_b),
        new_lp_supply=check_u64("new_lp_supply", lp_supply + minted_lp),
    )


def withdraw(
    lpt: int,
    lp_supply: int,
    reserve_a: int,
    reserve_b: int,
) -> WithdrawResult:
    """Burn `lpt` for a strictly proportional share of both reserves.

    Raises:
        InvalidReservesError: If lp_supply is zero
        OverdrawError: If lpt exceeds lp_supply
    """
    require_amount("lpt", lpt)
    require_amount("lp_supply", lp_supply)
    require_amount("reserve_a", reserve_a)
    require_amount("reserve_b", reserve_b)
    if lp_supply == 0:
        raise InvalidReservesError("lp_supply is zero")
    if lpt > lp_supply:
        raise OverdrawError(lpt, lp_supply)

    delta_a = checked_mul("reserve_a * lpt", reserve_a, lpt) // lp_supply
    delta_b = checked_mul("reserve_b * lpt", reserve_b, lpt) // lp_supply
    return WithdrawResult(
        delta_a=delta_a,
        delta_b=delta_b,
        new_reserve_a=reserve_a - delta_a,
        new_reserve_b=reserve_b - delta_b,
    )


def rake(
    amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
    max_iterations: int = RAKE_MAX_ITERATIONS,
) -> int:
    """Split a one-sided `amount` into the part to swap and the part to keep.

    Returns the largest bid amount whose unswapped remainder still covers
    the remainder its swap proceeds call for at the post-swap reserves, so
    depositing the remainder with the proceeds consumes all of the
    proceeds. The gap `remainder - expected` is non-increasing in the bid,
    which makes this a bisection over [0, amount]; one step per bit of a
    u64 amount is enough to close it.
    """
    require_amount("amount", amount)
    require_amount("reserve_bid", reserve_bid)
    require_amount("reserve_ask", reserve_ask)
    require_ratio("fee_ratio", fee_ratio)
    require_ratio("tax_ratio", tax_ratio)
    if reserve_bid == 0 or reserve_ask == 0:
        raise InvalidReservesError(
            f"reserve_bid={reserve_bid}, reserve_ask={reserve_ask}"
        )

    # gap(lo) >= 0 always holds since gap(0) == amount
    lo, hi = 0, amount
    iterations = 0
    while hi - lo > 1 and iterations < max_iterations:
        mid = (lo + hi) // 2
        gap = _rake_gap(mid, amount, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
        if gap >= 0:
            lo = mid
        else:
            hi = mid
        iterations += 1
    logger.debug(f"Rake settled on {lo} after {iterations} step(s)")
    return lo


def _rake_gap(
    bid_amount: int,
    amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
) -> int:
    quote = _swap(bid_amount, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
    if quote.new_reserve_ask == 0:
        raise InvalidReservesError("swap drains the ask reserve")
    expected = (
        checked_mul("expected", quote.ask_amount, quote.new_reserve_bid)
        // quote.new_reserve_ask
    )
    return (amount - bid_amount) - expected


def sided_deposit(
    delta_a: int,
    delta_b: int,
    reserve_a: int,
    reserve_b: int,
    lp_supply: int,
    fee_ratio: int,
    tax_ratio: int,
    max_iterations: int = RAKE_MAX_ITERATIONS,
) -> DepositResult:
    """Deposit any mix of A and B, including a single side.

    The proportional part is deposited first. The excess side is then raked:
    part of it is swapped against the pool and the proceeds are deposited
    with the rest. `accepted_*` are net of the swap, so the side that was
    bought may come out a few units negative from rounding.

    Raises:
        The errors of deposit and swap.
    """
    require_ratio("fee_ratio", fee_ratio)
    require_ratio("tax_ratio", tax_ratio)
    unraked = deposit(delta_a, delta_b, reserve_a, reserve_b, lp_supply)
    remainder_a = delta_a - unraked.accepted_a
    remainder_b = delta_b - unraked.accepted_b

    if remainder_a > 0:
        bid_amount = rake(
            remainder_a,
            unraked.new_reserve_a,
            unraked.new_reserve_b,
            fee_ratio,
            tax_ratio,
            max_iterations,
        )
        quote = _swap(
            bid_amount,
            unraked.new_reserve_a,
            unraked.new_reserve_b,
            fee_ratio,
            tax_ratio,
        )
        raked = _deposit_proceeds(
            remainder_a - bid_amount,
            quote.ask_amount,
            quote.new_reserve_bid,
            quote.new_reserve_ask,
            unraked.new_lp_supply,
        )
        return DepositResult(
            accepted_a=unraked.accepted_a + bid_amount + raked.accepted_a,
            accepted_b=unraked.accepted_b + raked.accepted_b - quote.ask_amount,
            minted_lp=unraked.minted_lp + raked.minted_lp,
            new_reserve_a=raked.new_reserve_a,
            new_reserve_b=raked.new_reserve_b,
            new_lp_supply=raked.new_lp_supply,
        )

    if remainder_b > 0:
        bid_amount = rake(
            remainder_b,
            unraked.new_reserve_b,
            unraked.new_reserve_a,
            fee_ratio,
            tax_ratio,
            max_iterations,
        )
        quote = _swap(
            bid_amount,
            unraked.new_reserve_b,
            unraked.new_reserve_a,
            fee_ratio,
            tax_ratio,
        )
        raked = _deposit_proceeds(
            quote.ask_amount,
            remainder_b - bid_amount,
            quote.new_reserve_ask,
            quote.new_reserve_bid,
            unraked.new_lp_supply,
        )
        return DepositResult(
            accepted_a=unraked.accepted_a + raked.accepted_a - quote.ask_amount,
            accepted_b=unraked.accepted_b + bid_amount + raked.accepted_b,
            minted_lp=unraked.minted_lp + raked.minted_lp,
            new_reserve_a=raked.new_reserve_a,
            new_reserve_b=raked.new_reserve_b,
            new_lp_supply=raked.new_lp_supply,
        )

    return unraked


def _deposit_proceeds(
    delta_a: int,
    delta_b: int,
    reserve_a: int,
    reserve_b: int,
    lp_supply: int,
) -> DepositResult:
    # A dust remainder can rake down to nothing on one side
    if delta_a == 0 or delta_b == 0:
        return DepositResult(
            accepted_a=0,
            accepted_b=0,
            minted_lp=0,
            new_reserve_a=reserve_a,
            new_reserve_b=reserve_b,
            new_lp_supply=lp_supply,
        )
    return deposit(delta_a, delta_b, reserve_a, reserve_b, lp_supply)
