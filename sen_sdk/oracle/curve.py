"""Constant-product curve: swap, inverse swap, fee/tax split and slippage.

All amounts are u64 on-chain and products are taken in u128, exactly as the
swap program does, so quotes computed here match the program to the unit.
"""

import logging

from ..program.constants import MAX_U64, RATIO_PRECISION
from ..program.errors import (
    ArithmeticOverflowError,
    InvalidReservesError,
    OverdrawError,
    ZeroAmountError,
)
from ..program.types import FeeResult, SwapResult
from ..program.utils import check_u64, checked_mul, require_amount

logger = logging.getLogger(__name__)


def require_ratio(name: str, ratio: int) -> int:
    """Validate a fee or tax ratio against RATIO_PRECISION."""
    require_amount(name, ratio)
    if ratio >= RATIO_PRECISION:
        raise ValueError(
            f"{name} must be below {RATIO_PRECISION}, got {ratio}"
        )
    return ratio


def _require_reserves(reserve_bid: int, reserve_ask: int) -> None:
    require_amount("reserve_bid", reserve_bid)
    require_amount("reserve_ask", reserve_ask)
    if reserve_bid == 0 or reserve_ask == 0:
        raise InvalidReservesError(
            f"reserve_bid={reserve_bid}, reserve_ask={reserve_ask}"
        )


def fee(amount: int, fee_ratio: int, tax_ratio: int) -> FeeResult:
    """Split a gross ask amount into the bidder's share, the fee and the tax.

    The fee is taken first and stays in the pool; the tax is taken from
    what remains and goes to the taxman.
    """
    fee_amount = checked_mul("fee", amount, fee_ratio) // RATIO_PRECISION
    after_fee = amount - fee_amount
    tax = checked_mul("tax", after_fee, tax_ratio) // RATIO_PRECISION
    return FeeResult(amount=after_fee - tax, fee=fee_amount, tax=tax)


def _swap(
    bid_amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
) -> SwapResult:
    # Unvalidated core shared with slippage and rake, where a zero bid is legal
    new_reserve_bid = check_u64("new_reserve_bid", reserve_bid + bid_amount)
    temp_reserve_ask = (
        checked_mul("reserve_product", reserve_bid, reserve_ask) // new_reserve_bid
    )
    temp_ask_amount = reserve_ask - temp_reserve_ask
    split = fee(temp_ask_amount, fee_ratio, tax_ratio)
    return SwapResult(
        ask_amount=split.amount,
        tax=split.tax,
        new_reserve_bid=new_reserve_bid,
        new_reserve_ask=temp_reserve_ask + split.fee,
    )


def swap(
    bid_amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
) -> SwapResult:
    """Quote a swap of `bid_amount` against the pool.

    Checking the quote against a minimum output (the `limit` of the swap
    instruction) is left to the caller.

    Raises:
        ZeroAmountError: If bid_amount is zero
        InvalidReservesError: If either reserve is zero
        ArithmeticOverflowError: If a result leaves the u64 range
    """
    require_amount("bid_amount", bid_amount)
    _require_reserves(reserve_bid, reserve_ask)
    require_ratio("fee_ratio", fee_ratio)
    require_ratio("tax_ratio", tax_ratio)
    if bid_amount == 0:
        raise ZeroAmountError("bid_amount")
    return _swap(bid_amount, reserve_bid, reserve_ask, fee_ratio, tax_ratio)


def _inverse_estimate(
    ask_amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
) -> int:
    # Gross the ask amount back up by the tax and then the fee
    temp_ask_amount = (
        checked_mul("ask_amount", ask_amount, RATIO_PRECISION**2)
        // (RATIO_PRECISION - tax_ratio)
        // (RATIO_PRECISION - fee_ratio)
    )
    if temp_ask_amount >= reserve_ask:
        raise OverdrawError(temp_ask_amount, reserve_ask, "reserve_ask")
    temp_reserve_ask = reserve_ask - temp_ask_amount
    temp_reserve_bid = (
        checked_mul("reserve_product", reserve_bid, reserve_ask) // temp_reserve_ask
    )
    return temp_reserve_bid - reserve_bid


def _brackets(
    bid_amount: int,
    ask_amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
) -> bool:
    lower = _swap(bid_amount, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
    upper = _swap(bid_amount + 1, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
    return lower.ask_amount <= ask_amount <= upper.ask_amount


def inverse_swap(
    ask_amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
) -> int:
    """Find the bid amount that buys `ask_amount` (exact-output quoting).

    The result satisfies
    swap(bid).ask_amount <= ask_amount <= swap(bid + 1).ask_amount.

    Raises:
        ZeroAmountError: If ask_amount is zero
        InvalidReservesError: If either reserve is zero
        OverdrawError: If the pool cannot pay out ask_amount
    """
    require_amount("ask_amount", ask_amount)
    _require_reserves(reserve_bid, reserve_ask)
    require_ratio("fee_ratio", fee_ratio)
    require_ratio("tax_ratio", tax_ratio)
    if ask_amount == 0:
        raise ZeroAmountError("ask_amount")

    ceiling = MAX_U64 - reserve_bid - 1
    bid_amount = _inverse_estimate(
        ask_amount, reserve_bid, reserve_ask, fee_ratio, tax_ratio
    )
    if bid_amount <= ceiling and _brackets(
        bid_amount, ask_amount, reserve_bid, reserve_ask, fee_ratio, tax_ratio
    ):
        return bid_amount

    # Fee and tax rounding can push the closed form off by a few units;
    # fall back to bisection on the monotone swap curve.
    logger.debug(f"Inverse swap estimate {bid_amount} off, bisecting")
    if ceiling < 1:
        raise ArithmeticOverflowError("new_reserve_bid", reserve_bid + 1, 64)
    top = _swap(ceiling + 1, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
    if top.ask_amount < ask_amount:
        raise OverdrawError(ask_amount, top.ask_amount, "ask_amount")
    # Smallest b with swap(b).ask_amount >= ask_amount lies in (lo, hi]
    lo, hi = 0, ceiling + 1
    while hi - lo > 1:
        mid = (lo + hi) // 2
        quote = _swap(mid, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
        if quote.ask_amount >= ask_amount:
            hi = mid
        else:
            lo = mid
    return hi - 1


def slippage(
    bid_amount: int,
    reserve_bid: int,
    reserve_ask: int,
    fee_ratio: int,
    tax_ratio: int,
) -> int:
    """Price impact of a swap, scaled by RATIO_PRECISION.

    price = reserve_ask * RATIO_PRECISION / reserve_bid, before and after
    the swap; the result is |next - prev| * RATIO_PRECISION / prev.
    """
    require_amount("bid_amount", bid_amount)
    _require_reserves(reserve_bid, reserve_ask)
    require_ratio("fee_ratio", fee_ratio)
    require_ratio("tax_ratio", tax_ratio)

    quote = _swap(bid_amount, reserve_bid, reserve_ask, fee_ratio, tax_ratio)
    prev_price = reserve_ask * RATIO_PRECISION // reserve_bid
    if prev_price == 0:
        raise InvalidReservesError("price rounds to zero at RATIO_PRECISION")
    next_price = quote.new_reserve_ask * RATIO_PRECISION // quote.new_reserve_bid
    return abs(next_price - prev_price) * RATIO_PRECISION // prev_price
