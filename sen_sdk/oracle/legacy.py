"""Legacy three-asset (S/A/B) pools.

Older pools held a primary token S next to A and B. Their LP supply is
seeded with the cube root of the three deposits and later deposits are
limited by whichever side is scarcest relative to its reserve. These pools
have no taxman and are not interchangeable with the two-asset pools of
`liquidity`.
"""

from typing import Tuple

from ..program.errors import InvalidReservesError, ZeroAmountError
from ..program.types import TriDepositResult
from ..program.utils import check_u64, checked_mul, require_amount
from .fixed_point import icbrt


def tri_extract(
    deltas: Tuple[int, int, int],
    reserves: Tuple[int, int, int],
) -> Tuple[Tuple[int, int, int], int]:
    """Largest triple not above `deltas` in the ratio of `reserves`.

    Returns the accepted triple and the index of the limiting side.

    Raises:
        InvalidReservesError: If any reserve is zero
    """
    if any(reserve == 0 for reserve in reserves):
        raise InvalidReservesError(f"reserves={reserves}")
    if any(delta == 0 for delta in deltas):
        return (0, 0, 0), 0

    # Side k limits when delta_k / reserve_k is the smallest ratio
    limit = 0
    for i in (1, 2):
        if deltas[i] * reserves[limit] < deltas[limit] * reserves[i]:
            limit = i
    accepted = tuple(
        deltas[i]
        if i == limit
        else checked_mul("delta * reserve", deltas[limit], reserves[i])
        // reserves[limit]
        for i in range(3)
    )
    return accepted, limit


def tri_deposit(
    delta_s: int,
    delta_a: int,
    delta_b: int,
    reserve_s: int,
    reserve_a: int,
    reserve_b: int,
    lp_supply: int,
) -> TriDepositResult:
    """Deposit into a three-asset pool.

    Raises:
        ZeroAmountError: If all deltas are zero, or any is zero on an
            empty pool
        InvalidReservesError: If the pool is partially empty or has
            reserves but no LP supply
    """
    deltas = (delta_s, delta_a, delta_b)
    reserves = (reserve_s, reserve_a, reserve_b)
    for name, value in zip(("delta_s", "delta_a", "delta_b"), deltas):
        require_amount(name, value)
    for name, value in zip(("reserve_s", "reserve_a", "reserve_b"), reserves):
        require_amount(name, value)
    require_amount("lp_supply", lp_supply)
    if not any(deltas):
        raise ZeroAmountError("delta_s, delta_a and delta_b")

    if not any(reserves):
        if not all(deltas):
            raise ZeroAmountError("delta_s, delta_a or delta_b")
        # s * a * b needs 192 bits; its cube root is back within u64
        minted_lp = icbrt(delta_s * delta_a * delta_b)
        accepted = deltas
    else:
        if not all(reserves):
            raise InvalidReservesError(f"reserves={reserves}")
        if lp_supply == 0:
            raise InvalidReservesError("pool has reserves but no LP supply")
        accepted, limit = tri_extract(deltas, reserves)
        minted_lp = (
            checked_mul("accepted * lp_supply", accepted[limit], lp_supply)
            // reserves[limit]
        )

    return TriDepositResult(
        accepted_s=accepted[0],
        accepted_a=accepted[1],
        accepted_b=accepted[2],
        minted_lp=minted_lp,
        new_reserve_s=check_u64("new_reserve_s", reserve_s + accepted[0]),
        new_reserve_a=check_u64("new_reserve_a", reserve_a + accepted[1]),
        new_reserve_b=check_u64("new_reserve_b", reserve_b + accepted[2]),
        new_lp_supply=check_u64("new_lp_supply", lp_supply + minted_lp),
    )
