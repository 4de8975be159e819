"""Conversions between human-readable amounts and raw token units."""

from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Union

from ..program.constants import RATIO_PRECISION


class ScalingError(Exception):
    """Error during amount scaling."""

    pass


def _require_decimals(decimals: int) -> None:
    if not isinstance(decimals, int) or decimals < 0:
        raise ScalingError(
            f"Invalid decimals: {decimals} (must be a non-negative int)"
        )


def decimalize(value: Union[str, int, Decimal], decimals: int) -> int:
    """Scale a human amount to raw units, truncating extra fraction digits.

    Example: decimalize("1.5", 9) == 1_500_000_000

    Raises:
        ScalingError: If the value is not a number or decimals is invalid
    """
    _require_decimals(decimals)
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise ScalingError(f"Invalid decimal input: {e}")
    if not amount.is_finite():
        raise ScalingError(f"Invalid decimal input: {value}")

    scaled = (amount * (Decimal(10) ** decimals)).quantize(
        Decimal(1), rounding=ROUND_DOWN
    )
    return int(scaled)


def undecimalize(amount: int, decimals: int) -> str:
    """Format raw units as a human amount without trailing zeros.

    Example: undecimalize(1_500_000_000, 9) == "1.5"
    """
    _require_decimals(decimals)
    sign = "-" if amount < 0 else ""
    integer, fraction = divmod(abs(amount), 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0")
    if not fraction_str:
        return f"{sign}{integer}"
    return f"{sign}{integer}.{fraction_str}"


def div(a: int, b: int) -> float:
    """Divide two raw amounts, keeping 9 decimal places.

    Raises:
        ScalingError: If b is zero
    """
    if not b:
        raise ScalingError("Cannot be divided by 0")
    if not a:
        return 0.0
    quotient = a * RATIO_PRECISION // b
    return float(Decimal(quotient) / Decimal(RATIO_PRECISION))
