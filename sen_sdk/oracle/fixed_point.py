"""Integer roots used by the liquidity math.

Both roots are exact floors computed on Python ints only, so they agree with
the program's integer square root for every input.
"""

import math


def isqrt(n: int) -> int:
    """Largest r such that r * r <= n."""
    if n < 0:
        raise ValueError(f"isqrt of negative number: {n}")
    return math.isqrt(n)


def icbrt(n: int) -> int:
    """Largest r such that r ** 3 <= n.

    Newton iteration from an over-estimate; the sequence decreases
    monotonically until it reaches the floor.
    """
    if n < 0:
        raise ValueError(f"icbrt of negative number: {n}")
    if n < 2:
        return n
    # 2 ** ceil(bits / 3) is always >= cbrt(n)
    x = 1 << -(-n.bit_length() // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y
