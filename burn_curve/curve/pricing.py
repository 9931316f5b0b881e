"""Forward pricing: cumulative native amount at a remaining supply.

Evaluates one segment's curve y = k / x^n - c in fixed-point integers.
The rounding direction chosen by the caller is applied to every internal
division. The result stays within one lamport of the exact value:

- round_up=True for the far end of a buy and the near end of a sell
- round_up=False for the opposite ends

Combining the two keeps every quote in the protocol's favor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from burn_curve.constants import MULTIPLIER, SUPPLY_MULTIPLIER
from burn_curve.math import div_with_rounding
from burn_curve.safe_int import S

if TYPE_CHECKING:
    from burn_curve.curve.segments import CurveSegment

__all__ = ["calculate_curve"]


def calculate_curve(supply: int, round_up: bool, segment: CurveSegment) -> int:
    """Cumulative native amount (lamports) at the given remaining supply.

    Formula: y = k_scaled / pow_x - c_scaled, where pow_x is
    (supply / MAX_TOKEN_SUPPLY)^n scaled by MULTIPLIER.

    Args:
        supply: Remaining token supply, must be > 0
        round_up: Rounding direction for every division in the computation
        segment: Curve segment to evaluate

    Returns:
        Native amount as an unbounded integer (fits u128 for valid supplies)

    Raises:
        DivisionByZero: If supply is zero
        Underflow: If supply lies far above the segment's valid range
    """
    if segment.exponent > 1:
        pow_x = _pow(supply, segment.exponent, round_up)
    else:
        pow_x = supply * SUPPLY_MULTIPLIER

    y = div_with_rounding(segment.k_scaled, pow_x, round_up)
    return (S(y) - segment.c_scaled).value


def _pow(supply: int, exponent: int, round_up: bool) -> int:
    """(supply * SUPPLY_MULTIPLIER)^exponent rescaled to MULTIPLIER units.

    Exponentiation by squaring; each product is divided back down by
    MULTIPLIER with the requested rounding.
    """
    result = MULTIPLIER
    base = supply * SUPPLY_MULTIPLIER
    n = exponent
    while n > 0:
        if n % 2 == 1:
            result = div_with_rounding(result * base, MULTIPLIER, round_up)
        base = div_with_rounding(base * base, MULTIPLIER, round_up)
        n //= 2
    return result
