"""Inverse solver: tokens purchasable on one segment for a native budget.

The terminal segment (n = 1) inverts in closed form. The n = 2 and n = 4
segments have no practical closed-form inverse in fixed-point integers, so
they are inverted by bisection with a bounded error of FIND_ROOT_MAX_ERROR
base units. Both paths round toward delivering fewer tokens.

Worst-case bisection cost is log2(segment_width / FIND_ROOT_MAX_ERROR),
about 33 iterations for the widest segment.
"""

from __future__ import annotations

from burn_curve.constants import FIND_ROOT_MAX_ERROR, SUPPLY_MULTIPLIER
from burn_curve.curve.errors import BuyAmountTooLarge
from burn_curve.curve.pricing import calculate_curve
from burn_curve.curve.segments import CURVE_LAST, CurveSegment
from burn_curve.math import ceil_div
from burn_curve.safe_int import S

__all__ = ["find_root"]


def find_root(
    remaining_supply: int,
    remaining_supply_native_value: int,
    pay_amount: int,
    segment: CurveSegment,
) -> int:
    """Largest token amount buyable on `segment` without exceeding pay_amount.

    Args:
        remaining_supply: Current remaining supply, inside the segment
        remaining_supply_native_value: calculate_curve(remaining_supply, False, segment),
            the value compute_swap subtracts when pricing the result
        pay_amount: Native budget to spend entirely within this segment
        segment: Segment the purchase happens on

    Returns:
        Token amount to deliver

    Raises:
        BuyAmountTooLarge: On the terminal segment, if the budget cannot buy a
            whole token without reaching the last, unsellable unit

    Examples:
        >>> from burn_curve.constants import MAX_TOKEN_SUPPLY
        >>> from burn_curve.curve.segments import CURVE_1
        >>> start = calculate_curve(MAX_TOKEN_SUPPLY, True, CURVE_1)
        >>> find_root(MAX_TOKEN_SUPPLY, start, 0, CURVE_1)
        0
    """
    target_native = S(remaining_supply_native_value) + pay_amount

    if segment == CURVE_LAST:
        # y = k / (x * SUPPLY_MULTIPLIER) - c  =>  x = k / ((y + c) * SUPPLY_MULTIPLIER)
        denominator = (target_native + segment.c_scaled) * SUPPLY_MULTIPLIER
        target_supply = ceil_div(segment.k_scaled, denominator.value)
        if target_supply >= remaining_supply:
            raise BuyAmountTooLarge(
                f"Budget {pay_amount} cannot buy a token at remaining supply "
                f"{remaining_supply} without taking the last unit"
            )
        return (S(remaining_supply) - target_supply).value

    # high stays on the affordable side of the target, low on the other
    low = S(segment.supply_at_boundary)
    high = S(remaining_supply)
    while high - low > FIND_ROOT_MAX_ERROR:
        mid = (low + high) >> 1
        # Round up so high moves as little as possible
        y = calculate_curve(mid.value, True, segment)
        if target_native > y:
            high = mid
        else:
            low = mid
    return (S(remaining_supply) - high).value
