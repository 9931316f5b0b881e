"""Bonding curve swap engine.

This package prices trades against the fixed token supply:
- segments: the immutable three-segment curve table
- pricing: calculate_curve, the forward price function
- solver: find_root, the inverse on a single segment
- swap: compute_swap and compute_buy_token_exact_in, which walk the table
- spot: display-only spot price and market cap

Usage:
    from burn_curve.curve import compute_swap, compute_buy_token_exact_in

    pay = compute_swap(amount, remaining_supply, is_buy=True)
    tokens = compute_buy_token_exact_in(pay_amount, remaining_supply)
"""

from burn_curve.curve.errors import (
    BuyAmountTooLarge,
    CurveError,
    InvalidSwapAmount,
    TooMuchNativeTokenRequired,
)
from burn_curve.curve.pricing import calculate_curve
from burn_curve.curve.segments import (
    CURVE_1,
    CURVE_2,
    CURVE_3,
    CURVE_LAST,
    CURVES,
    CurveSegment,
    active_segment_index,
    segment_upper_bound,
)
from burn_curve.curve.solver import find_root
from burn_curve.curve.spot import market_cap, search_curve, spot_price
from burn_curve.curve.swap import compute_buy_token_exact_in, compute_swap

__all__ = [
    # Table
    "CurveSegment",
    "CURVE_1",
    "CURVE_2",
    "CURVE_3",
    "CURVE_LAST",
    "CURVES",
    "active_segment_index",
    "segment_upper_bound",
    # Pricing
    "calculate_curve",
    "find_root",
    "compute_swap",
    "compute_buy_token_exact_in",
    "search_curve",
    "spot_price",
    "market_cap",
    # Errors
    "CurveError",
    "TooMuchNativeTokenRequired",
    "BuyAmountTooLarge",
    "InvalidSwapAmount",
]
