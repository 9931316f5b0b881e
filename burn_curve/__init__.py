"""Burn Curve - integer bonding-curve pricing for a fixed token supply."""

from burn_curve.curve import compute_buy_token_exact_in, compute_swap
from burn_curve.fees import SwapQuote, compute_swap_with_fee
from burn_curve.market import Market

__version__ = "0.1.0"
__all__ = [
    "compute_swap",
    "compute_buy_token_exact_in",
    "compute_swap_with_fee",
    "SwapQuote",
    "Market",
    "__version__",
]
