"""Fee handling for the curve.

Usage:
    from burn_curve.fees import compute_fee, split_pay_amount, compute_swap_with_fee

    quote = compute_swap_with_fee(amount, remaining_supply, is_buy=True)
    charge = quote.total  # curve amount + 1% fee

    pay, fee = split_pay_amount(available)  # pay + fee == available
"""

from burn_curve.fees.calculator import compute_fee, compute_swap_with_fee, split_pay_amount
from burn_curve.fees.result import SwapQuote

__all__ = [
    "compute_fee",
    "split_pay_amount",
    "compute_swap_with_fee",
    "SwapQuote",
]
