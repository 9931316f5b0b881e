"""Protocol fee calculation.

The fee is 1% of the native amount of a swap, rounded up. Results leave
through SafeInt.to_u64 so a value outside u64 fails loudly.
"""

from __future__ import annotations

from burn_curve.constants import FEE_DENOMINATOR
from burn_curve.curve.swap import compute_swap
from burn_curve.fees.result import SwapQuote
from burn_curve.math import ceil_div
from burn_curve.safe_int import S

__all__ = ["compute_fee", "split_pay_amount", "compute_swap_with_fee"]


def compute_fee(amount: int) -> int:
    """Fee owed on a native amount: ⌈amount / 100⌉.

    Examples:
        >>> compute_fee(10000)
        100
        >>> compute_fee(33)
        1
    """
    return S(ceil_div(amount, FEE_DENOMINATOR)).to_u64()


def split_pay_amount(max_total: int) -> tuple[int, int]:
    """Split a capped budget into (pay_amount, fee) with pay + fee == max_total.

    Solves pay * (1 + 1/100) = max_total for pay, rounding up:

        pay = ⌈max_total * 100 / 101⌉
        fee = max_total - pay

    Rounding pay up keeps the split inside the cap; the fee taken is the
    remainder, which can be one lamport less than compute_fee(pay).

    Args:
        max_total: Total lamports available for pay and fee together (u64)

    Returns:
        Tuple of (pay_amount, fee)

    Examples:
        >>> split_pay_amount(10000)
        (9901, 99)
    """
    total = S(max_total)
    pay = S(ceil_div(max_total * FEE_DENOMINATOR, FEE_DENOMINATOR + 1))
    fee = total - pay
    return pay.to_u64(), fee.to_u64()


def compute_swap_with_fee(amount: int, remaining_supply: int, is_buy: bool) -> SwapQuote:
    """Price a swap of `amount` tokens and attach the protocol fee.

    For a buy the trader pays native_amount + fee; for a sell the trader
    receives native_amount - fee (see SwapQuote.total).

    Raises:
        InvalidSwapAmount: If the swap is outside the curve's range
        TooMuchNativeTokenRequired: If the native amount does not fit in u64
    """
    native_amount = compute_swap(amount, remaining_supply, is_buy)
    return SwapQuote(
        token_amount=amount,
        native_amount=native_amount,
        fee=compute_fee(native_amount),
        is_buy=is_buy,
    )
