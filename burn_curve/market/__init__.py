"""Market state owning a curve's remaining supply.

Usage:
    from burn_curve.market import Market

    market = Market(symbol="ABC")
    quote = market.buy_token(buy_amount=1_000_000, max_pay=10**9)
"""

from burn_curve.market.errors import (
    AmountCannotBeZero,
    CannotUseThisInstruction,
    InvalidSymbol,
    InvalidSymbolLength,
    MarketError,
    PayAmountExceedsMaxPay,
    ReceiveAmountTooSmall,
    SellAmountTooLarge,
)
from burn_curve.market.state import Market

__all__ = [
    "Market",
    "MarketError",
    "AmountCannotBeZero",
    "SellAmountTooLarge",
    "PayAmountExceedsMaxPay",
    "ReceiveAmountTooSmall",
    "CannotUseThisInstruction",
    "InvalidSymbolLength",
    "InvalidSymbol",
]
