"""Market error classes.

These errors reject a trade before any state changes.
"""


class MarketError(Exception):
    """Base error for market operations."""

    pass


class AmountCannotBeZero(MarketError):
    """Trade amount or budget is zero."""

    pass


class SellAmountTooLarge(MarketError):
    """Sell exceeds the tokens sold off the curve so far."""

    pass


class PayAmountExceedsMaxPay(MarketError):
    """Price plus fee is above the trader's limit."""

    pass


class ReceiveAmountTooSmall(MarketError):
    """Trader would receive less than their minimum."""

    pass


class CannotUseThisInstruction(MarketError):
    """Operation is not available on this market in its current state."""

    pass


class InvalidSymbolLength(MarketError):
    """Symbol is shorter or longer than allowed."""

    pass


class InvalidSymbol(MarketError):
    """Symbol contains characters other than A-Z and 0-9."""

    pass
