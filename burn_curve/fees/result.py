"""Swap quote result type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SwapQuote:
    """Result of pricing a swap, fee included.

    Quotes are created per call and never stored by the engine; recording
    one is up to the caller.

    Attributes:
        token_amount: Tokens bought from or sold to the curve.
        native_amount: Lamports moved along the curve, before fees.
        fee: Protocol fee in lamports.
        is_buy: True for a buy, False for a sell.

    Examples:
        # Buying: the trader pays the curve amount plus the fee
        quote = SwapQuote(token_amount=10, native_amount=1000, fee=10, is_buy=True)
        assert quote.total == 1010

        # Selling: the fee comes out of the payout
        quote = SwapQuote(token_amount=10, native_amount=1000, fee=10, is_buy=False)
        assert quote.total == 990
    """

    token_amount: int
    native_amount: int
    fee: int
    is_buy: bool = True

    @property
    def total(self) -> int:
        """Lamports the trader pays (buy) or receives (sell)."""
        if self.is_buy:
            return self.native_amount + self.fee
        return self.native_amount - self.fee
