"""Pydantic models for the quote API requests and responses."""

from pydantic import BaseModel, Field

from burn_curve.curve.segments import CurveSegment
from burn_curve.fees.result import SwapQuote
from burn_curve.models.types import U64


class SwapQuoteRequest(BaseModel):
    """Quote a buy or sell of an exact token amount."""

    remaining_supply: U64 = Field(description="Tokens still on the curve.")
    amount: U64 = Field(description="Tokens to buy or sell.")

    @property
    def remaining_supply_int(self) -> int:
        """Remaining supply as integer for calculations."""
        return int(self.remaining_supply)

    @property
    def amount_int(self) -> int:
        """Token amount as integer for calculations."""
        return int(self.amount)


class BuyExactInRequest(BaseModel):
    """Quote how many tokens a fixed lamport budget buys."""

    remaining_supply: U64 = Field(description="Tokens still on the curve.")
    pay_amount: U64 = Field(description="Lamports to spend on the curve, fee excluded.")

    @property
    def remaining_supply_int(self) -> int:
        """Remaining supply as integer for calculations."""
        return int(self.remaining_supply)

    @property
    def pay_amount_int(self) -> int:
        """Pay amount as integer for calculations."""
        return int(self.pay_amount)


class QuoteResponse(BaseModel):
    """A priced swap, fee included."""

    is_buy: bool
    token_amount: U64
    native_amount: U64 = Field(description="Lamports moved along the curve, before fees.")
    fee: U64
    total: U64 = Field(description="Lamports paid (buy) or received (sell) by the trader.")

    @classmethod
    def from_quote(cls, quote: SwapQuote) -> "QuoteResponse":
        """Build a response from an engine quote."""
        return cls(
            is_buy=quote.is_buy,
            token_amount=quote.token_amount,
            native_amount=quote.native_amount,
            fee=quote.fee,
            total=quote.total,
        )


class SegmentResponse(BaseModel):
    """One row of the curve table."""

    exponent: int
    k_scaled: str
    c_scaled: str
    supply_at_boundary: U64
    native_amount_at_boundary: str = Field(
        description="Cumulative lamports paid in at the boundary; may exceed u64."
    )

    @classmethod
    def from_segment(cls, segment: CurveSegment) -> "SegmentResponse":
        """Build a response row from a curve segment."""
        return cls(
            exponent=segment.exponent,
            k_scaled=str(segment.k_scaled),
            c_scaled=str(segment.c_scaled),
            supply_at_boundary=segment.supply_at_boundary,
            native_amount_at_boundary=str(segment.native_amount_at_boundary),
        )


class CurveResponse(BaseModel):
    """The full curve table, first segment first."""

    max_token_supply: U64
    segments: list[SegmentResponse]


class PriceResponse(BaseModel):
    """Display-only spot price at a remaining supply."""

    remaining_supply: U64
    segment: int = Field(description="Index of the active curve segment.")
    spot_price: str = Field(description="SOL per whole token, decimal string.")
    market_cap: str = Field(description="Fully diluted market cap in SOL, decimal string.")


class ErrorResponse(BaseModel):
    """Body returned with HTTP 400 when the engine rejects a request."""

    error: str = Field(description="Error class name.")
    detail: str
