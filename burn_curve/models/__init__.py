"""Pydantic models for the quote API."""

from burn_curve.models.quote import (
    BuyExactInRequest,
    CurveResponse,
    ErrorResponse,
    PriceResponse,
    QuoteResponse,
    SegmentResponse,
    SwapQuoteRequest,
)
from burn_curve.models.types import U64, validate_u64

__all__ = [
    # Types
    "U64",
    "validate_u64",
    # Requests
    "SwapQuoteRequest",
    "BuyExactInRequest",
    # Responses
    "QuoteResponse",
    "SegmentResponse",
    "CurveResponse",
    "PriceResponse",
    "ErrorResponse",
]
