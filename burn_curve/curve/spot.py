"""Spot price and market capitalisation.

Display-only helpers: the marginal price of the curve at a remaining supply,
expressed in SOL per whole token. These use Decimal and must never feed back
into swap amounts, which are integer-only.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal

from burn_curve.constants import LAMPORTS_PER_SOL, MAX_TOKEN_SUPPLY, TOKEN_UNIT
from burn_curve.curve.pricing import calculate_curve
from burn_curve.curve.segments import CURVES, CurveSegment, active_segment_index

__all__ = ["PRICE_CONTEXT", "search_curve", "spot_price", "market_cap"]

# Prices are reported to 15 significant digits, truncated
PRICE_CONTEXT = decimal.Context(prec=15, rounding=ROUND_DOWN)


def search_curve(supply: int) -> CurveSegment:
    """Segment that prices the next token bought at this remaining supply."""
    return CURVES[active_segment_index(supply)]


def spot_price(remaining_supply: int) -> Decimal:
    """Marginal price in SOL per whole token at remaining_supply.

    The derivative of y = k / x^n - c is -n * (y + c) / x, so the price of
    the next token is n * (y + c) / x.
    """
    segment = search_curve(remaining_supply)
    y = calculate_curve(remaining_supply, False, segment)
    with decimal.localcontext(PRICE_CONTEXT):
        native = Decimal(y + segment.c_scaled) / Decimal(LAMPORTS_PER_SOL)
        tokens = Decimal(remaining_supply) / Decimal(TOKEN_UNIT)
        return Decimal(segment.exponent) * native / tokens


def market_cap(price: Decimal) -> Decimal:
    """Fully diluted market cap in SOL for a per-token price."""
    with decimal.localcontext(PRICE_CONTEXT):
        return price * (Decimal(MAX_TOKEN_SUPPLY) / Decimal(TOKEN_UNIT))
