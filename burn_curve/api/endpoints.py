"""API endpoints for the curve quote service.

Every endpoint is stateless: the caller supplies the remaining supply and
gets back what the curve would charge or pay at that point.
"""

import structlog
from fastapi import APIRouter, Query

from burn_curve.constants import MAX_TOKEN_SUPPLY
from burn_curve.curve import (
    CURVES,
    active_segment_index,
    compute_buy_token_exact_in,
    market_cap,
    spot_price,
)
from burn_curve.fees import SwapQuote, compute_fee, compute_swap_with_fee
from burn_curve.models import (
    BuyExactInRequest,
    CurveResponse,
    ErrorResponse,
    PriceResponse,
    QuoteResponse,
    SegmentResponse,
    SwapQuoteRequest,
)

logger = structlog.get_logger()

router = APIRouter()

# Engine rejections share one 400 body, see engine_error_handler in main
REJECTION_RESPONSES: dict[int | str, dict[str, object]] = {400: {"model": ErrorResponse}}


@router.get("/curve")
async def curve() -> CurveResponse:
    """Return the curve segment table, first segment first."""
    return CurveResponse(
        max_token_supply=MAX_TOKEN_SUPPLY,
        segments=[SegmentResponse.from_segment(segment) for segment in CURVES],
    )


@router.get("/price")
async def price(
    remaining_supply: int = Query(ge=1, le=MAX_TOKEN_SUPPLY),
) -> PriceResponse:
    """Spot price and market cap at a remaining supply.

    Display-only: these values are decimal approximations and never feed
    back into swap amounts.
    """
    spot = spot_price(remaining_supply)
    return PriceResponse(
        remaining_supply=remaining_supply,
        segment=active_segment_index(remaining_supply),
        spot_price=str(spot),
        market_cap=str(market_cap(spot)),
    )


@router.post("/quote/buy", responses=REJECTION_RESPONSES)
async def quote_buy(request: SwapQuoteRequest) -> QuoteResponse:
    """Price buying an exact number of tokens; the fee is added on top.

    Error Handling:
        - Amount at or above the remaining supply: 400 InvalidSwapAmount
        - Price above u64: 400 TooMuchNativeTokenRequired
    """
    quote = compute_swap_with_fee(request.amount_int, request.remaining_supply_int, True)
    logger.debug(
        "quote_buy",
        remaining_supply=request.remaining_supply_int,
        amount=quote.token_amount,
        native_amount=quote.native_amount,
        fee=quote.fee,
    )
    return QuoteResponse.from_quote(quote)


@router.post("/quote/sell", responses=REJECTION_RESPONSES)
async def quote_sell(request: SwapQuoteRequest) -> QuoteResponse:
    """Price selling an exact number of tokens; the fee comes out of the payout."""
    quote = compute_swap_with_fee(request.amount_int, request.remaining_supply_int, False)
    logger.debug(
        "quote_sell",
        remaining_supply=request.remaining_supply_int,
        amount=quote.token_amount,
        native_amount=quote.native_amount,
        fee=quote.fee,
    )
    return QuoteResponse.from_quote(quote)


@router.post("/quote/buy-exact-in", responses=REJECTION_RESPONSES)
async def quote_buy_exact_in(request: BuyExactInRequest) -> QuoteResponse:
    """How many tokens pay_amount lamports buy; the fee is added on top.

    The returned token_amount may be zero when the budget is too small to
    buy a single token.
    """
    pay_amount = request.pay_amount_int
    tokens = compute_buy_token_exact_in(pay_amount, request.remaining_supply_int)
    quote = SwapQuote(
        token_amount=tokens,
        native_amount=pay_amount,
        fee=compute_fee(pay_amount),
        is_buy=True,
    )
    logger.debug(
        "quote_buy_exact_in",
        remaining_supply=request.remaining_supply_int,
        pay_amount=pay_amount,
        token_amount=tokens,
    )
    return QuoteResponse.from_quote(quote)
