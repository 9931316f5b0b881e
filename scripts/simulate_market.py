#!/usr/bin/env python3
"""Replay a sequence of trades against a fresh in-memory market.

Each trade is ACTION:AMOUNT where ACTION is one of:
    buy       buy AMOUNT tokens
    sell      sell AMOUNT tokens
    exact-in  spend AMOUNT lamports (fee excluded) on tokens

Usage:
    # Buy 10% of supply, then sell half of it back
    python scripts/simulate_market.py buy:100000000000000 sell:50000000000000

    # Spend 1 SOL on the curve, with engine logs
    python scripts/simulate_market.py --verbose exact-in:1000000000
"""

import argparse
import logging
import sys
from pathlib import Path

import structlog

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from burn_curve.constants import LAMPORTS_PER_SOL, TOKEN_UNIT  # noqa: E402
from burn_curve.curve import CurveError, market_cap, spot_price  # noqa: E402
from burn_curve.fees import SwapQuote  # noqa: E402
from burn_curve.market import Market, MarketError  # noqa: E402
from burn_curve.safe_int import U64_MAX  # noqa: E402

logger = structlog.get_logger()

ACTIONS = ("buy", "sell", "exact-in")


def parse_trade(value: str) -> tuple[str, int]:
    """Parse an ACTION:AMOUNT argument."""
    action, sep, amount = value.partition(":")
    if not sep or action not in ACTIONS:
        raise argparse.ArgumentTypeError(f"expected one of {ACTIONS} as ACTION:AMOUNT, got {value!r}")
    try:
        parsed = int(amount.replace("_", ""))
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"amount must be an integer: {amount!r}") from err
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"amount must be positive: {amount!r}")
    return action, parsed


def execute(market: Market, action: str, amount: int) -> SwapQuote:
    """Run one trade with no slippage limit."""
    if action == "buy":
        return market.buy_token(amount, max_pay=U64_MAX)
    if action == "sell":
        return market.sell_token(amount, min_receive=0)
    return market.buy_token_exact_in(amount, min_receive=1)


def print_quote(action: str, quote: SwapQuote, market: Market) -> None:
    """Print a trade and the market state after it."""
    tokens = quote.token_amount / TOKEN_UNIT
    total = quote.total / LAMPORTS_PER_SOL
    verb = "paid" if quote.is_buy else "received"
    price = spot_price(market.remaining_supply)
    print(f"{action:<9} {tokens:>22,.6f} tokens  {verb} {total:,.9f} SOL (fee {quote.fee} lamports)")
    print(
        f"{'':<9} remaining {market.remaining_supply:,}  spot {price} SOL  "
        f"mcap {market_cap(price)} SOL"
    )


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Replay trades against an in-memory bonding-curve market",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "trades",
        type=parse_trade,
        nargs="+",
        metavar="ACTION:AMOUNT",
        help="Trades to execute in order",
    )
    parser.add_argument(
        "--symbol",
        default="DEMO",
        help="Market symbol (default: DEMO)",
    )
    parser.add_argument(
        "--transfer-hook",
        action="store_true",
        help="Create the market with the transfer hook enabled",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show engine logs",
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    try:
        market = Market(symbol=args.symbol, transfer_hook_enabled=args.transfer_hook)
    except MarketError as err:
        print(f"Error: {err}")
        return 1

    print(f"Market {market.symbol}")
    print("=" * 60)

    for action, amount in args.trades:
        try:
            quote = execute(market, action, amount)
        except (CurveError, MarketError) as err:
            logger.error("trade_failed", action=action, amount=amount, error=type(err).__name__)
            print(f"{action:<9} failed: {type(err).__name__}: {err}")
            return 1
        print_quote(action, quote, market)

    print()
    print(f"Sold supply: {market.sold_supply:,}")
    print(f"Free transfer allowed: {market.free_transfer_allowed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
