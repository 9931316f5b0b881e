"""In-memory market: the owner of a curve's remaining supply.

The curve engine is pure; Market is the caller that reads the remaining
supply, asks the engine for a price, checks the trader's limits and only
then commits the new supply. Every operation is all-or-nothing: when it
raises, the market is unchanged.

Token and lamport transfers are out of scope. Each operation returns the
SwapQuote describing what would be transferred.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from burn_curve.constants import (
    FREE_TRANSFER_THRESHOLD,
    MAX_TOKEN_SUPPLY,
    SYMBOL_BURN,
    SYMBOL_MAX_LEN,
    SYMBOL_MIN_LEN,
)
from burn_curve.curve.errors import BuyAmountTooLarge, TooMuchNativeTokenRequired
from burn_curve.curve.swap import compute_buy_token_exact_in, compute_swap
from burn_curve.fees import SwapQuote, compute_fee, split_pay_amount
from burn_curve.market.errors import (
    AmountCannotBeZero,
    CannotUseThisInstruction,
    InvalidSymbol,
    InvalidSymbolLength,
    PayAmountExceedsMaxPay,
    ReceiveAmountTooSmall,
    SellAmountTooLarge,
)

logger = structlog.get_logger()


@dataclass
class Market:
    """A token market priced by the bonding curve.

    Attributes:
        symbol: Market symbol, 2-10 characters of A-Z and 0-9
        transfer_hook_enabled: Whether token transfers are gated by a hook
        remaining_supply: Tokens still on the curve, in [1, MAX_TOKEN_SUPPLY]
        free_transfer_allowed: Whether tokens may move freely. Starts as the
            opposite of transfer_hook_enabled and switches on once the
            remaining supply reaches FREE_TRANSFER_THRESHOLD.
    """

    symbol: str
    transfer_hook_enabled: bool = False
    remaining_supply: int = MAX_TOKEN_SUPPLY
    free_transfer_allowed: bool = field(default=False)

    def __post_init__(self) -> None:
        self.check_symbol(self.symbol)
        if not self.transfer_hook_enabled:
            self.free_transfer_allowed = True

    @property
    def sold_supply(self) -> int:
        """Tokens currently held outside the curve."""
        return MAX_TOKEN_SUPPLY - self.remaining_supply

    @staticmethod
    def check_symbol(symbol: str) -> None:
        """Validate a market symbol.

        Raises:
            InvalidSymbolLength: If the symbol is not 2-10 characters long
            InvalidSymbol: If it contains anything other than A-Z or 0-9
        """
        if not SYMBOL_MIN_LEN <= len(symbol) <= SYMBOL_MAX_LEN:
            raise InvalidSymbolLength(
                f"Symbol length {len(symbol)} outside {SYMBOL_MIN_LEN}..{SYMBOL_MAX_LEN}"
            )
        if not all(ch.isascii() and (ch.isupper() or ch.isdigit()) for ch in symbol):
            raise InvalidSymbol(f"Symbol {symbol!r} must be uppercase ASCII letters or digits")

    def buy_token(self, buy_amount: int, max_pay: int) -> SwapQuote:
        """Buy an exact number of tokens, paying at most max_pay including fee.

        Raises:
            CannotUseThisInstruction: On the BURN market before free transfer
            AmountCannotBeZero: If buy_amount is zero
            BuyAmountTooLarge: If buy_amount is not below the remaining supply
            TooMuchNativeTokenRequired: If the price does not fit in u64
            PayAmountExceedsMaxPay: If price + fee > max_pay
        """
        if self.symbol == SYMBOL_BURN and not self.free_transfer_allowed:
            raise CannotUseThisInstruction("BURN tokens can only be bought by burning")
        if buy_amount == 0:
            raise AmountCannotBeZero("Buy amount cannot be zero")
        if buy_amount >= self.remaining_supply:
            raise BuyAmountTooLarge(
                f"Buy amount {buy_amount} >= remaining supply {self.remaining_supply}"
            )

        pay_amount = compute_swap(buy_amount, self.remaining_supply, True)
        fee = compute_fee(pay_amount)
        if pay_amount + fee > max_pay:
            logger.warning(
                "buy_rejected",
                symbol=self.symbol,
                buy_amount=buy_amount,
                pay_amount=pay_amount,
                fee=fee,
                max_pay=max_pay,
            )
            raise PayAmountExceedsMaxPay(f"Pay {pay_amount} + fee {fee} exceeds max pay {max_pay}")

        quote = SwapQuote(token_amount=buy_amount, native_amount=pay_amount, fee=fee, is_buy=True)
        self._commit_buy(quote)
        return quote

    def buy_token_exact_in(self, pay_amount: int, min_receive: int) -> SwapQuote:
        """Spend exactly pay_amount on the curve, plus a fee on top.

        Raises:
            AmountCannotBeZero: If pay_amount is zero
            ReceiveAmountTooSmall: If fewer than min_receive tokens (or none
                at all) would be bought
        """
        if pay_amount == 0:
            raise AmountCannotBeZero("Pay amount cannot be zero")

        buy_amount = compute_buy_token_exact_in(pay_amount, self.remaining_supply)
        if buy_amount == 0 or buy_amount < min_receive:
            logger.warning(
                "buy_exact_in_rejected",
                symbol=self.symbol,
                pay_amount=pay_amount,
                buy_amount=buy_amount,
                min_receive=min_receive,
            )
            raise ReceiveAmountTooSmall(
                f"Pay {pay_amount} buys {buy_amount} tokens, minimum is {max(min_receive, 1)}"
            )

        quote = SwapQuote(
            token_amount=buy_amount,
            native_amount=pay_amount,
            fee=compute_fee(pay_amount),
            is_buy=True,
        )
        self._commit_buy(quote)
        return quote

    def sell_token(self, sell_amount: int, min_receive: int) -> SwapQuote:
        """Sell tokens back to the curve; the fee is taken from the payout.

        Raises:
            AmountCannotBeZero: If sell_amount is zero
            SellAmountTooLarge: If more than the sold supply is returned
            ReceiveAmountTooSmall: If the payout after fee is below min_receive
        """
        if sell_amount == 0:
            raise AmountCannotBeZero("Sell amount cannot be zero")
        if sell_amount > self.sold_supply:
            raise SellAmountTooLarge(
                f"Sell amount {sell_amount} exceeds sold supply {self.sold_supply}"
            )

        native_amount = compute_swap(sell_amount, self.remaining_supply, False)
        fee = compute_fee(native_amount)
        quote = SwapQuote(
            token_amount=sell_amount,
            native_amount=native_amount,
            fee=fee,
            is_buy=False,
        )
        if quote.total < min_receive:
            logger.warning(
                "sell_rejected",
                symbol=self.symbol,
                sell_amount=sell_amount,
                receive_amount=quote.total,
                min_receive=min_receive,
            )
            raise ReceiveAmountTooSmall(
                f"Sell of {sell_amount} receives {quote.total}, minimum is {min_receive}"
            )

        self.remaining_supply += sell_amount
        self._update_free_transfer_allowed()
        logger.info(
            "sell_token",
            symbol=self.symbol,
            sell_amount=sell_amount,
            receive_amount=quote.total,
            fee=fee,
            remaining_supply=self.remaining_supply,
        )
        return quote

    def use_funds_buy_burn(self, max_buy_amount: int, available_native: int) -> SwapQuote | None:
        """Spend spare market funds buying tokens back off the curve.

        Buys min(remaining_supply - 1, max_buy_amount) tokens if the funds
        cover price and fee; otherwise splits the funds into pay and fee
        with split_pay_amount and buys as many tokens as the pay part
        affords.

        Args:
            max_buy_amount: Upper bound on tokens to buy
            available_native: Lamports available for price and fee together

        Returns:
            The executed quote, or None when nothing could be bought

        Raises:
            AmountCannotBeZero: If max_buy_amount is zero
        """
        if max_buy_amount == 0:
            raise AmountCannotBeZero("Max buy amount cannot be zero")

        # Keep the last unit on the curve
        buy_amount = min(self.remaining_supply - 1, max_buy_amount)
        if available_native == 0 or buy_amount == 0:
            return None

        try:
            pay_amount = compute_swap(buy_amount, self.remaining_supply, True)
            fee = compute_fee(pay_amount)
            affordable = pay_amount + fee <= available_native
        except TooMuchNativeTokenRequired:
            # A price above u64 is never covered by a u64 balance
            affordable = False

        if not affordable:
            pay_amount, fee = split_pay_amount(available_native)
            buy_amount = compute_buy_token_exact_in(pay_amount, self.remaining_supply)
            if buy_amount == 0:
                return None

        quote = SwapQuote(token_amount=buy_amount, native_amount=pay_amount, fee=fee, is_buy=True)
        self.remaining_supply -= buy_amount
        logger.info(
            "use_funds_buy_burn",
            symbol=self.symbol,
            buy_amount=buy_amount,
            pay_amount=pay_amount,
            fee=fee,
            remaining_supply=self.remaining_supply,
        )
        return quote

    def _commit_buy(self, quote: SwapQuote) -> None:
        self.remaining_supply -= quote.token_amount
        self._update_free_transfer_allowed()
        logger.info(
            "buy_token",
            symbol=self.symbol,
            buy_amount=quote.token_amount,
            pay_amount=quote.native_amount,
            fee=quote.fee,
            remaining_supply=self.remaining_supply,
        )

    def _update_free_transfer_allowed(self) -> None:
        """Unlock free transfer once enough supply has left the curve.

        The BURN market is exempt: trading never changes its flag.
        """
        if self.free_transfer_allowed or self.symbol == SYMBOL_BURN:
            return
        self.free_transfer_allowed = self.remaining_supply <= FREE_TRANSFER_THRESHOLD
