"""Segment walker: swaps that span one or more curve segments.

A swap moves the remaining supply from its current value to a target value.
When the move crosses a segment boundary the walk clamps at the boundary and
continues on the next segment with what is left of the trade. The walks are
written as folds over the segment table: each *_through_segment step takes
the walk state and one segment index and returns the new state, leaving the
state untouched for segments the trade does not reach.

Rounding:
    buy   cost   = y(end, up)   - y(start, down)   (trader pays at least fair value)
    sell  payout = y(start, down) - y(end, up)     (trader receives at most fair value)

Segment boundaries are exact under both rounding directions, so summing the
per-segment deltas gives the same result as evaluating the two endpoints.
"""

from __future__ import annotations

from functools import reduce
from typing import NamedTuple

from burn_curve.constants import MAX_TOKEN_SUPPLY
from burn_curve.curve.errors import BuyAmountTooLarge, InvalidSwapAmount, TooMuchNativeTokenRequired
from burn_curve.curve.pricing import calculate_curve
from burn_curve.curve.segments import CURVE_LAST, CURVES, CurveSegment, segment_upper_bound
from burn_curve.curve.solver import find_root
from burn_curve.safe_int import U64_MAX, S

__all__ = [
    "compute_swap",
    "compute_buy_token_exact_in",
    "WalkState",
    "ExactInState",
    "buy_through_segment",
    "sell_through_segment",
    "buy_exact_in_through_segment",
]


class WalkState(NamedTuple):
    """State carried across segments by compute_swap.

    Attributes:
        supply: Remaining supply the walk has reached
        amount_left: Tokens of the trade not yet walked
        native: Native amount accumulated so far (signed: a sell's rounding
            can make a tiny segment delta negative)
    """

    supply: int
    amount_left: int
    native: int


class ExactInState(NamedTuple):
    """State carried across segments by compute_buy_token_exact_in.

    Attributes:
        supply: Remaining supply the walk has reached
        budget: Native budget not yet spent
        tokens: Tokens bought so far
        start_native: Rounded-down curve value at `supply`, None before the
            first spanned segment
        done: True once the budget has been used up
    """

    supply: int
    budget: int
    tokens: int
    start_native: int | None
    done: bool


def buy_through_segment(state: WalkState, index: int) -> WalkState:
    """Walk a buy down through segment `index`."""
    segment = CURVES[index]
    if state.amount_left == 0 or state.supply <= segment.supply_at_boundary:
        return state

    target = state.supply - state.amount_left
    end = max(target, segment.supply_at_boundary)
    cost = S(calculate_curve(end, True, segment)) - calculate_curve(state.supply, False, segment)
    return WalkState(
        supply=end,
        amount_left=state.amount_left - (state.supply - end),
        native=state.native + cost.value,
    )


def sell_through_segment(state: WalkState, index: int) -> WalkState:
    """Walk a sell up through segment `index`."""
    segment = CURVES[index]
    upper = segment_upper_bound(index)
    if state.amount_left == 0 or state.supply >= upper:
        return state

    target = state.supply + state.amount_left
    end = min(target, upper)
    payout = calculate_curve(state.supply, False, segment) - calculate_curve(end, True, segment)
    return WalkState(
        supply=end,
        amount_left=state.amount_left - (end - state.supply),
        native=state.native + payout,
    )


def compute_swap(amount: int, remaining_supply: int, is_buy: bool) -> int:
    """Native amount paid for a buy, or received for a sell, of `amount` tokens.

    Fees are not included; see burn_curve.fees.compute_swap_with_fee.

    Args:
        amount: Tokens to buy or sell
        remaining_supply: Remaining supply on the curve before the swap
        is_buy: True when buying from the curve, False when selling to it

    Returns:
        Native amount in lamports

    Raises:
        InvalidSwapAmount: If a buy would take the whole remaining supply, a
            sell would exceed MAX_TOKEN_SUPPLY, or remaining_supply is out of range
        TooMuchNativeTokenRequired: If the native amount does not fit in u64

    Examples:
        >>> from burn_curve.constants import MAX_TOKEN_SUPPLY
        >>> compute_swap(1, MAX_TOKEN_SUPPLY, True)
        1
    """
    _check_remaining_supply(remaining_supply)
    if amount < 0:
        raise InvalidSwapAmount(f"Swap amount cannot be negative: {amount}")

    initial = WalkState(supply=remaining_supply, amount_left=amount, native=0)
    if is_buy:
        if amount >= remaining_supply:
            raise InvalidSwapAmount(
                f"Cannot buy {amount} with remaining supply {remaining_supply}: "
                "the last unit is never sold"
            )
        final = reduce(buy_through_segment, range(len(CURVES)), initial)
        native = final.native
    else:
        if remaining_supply + amount > MAX_TOKEN_SUPPLY:
            raise InvalidSwapAmount(
                f"Cannot sell {amount} with remaining supply {remaining_supply}: "
                f"only {MAX_TOKEN_SUPPLY - remaining_supply} were sold"
            )
        final = reduce(sell_through_segment, reversed(range(len(CURVES))), initial)
        native = max(final.native, 0)

    if native > U64_MAX:
        raise TooMuchNativeTokenRequired(
            f"Swap of {amount} at remaining supply {remaining_supply} needs "
            f"{native} lamports (u64 max {U64_MAX})"
        )
    return native


def buy_exact_in_through_segment(state: ExactInState, index: int) -> ExactInState:
    """Spend as much of the budget as segment `index` can absorb."""
    segment = CURVES[index]
    if state.done or state.supply <= segment.supply_at_boundary:
        return state

    start_native = state.start_native
    if start_native is None:
        start_native = calculate_curve(state.supply, False, segment)
    capacity = (S(segment.native_amount_at_boundary) - start_native).value
    span = state.supply - segment.supply_at_boundary

    if state.budget < capacity or segment == CURVE_LAST:
        # Budget runs out inside this segment. Solve from the same rounded-down
        # start compute_swap prices from, so the result never costs more than
        # the budget.
        bought = _solve_within_segment(state.supply, start_native, state.budget, segment)
        return ExactInState(
            supply=state.supply - bought,
            budget=0,
            tokens=state.tokens + bought,
            start_native=None,
            done=True,
        )

    # Budget covers the rest of the segment
    return ExactInState(
        supply=segment.supply_at_boundary,
        budget=state.budget - capacity,
        tokens=state.tokens + span,
        start_native=segment.native_amount_at_boundary,
        done=state.budget == capacity,
    )


def compute_buy_token_exact_in(pay_amount: int, remaining_supply: int) -> int:
    """Tokens bought by spending up to pay_amount lamports on the curve.

    The result never costs more than pay_amount when priced with
    compute_swap(result, remaining_supply, True). Fees are not included.

    Args:
        pay_amount: Native budget in lamports (u64)
        remaining_supply: Remaining supply on the curve before the swap

    Returns:
        Token amount; 0 when the budget cannot buy a whole token

    Raises:
        InvalidSwapAmount: If pay_amount is not a u64 or remaining_supply is
            out of range
    """
    _check_remaining_supply(remaining_supply)
    if not S(pay_amount).is_u64():
        raise InvalidSwapAmount(f"Pay amount {pay_amount} is not a u64")

    initial = ExactInState(
        supply=remaining_supply,
        budget=pay_amount,
        tokens=0,
        start_native=None,
        done=False,
    )
    final = reduce(buy_exact_in_through_segment, range(len(CURVES)), initial)
    return final.tokens


def _solve_within_segment(supply: int, start_native: int, budget: int, segment: CurveSegment) -> int:
    try:
        return find_root(supply, start_native, budget, segment)
    except BuyAmountTooLarge:
        # Residual near the terminal floor buys nothing: the trade stops here
        return 0


def _check_remaining_supply(remaining_supply: int) -> None:
    if not 1 <= remaining_supply <= MAX_TOKEN_SUPPLY:
        raise InvalidSwapAmount(
            f"Remaining supply {remaining_supply} outside [1, {MAX_TOKEN_SUPPLY}]"
        )
