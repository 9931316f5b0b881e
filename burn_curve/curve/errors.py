"""Curve engine error classes.

Every error here rejects a trade; none of them is transient, so retrying
with the same inputs always fails the same way. Division by zero is not in
this hierarchy: it is a programming error and surfaces as
burn_curve.safe_int.DivisionByZero.
"""


class CurveError(Exception):
    """Base error for bonding curve operations."""

    pass


class TooMuchNativeTokenRequired(CurveError):
    """Native amount of a swap does not fit in u64."""

    pass


class BuyAmountTooLarge(CurveError):
    """Purchase would exhaust the remaining supply of the curve."""

    pass


class InvalidSwapAmount(CurveError):
    """Swap amount or remaining supply is outside the range the curve covers.

    Raised for a buy of at least the whole remaining supply, a sell that
    would push the supply above MAX_TOKEN_SUPPLY, or a remaining supply
    outside [1, MAX_TOKEN_SUPPLY].
    """

    pass
