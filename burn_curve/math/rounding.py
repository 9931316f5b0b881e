"""Rounding-aware integer division.

Every division in the curve engine goes through one of these two helpers so
the rounding direction of a computation is always explicit at the call site.
Division by zero is a contract violation and raises DivisionByZero; callers
must never catch it.
"""

from __future__ import annotations

from burn_curve.safe_int import S

__all__ = ["ceil_div", "div_with_rounding"]


def ceil_div(a: int, b: int) -> int:
    """Return ⌈a / b⌉.

    Raises:
        DivisionByZero: If b is zero

    Examples:
        >>> ceil_div(10, 3)
        4
        >>> ceil_div(10, 5)
        2
    """
    return S(a).ceiling_div(b).value


def div_with_rounding(numerator: int, denominator: int, round_up: bool) -> int:
    """Floor division, rounded up by one when round_up is set and inexact.

    Args:
        numerator: Dividend (non-negative)
        denominator: Divisor (must be non-zero)
        round_up: True to round toward +inf, False to round toward zero

    Raises:
        DivisionByZero: If denominator is zero
    """
    return S(numerator).div_rounding(denominator, round_up).value
