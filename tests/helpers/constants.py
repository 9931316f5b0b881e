"""Shared supply and curve constants for tests.

Usage:
    from tests.helpers import MAX, B1, B2, pct
"""

from burn_curve.constants import MAX_TOKEN_SUPPLY
from burn_curve.curve import CURVE_1, CURVE_2, CURVE_3

MAX = MAX_TOKEN_SUPPLY


def pct(percent: int) -> int:
    """Supply at `percent` of MAX_TOKEN_SUPPLY."""
    return MAX * percent // 100


# =============================================================================
# Segment boundaries and the cumulative native amount at each
# =============================================================================

B1 = CURVE_1.supply_at_boundary  # 80%
B2 = CURVE_2.supply_at_boundary  # 5%

NAB1 = 10_089_843_750
NAB2 = 8_725_910_156_250
NAB3 = CURVE_3.native_amount_at_boundary
