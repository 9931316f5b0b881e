"""Curve segment table.

The price curve is split into three power-law segments, each valid over a
contiguous range of remaining supply:

    y = k / x^n - c

where x is the remaining supply as a fraction of MAX_TOKEN_SUPPLY and y is
the cumulative native amount (lamports) paid into the curve once supply has
dropped to x. Segments are ordered from the one active at full supply to the
terminal one active near depletion.

The table is built once at import and validated there: a typo in a
coefficient fails loudly instead of silently mispricing trades.
"""

from __future__ import annotations

from dataclasses import dataclass

from burn_curve.constants import LAMPORTS_PER_SOL, MAX_TOKEN_SUPPLY, MULTIPLIER
from burn_curve.curve.pricing import calculate_curve

__all__ = [
    "CurveSegment",
    "CURVE_1",
    "CURVE_2",
    "CURVE_3",
    "CURVE_LAST",
    "CURVES",
    "segment_upper_bound",
    "active_segment_index",
]


@dataclass(frozen=True)
class CurveSegment:
    """One power-law piece of the bonding curve.

    Attributes:
        exponent: Power n of the supply in the curve.
        k_scaled: k * MULTIPLIER * LAMPORTS_PER_SOL.
        c_scaled: c * LAMPORTS_PER_SOL.
        supply_at_boundary: Remaining supply at which this segment ends.
        native_amount_at_boundary: calculate_curve(supply_at_boundary, True, self),
            cached so segment walks can compare against it directly.
    """

    exponent: int
    k_scaled: int
    c_scaled: int
    supply_at_boundary: int
    native_amount_at_boundary: int


CURVE_1 = CurveSegment(
    exponent=4,
    k_scaled=7 * MULTIPLIER * LAMPORTS_PER_SOL,
    c_scaled=7_000_000_000,
    supply_at_boundary=MAX_TOKEN_SUPPLY * 80 // 100,
    native_amount_at_boundary=10_089_843_750,
)

CURVE_2 = CurveSegment(
    exponent=2,
    k_scaled=21_875 * MULTIPLIER * LAMPORTS_PER_SOL // 1000,  # 21.875
    c_scaled=24_089_843_750,
    supply_at_boundary=MAX_TOKEN_SUPPLY * 5 // 100,
    native_amount_at_boundary=8_725_910_156_250,
)

CURVE_3 = CurveSegment(
    exponent=1,
    k_scaled=875 * MULTIPLIER * LAMPORTS_PER_SOL,
    c_scaled=8_774_089_843_750,
    # The last token is never sold, so the terminal segment ends at 1
    supply_at_boundary=1,
    native_amount_at_boundary=874_999_999_999_991_225_910_156_250,
)

CURVE_LAST = CURVE_3

# All segments, from full supply down to depletion
CURVES: tuple[CurveSegment, ...] = (CURVE_1, CURVE_2, CURVE_3)


def segment_upper_bound(index: int) -> int:
    """Remaining supply at which segment `index` starts.

    The first segment starts at MAX_TOKEN_SUPPLY; every other segment
    starts where the previous one ends.
    """
    if index == 0:
        return MAX_TOKEN_SUPPLY
    return CURVES[index - 1].supply_at_boundary


def active_segment_index(remaining_supply: int) -> int:
    """Index of the segment that prices the next unit bought at remaining_supply.

    A supply sitting exactly on a boundary belongs to the segment that ends
    there. Supplies at or below the terminal boundary map to the terminal
    segment.
    """
    for index, segment in enumerate(CURVES):
        if remaining_supply > segment.supply_at_boundary:
            return index
    return len(CURVES) - 1


def _validate_curve_table(curves: tuple[CurveSegment, ...]) -> None:
    """Check ordering, cached boundary values and continuity of the table.

    Raises:
        ValueError: If the table is inconsistent
    """
    previous_boundary = MAX_TOKEN_SUPPLY
    for index, segment in enumerate(curves):
        if not 1 <= segment.exponent <= 4:
            raise ValueError(f"Segment {index}: exponent {segment.exponent} outside 1..4")
        if segment.supply_at_boundary >= previous_boundary:
            raise ValueError(
                f"Segment {index}: boundary {segment.supply_at_boundary} "
                f"not below {previous_boundary}"
            )
        at_boundary = calculate_curve(segment.supply_at_boundary, True, segment)
        if at_boundary != segment.native_amount_at_boundary:
            raise ValueError(
                f"Segment {index}: native amount at boundary is {at_boundary}, "
                f"table says {segment.native_amount_at_boundary}"
            )
        if index + 1 < len(curves):
            following = calculate_curve(segment.supply_at_boundary, True, curves[index + 1])
            if following != at_boundary:
                raise ValueError(
                    f"Segments {index} and {index + 1} disagree at supply "
                    f"{segment.supply_at_boundary}: {at_boundary} != {following}"
                )
        previous_boundary = segment.supply_at_boundary

    if curves[-1].supply_at_boundary != 1:
        raise ValueError("Terminal segment must end at a remaining supply of 1")


_validate_curve_table(CURVES)
