"""Tests for calculate_curve."""

import pytest

from burn_curve.curve import CURVE_1, CURVE_2, CURVE_3, calculate_curve
from tests.helpers import MAX, NAB1, NAB2, NAB3, pct


class TestBoundaryValues:
    """Boundary values are exact under both rounding directions."""

    @pytest.mark.parametrize("round_up", [True, False])
    def test_full_supply_is_zero(self, round_up):
        """Nothing has been paid in at full supply."""
        assert calculate_curve(MAX, round_up, CURVE_1) == 0

    @pytest.mark.parametrize("round_up", [True, False])
    @pytest.mark.parametrize("segment", [CURVE_1, CURVE_2])
    def test_first_boundary(self, segment, round_up):
        """Segments 1 and 2 meet at 80%."""
        assert calculate_curve(pct(80), round_up, segment) == NAB1

    @pytest.mark.parametrize("round_up", [True, False])
    @pytest.mark.parametrize("segment", [CURVE_2, CURVE_3])
    def test_second_boundary(self, segment, round_up):
        """Segments 2 and 3 meet at 5%."""
        assert calculate_curve(pct(5), round_up, segment) == NAB2

    @pytest.mark.parametrize("round_up", [True, False])
    def test_last_unit(self, round_up):
        """The terminal segment ends at a remaining supply of 1."""
        assert calculate_curve(1, round_up, CURVE_3) == NAB3


class TestInteriorValues:
    """Interior values, rounded down and up."""

    @pytest.mark.parametrize(
        "segment,supply,expected_down",
        [
            (CURVE_1, pct(99), 287_142_489),
            (CURVE_1, pct(98), 589_160_493),
            (CURVE_1, pct(97), 906_988_423),
            (CURVE_2, pct(79), 10_960_628_930),
            (CURVE_2, pct(63), 31_024_794_697),
        ],
    )
    def test_inexact_values(self, segment, supply, expected_down):
        """Rounding up adds exactly one lamport when inexact."""
        assert calculate_curve(supply, False, segment) == expected_down
        assert calculate_curve(supply, True, segment) == expected_down + 1

    @pytest.mark.parametrize(
        "supply,expected",
        [
            (pct(4), 13_100_910_156_250),
            (pct(1), 78_725_910_156_250),
        ],
    )
    def test_terminal_segment_exact(self, supply, expected):
        """Whole-percent supplies are exact on the terminal segment."""
        assert calculate_curve(supply, False, CURVE_3) == expected
        assert calculate_curve(supply, True, CURVE_3) == expected


class TestShape:
    """The curve only grows as supply leaves it."""

    def test_decreasing_in_supply(self):
        """Less remaining supply means more paid in."""
        supplies = [MAX, pct(90), pct(81)]
        values = [calculate_curve(s, False, CURVE_1) for s in supplies]
        assert values == sorted(values)
        assert values[0] < values[-1]

    def test_round_up_never_below_round_down(self):
        """Rounding up is at most one lamport above rounding down."""
        for supply in (MAX - 1, pct(85) + 12345, pct(60) + 7, pct(3) + 1):
            segment = CURVE_1 if supply > pct(80) else CURVE_2 if supply > pct(5) else CURVE_3
            down = calculate_curve(supply, False, segment)
            up = calculate_curve(supply, True, segment)
            assert down <= up <= down + 1
