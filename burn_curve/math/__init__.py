"""Mathematical utilities for the curve engine.

This package provides the integer rounding primitives every curve
computation is built on:
- ceil_div: ceiling division
- div_with_rounding: floor division with an explicit rounding direction
"""

from burn_curve.math.rounding import ceil_div, div_with_rounding

__all__ = ["ceil_div", "div_with_rounding"]
