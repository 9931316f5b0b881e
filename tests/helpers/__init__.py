"""Test helpers."""

from tests.helpers.constants import B1, B2, MAX, NAB1, NAB2, NAB3, pct

__all__ = ["MAX", "B1", "B2", "NAB1", "NAB2", "NAB3", "pct"]
