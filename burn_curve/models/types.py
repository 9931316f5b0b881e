"""Shared type definitions for the quote API models.

Token and lamport amounts are u64 on the wire. They travel as decimal
strings so JSON clients with 53-bit numbers do not lose precision.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from burn_curve.safe_int import U64_MAX


def validate_u64(value: Any) -> str:
    """Validate that a value is a valid u64 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid u64 as decimal string

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool):
        raise ValueError("U64 must be string or int, got bool")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"U64 must be a decimal integer string: '{value}'")
        int_value = int(value)
    else:
        raise ValueError(f"U64 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"U64 cannot be negative: {value}")
    if int_value > U64_MAX:
        raise ValueError(f"U64 overflow: {value} > 2^64-1")

    return str(int_value)


# 64-bit unsigned integer as decimal string (validated)
U64 = Annotated[
    str,
    BeforeValidator(validate_u64),
    Field(description="64-bit unsigned integer as decimal string"),
]
