"""Shared type definitions for fixed-point models.

Annotated pydantic types that validate magnitudes and decimal counts at
model boundaries.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

from fpcore.constants import MIN_PRECISION, UINT128_MAX, UINT128_MAX_DECIMALS


def validate_uint128(value: Any) -> int:
    """Validate that a value is a valid uint128 magnitude.

    Big magnitudes often travel as decimal strings (JSON numbers lose
    precision past 2^53 in many parsers), so both int and str are accepted.

    Args:
        value: Value to validate (int or decimal string)

    Returns:
        Valid uint128 as int

    Raises:
        ValueError: If value is not a non-negative integer within uint128 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint128 must be int or string, got bool")

    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint128 must be a decimal integer string: '{value}'") from err
    elif not isinstance(value, int):
        raise ValueError(f"Uint128 must be string or int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Uint128 cannot be negative: {value}")
    if value > UINT128_MAX:
        raise ValueError(f"Uint128 overflow: {value} > 2^128-1")
    return value


# 128-bit unsigned magnitude (int or decimal string in, decimal string in JSON out)
Uint128 = Annotated[
    int,
    BeforeValidator(validate_uint128),
    PlainSerializer(str, return_type=str, when_used="json"),
    Field(description="128-bit unsigned integer magnitude"),
]

# Decimal count usable for precision casts at 128 bits
Decimals = Annotated[
    int,
    Field(
        ge=MIN_PRECISION,
        le=UINT128_MAX_DECIMALS,
        description="Number of fractional digits",
    ),
]
