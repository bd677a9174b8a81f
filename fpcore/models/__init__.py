"""Pydantic models for fixed-point values."""

from fpcore.models.amount import FixedPointAmount
from fpcore.models.types import Decimals, Uint128, validate_uint128

__all__ = [
    # Types
    "Decimals",
    "Uint128",
    "validate_uint128",
    # Models
    "FixedPointAmount",
]
