"""Fixed-point arithmetic on width-bounded unsigned magnitudes.

This package provides the arithmetic core:
- precision: scale factors (10^decimals and 100%)
- arithmetic: checked add/sub and scaled mul/div
- percentage: slices, gains/losses, percentage increase/decrease
- scaling: precision casts and Decimal conversion
"""

from fpcore.math.arithmetic import add, div, mul, sub
from fpcore.math.percentage import (
    add_percentage,
    percentage_gain,
    percentage_loss,
    slice_of,
    sub_percentage,
)
from fpcore.math.precision import (
    is_supported_precision,
    one_hundred_percent,
    representation,
    validate_precision,
)
from fpcore.math.scaling import from_decimal, to_decimal, to_precision

__all__ = [
    # Scale
    "representation",
    "one_hundred_percent",
    "is_supported_precision",
    "validate_precision",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    # Percentages
    "slice_of",
    "percentage_gain",
    "percentage_loss",
    "add_percentage",
    "sub_percentage",
    # Casts
    "to_precision",
    "to_decimal",
    "from_decimal",
]
