"""Checked fixed-point decimal arithmetic on unsigned 128-bit magnitudes."""

from fpcore.config import DEFAULT_MATH_CONFIG, MathConfig
from fpcore.errors import (
    DivideByZero,
    MathError,
    MathErrorKind,
    Overflow,
    Underflow,
    UnsupportedPrecision,
)
from fpcore.math import (
    add,
    add_percentage,
    div,
    from_decimal,
    is_supported_precision,
    mul,
    one_hundred_percent,
    percentage_gain,
    percentage_loss,
    representation,
    slice_of,
    sub,
    sub_percentage,
    to_decimal,
    to_precision,
    validate_precision,
)
from fpcore.result import MathResult, capture

__version__ = "0.1.0"
__all__ = [
    # Config
    "MathConfig",
    "DEFAULT_MATH_CONFIG",
    # Errors
    "MathError",
    "MathErrorKind",
    "Overflow",
    "Underflow",
    "DivideByZero",
    "UnsupportedPrecision",
    # Results
    "MathResult",
    "capture",
    # Operations
    "representation",
    "one_hundred_percent",
    "is_supported_precision",
    "validate_precision",
    "add",
    "sub",
    "mul",
    "div",
    "slice_of",
    "percentage_gain",
    "percentage_loss",
    "add_percentage",
    "sub_percentage",
    "to_precision",
    "to_decimal",
    "from_decimal",
    "__version__",
]
