"""Fixed-point arithmetic error classes.

Every failure of a fixed-point operation is one of four kinds. Each kind
is an exception class carrying its ``MathErrorKind`` so callers can either
catch by class or switch on ``err.kind``.
"""

from enum import Enum
from typing import ClassVar


class MathErrorKind(Enum):
    """The four kinds of fixed-point arithmetic failure."""

    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    DIVIDE_BY_ZERO = "divide_by_zero"
    UNSUPPORTED_PRECISION = "unsupported_precision"


class MathError(ArithmeticError):
    """Base class for fixed-point arithmetic errors."""

    kind: ClassVar[MathErrorKind]


class Overflow(MathError):
    """Addition, multiplication or power exceeds the integer width."""

    kind = MathErrorKind.OVERFLOW


class Underflow(MathError):
    """Subtraction would produce a negative result."""

    kind = MathErrorKind.UNDERFLOW


class DivideByZero(MathError):
    """Division by a zero divisor or a degenerate scale factor."""

    kind = MathErrorKind.DIVIDE_BY_ZERO


class UnsupportedPrecision(MathError):
    """Decimal count is below the supported minimum (or negative)."""

    kind = MathErrorKind.UNSUPPORTED_PRECISION


ERRORS_BY_KIND: dict[MathErrorKind, type[MathError]] = {
    MathErrorKind.OVERFLOW: Overflow,
    MathErrorKind.UNDERFLOW: Underflow,
    MathErrorKind.DIVIDE_BY_ZERO: DivideByZero,
    MathErrorKind.UNSUPPORTED_PRECISION: UnsupportedPrecision,
}
