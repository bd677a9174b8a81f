"""Rescaling fixed-point values between precisions.

Functions for casting a magnitude from one decimal count to another, and
for converting between magnitudes and ``Decimal`` for display or input
parsing.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_DOWN, Decimal

import structlog

from fpcore.config import DEFAULT_MATH_CONFIG, MathConfig
from fpcore.errors import DivideByZero, MathError, Overflow, Underflow
from fpcore.math.precision import representation, validate_precision
from fpcore.safe_int import S

logger = structlog.get_logger()

# Enough digits for any uint256 magnitude; wider configs get a wider context
DECIMAL_MIN_PREC = 78


def _decimal_context(config: MathConfig) -> decimal.Context:
    prec = max(DECIMAL_MIN_PREC, 2 * (config.max_decimals + 1))
    return decimal.Context(prec=prec, rounding=ROUND_DOWN)


def to_precision(
    value: int,
    old_decimals: int,
    new_decimals: int,
    *,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> int:
    """Rescale a magnitude from ``old_decimals`` to ``new_decimals``.

    Computes value * 10^new / 10^old. Casting down truncates the dropped
    digits; casting up and back down returns the original value.

    When the precisions match or the value is zero the value is returned
    as-is, so those casts succeed even where the scale factors would not fit.

    Args:
        value: Magnitude at old_decimals
        old_decimals: Current decimal count (>= 2)
        new_decimals: Target decimal count (>= 2)
        config: Integer width to check against

    Returns:
        Magnitude at new_decimals

    Raises:
        UnsupportedPrecision: If either decimal count is below 2
        Overflow: If a scale factor or value * 10^new exceeds the width
    """
    validate_precision(old_decimals, new_decimals, config=config)
    sv = S(value, config.max_value)
    if not sv or old_decimals == new_decimals:
        return value

    try:
        old_rep = representation(old_decimals, config=config)
        new_rep = representation(new_decimals, config=config)
        scaled = sv * new_rep
    except MathError as err:
        logger.debug(
            "fixed_point_cast_failed",
            value=value,
            old_decimals=old_decimals,
            new_decimals=new_decimals,
            error=str(err),
        )
        raise

    # Unreachable for valid precisions: 10^d >= 1
    if old_rep == 0:
        raise DivideByZero(f"Scale factor for {old_decimals} decimals is zero")
    return (scaled // old_rep).value


def to_decimal(value: int, decimals: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> Decimal:
    """Convert a magnitude to the exact Decimal it represents.

    Example: to_decimal(4550, 2) == Decimal("45.50")
    """
    sv = S(value, config.max_value)
    representation(decimals, config=config)
    with decimal.localcontext(_decimal_context(config)):
        return Decimal(sv.value).scaleb(-decimals)


def from_decimal(
    amount: Decimal | int | str,
    decimals: int,
    *,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> int:
    """Scale a decimal amount to an integer magnitude at ``decimals``.

    Digits beyond ``decimals`` are truncated toward zero. Floats are
    rejected: pass a Decimal or a string so no binary rounding sneaks in.

    Example: from_decimal(Decimal("45.509"), 2) == 4550

    Raises:
        TypeError: If amount is a float (or any non-Decimal/int/str)
        ValueError: If amount is not a finite number
        Underflow: If amount is negative
        Overflow: If the scaled amount exceeds the width
    """
    if isinstance(amount, (float, bool)) or not isinstance(amount, (Decimal, int, str)):
        raise TypeError(f"from_decimal requires Decimal, int or str, got {type(amount).__name__}")
    try:
        d = Decimal(amount)
    except decimal.InvalidOperation as err:
        raise ValueError(f"Not a decimal number: {amount!r}") from err
    if not d.is_finite():
        raise ValueError(f"Amount must be finite, got {amount!r}")
    if d < 0:
        raise Underflow(f"Negative amount cannot be unsigned: {amount}")

    representation(decimals, config=config)
    # Reject before scaling: exponents past the context Emax trap inside decimal
    if d and d.adjusted() + decimals > config.max_decimals:
        raise Overflow(f"Amount {amount} at {decimals} decimals exceeds max {config.max_value}")
    with decimal.localcontext(_decimal_context(config)):
        scaled = d.scaleb(decimals).to_integral_value(rounding=ROUND_DOWN)
    return S(int(scaled), config.max_value).value
