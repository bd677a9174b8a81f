"""Checked arithmetic on fixed-point magnitudes.

``add`` and ``sub`` work on raw magnitudes at any shared precision.
``mul`` and ``div`` take the precision of their operands and rescale the
result so it stays at that precision:

    mul(x, y, d) = (x * y) / 10^d
    div(x, y, d) = (x * 10^d) / y

All division truncates toward zero. No operation ever wraps: results
outside the configured width raise instead.
"""

from fpcore.config import DEFAULT_MATH_CONFIG, MathConfig
from fpcore.errors import DivideByZero
from fpcore.math.precision import representation
from fpcore.safe_int import S


def add(x: int, y: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> int:
    """Checked addition.

    Raises:
        Overflow: If x + y exceeds the integer width
    """
    return (S(x, config.max_value) + y).value


def sub(x: int, y: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> int:
    """Checked subtraction.

    Raises:
        Underflow: If y > x
    """
    return (S(x, config.max_value) - y).value


def mul(x: int, y: int, decimals: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> int:
    """Multiply two values at the same precision: (x * y) // 10^decimals.

    The raw product must itself fit in the integer width, even when the
    rescaled result would.

    Example at 2 decimals: mul(4550, 50, 2) == 2275 (45.50 * 0.50 = 22.75).

    Raises:
        Overflow: If the scale factor or x * y exceeds the integer width
    """
    rep = representation(decimals, config=config)
    product = S(x, config.max_value) * y
    # rep >= 1 for any decimals, so this only guards a degenerate scale
    if rep == 0:
        raise DivideByZero(f"Scale factor for {decimals} decimals is zero")
    return (product // rep).value


def div(x: int, y: int, decimals: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> int:
    """Divide two values at the same precision: (x * 10^decimals) // y.

    The zero divisor is checked first, so ``div(x, 0, d)`` reports
    DivideByZero whatever x and d are.

    Example at 2 decimals: div(4550, 5000, 2) == 91 (45.50 / 50.00 = 0.91).

    Raises:
        DivideByZero: If y is zero
        Overflow: If the scale factor or x * 10^decimals exceeds the width
    """
    divisor = S(y, config.max_value)
    if not divisor:
        raise DivideByZero(f"Division by zero: {x} / 0 at {decimals} decimals")
    rep = representation(decimals, config=config)
    return ((S(x, config.max_value) * rep) // divisor).value
