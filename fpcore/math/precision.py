"""Scale factors for fixed-point values.

A value stored at ``decimals`` precision is an integer magnitude scaled by
``10^decimals``. Scale factors are computed per call and checked against
the configured integer width.
"""

from fpcore.config import DEFAULT_MATH_CONFIG, MathConfig
from fpcore.constants import PERCENT_BASE
from fpcore.errors import UnsupportedPrecision
from fpcore.safe_int import S


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int):
        raise TypeError(f"decimals must be int, got {type(decimals).__name__}")
    if decimals < 0:
        raise UnsupportedPrecision(f"decimals cannot be negative: {decimals}")


def representation(decimals: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> int:
    """Scale factor for a decimal count: 10^decimals.

    Args:
        decimals: Number of fractional digits
        config: Integer width to check against

    Returns:
        10^decimals

    Raises:
        Overflow: If 10^decimals exceeds the integer width
        UnsupportedPrecision: If decimals is negative
    """
    _check_decimals(decimals)
    return (S(10, config.max_value) ** decimals).value


def one_hundred_percent(decimals: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> int:
    """The value of 100% at a decimal count: 100 * 10^decimals.

    At 2 decimals this is 10000, so 25.00% is encoded as 2500.

    Raises:
        Overflow: If the scale factor or the final product exceeds the width
        UnsupportedPrecision: If decimals is negative
    """
    rep = representation(decimals, config=config)
    return (S(rep, config.max_value) * PERCENT_BASE).value


def is_supported_precision(decimals: int, *, config: MathConfig = DEFAULT_MATH_CONFIG) -> bool:
    """True if decimals is large enough to control a precision cast."""
    return decimals >= config.min_precision


def validate_precision(*decimals: int, config: MathConfig = DEFAULT_MATH_CONFIG) -> None:
    """Reject any decimal count below the supported minimum.

    Raises:
        UnsupportedPrecision: Naming the first offending decimal count
    """
    for d in decimals:
        _check_decimals(d)
        if not is_supported_precision(d, config=config):
            raise UnsupportedPrecision(
                f"Precision {d} is below the minimum of {config.min_precision} decimals"
            )
