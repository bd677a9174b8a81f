"""Percentage operations on fixed-point values.

Percentages are fixed-point values at the same precision as the value
they apply to, relative to ``one_hundred_percent(decimals)``. At 2
decimals 100% is 10000, so 25.00% is 2500 and 160.00% is 16000.

Composite operations fail with the first failing step's error; no partial
result is ever returned.
"""

import structlog

from fpcore.config import DEFAULT_MATH_CONFIG, MathConfig
from fpcore.errors import DivideByZero
from fpcore.math.arithmetic import add, div, mul, sub
from fpcore.math.precision import one_hundred_percent
from fpcore.safe_int import S

logger = structlog.get_logger()


def slice_of(
    value: int,
    percentage: int,
    decimals: int,
    *,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> int:
    """Return ``percentage`` percent of ``value``.

    Computed as (value / 100%) * percentage. Dividing by 100% first keeps
    the intermediate at the common scale, where value * percentage would
    carry a double scale and overflow much sooner.

    Example at 2 decimals: slice_of(6500, 2500, 2) == 1625
    (25% of 65.00 is 16.25).

    Raises:
        Overflow: If the scale or an intermediate product exceeds the width
    """
    hundred = one_hundred_percent(decimals, config=config)
    fraction = div(value, hundred, decimals, config=config)
    return mul(fraction, percentage, decimals, config=config)


def _check_values(old_value: int, new_value: int, config: MathConfig) -> None:
    S(old_value, config.max_value)
    S(new_value, config.max_value)


def _relative_change(delta: int, base: int, hundred: int, decimals: int, config: MathConfig) -> int:
    return mul(div(delta, base, decimals, config=config), hundred, decimals, config=config)


def percentage_gain(
    old_value: int,
    new_value: int,
    decimals: int,
    *,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> int:
    """Percentage increase from ``old_value`` to ``new_value``.

    Returns 0 when ``new_value <= old_value``: a gain only exists for a
    strict increase.

    Example at 2 decimals: percentage_gain(2500, 6500, 2) == 16000 (160%).

    Raises:
        DivideByZero: If old_value is zero and new_value is larger
        Overflow: If the scale or an intermediate product exceeds the width
    """
    hundred = one_hundred_percent(decimals, config=config)
    _check_values(old_value, new_value, config)
    if new_value <= old_value:
        return 0
    if old_value == 0:
        logger.debug("percentage_gain_from_zero", new_value=new_value, decimals=decimals)
        raise DivideByZero(f"Percentage gain from zero to {new_value} is undefined")
    delta = sub(new_value, old_value, config=config)
    return _relative_change(delta, old_value, hundred, decimals, config)


def percentage_loss(
    old_value: int,
    new_value: int,
    decimals: int,
    *,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> int:
    """Percentage decrease from ``old_value`` to ``new_value``.

    Returns 0 when ``new_value >= old_value``. Since a loss needs
    ``old_value > new_value >= 0``, old_value is never zero past that check.

    Example at 2 decimals: percentage_loss(6500, 2500, 2) == 6100 (61%).

    Raises:
        Overflow: If the scale or an intermediate product exceeds the width
    """
    hundred = one_hundred_percent(decimals, config=config)
    _check_values(old_value, new_value, config)
    if new_value >= old_value:
        return 0
    delta = sub(old_value, new_value, config=config)
    return _relative_change(delta, old_value, hundred, decimals, config)


def add_percentage(
    value: int,
    percentage: int,
    decimals: int,
    *,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> int:
    """Increase ``value`` by ``percentage`` percent.

    Example at 2 decimals: add_percentage(500, 2500, 2) == 625.

    Raises:
        Overflow: If the slice or the final sum exceeds the width
    """
    amount_more = slice_of(value, percentage, decimals, config=config)
    return add(value, amount_more, config=config)


def sub_percentage(
    value: int,
    percentage: int,
    decimals: int,
    *,
    config: MathConfig = DEFAULT_MATH_CONFIG,
) -> int:
    """Decrease ``value`` by ``percentage`` percent.

    Example at 2 decimals: sub_percentage(1250, 2500, 2) == 950.

    Raises:
        Overflow: If the slice exceeds the width
        Underflow: If percentage is above 100%
    """
    amount_less = slice_of(value, percentage, decimals, config=config)
    return sub(value, amount_less, config=config)
