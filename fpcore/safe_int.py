"""Width-bounded unsigned integer for fixed-point arithmetic.

This module provides SafeUint, a lightweight wrapper that makes arithmetic
on fixed-width unsigned magnitudes safe by default:
- Every result is checked against the width and raises Overflow
- Subtraction below zero raises Underflow
- Division by zero raises DivideByZero

Python integers never wrap, so the width is enforced explicitly on every
operation rather than on a final conversion.

Usage pattern:
    from fpcore.safe_int import S

    def scaled_mul(x: int, y: int, rep: int) -> int:
        # Wrap at entry
        sx = S(x)

        # Natural arithmetic - automatically checked
        result = (sx * y) // rep  # Overflow if x * y exceeds the width

        # Unwrap at exit
        return result.value
"""

from __future__ import annotations

from fpcore.constants import UINT128_MAX
from fpcore.errors import DivideByZero, Overflow, Underflow


class SafeUint:
    """Unsigned integer with checked arithmetic operations.

    Wraps an integer in ``[0, max_value]`` and provides arithmetic
    operators that raise instead of leaving that range:
    - Results above max_value raise Overflow
    - Negative results raise Underflow
    - Division by zero raises DivideByZero

    Int operands are validated against the same range before use, so a
    negative or oversized argument fails the same way a result would.

    Attributes:
        value: The underlying integer value (read-only)
        max_value: Largest value allowed (read-only, default: 2^128-1)
    """

    __slots__ = ("_value", "_max")
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__
    _value: int
    _max: int

    def __init__(self, value: int | SafeUint, max_value: int | None = None) -> None:
        """Create a SafeUint from an integer or another SafeUint.

        Args:
            value: Integer value to wrap, or SafeUint to copy
            max_value: Upper bound. Defaults to the copied SafeUint's bound,
                or UINT128_MAX for plain integers.

        Raises:
            TypeError: If value is not an int or SafeUint (bool is rejected)
            Underflow: If value is negative
            Overflow: If value exceeds max_value
        """
        if isinstance(value, SafeUint):
            raw = value._value
            bound = value._max if max_value is None else max_value
        elif isinstance(value, int) and not isinstance(value, bool):
            raw = value
            bound = UINT128_MAX if max_value is None else max_value
        else:
            raise TypeError(f"SafeUint requires int, got {type(value).__name__}")

        if raw < 0:
            raise Underflow(f"Negative value cannot be unsigned: {raw}")
        if raw > bound:
            raise Overflow(f"Value exceeds max {bound}: {raw}")
        self._value = raw
        self._max = bound

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    @property
    def max_value(self) -> int:
        """Largest value this SafeUint may hold."""
        return self._max

    def __repr__(self) -> str:
        return f"SafeUint({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def _coerce(self, other: SafeUint | int) -> int:
        """Validate an operand against this value's range and return it as int."""
        return SafeUint(other, self._max)._value

    def _wrap(self, result: int, expr: str) -> SafeUint:
        if result > self._max:
            raise Overflow(f"Overflow: {expr} = {result} > {self._max}")
        return SafeUint(result, self._max)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeUint | int) -> SafeUint:
        """Add two values.

        Raises:
            Overflow: If the sum exceeds max_value
        """
        other_val = self._coerce(other)
        return self._wrap(self._value + other_val, f"{self._value} + {other_val}")

    def __sub__(self, other: SafeUint | int) -> SafeUint:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = self._coerce(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeUint(result, self._max)

    def __mul__(self, other: SafeUint | int) -> SafeUint:
        """Multiply two values.

        Raises:
            Overflow: If the product exceeds max_value
        """
        other_val = self._coerce(other)
        return self._wrap(self._value * other_val, f"{self._value} * {other_val}")

    def __floordiv__(self, other: SafeUint | int) -> SafeUint:
        """Integer division, truncating toward zero.

        Raises:
            DivideByZero: If other is zero
        """
        other_val = self._coerce(other)
        if other_val == 0:
            raise DivideByZero(f"Division by zero: {self._value} // 0")
        return SafeUint(self._value // other_val, self._max)

    def __pow__(self, exponent: int) -> SafeUint:
        """Raise to a non-negative integer power.

        Bases of 2 or more overflow any exponent larger than the width in
        bits, so those are rejected before the power is computed.

        Raises:
            Overflow: If the power exceeds max_value
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Exponent must be int, got {type(exponent).__name__}")
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        if self._value >= 2 and exponent > self._max.bit_length():
            raise Overflow(f"Overflow: {self._value} ** {exponent} exceeds {self._max}")
        return self._wrap(self._value**exponent, f"{self._value} ** {exponent}")

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeUint):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    # --- Conversion ---

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0


# Convenience alias for concise code
S = SafeUint
