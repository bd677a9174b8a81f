"""Arithmetic configuration for fixed-point operations."""

from dataclasses import dataclass

from fpcore.constants import MIN_PRECISION, UINT128_BITS


@dataclass(frozen=True)
class MathConfig:
    """Integer width and precision bounds for fixed-point arithmetic.

    Every public operation accepts a config so callers can run the same
    math against a different unsigned width (e.g. 256 bits for on-chain
    amounts) without touching the operations themselves.

    Attributes:
        bits: Width of the unsigned magnitude (default: 128)
        min_precision: Smallest decimal count accepted for precision casts
            (default: 2)
    """

    bits: int = UINT128_BITS
    min_precision: int = MIN_PRECISION

    def __post_init__(self) -> None:
        if self.bits <= 0:
            raise ValueError(f"bits must be positive, got {self.bits}")
        if self.min_precision < MIN_PRECISION:
            raise ValueError(
                f"min_precision must be at least {MIN_PRECISION}, got {self.min_precision}"
            )

    @property
    def max_value(self) -> int:
        """Largest magnitude representable at this width."""
        return 2**self.bits - 1

    @property
    def max_decimals(self) -> int:
        """Largest decimal count whose scale factor fits at this width."""
        return len(str(self.max_value)) - 1


# Default configuration instance
DEFAULT_MATH_CONFIG = MathConfig()
