"""Pydantic model pairing a fixed-point magnitude with its precision."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from fpcore.math.scaling import from_decimal, to_decimal, to_precision
from fpcore.models.types import Decimals, Uint128


class FixedPointAmount(BaseModel):
    """A uint128 magnitude together with the decimal count it is scaled by.

    The math functions take magnitude and precision separately; this model
    is for callers that need to carry them together across a boundary
    (a ledger entry, a price quote).
    """

    model_config = ConfigDict(frozen=True)

    value: Uint128 = Field(description="Magnitude scaled by 10^decimals.")
    decimals: Decimals = Field(description="Number of fractional digits.")

    @classmethod
    def from_decimal(cls, amount: Decimal | int | str, decimals: int) -> FixedPointAmount:
        """Create from a decimal amount, truncating digits beyond ``decimals``."""
        return cls(value=from_decimal(amount, decimals), decimals=decimals)

    def to_decimal(self) -> Decimal:
        """Convert to the exact Decimal this amount represents."""
        return to_decimal(self.value, self.decimals)

    def to_precision(self, decimals: int) -> FixedPointAmount:
        """Rescale to another decimal count.

        Raises:
            UnsupportedPrecision: If decimals is below 2
            Overflow: If the rescaled magnitude exceeds uint128
        """
        return FixedPointAmount(
            value=to_precision(self.value, self.decimals, decimals),
            decimals=decimals,
        )

    def __str__(self) -> str:
        return str(self.to_decimal())
