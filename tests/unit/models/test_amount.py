"""Tests for FixedPointAmount and the Uint128 type."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from fpcore.constants import UINT128_MAX
from fpcore.errors import UnsupportedPrecision
from fpcore.models import FixedPointAmount


class TestFixedPointAmountValidation:
    """Tests for model validation."""

    def test_valid(self):
        """A value and a supported precision are accepted."""
        amount = FixedPointAmount(value=4550, decimals=2)
        assert amount.value == 4550
        assert amount.decimals == 2

    def test_value_from_string(self):
        """Magnitudes may arrive as decimal strings."""
        amount = FixedPointAmount(value=str(UINT128_MAX), decimals=18)
        assert amount.value == UINT128_MAX

    @pytest.mark.parametrize("value", [-1, UINT128_MAX + 1, "abc", "-5", True, 1.5])
    def test_invalid_value(self, value):
        """Negative, oversized and non-integer values are rejected."""
        with pytest.raises(ValidationError):
            FixedPointAmount(value=value, decimals=2)

    @pytest.mark.parametrize("decimals", [0, 1, 39])
    def test_invalid_decimals(self, decimals):
        """Decimals outside [2, 38] are rejected."""
        with pytest.raises(ValidationError):
            FixedPointAmount(value=1, decimals=decimals)

    def test_frozen(self):
        """Amounts are immutable."""
        amount = FixedPointAmount(value=1, decimals=2)
        with pytest.raises(ValidationError):
            amount.value = 2  # type: ignore[misc]


class TestFixedPointAmountConversion:
    """Tests for conversions and casts."""

    def test_to_decimal(self):
        """4550 at 2 decimals is 45.50."""
        amount = FixedPointAmount(value=4550, decimals=2)
        assert amount.to_decimal() == Decimal("45.50")
        assert str(amount) == "45.50"

    def test_from_decimal(self):
        """Digits beyond the precision are truncated."""
        amount = FixedPointAmount.from_decimal("45.509", 2)
        assert amount == FixedPointAmount(value=4550, decimals=2)

    def test_to_precision(self):
        """Casting keeps the represented amount."""
        amount = FixedPointAmount(value=4550, decimals=2).to_precision(18)
        assert amount.value == 4550 * 10**16
        assert amount.decimals == 18
        assert amount.to_decimal() == Decimal("45.50")

    def test_to_unsupported_precision(self):
        """Casting below 2 decimals raises UnsupportedPrecision."""
        with pytest.raises(UnsupportedPrecision):
            FixedPointAmount(value=4550, decimals=2).to_precision(1)

    def test_json_round_trip(self):
        """Values serialize to JSON as decimal strings."""
        amount = FixedPointAmount(value=UINT128_MAX, decimals=18)
        assert amount.model_dump(mode="json") == {"value": str(UINT128_MAX), "decimals": 18}
        assert FixedPointAmount.model_validate_json(amount.model_dump_json()) == amount

    def test_python_dump_keeps_int(self):
        """Python-mode dumps keep the value as int."""
        assert FixedPointAmount(value=5, decimals=2).model_dump() == {"value": 5, "decimals": 2}
