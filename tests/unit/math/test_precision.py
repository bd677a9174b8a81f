"""Tests for scale factors and precision validation."""

import pytest

from fpcore.errors import Overflow, UnsupportedPrecision
from fpcore.math.precision import (
    is_supported_precision,
    one_hundred_percent,
    representation,
    validate_precision,
)


class TestRepresentation:
    """Tests for representation (10^decimals)."""

    @pytest.mark.parametrize("decimals", range(0, 39))
    def test_power_of_ten(self, decimals):
        """representation(d) == 10^d across the uint128 range."""
        assert representation(decimals) == 10**decimals

    @pytest.mark.parametrize("decimals", [39, 40, 77, 1000])
    def test_too_large_overflows(self, decimals):
        """Scale factors past uint128 raise Overflow."""
        with pytest.raises(Overflow):
            representation(decimals)

    def test_negative_rejected(self):
        """Negative decimal counts are unsupported."""
        with pytest.raises(UnsupportedPrecision):
            representation(-1)

    def test_non_int_rejected(self):
        """Decimal counts must be ints."""
        with pytest.raises(TypeError):
            representation(2.0)  # type: ignore

    def test_wider_config(self, uint256_config):
        """A 256-bit config admits scale factors up to 10^77."""
        assert representation(77, config=uint256_config) == 10**77
        with pytest.raises(Overflow):
            representation(78, config=uint256_config)


class TestOneHundredPercent:
    """Tests for one_hundred_percent (100 * 10^decimals)."""

    def test_two_decimals(self):
        """100% at 2 decimals is 10000."""
        assert one_hundred_percent(2) == 10_000

    def test_eighteen_decimals(self):
        """100% at 18 decimals is 10^20."""
        assert one_hundred_percent(18) == 10**20

    def test_largest_fitting(self):
        """100% at 36 decimals is 10^38, the largest that fits."""
        assert one_hundred_percent(36) == 10**38

    def test_overflow_on_final_multiply(self):
        """10^37 fits but 100 * 10^37 does not."""
        with pytest.raises(Overflow):
            one_hundred_percent(37)

    def test_overflow_propagated_from_scale(self):
        """Overflow from the scale factor propagates."""
        with pytest.raises(Overflow):
            one_hundred_percent(39)


class TestSupportedPrecision:
    """Tests for is_supported_precision and validate_precision."""

    @pytest.mark.parametrize("decimals,expected", [(0, False), (1, False), (2, True), (38, True)])
    def test_is_supported(self, decimals, expected):
        """Precision is supported from 2 decimals up."""
        assert is_supported_precision(decimals) is expected

    def test_validate_accepts_supported(self):
        """Supported precisions pass validation."""
        validate_precision(2, 18, 38)

    def test_validate_names_offending_precision(self):
        """Validation reports the first unsupported decimal count."""
        with pytest.raises(UnsupportedPrecision) as exc_info:
            validate_precision(18, 1)
        assert "Precision 1" in str(exc_info.value)

    def test_validate_rejects_negative(self):
        """Negative precision is unsupported."""
        with pytest.raises(UnsupportedPrecision):
            validate_precision(-2)
