"""Pytest configuration and fixtures."""

import pytest

from fpcore.config import MathConfig


@pytest.fixture
def uint256_config() -> MathConfig:
    """Config for 256-bit magnitudes."""
    return MathConfig(bits=256)


@pytest.fixture
def small_config() -> MathConfig:
    """Config for 32-bit magnitudes, where overflow is easy to reach."""
    return MathConfig(bits=32)
