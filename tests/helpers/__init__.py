"""Test helpers module for shared test utilities.

- constants: common scales and precision sweeps
"""

from tests.helpers.constants import ONE_18, SUPPORTED_PRECISIONS

__all__ = [
    "ONE_18",
    "SUPPORTED_PRECISIONS",
]
