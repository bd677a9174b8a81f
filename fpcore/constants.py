"""Numeric constants for fixed-point arithmetic.

Centralizes integer widths and precision bounds shared across modules.
"""

# Default integer width for stored magnitudes
UINT128_BITS = 128
UINT128_MAX = 2**UINT128_BITS - 1

# Largest decimal count whose scale factor (10^d) fits in a uint128
UINT128_MAX_DECIMALS = 38

# A single digit (or none) cannot represent 100% distinctly at its own scale
MIN_PRECISION = 2

# "100%" expressed in whole units, before scaling by 10^decimals
PERCENT_BASE = 100
