"""
Core math for heidi.

Modulus 11 check digit arithmetic shared by every identifier format.
"""

from heidi.core.math.checksum import (
    CHECKDIGIT_UNREPRESENTABLE,
    MODULUS,
    SIGNIFICANT_DIGITS,
    WEIGHTS,
    compute_checkdigit,
    is_valid_checkdigit,
    weighted_sum,
)

__all__ = [
    # Constants
    "CHECKDIGIT_UNREPRESENTABLE",
    "MODULUS",
    "SIGNIFICANT_DIGITS",
    "WEIGHTS",
    # Functions
    "compute_checkdigit",
    "is_valid_checkdigit",
    "weighted_sum",
]
