"""
CHI Numbers: validation and display.
"""

from heidi.chi.number import ChiNumber, Sex, validate_date_prefix

__all__ = [
    "ChiNumber",
    "Sex",
    "validate_date_prefix",
]
