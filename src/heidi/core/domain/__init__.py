"""
Domain value objects.

Number is the generic 9 digits + check digit value; Identifier is the base
for format-specific wrappers (NHS, CHI).
"""

from heidi.core.domain.identifier import DisplayFormat, Identifier, IdentifierType
from heidi.core.domain.number import (
    MAX_VALUE,
    TOTAL_DIGITS,
    Digit,
    Number,
    coerce_digits,
    extract_digits,
    split_int,
)

__all__ = [
    # Number
    "Digit",
    "MAX_VALUE",
    "TOTAL_DIGITS",
    "Number",
    "coerce_digits",
    "extract_digits",
    "split_int",
    # Identifier
    "DisplayFormat",
    "Identifier",
    "IdentifierType",
]
