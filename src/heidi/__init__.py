"""
heidi: health identifiers.

Validation, construction and generation of Modulus 11 health identifiers:
NHS Numbers (England, Wales, Isle of Man) and CHI Numbers (Scotland).
"""

from heidi.chi import ChiNumber, Sex
from heidi.core.domain import DisplayFormat, IdentifierType, Number
from heidi.core.errors import ValidationError, ValidationReason
from heidi.nhs import NhsNumber, lottery

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "ChiNumber",
    "DisplayFormat",
    "IdentifierType",
    "NhsNumber",
    "Number",
    "Sex",
    "ValidationError",
    "ValidationReason",
    "lottery",
]
