"""
Contract Validation Module

JSON Schema contracts for identifiers exchanged as JSON.
"""

from .validators import (
    ContractValidator,
    IdentifierPayloadValidator,
    SchemaLoader,
    validate_identifier_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IdentifierPayloadValidator",
    # Functions
    "validate_identifier_payload",
]
