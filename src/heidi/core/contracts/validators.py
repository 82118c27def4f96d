"""
JSON Schema Contract Validators

Validates JSON data against the formal contracts shipped with heidi,
using the jsonschema library.

Schemas:
- identifier.json (an NHS or CHI number as exchanged between systems)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loads JSON Schema files.

    Schemas live in the `schema/` directory next to this module so they
    are installed together with the package.
    """

    def __init__(self, schema_dir: Path = Path(__file__).parent / "schema"):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Loaded schemas by name
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Loads a JSON Schema file.

        Args:
            schema_name: schema name without extension (e.g. 'identifier')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: if the schema file does not exist
            json.JSONDecodeError: if the file is not valid JSON
            ValueError: if the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validates data against the schema.

        Raises:
            ValidationError: if the data does not satisfy the schema
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("%s contract violated: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True if the data satisfies the schema, without raising."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Iterates over every violation found in the data."""
        return self.validator.iter_errors(data)


class IdentifierPayloadValidator(ContractValidator):
    """Validator for the identifier contract."""

    def __init__(self):
        super().__init__("identifier")


_IDENTIFIER_VALIDATOR = IdentifierPayloadValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_identifier_payload(data: Dict[str, Any]) -> None:
    """
    Validates an identifier payload.

    Raises:
        ValidationError: if the payload does not satisfy the contract
    """
    _IDENTIFIER_VALIDATOR.validate(data)
