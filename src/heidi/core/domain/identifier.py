"""
Identifier: format-specific wrapper around a Number

NHS and CHI numbers hold exactly the same payload (a `Number`) and only
differ in:
- an extra validation run on the 9 significant digits BEFORE the
  checksum (`precheck`, e.g. the CHI date of birth prefix)
- the official display grouping (NHS: 3-3-4, CHI: none)

Subclasses set the class-level attributes and, where needed, override
`precheck`. Everything else (construction, parsing, display, payloads)
lives here once.
"""

from enum import Enum
from typing import (
    Any,
    ClassVar,
    Dict,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from pydantic import BaseModel, Field, model_validator

from heidi.core.contracts import validate_identifier_payload
from heidi.core.domain.number import (
    TOTAL_DIGITS,
    Number,
    coerce_digits,
    extract_digits,
    split_int,
)
from heidi.core.errors import ValidationError, reporting_value
from heidi.core.math.checksum import SIGNIFICANT_DIGITS


# =============================================================================
# ENUMS
# =============================================================================


class IdentifierType(str, Enum):
    """Supported health identifier formats"""

    NHS = "nhs"
    CHI = "chi"


class DisplayFormat(str, Enum):
    """
    Output format.

    OFFICIAL requires a particular spacing, for example an NHS Number is
    presented 3-3-4: 123 456 7890.
    """

    COMPACT = "compact"
    OFFICIAL = "official"


T = TypeVar("T", bound="Identifier")


def _is_raw(value: Any) -> bool:
    """Text or a plain (non-bool) integer standing for a whole number."""
    return isinstance(value, str) or (
        isinstance(value, int) and not isinstance(value, bool)
    )


# =============================================================================
# IDENTIFIER BASE
# =============================================================================


class Identifier(BaseModel):
    """
    Base for health identifiers.

    Immutable (frozen=True). A bare string or integer is accepted wherever
    pydantic validates an Identifier, so subclasses can be used directly as
    fields of other models.
    """

    kind: ClassVar[IdentifierType]
    label: ClassVar[str] = "Number"
    official_grouping: ClassVar[Optional[Tuple[int, ...]]] = None
    separator: ClassVar[str] = " "

    number: Number = Field(..., description="Digits and check digit")

    model_config = {"frozen": True}

    @classmethod
    def precheck(cls, digits: Sequence[int]) -> None:
        """Format rules for the 9 significant digits, run before the checksum."""

    @model_validator(mode="before")
    @classmethod
    def accept_raw(cls, data: Any) -> Any:
        if _is_raw(data):
            with reporting_value(data):
                return {"number": cls._number_from_raw(data)}

        if isinstance(data, dict) and "number" in data:
            raw = data["number"]
            if _is_raw(raw):
                with reporting_value(raw):
                    return {**data, "number": cls._number_from_raw(raw)}
            # format rules come before the checksum Number verifies
            if isinstance(raw, dict) and "digits" in raw:
                cls.precheck(coerce_digits(raw["digits"], SIGNIFICANT_DIGITS))

        return data

    @model_validator(mode="after")
    def apply_precheck(self) -> "Identifier":
        type(self).precheck(self.number.digits)
        return self

    def model_copy(
        self: T, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> T:
        """Copies the identifier; updated fields are validated again."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**dict(self), **update})

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def _number_from_raw(cls, value: Union[str, int]) -> Number:
        digits = extract_digits(value) if isinstance(value, str) else split_int(value)
        return cls._number_from_digits(digits)

    @classmethod
    def _number_from_digits(cls, digits: Sequence[int]) -> Number:
        values = coerce_digits(digits, TOTAL_DIGITS)
        cls.precheck(values[:SIGNIFICANT_DIGITS])
        return Number.from_digits(values)

    @classmethod
    def new(cls: Type[T], digits: Sequence[int]) -> T:
        """Creates an identifier from its 9 significant digits."""
        values = coerce_digits(digits, SIGNIFICANT_DIGITS)
        cls.precheck(values)
        return cls(number=Number.new(values))

    @classmethod
    def from_digits(cls: Type[T], digits: Sequence[int]) -> T:
        """Creates an identifier from all 10 digits, verifying the check digit."""
        return cls(number=cls._number_from_digits(digits))

    @classmethod
    def parse(cls: Type[T], text: str) -> T:
        """Creates an identifier from text; whitespace is ignored."""
        with reporting_value(text):
            return cls.from_digits(extract_digits(text))

    @classmethod
    def from_int(cls: Type[T], value: int) -> T:
        """Creates an identifier from an unsigned integer of up to 10 digits."""
        with reporting_value(value):
            return cls.from_digits(split_int(value))

    @classmethod
    def coerce(cls: Type[T], value: Union[str, int]) -> T:
        """
        Dispatches on the input type: text is parsed, integers are split.

        Raises:
            TypeError: for anything else (bool included)
        """
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_int(value)
        raise TypeError(
            f"{cls.label} must be a str or an int, got {type(value).__name__}"
        )

    @classmethod
    def is_valid(cls, value: Union[str, int]) -> bool:
        """
        Checks a value without raising for invalid identifiers.

        Returns:
            True if `value` is a valid identifier of this type, False otherwise
        """
        try:
            cls.coerce(value)
        except ValidationError:
            return False
        return True

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> Tuple[int, ...]:
        return self.number.digits

    @property
    def checkdigit(self) -> int:
        return self.number.checkdigit

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def display(self, fmt: Union[DisplayFormat, str] = DisplayFormat.COMPACT) -> str:
        """
        Renders the identifier.

        Args:
            fmt: COMPACT for the 10 digits with no separators; OFFICIAL for the
                format's grouping (compact when the format has none)
        """
        compact = self.number.compact()

        if DisplayFormat(fmt) is DisplayFormat.COMPACT or not self.official_grouping:
            return compact

        groups = []
        start = 0
        for size in self.official_grouping:
            groups.append(compact[start : start + size])
            start += size
        return self.separator.join(groups)

    def __str__(self) -> str:
        return self.number.compact()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.number.compact()}')"

    def __int__(self) -> int:
        return int(self.number)

    # -------------------------------------------------------------------------
    # Payloads
    # -------------------------------------------------------------------------

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready representation matching the identifier contract."""
        return {
            "type": self.kind.value,
            "value": self.number.compact(),
            "digits": list(self.digits),
            "checkdigit": self.checkdigit,
        }

    @classmethod
    def from_payload(cls: Type[T], data: Dict[str, Any]) -> T:
        """
        Rebuilds an identifier from a payload produced by `to_payload`.

        Raises:
            jsonschema.ValidationError: if the payload breaks the contract
            ValueError: if the payload is for another type, or its digits
                disagree with its value
            ValidationError: if the value is not a valid identifier
        """
        validate_identifier_payload(data)

        if data["type"] != cls.kind.value:
            raise ValueError(
                f"Expected a {cls.kind.value!r} payload, got {data['type']!r}"
            )

        identifier = cls.parse(data["value"])

        if "digits" in data and tuple(data["digits"]) != identifier.digits:
            raise ValueError(
                f"Payload digits {data['digits']} do not match value {data['value']!r}"
            )
        if "checkdigit" in data and data["checkdigit"] != identifier.checkdigit:
            raise ValueError(
                f"Payload check digit {data['checkdigit']} does not match "
                f"value {data['value']!r}"
            )

        return identifier
