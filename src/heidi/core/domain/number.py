"""
Number: generic identifier of 9 digits plus a check digit

Immutable Pydantic model shared by every Modulus 11 health identifier.
A Number only exists in a valid state: the check digit is recomputed on
every construction path, so a value whose check digit disagrees with its
digits cannot be observed.

Inputs accepted:
- 9 digits (`Number.new`), the check digit is computed
- 10 digits (`Number.from_digits`), the last one is verified
- text (`Number.parse`), whitespace is ignored, e.g. "893 177 4583"
- an unsigned integer (`Number.from_int`), left-padded to 10 digits
"""

import string
from typing import Annotated, Any, Final, FrozenSet, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from heidi.core.errors import ValidationError, ValidationReason, reporting_value
from heidi.core.math.checksum import SIGNIFICANT_DIGITS, compute_checkdigit

# A digit can be from 0 to 9.
Digit = Annotated[int, Field(ge=0, le=9)]

# =============================================================================
# CONSTANTS
# =============================================================================

# Significant digits plus the check digit
TOTAL_DIGITS: Final[int] = SIGNIFICANT_DIGITS + 1

# Largest integer that fits in 10 decimal digits
MAX_VALUE: Final[int] = 10**TOTAL_DIGITS - 1

_DECIMAL_DIGITS: Final[FrozenSet[str]] = frozenset(string.digits)


# =============================================================================
# DIGIT EXTRACTION
# =============================================================================


def coerce_digits(digits: Iterable[Any], count: int) -> Tuple[int, ...]:
    """
    Checks a fixed-length run of digits.

    Args:
        digits: integers in [0, 9]
        count: expected length

    Returns:
        The digits as a tuple

    Raises:
        ValidationError: LENGTH for a wrong count, FORMAT for a non-digit item
    """
    values = tuple(digits)

    if len(values) != count:
        raise ValidationError(
            ValidationReason.LENGTH, values, expected=count, count=len(values)
        )

    for position, digit in enumerate(values):
        # bool is an int subclass, reject it explicitly
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValidationError(
                ValidationReason.FORMAT, values, char=digit, position=position
            )

    return values


def extract_digits(text: str) -> Tuple[int, ...]:
    """
    Converts text into 10 digits, ignoring any whitespace.

    Args:
        text: e.g. "6541003238" or "654 100 3238"

    Returns:
        10 digits, most significant first

    Raises:
        TypeError: if `text` is not a string
        ValidationError: FORMAT on the first character that is neither a
            decimal digit nor whitespace, LENGTH when there are not
            exactly 10 digits

    Examples:
        >>> extract_digits("654 100 3238")
        (6, 5, 4, 1, 0, 0, 3, 2, 3, 8)
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a string, got {type(text).__name__}")

    digits = []
    for position, char in enumerate(text):
        if char.isspace():
            continue
        if char not in _DECIMAL_DIGITS:
            raise ValidationError(
                ValidationReason.FORMAT, text, char=char, position=position
            )
        digits.append(int(char))

    if len(digits) != TOTAL_DIGITS:
        raise ValidationError(
            ValidationReason.LENGTH, text, expected=TOTAL_DIGITS, count=len(digits)
        )

    return tuple(digits)


def split_int(value: int) -> Tuple[int, ...]:
    """
    Decomposes an unsigned integer into 10 digits, most significant first.

    Values with fewer than 10 digits are left-padded with zeros.

    Raises:
        TypeError: if `value` is not an int (bool included)
        ValidationError: MAGNITUDE above 9_999_999_999, FORMAT for a
            negative value

    Examples:
        >>> split_int(6541003238)
        (6, 5, 4, 1, 0, 0, 3, 2, 3, 8)
        >>> split_int(12)
        (0, 0, 0, 0, 0, 0, 0, 0, 1, 2)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an int, got {type(value).__name__}")

    if value < 0:
        raise ValidationError(ValidationReason.FORMAT, value, char="-", position=0)
    if value > MAX_VALUE:
        raise ValidationError(ValidationReason.MAGNITUDE, value, number=value)

    digits = []
    remaining = value
    for _ in range(TOTAL_DIGITS):
        remaining, digit = divmod(remaining, 10)
        digits.append(digit)

    assert remaining == 0
    return tuple(reversed(digits))


# =============================================================================
# NUMBER MODEL
# =============================================================================


class Number(BaseModel):
    """
    9 significant digits plus their Modulus 11 check digit.

    Immutable (frozen=True) and hashable. Prefer `parse`, `from_int` or
    `from_digits` when you already hold a full 10-digit number; `new` is
    for building one from its 9 significant digits.

    Examples:
        >>> Number.new([0, 1, 0, 1, 9, 9, 0, 0, 1]).checkdigit
        4
        >>> str(Number.parse("893 177 4583"))
        '8931774583'
    """

    digits: Tuple[Digit, ...] = Field(
        ...,
        min_length=SIGNIFICANT_DIGITS,
        max_length=SIGNIFICANT_DIGITS,
        description="Significant digits, most significant first",
    )
    checkdigit: Digit = Field(..., description="Modulus 11 check digit")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def accept_raw(cls, data: Any) -> Any:
        """Lets a plain string or integer stand for a whole Number."""
        if isinstance(data, str):
            digits = extract_digits(data)
        elif isinstance(data, int) and not isinstance(data, bool):
            digits = split_int(data)
        else:
            return data
        return {"digits": digits[:SIGNIFICANT_DIGITS], "checkdigit": digits[-1]}

    @model_validator(mode="after")
    def verify_checkdigit(self) -> "Number":
        actual = compute_checkdigit(self.digits)
        if actual != self.checkdigit:
            raise ValidationError(
                ValidationReason.CHECKSUM_MISMATCH,
                given=self.checkdigit,
                actual=actual,
            )
        return self

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Number":
        """Copies the number; updated fields go through validation again."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**dict(self), **update})

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, digits: Iterable[int]) -> "Number":
        """
        Creates a Number from its 9 significant digits.

        Raises:
            ValidationError: LENGTH/FORMAT for malformed digits,
                CHECKSUM_DOMAIN when no check digit exists for them
        """
        values = coerce_digits(digits, SIGNIFICANT_DIGITS)
        return cls(digits=values, checkdigit=compute_checkdigit(values))

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> "Number":
        """
        Creates a Number from all 10 digits, verifying the last one.

        Raises:
            ValidationError: CHECKSUM_MISMATCH naming the given and the
                actual check digit, or any error from `new`
        """
        values = coerce_digits(digits, TOTAL_DIGITS)
        number = cls.new(values[:SIGNIFICANT_DIGITS])
        control = values[-1]

        if number.checkdigit != control:
            raise ValidationError(
                ValidationReason.CHECKSUM_MISMATCH,
                values,
                given=control,
                actual=number.checkdigit,
            )

        return number

    @classmethod
    def parse(cls, text: str) -> "Number":
        """Creates a Number from text such as "6541003238" or "654 100 3238"."""
        with reporting_value(text):
            return cls.from_digits(extract_digits(text))

    @classmethod
    def from_int(cls, value: int) -> "Number":
        """Creates a Number from an unsigned integer of up to 10 digits."""
        with reporting_value(value):
            return cls.from_digits(split_int(value))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def all_digits(self) -> Tuple[int, ...]:
        """All 10 digits, check digit last."""
        return self.digits + (self.checkdigit,)

    def compact(self) -> str:
        return "".join(str(digit) for digit in self.all_digits())

    def __str__(self) -> str:
        return self.compact()

    def __repr__(self) -> str:
        return f"Number('{self.compact()}')"

    def __int__(self) -> int:
        return int(self.compact())
