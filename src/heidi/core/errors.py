"""
ValidationError: single failure type shared by every identifier.

The error carries a discriminated reason plus the raw details; the
human-readable message is rendered from them on demand so callers can
match on `reason` instead of parsing text.
"""

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Final, Iterator, Optional


# =============================================================================
# REASONS
# =============================================================================


class ValidationReason(str, Enum):
    """Why an input could not become an identifier."""

    LENGTH = "length"
    FORMAT = "format"
    CHECKSUM_DOMAIN = "checksum_domain"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    DATE_RANGE = "date_range"
    MAGNITUDE = "magnitude"
    LOTTERY_EXHAUSTED = "lottery_exhausted"


_MESSAGES: Final[Dict[ValidationReason, str]] = {
    ValidationReason.LENGTH: "Numbers must be {expected} digits long, got {count}",
    ValidationReason.FORMAT: "Unexpected {char!r} at position {position}, expected a decimal digit",
    ValidationReason.CHECKSUM_DOMAIN: "Modulus 11 numbers cannot have a check digit of 10",
    ValidationReason.CHECKSUM_MISMATCH: (
        "The given check digit {given} does not match the actual check digit {actual}"
    ),
    ValidationReason.DATE_RANGE: (
        "Invalid date of birth prefix: day {day:02d}, month {month:02d}"
    ),
    ValidationReason.MAGNITUDE: "The given number {number} has more than 10 digits",
    ValidationReason.LOTTERY_EXHAUSTED: "No valid number drawn after {attempts} attempts",
}


# =============================================================================
# EXCEPTION
# =============================================================================


class ValidationError(Exception):
    """
    Represents an error after validating the integrity of a number.

    Not a ValueError on purpose: pydantic only converts ValueError and
    AssertionError raised by validators, so this one propagates from model
    validation untouched.

    Attributes:
        reason: discriminated failure kind
        value: the offending raw input, when known
        details: values used to render the message (given/actual, day/month, ...)
    """

    def __init__(
        self,
        reason: ValidationReason,
        value: Optional[Any] = None,
        **details: Any,
    ):
        self.reason = reason
        self.value = value
        self.details = details
        super().__init__(reason, value)

    @property
    def message(self) -> str:
        return _MESSAGES[self.reason].format(**self.details)

    def with_value(self, value: Any) -> "ValidationError":
        """Copy of this error naming `value` as the offending input."""
        return ValidationError(self.reason, value, **self.details)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"ValidationError(reason={self.reason.value!r}, "
            f"value={self.value!r}, details={self.details!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationError):
            return NotImplemented
        return (self.reason, self.value, self.details) == (
            other.reason,
            other.value,
            other.details,
        )

    def __hash__(self) -> int:
        return hash((self.reason, repr(self.value)))


@contextmanager
def reporting_value(value: Any) -> Iterator[None]:
    """Re-raise any ValidationError from the block naming `value` as the input."""
    try:
        yield
    except ValidationError as error:
        raise error.with_value(value) from None
