"""
Tests for ValidationError

Coverage:
- Message rendering per reason
- Value attachment
- Equality
- Interaction with pydantic (not a ValueError)
"""

import pytest

from heidi.core.errors import ValidationError, ValidationReason, reporting_value


class TestValidationErrorMessages:
    """Messages are rendered from the reason and its details"""

    @pytest.mark.parametrize(
        "reason, details, expected",
        [
            (
                ValidationReason.LENGTH,
                {"expected": 10, "count": 9},
                "Numbers must be 10 digits long, got 9",
            ),
            (
                ValidationReason.FORMAT,
                {"char": "x", "position": 2},
                "Unexpected 'x' at position 2, expected a decimal digit",
            ),
            (
                ValidationReason.CHECKSUM_DOMAIN,
                {},
                "Modulus 11 numbers cannot have a check digit of 10",
            ),
            (
                ValidationReason.CHECKSUM_MISMATCH,
                {"given": 4, "actual": 3},
                "The given check digit 4 does not match the actual check digit 3",
            ),
            (
                ValidationReason.DATE_RANGE,
                {"day": 0, "month": 13},
                "Invalid date of birth prefix: day 00, month 13",
            ),
            (
                ValidationReason.MAGNITUDE,
                {"number": 12345678901},
                "The given number 12345678901 has more than 10 digits",
            ),
            (
                ValidationReason.LOTTERY_EXHAUSTED,
                {"attempts": 3},
                "No valid number drawn after 3 attempts",
            ),
        ],
    )
    def test_message(self, reason, details, expected) -> None:
        error = ValidationError(reason, **details)
        assert str(error) == expected
        assert error.message == expected

    def test_every_reason_has_a_message(self) -> None:
        from heidi.core.errors import _MESSAGES

        assert set(_MESSAGES) == set(ValidationReason)


class TestValidationErrorValue:
    """Offending input handling"""

    def test_with_value(self) -> None:
        error = ValidationError(ValidationReason.CHECKSUM_MISMATCH, given=4, actual=3)
        named = error.with_value("8931774584")

        assert named.value == "8931774584"
        assert named.details == error.details
        assert error.value is None

    def test_reporting_value(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            with reporting_value("raw input"):
                raise ValidationError(ValidationReason.CHECKSUM_DOMAIN, (0, 1))
        assert exc_info.value.value == "raw input"

    def test_reporting_value_ignores_other_errors(self) -> None:
        with pytest.raises(KeyError):
            with reporting_value("raw input"):
                raise KeyError("boom")

    def test_equality(self) -> None:
        a = ValidationError(ValidationReason.DATE_RANGE, "x", day=32, month=1)
        b = ValidationError(ValidationReason.DATE_RANGE, "x", day=32, month=1)
        c = ValidationError(ValidationReason.DATE_RANGE, "y", day=32, month=1)

        assert a == b
        assert a != c

    def test_repr(self) -> None:
        error = ValidationError(ValidationReason.CHECKSUM_DOMAIN, "0000000060")
        assert repr(error) == (
            "ValidationError(reason='checksum_domain', value='0000000060', details={})"
        )

    def test_not_a_value_error(self) -> None:
        """pydantic must not swallow it into its own ValidationError"""
        assert not issubclass(ValidationError, ValueError)
