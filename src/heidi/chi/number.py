"""
CHI Number: Modulus 11 health identifier for Scotland

See <https://www.ndc.scot.nhs.uk/Data-Dictionary/SMR-Datasets/Patient-Identification-and-Demographic-Information/Community-Health-Index-Number/>

The CHI Number (Community Health Index) is a unique number allocated to
every patient registered with the NHS in Scotland.

A CHI Number is always 10 digits long:
- digits 1-6: date of birth as DDMMYY
- digits 7-8: random
- digit 9: random, even for females and odd for males
- digit 10: check digit
"""

from enum import Enum
from typing import ClassVar, Sequence

from heidi.core.domain import Identifier, IdentifierType
from heidi.core.errors import ValidationError, ValidationReason


class Sex(str, Enum):
    """Sex encoded by the parity of the 9th digit"""

    FEMALE = "female"
    MALE = "male"


def validate_date_prefix(digits: Sequence[int]) -> None:
    """
    Checks the date boundaries of the DDMMYY prefix.

    Naive on purpose: real month lengths and leap years are not checked.

    Raises:
        ValidationError: DATE_RANGE if the day is not in 1..31 or the month
            not in 1..12
    """
    day = digits[0] * 10 + digits[1]
    month = digits[2] * 10 + digits[3]

    if day == 0 or day > 31 or month == 0 or month > 12:
        raise ValidationError(ValidationReason.DATE_RANGE, day=day, month=month)


class ChiNumber(Identifier):
    """
    A CHI Number: date of birth prefix, 3 random digits and a check digit.

    The date prefix is validated before the checksum.

    Examples:
        >>> ChiNumber.parse("3011203237").checkdigit
        7
        >>> ChiNumber.parse("0101990014").sex
        <Sex.MALE: 'male'>
    """

    kind: ClassVar[IdentifierType] = IdentifierType.CHI
    label: ClassVar[str] = "CHI Number"

    @classmethod
    def precheck(cls, digits: Sequence[int]) -> None:
        validate_date_prefix(digits)

    @property
    def birth_day(self) -> int:
        return self.digits[0] * 10 + self.digits[1]

    @property
    def birth_month(self) -> int:
        return self.digits[2] * 10 + self.digits[3]

    @property
    def birth_year(self) -> int:
        """Two-digit year of birth; the century is not encoded."""
        return self.digits[4] * 10 + self.digits[5]

    @property
    def sex(self) -> Sex:
        return Sex.FEMALE if self.digits[8] % 2 == 0 else Sex.MALE
