"""
NHS Number: Modulus 11 health identifier for England, Wales and the Isle of Man

See <https://www.datadictionary.nhs.uk/attributes/nhs_number.html>

The NHS Number is a unique number allocated to every patient registered
with the NHS in England, Wales and the Isle of Man.

An NHS Number is always 10 digits long, sometimes formatted in a 3-3-4
manner. For example, `6541003238` can be presented as `654 100 3238`.
The last digit is the check digit.
"""

import logging
from typing import ClassVar, Optional, Tuple

from heidi.core.domain import Identifier, IdentifierType
from heidi.core.errors import ValidationError, ValidationReason
from heidi.core.math.checksum import SIGNIFICANT_DIGITS
from heidi.nhs.sources import DigitSource, LotteryConfig, RandomDigitSource

logger = logging.getLogger(__name__)


class NhsNumber(Identifier):
    """
    An NHS Number: 9 digits plus 1 check digit.

    Examples:
        >>> NhsNumber.parse("6541003238").checkdigit
        8
        >>> NhsNumber.from_int(6541003238).display("official")
        '654 100 3238'
        >>> NhsNumber.new([3, 7, 8, 3, 9, 5, 5, 6, 0]).checkdigit
        2
    """

    kind: ClassVar[IdentifierType] = IdentifierType.NHS
    label: ClassVar[str] = "NHS Number"
    official_grouping: ClassVar[Optional[Tuple[int, ...]]] = (3, 3, 4)

    @classmethod
    def random(
        cls,
        source: Optional[DigitSource] = None,
        config: Optional[LotteryConfig] = None,
    ) -> "NhsNumber":
        """Random valid NHS Number, see `lottery`."""
        return lottery(source, config)


def lottery(
    source: Optional[DigitSource] = None,
    config: Optional[LotteryConfig] = None,
) -> NhsNumber:
    """
    Returns a random NHS Number.

    Draws 9 digits per attempt. A draw whose check digit would be 10 is
    discarded and a fresh one is drawn, up to `config.max_attempts` times.

    Args:
        source: digit source (default: a fresh RandomDigitSource)
        config: lottery limits (default: LotteryConfig())

    Returns:
        A valid NhsNumber

    Raises:
        ValidationError: LOTTERY_EXHAUSTED when every attempt was discarded;
            any other reason (e.g. a source yielding a non-digit) immediately
    """
    source = source or RandomDigitSource()
    config = config or LotteryConfig()

    for attempt in range(1, config.max_attempts + 1):
        digits = [source.next_digit() for _ in range(SIGNIFICANT_DIGITS)]
        try:
            return NhsNumber.new(digits)
        except ValidationError as e:
            if e.reason is not ValidationReason.CHECKSUM_DOMAIN:
                raise
            logger.debug("Discarded draw %s (attempt %d)", digits, attempt)

    logger.warning("Lottery exhausted after %d attempts", config.max_attempts)
    raise ValidationError(
        ValidationReason.LOTTERY_EXHAUSTED, attempts=config.max_attempts
    )
