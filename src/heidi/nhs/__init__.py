"""
NHS Numbers: validation, display and random generation.
"""

from heidi.nhs.number import NhsNumber, lottery
from heidi.nhs.sources import (
    DigitSource,
    LotteryConfig,
    RandomDigitSource,
    SequenceDigitSource,
)

__all__ = [
    "NhsNumber",
    "lottery",
    "DigitSource",
    "LotteryConfig",
    "RandomDigitSource",
    "SequenceDigitSource",
]
