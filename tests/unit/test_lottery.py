"""
Tests for NHS Number generation (lottery)

Coverage:
- Deterministic generation with a fixed digit sequence
- Discarding draws without a valid check digit
- Bounded retries (LOTTERY_EXHAUSTED)
- Seeded reproducibility and independent sources
- Digit source and config validation
"""

import logging

import pytest

from heidi.core.domain import Number
from heidi.core.errors import ValidationError, ValidationReason
from heidi.nhs import (
    LotteryConfig,
    NhsNumber,
    RandomDigitSource,
    SequenceDigitSource,
    lottery,
)

# 6 * 2 = 12 → remainder 1 → check digit would be 10
UNREPRESENTABLE_DRAW = [0, 0, 0, 0, 0, 0, 0, 0, 6]
VALID_DRAW = [8, 9, 3, 1, 7, 7, 4, 5, 8]


# =============================================================================
# DETERMINISTIC SOURCES
# =============================================================================


class TestLotteryWithSequence:
    """Lottery driven by a fixed digit sequence"""

    def test_first_draw_valid(self) -> None:
        number = lottery(SequenceDigitSource(VALID_DRAW))
        assert number == NhsNumber.parse("8931774583")

    def test_invalid_draw_is_discarded(self) -> None:
        source = SequenceDigitSource(UNREPRESENTABLE_DRAW + VALID_DRAW)
        assert lottery(source) == NhsNumber.parse("8931774583")

    def test_discarded_draw_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        source = SequenceDigitSource(UNREPRESENTABLE_DRAW + VALID_DRAW)
        with caplog.at_level(logging.DEBUG, logger="heidi.nhs.number"):
            lottery(source)
        assert "Discarded draw" in caplog.text

    def test_exhausted(self, caplog: pytest.LogCaptureFixture) -> None:
        source = SequenceDigitSource(UNREPRESENTABLE_DRAW)

        with caplog.at_level(logging.WARNING, logger="heidi.nhs.number"):
            with pytest.raises(ValidationError) as exc_info:
                lottery(source, LotteryConfig(max_attempts=5))

        assert exc_info.value.reason is ValidationReason.LOTTERY_EXHAUSTED
        assert exc_info.value.details == {"attempts": 5}
        assert "Lottery exhausted after 5 attempts" in caplog.text

    def test_last_attempt_can_succeed(self) -> None:
        source = SequenceDigitSource(UNREPRESENTABLE_DRAW * 2 + VALID_DRAW)
        number = lottery(source, LotteryConfig(max_attempts=3))
        assert number.checkdigit == 3

    def test_non_digit_source_fails_immediately(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            lottery(SequenceDigitSource([12]))
        assert exc_info.value.reason is ValidationReason.FORMAT

    def test_random_classmethod(self) -> None:
        number = NhsNumber.random(SequenceDigitSource(VALID_DRAW))
        assert number.display("official") == "893 177 4583"


# =============================================================================
# RANDOM SOURCES
# =============================================================================


class TestLotteryWithRandom:
    """Lottery driven by random digits"""

    def test_always_valid(self) -> None:
        for _ in range(200):
            number = lottery()
            assert Number.new(number.digits).checkdigit == number.checkdigit

    def test_seeded_reproducible(self) -> None:
        assert lottery(RandomDigitSource(42)) == lottery(RandomDigitSource(42))

    def test_sources_are_independent(self) -> None:
        first = RandomDigitSource(7)
        second = RandomDigitSource(7)

        drawn = [first.next_digit() for _ in range(5)]

        # advancing the first source leaves the second untouched
        assert [second.next_digit() for _ in range(5)] == drawn

    def test_digits_in_range(self) -> None:
        source = RandomDigitSource(3)
        assert all(0 <= source.next_digit() <= 9 for _ in range(1000))


# =============================================================================
# SOURCES & CONFIG
# =============================================================================


class TestSequenceDigitSource:
    """Tests for SequenceDigitSource"""

    def test_cycles(self) -> None:
        source = SequenceDigitSource([1, 2])
        assert [source.next_digit() for _ in range(5)] == [1, 2, 1, 2, 1]

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            SequenceDigitSource([])


class TestLotteryConfig:
    """Tests for LotteryConfig"""

    def test_default(self) -> None:
        assert LotteryConfig().max_attempts == 1000

    def test_at_least_one_attempt(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            LotteryConfig(max_attempts=0)
