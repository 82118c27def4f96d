"""
Digit sources for random identifier generation.

The lottery never touches a shared generator: each source owns its
state, so concurrent callers use independent instances and tests can
substitute a fixed sequence.
"""

import itertools
import random
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol


class DigitSource(Protocol):
    """Anything that yields one decimal digit per call."""

    def next_digit(self) -> int: ...


class RandomDigitSource:
    """Uniform, independent digits from a private `random.Random`."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_digit(self) -> int:
        return self._rng.randint(0, 9)


class SequenceDigitSource:
    """
    Replays a fixed digit sequence, cycling when it runs out.

    Raises:
        ValueError: if the sequence is empty
    """

    def __init__(self, digits: Iterable[int]):
        values = list(digits)
        if not values:
            raise ValueError("SequenceDigitSource needs at least one digit")
        self._digits: Iterator[int] = itertools.cycle(values)

    def next_digit(self) -> int:
        return next(self._digits)


@dataclass(frozen=True)
class LotteryConfig:
    """
    Lottery limits.

    A draw has no valid check digit with probability 1/11, so the default
    bound is never reached in practice.
    """

    max_attempts: int = 1000

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
