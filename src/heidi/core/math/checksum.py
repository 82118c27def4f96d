"""
Checksum: Modulus 11 check digit

The check digit of a 10-digit health identifier is derived from the
first 9 digits:

    weighted_sum = Σ digit[i] * (10 - i)        for i in 0..8
    candidate    = 11 - (weighted_sum mod 11)

    candidate == 11  → check digit 0
    candidate == 10  → no valid check digit (the 9 digits are unusable)
    otherwise        → check digit == candidate

NHS and CHI numbers share this scheme; they only differ in how the 9
digits are interpreted.

INVARIANTS:
1. The check digit is always in [0, 9]
2. Exactly 9 digits take part in the sum, weights 10 down to 2
3. The computation is pure and deterministic
"""

from typing import Final, Sequence, Tuple

from heidi.core.errors import ValidationError, ValidationReason

# =============================================================================
# CONSTANTS
# =============================================================================

MODULUS: Final[int] = 11

# Number of digits weighted into the checksum
SIGNIFICANT_DIGITS: Final[int] = 9

# Weight of digit i is 10 - i
WEIGHTS: Final[Tuple[int, ...]] = tuple(range(10, 1, -1))

# Candidate value with no single-digit representation
CHECKDIGIT_UNREPRESENTABLE: Final[int] = 10


# =============================================================================
# CHECKSUM
# =============================================================================


def weighted_sum(digits: Sequence[int]) -> int:
    """
    Weighted sum of the 9 significant digits.

    Args:
        digits: 9 digits, most significant first

    Returns:
        Σ digit[i] * (10 - i)

    Raises:
        ValidationError: LENGTH unless exactly 9 digits are given

    Examples:
        >>> weighted_sum([8, 9, 3, 1, 7, 7, 4, 5, 8])
        316
    """
    if len(digits) != SIGNIFICANT_DIGITS:
        raise ValidationError(
            ValidationReason.LENGTH,
            tuple(digits),
            expected=SIGNIFICANT_DIGITS,
            count=len(digits),
        )

    return sum(digit * weight for digit, weight in zip(digits, WEIGHTS))


def compute_checkdigit(digits: Sequence[int]) -> int:
    """
    Modulus 11 check digit for 9 significant digits.

    Args:
        digits: 9 digits, most significant first

    Returns:
        Check digit in [0, 9]

    Raises:
        ValidationError: LENGTH unless exactly 9 digits are given,
            CHECKSUM_DOMAIN when the candidate is 10

    Examples:
        >>> compute_checkdigit([8, 9, 3, 1, 7, 7, 4, 5, 8])
        3
        >>> compute_checkdigit([0, 1, 0, 1, 9, 9, 0, 0, 1])
        4
        >>> compute_checkdigit([0, 0, 0, 0, 0, 0, 0, 0, 0])
        0
    """
    candidate = MODULUS - (weighted_sum(digits) % MODULUS)

    if candidate == MODULUS:
        return 0
    if candidate == CHECKDIGIT_UNREPRESENTABLE:
        raise ValidationError(ValidationReason.CHECKSUM_DOMAIN)

    return candidate


def is_valid_checkdigit(digits: Sequence[int], checkdigit: int) -> bool:
    """
    Check whether `checkdigit` is the Modulus 11 check digit of `digits`.

    Never raises: a wrong number of digits or an unrepresentable checksum
    is simply not valid.
    """
    try:
        return compute_checkdigit(digits) == checkdigit
    except ValidationError:
        return False
