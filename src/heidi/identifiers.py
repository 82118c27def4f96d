"""
Identifier facade: operations by identifier type.

Used by front-ends (the CLI) that pick the format at run time.
"""

from typing import Dict, Optional, Type, Union

from heidi.chi import ChiNumber
from heidi.core.domain import DisplayFormat, Identifier, IdentifierType
from heidi.nhs import DigitSource, LotteryConfig, NhsNumber, lottery

_CLASSES: Dict[IdentifierType, Type[Identifier]] = {
    IdentifierType.NHS: NhsNumber,
    IdentifierType.CHI: ChiNumber,
}


def identifier_class(kind: Union[IdentifierType, str]) -> Type[Identifier]:
    """Wrapper class for an identifier type ("nhs" or "chi")."""
    return _CLASSES[IdentifierType(kind)]


def parse(kind: Union[IdentifierType, str], value: Union[str, int]) -> Identifier:
    """
    Validates `value` as an identifier of the given type.

    Raises:
        ValidationError: if the value is not a valid identifier
        TypeError: if the value is neither a str nor an int
    """
    return identifier_class(kind).coerce(value)


def random(
    kind: Union[IdentifierType, str],
    source: Optional[DigitSource] = None,
    config: Optional[LotteryConfig] = None,
) -> Identifier:
    """
    Random valid identifier of the given type.

    Raises:
        ValueError: for types without a generator (CHI)
        ValidationError: LOTTERY_EXHAUSTED, see `heidi.nhs.lottery`
    """
    kind = IdentifierType(kind)
    if kind is not IdentifierType.NHS:
        raise ValueError(f"{identifier_class(kind).label}s cannot be generated")
    return lottery(source, config)


def display(
    identifier: Identifier,
    fmt: Union[DisplayFormat, str] = DisplayFormat.COMPACT,
) -> str:
    return identifier.display(fmt)
