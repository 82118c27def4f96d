"""CLI entry point: ``heidi check`` and ``heidi generate``.

heidi helps dealing with health identifiers such as NHS numbers or CHI
numbers.

Exit codes: 0 on a valid or generated identifier, 1 when validation or
generation fails, 2 for usage and configuration errors.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import pydantic

from heidi import __version__, identifiers
from heidi.config import Settings
from heidi.core.domain import DisplayFormat, IdentifierType
from heidi.core.errors import ValidationError
from heidi.logging_config import setup_logging
from heidi.nhs import RandomDigitSource

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"heidi {__version__}")
        return EXIT_OK

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE

    try:
        settings = Settings()
    except pydantic.ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    if args.command == "check":
        return _run_check(args)
    return _run_generate(args, settings)


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="heidi",
        description=(
            "Validate and generate health identifiers: NHS Numbers "
            "(England and Wales) and CHI Numbers (Scotland)."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    types = [kind.value for kind in IdentifierType]
    formats = [fmt.value for fmt in DisplayFormat]

    sub = parser.add_subparsers(dest="command")

    check = sub.add_parser(
        "check",
        help="Validate a health identifier number for the given type",
    )
    check.add_argument(
        "type",
        choices=types,
        help="The type of health identifier",
    )
    check.add_argument(
        "number",
        help="The health identifier number to validate",
    )

    generate = sub.add_parser(
        "generate",
        help="Generate a random valid health identifier",
    )
    generate.add_argument(
        "type",
        choices=types,
        help="The type of health identifier",
    )
    generate.add_argument(
        "--format",
        "-f",
        choices=formats,
        type=str.lower,
        default=None,
        help=(
            "Output format (default: compact). Official display requires "
            "a particular spacing, e.g. 3-3-4 for NHS Numbers: 123 456 7890"
        ),
    )
    generate.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible generation",
    )

    return parser


def _run_check(args: argparse.Namespace) -> int:
    cls = identifiers.identifier_class(args.type)

    try:
        identifier = identifiers.parse(args.type, args.number)
    except ValidationError as e:
        logger.info("%s %r rejected: %s", cls.label, args.number, e.reason.value)
        print(f"{cls.label} '{args.number}' is invalid.", file=sys.stderr)
        print(f"Error: {e}.", file=sys.stderr)
        return EXIT_INVALID

    logger.info("%s %r accepted", cls.label, args.number)
    print(f"{cls.label} '{identifier.display(DisplayFormat.OFFICIAL)}' is valid.")
    return EXIT_OK


def _run_generate(args: argparse.Namespace, settings: Settings) -> int:
    fmt = DisplayFormat(args.format) if args.format else settings.display_format
    seed = args.seed if args.seed is not None else settings.lottery_seed

    try:
        identifier = identifiers.random(
            args.type,
            source=RandomDigitSource(seed),
            config=settings.lottery_config(),
        )
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}.", file=sys.stderr)
        return EXIT_INVALID

    logger.info("Generated %s %s", identifier.label, identifier)
    print(identifiers.display(identifier, fmt))
    return EXIT_OK
