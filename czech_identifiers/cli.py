"""Command line interface for parsing, formatting and generating identifiers.

Usage::

    czech-identifiers parse account 19-2000145399/0800
    czech-identifiers format birth 675914/1488 --format N
    czech-identifiers generate ico --count 5 --seed 42
"""

import argparse
import json
import sys
from typing import Any, Sequence

from czech_identifiers.config import (
    ACCOUNT_NUMBER_FORMATS,
    BIRTH_NUMBER_FORMATS,
    IDENTIFICATION_NUMBER_FORMATS,
    IdentifiersConfig,
)
from czech_identifiers.exceptions import ConfigurationError, UnknownFormatError
from czech_identifiers.generators import (
    AccountNumberGenerator,
    BirthNumberGenerator,
    IdentificationNumberGenerator,
)
from czech_identifiers.logging import get_logger, setup_logging
from czech_identifiers.patterns import (
    AccountNumberPattern,
    BirthNumberPattern,
    IdentificationNumberPattern,
    Pattern,
)
from czech_identifiers.serialization import failure_to_dict, to_dict

logger = get_logger(__name__)

PATTERNS: dict[str, Pattern[Any]] = {
    "account": AccountNumberPattern.STANDARD,
    "birth": BirthNumberPattern.STANDARD,
    "birth-plain": BirthNumberPattern.NUMBER,
    "ico": IdentificationNumberPattern.STANDARD,
}

FORMATS = {
    "account": ACCOUNT_NUMBER_FORMATS,
    "birth": BIRTH_NUMBER_FORMATS,
    "birth-plain": BIRTH_NUMBER_FORMATS,
    "ico": IDENTIFICATION_NUMBER_FORMATS,
}

GENERATORS = {
    "account": AccountNumberGenerator,
    "birth": BirthNumberGenerator,
    "ico": IdentificationNumberGenerator,
}

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser of the command line interface."""
    parser = argparse.ArgumentParser(
        prog="czech-identifiers",
        description="Validate, format and generate Czech identifiers",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level, overrides LOG_LEVEL (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Log format, overrides LOG_FORMAT (default: standard)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser(
        "parse", help="Parse identifiers and print them as JSON"
    )
    parse_parser.add_argument("kind", choices=sorted(PATTERNS))
    parse_parser.add_argument("texts", nargs="+", metavar="TEXT")
    parse_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )

    format_parser = subparsers.add_parser(
        "format", help="Parse identifiers and print them in another format"
    )
    format_parser.add_argument("kind", choices=sorted(PATTERNS))
    format_parser.add_argument("texts", nargs="+", metavar="TEXT")
    format_parser.add_argument(
        "--format",
        dest="format_spec",
        type=str,
        default=None,
        help="Format selector: S or F for accounts, S or N for birth numbers",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate valid identifiers"
    )
    generate_parser.add_argument("kind", choices=sorted(GENERATORS))
    generate_parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of identifiers to generate (default: 1)",
    )
    generate_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility, overrides SEED",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = IdentifiersConfig.from_env()
    except ConfigurationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(
        level=args.log_level or config.log_level,
        format_type=args.log_format or config.log_format,
    )

    if args.command == "parse":
        return parse_command(args.kind, args.texts, args.pretty or config.output.pretty_json)
    if args.command == "format":
        return format_command(args.kind, args.texts, args.format_spec, config)
    return generate_command(
        args.kind, args.count, args.seed if args.seed is not None else config.seed
    )


def parse_command(kind: str, texts: Sequence[str], pretty: bool) -> int:
    """Print each parsed identifier as JSON; non-zero if any is not valid."""
    pattern = PATTERNS[kind]
    exit_code = EXIT_OK
    for text in texts:
        result = pattern.parse(text)
        if result.success:
            data = to_dict(result.value)
            if not data["is_valid"]:
                exit_code = EXIT_INVALID
        else:
            data = failure_to_dict(text, result.exception)
            exit_code = EXIT_INVALID
        print(json.dumps(data, indent=2 if pretty else None, ensure_ascii=False))
    return exit_code


def format_command(
    kind: str,
    texts: Sequence[str],
    format_spec: str | None,
    config: IdentifiersConfig,
) -> int:
    """Print each identifier formatted with ``format_spec``."""
    pattern = PATTERNS[kind]
    if format_spec is None:
        if kind == "account":
            format_spec = config.formats.account_number
        elif kind.startswith("birth"):
            format_spec = config.formats.birth_number

    supported = FORMATS[kind]
    if format_spec is not None and format_spec not in supported:
        print(UnknownFormatError(format_spec, ", ".join(supported)), file=sys.stderr)
        return EXIT_USAGE

    exit_code = EXIT_OK
    for text in texts:
        result = pattern.parse(text)
        if not result.success:
            print(result.exception, file=sys.stderr)
            exit_code = EXIT_INVALID
            continue
        print(result.value.format(format_spec))
    return exit_code


def generate_command(kind: str, count: int, seed: int | None) -> int:
    """Print ``count`` valid identifiers in their standard form."""
    generator = GENERATORS[kind](seed=seed)
    logger.debug("Generating %d identifiers of kind %s (seed=%s)", count, kind, seed)
    for identifier in generator.generate_batch(count):
        print(identifier)
    return EXIT_OK
