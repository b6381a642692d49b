"""Command-line converter for UNC token amounts.

Usage:
    unc-token "1.5 UNC"                 # 1.50 UNC
    unc-token "1.5 UNC" --to milli      # 1500
    unc-token "250 attounc" --to json   # "250"
    unc-token 10 --to hex               # 16-byte little-endian payload

Input without a unit suffix is read as whole tokens unless
UNC_TOKEN_UNSUFFIXED says otherwise; --strict requires a suffix.

Exit codes:
    0 - Amount parsed and printed
    1 - Amount could not be parsed
    2 - Invalid configuration
"""

import argparse
import json
import sys
from collections.abc import Sequence

import structlog

from unc_token.config import STRICT_PARSE_CONFIG, ParseConfig
from unc_token.constants import Denomination
from unc_token.errors import TokenParseError
from unc_token.log_config import configure_logging, resolve_log_level
from unc_token.token import TokenAmount

logger = structlog.get_logger()

OUTPUT_FORMATS = [d.value for d in Denomination] + ["display", "json", "hex"]


def render(amount: TokenAmount, output_format: str) -> str:
    """Render an amount in one of OUTPUT_FORMATS."""
    if output_format == "display":
        return amount.to_string()
    if output_format == "json":
        return json.dumps(amount.to_decimal_string())
    if output_format == "hex":
        return amount.to_bytes().hex()
    return str(amount.as_denomination(Denomination(output_format)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unc-token",
        description="Convert UNC token amounts between denominations and encodings",
    )
    parser.add_argument(
        "amount",
        type=str,
        help='Amount to convert, e.g. "1.5 UNC", "250 milliunc", "7 attounc"',
    )
    parser.add_argument(
        "--to",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default="display",
        help="Output denomination or encoding (default: display)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject amounts without a unit suffix",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(resolve_log_level(args.verbose))

    if args.strict:
        config = STRICT_PARSE_CONFIG
    else:
        try:
            config = ParseConfig.from_env()
        except ValueError as err:
            print(f"Error: {err}", file=sys.stderr)
            return 2

    try:
        amount = TokenAmount.parse(args.amount, config)
    except TokenParseError as err:
        logger.info("cli_parse_failed", amount=args.amount, error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1

    logger.debug("cli_parsed", amount=repr(amount), output_format=args.output_format)
    print(render(amount, args.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
