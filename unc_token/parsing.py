"""Decimal number parsing for token amounts.

Numbers are parsed exactly into integer atto-unit counts; no float or
Decimal intermediate is involved.
"""

from __future__ import annotations

import re

import structlog

from unc_token.config import DEFAULT_PARSE_CONFIG, ParseConfig
from unc_token.constants import U128_MAX, U128_MAX_DIGITS, UNIT_ALIASES, Denomination
from unc_token.errors import (
    InvalidNumber,
    InvalidTokenUnit,
    LongFractional,
    LongWhole,
    TokenParseError,
)

logger = structlog.get_logger()

# ASCII digits only; str.isdigit() also accepts superscripts and other scripts
_DIGITS = re.compile(r"[0-9]+")


def parse_decimal_number(text: str, denomination: Denomination) -> int:
    """Parse a decimal number expressed in a denomination into atto-units.

    Args:
        text: Number in the form "123" or "123.456" (no sign, no whitespace)
        denomination: Denomination the number is expressed in

    Returns:
        Exact atto-unit count

    Raises:
        InvalidNumber: If text is not a plain decimal number
        LongFractional: If there are more fractional digits than the
            denomination resolves (24 for whole tokens, 0 for atto-units)
        LongWhole: If the scaled value exceeds the 128-bit range

    Examples:
        parse_decimal_number("0.123456", Denomination.WHOLE)
        # -> 123456000000000000000000
    """
    whole, dot, fractional = text.partition(".")
    if not _DIGITS.fullmatch(whole) or (dot and not _DIGITS.fullmatch(fractional)):
        raise InvalidNumber(text)

    # int() refuses very long digit strings, so reject by length first
    significant = whole.lstrip("0") or "0"
    if len(significant) > U128_MAX_DIGITS:
        raise LongWhole(text)

    scale = denomination.scale
    fractional_value = 0
    if dot:
        if len(fractional) > denomination.max_fractional_digits:
            raise LongFractional(fractional)
        fractional_value = int(fractional) * (scale // 10 ** len(fractional))

    result = int(significant) * scale + fractional_value
    if result > U128_MAX:
        raise LongWhole(text)
    return result


def split_amount(text: str) -> tuple[str, str | None]:
    """Split text into its numeric part and upper-cased unit suffix.

    The unit starts at the first ASCII letter. Returns None as the unit
    when the text has no letters at all.
    """
    stripped = text.strip()
    for index, char in enumerate(stripped):
        if char.isascii() and char.isalpha():
            return stripped[:index].strip(), stripped[index:].strip().upper()
    return stripped, None


def resolve_unit(text: str, unit: str | None, config: ParseConfig) -> Denomination:
    """Map a unit suffix to its denomination, honoring the unsuffixed policy.

    Raises:
        InvalidTokenUnit: If the unit is unknown, or missing while the
            config rejects unsuffixed input
    """
    if unit is None:
        if not config.accepts_unsuffixed:
            raise InvalidTokenUnit(text)
        return config.unsuffixed
    denomination = UNIT_ALIASES.get(unit)
    if denomination is None:
        raise InvalidTokenUnit(text)
    return denomination


def parse_amount(text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> int:
    """Parse a textual amount such as "1.5 UNC" into atto-units.

    Args:
        text: Amount with an optional unit suffix
        config: Parsing configuration (controls unsuffixed input)

    Returns:
        Exact atto-unit count

    Raises:
        TokenParseError: Subclass describing the failure kind
    """
    number, unit = split_amount(text)
    try:
        denomination = resolve_unit(text, unit, config)
        return parse_decimal_number(number, denomination)
    except TokenParseError as err:
        logger.debug(
            "token_amount_parse_failed",
            text=text,
            error_kind=type(err).__name__,
        )
        raise
