"""Wire encodings for token amounts.

Two boundaries are supported:
- Decimal string: the atto-unit count as a base-10 string, used for JSON and
  other structured formats whose native numbers cannot hold 128 bits.
- Binary: the atto-unit count as 16 little-endian bytes, no length prefix.

The pydantic core schema defined here lets TokenAmount be used directly as a
BaseModel field with the decimal-string encoding.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

import structlog
from pydantic_core import core_schema

from unc_token.constants import U128_MAX, U128_MAX_DIGITS
from unc_token.errors import DeserializationError

if TYPE_CHECKING:
    from unc_token.token import TokenAmount

logger = structlog.get_logger()

# Size of the little-endian binary encoding
U128_BYTES = 16

_DIGITS = re.compile(r"[0-9]+")


def encode_decimal(atto: int) -> str:
    """Encode an atto-unit count as a decimal string."""
    return str(atto)


def decode_decimal(value: str) -> int:
    """Decode a decimal string into an atto-unit count.

    Raises:
        DeserializationError: If value is not a string of ASCII digits
            or exceeds the 128-bit range
    """
    if not isinstance(value, str) or not _DIGITS.fullmatch(value):
        logger.debug("token_amount_decode_failed", encoding="decimal", value=repr(value))
        raise DeserializationError(f"Token amount must be a decimal integer string: {value!r}")
    significant = value.lstrip("0") or "0"
    if len(significant) > U128_MAX_DIGITS:
        logger.debug("token_amount_decode_failed", encoding="decimal", length=len(value))
        raise DeserializationError(f"Token amount exceeds 2^128-1: {len(value)} digits")
    atto = int(significant)
    if atto > U128_MAX:
        logger.debug("token_amount_decode_failed", encoding="decimal", value=value)
        raise DeserializationError(f"Token amount exceeds 2^128-1: {value}")
    return atto


def encode_le128(atto: int) -> bytes:
    """Encode an atto-unit count as 16 little-endian bytes."""
    return atto.to_bytes(U128_BYTES, "little", signed=False)


def decode_le128(data: bytes | bytearray | memoryview) -> int:
    """Decode 16 little-endian bytes into an atto-unit count.

    Raises:
        DeserializationError: If data is not exactly 16 bytes long
    """
    raw = bytes(data)
    if len(raw) != U128_BYTES:
        logger.debug("token_amount_decode_failed", encoding="le128", length=len(raw))
        raise DeserializationError(
            f"Token amount binary payload must be {U128_BYTES} bytes, got {len(raw)}"
        )
    return int.from_bytes(raw, "little", signed=False)


def token_amount_core_schema(cls: type[TokenAmount]) -> core_schema.CoreSchema:
    """Build the pydantic core schema for TokenAmount.

    Validation accepts a decimal string (JSON and Python) or an existing
    instance (Python only). Serialization always produces the decimal string,
    so the JSON schema of a TokenAmount field is a plain string.
    """
    from_string = core_schema.chain_schema(
        [
            core_schema.str_schema(),
            core_schema.no_info_plain_validator_function(cls.from_decimal_string),
        ]
    )
    return core_schema.json_or_python_schema(
        json_schema=from_string,
        python_schema=core_schema.union_schema(
            [core_schema.is_instance_schema(cls), from_string]
        ),
        serialization=core_schema.plain_serializer_function_ser_schema(
            _serialize,
            return_schema=core_schema.str_schema(),
        ),
    )


def _serialize(amount: Any) -> str:
    return encode_decimal(amount.as_atto())
