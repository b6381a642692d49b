"""UNC token amount value type.

TokenAmount wraps an unsigned 128-bit count of atto-units (10^-24 UNC).
Every operation returns a new instance; nothing mutates in place.

Three flavours of arithmetic are available:
- checked_* methods return None on overflow, underflow or division by zero
- saturating_* methods clamp to [0, 2^128-1]
- operators (+, -, *, //, %) raise Overflow, Underflow or DivisionByZero

Usage pattern:
    from unc_token import TokenAmount

    fee = TokenAmount.from_milli(5)
    balance = TokenAmount.parse("1.5 UNC")

    remaining = balance.checked_sub(fee)
    if remaining is None:
        ...  # insufficient balance

    str(balance)  # "1.50 UNC"
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from unc_token.config import DEFAULT_PARSE_CONFIG, ParseConfig
from unc_token.constants import (
    DISPLAY_STEP,
    ONE_ATTOUNC,
    ONE_MICROUNC,
    ONE_MILLIUNC,
    ONE_UNC,
    U128_MAX,
    UNIT_SUFFIX,
    Denomination,
)
from unc_token.errors import DivisionByZero, Overflow, Underflow
from unc_token.parsing import parse_amount
from unc_token.serialization import (
    decode_decimal,
    decode_le128,
    encode_decimal,
    encode_le128,
    token_amount_core_schema,
)


def _require_int(value: object, what: str) -> int:
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} requires int, got {type(value).__name__}")
    return value


def _require_scalar(value: object, what: str) -> int:
    scalar = _require_int(value, what)
    if scalar < 0:
        raise Underflow(f"{what} requires a non-negative scalar, got {scalar}")
    return scalar


def _check_u128(value: int) -> int:
    if value < 0:
        raise Underflow(f"Token amount cannot be negative: {value}")
    if value > U128_MAX:
        raise Overflow(f"Token amount exceeds 2^128-1: {value}")
    return value


class TokenAmount:
    """Amount of UNC tokens stored as atto-units.

    Attributes:
        ZERO, ONE_UNC, ONE_MILLIUNC, ONE_MICROUNC, ONE_ATTOUNC, MAX:
            Pre-validated constant instances, built at import time.
    """

    __slots__ = ("_atto",)
    _atto: int

    ZERO: ClassVar[TokenAmount]
    ONE_UNC: ClassVar[TokenAmount]
    ONE_MILLIUNC: ClassVar[TokenAmount]
    ONE_MICROUNC: ClassVar[TokenAmount]
    ONE_ATTOUNC: ClassVar[TokenAmount]
    MAX: ClassVar[TokenAmount]

    def __init__(self, atto: int) -> None:
        """Create an amount from a number of atto-units.

        Raises:
            TypeError: If atto is not an int
            Underflow: If atto is negative
            Overflow: If atto exceeds 2^128-1
        """
        self._atto = _check_u128(_require_int(atto, "TokenAmount"))

    # --- Construction ---

    @classmethod
    def from_denomination(cls, value: int, denomination: Denomination) -> TokenAmount:
        """Create an amount from a count of the given denomination.

        Raises:
            TypeError: If value is not an int
            Underflow: If value is negative
            Overflow: If the scaled value exceeds 2^128-1
        """
        value = _require_int(value, f"TokenAmount.from_{denomination.value}")
        return cls(value * denomination.scale)

    @classmethod
    def checked_from_denomination(
        cls, value: int, denomination: Denomination
    ) -> TokenAmount | None:
        """Like from_denomination, but returns None when out of range."""
        value = _require_int(value, f"TokenAmount.from_{denomination.value}")
        scaled = value * denomination.scale
        if not 0 <= scaled <= U128_MAX:
            return None
        return cls(scaled)

    @classmethod
    def from_whole(cls, value: int) -> TokenAmount:
        """Create an amount from whole UNC (10^24 atto-units each)."""
        return cls.from_denomination(value, Denomination.WHOLE)

    @classmethod
    def from_milli(cls, value: int) -> TokenAmount:
        """Create an amount from milli-UNC (10^21 atto-units each)."""
        return cls.from_denomination(value, Denomination.MILLI)

    @classmethod
    def from_micro(cls, value: int) -> TokenAmount:
        """Create an amount from micro-UNC (10^18 atto-units each)."""
        return cls.from_denomination(value, Denomination.MICRO)

    @classmethod
    def from_atto(cls, value: int) -> TokenAmount:
        """Create an amount from atto-units."""
        return cls.from_denomination(value, Denomination.ATTO)

    # --- Extraction ---

    def as_denomination(self, denomination: Denomination) -> int:
        """Amount in the given denomination, truncating any remainder."""
        return self._atto // denomination.scale

    def as_whole(self) -> int:
        return self._atto // ONE_UNC

    def as_milli(self) -> int:
        return self._atto // ONE_MILLIUNC

    def as_micro(self) -> int:
        return self._atto // ONE_MICROUNC

    def as_atto(self) -> int:
        return self._atto

    def is_zero(self) -> bool:
        return self._atto == 0

    # --- Checked arithmetic ---

    def checked_add(self, other: TokenAmount) -> TokenAmount | None:
        """Add, returning None if the sum exceeds 2^128-1."""
        result = self._atto + other._atto
        if result > U128_MAX:
            return None
        return TokenAmount(result)

    def checked_sub(self, other: TokenAmount) -> TokenAmount | None:
        """Subtract, returning None if other is larger than self."""
        result = self._atto - other._atto
        if result < 0:
            return None
        return TokenAmount(result)

    def checked_mul(self, scalar: int) -> TokenAmount | None:
        """Multiply by a non-negative scalar, returning None when out of range.

        A negative scalar returns None, even for ZERO.
        """
        scalar = _require_int(scalar, "TokenAmount.checked_mul")
        if scalar < 0:
            return None
        result = self._atto * scalar
        if result > U128_MAX:
            return None
        return TokenAmount(result)

    def checked_div(self, scalar: int) -> TokenAmount | None:
        """Floor-divide by a positive scalar, returning None on zero or negative."""
        scalar = _require_int(scalar, "TokenAmount.checked_div")
        if scalar <= 0:
            return None
        return TokenAmount(self._atto // scalar)

    # --- Saturating arithmetic ---

    def saturating_add(self, other: TokenAmount) -> TokenAmount:
        """Add, clamping at 2^128-1."""
        return TokenAmount(min(self._atto + other._atto, U128_MAX))

    def saturating_sub(self, other: TokenAmount) -> TokenAmount:
        """Subtract, clamping at zero."""
        return TokenAmount(max(self._atto - other._atto, 0))

    def saturating_mul(self, scalar: int) -> TokenAmount:
        """Multiply, clamping at 2^128-1.

        Raises:
            Underflow: If scalar is negative
        """
        result = self._atto * _require_scalar(scalar, "TokenAmount.saturating_mul")
        return TokenAmount(min(result, U128_MAX))

    def saturating_div(self, scalar: int) -> TokenAmount:
        """Floor-divide; division by zero yields zero instead of failing.

        Raises:
            Underflow: If scalar is negative
        """
        scalar = _require_scalar(scalar, "TokenAmount.saturating_div")
        if scalar == 0:
            return TokenAmount.ZERO
        return TokenAmount(self._atto // scalar)

    # --- Operators ---

    def __add__(self, other: object) -> TokenAmount:
        """Add two amounts.

        Raises:
            Overflow: If the sum exceeds 2^128-1
        """
        if not isinstance(other, TokenAmount):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise Overflow(f"Overflow: {self._atto} + {other._atto}")
        return result

    def __sub__(self, other: object) -> TokenAmount:
        """Subtract other from self.

        Raises:
            Underflow: If other is larger than self
        """
        if not isinstance(other, TokenAmount):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise Underflow(f"Underflow: {self._atto} - {other._atto}")
        return result

    def __mul__(self, scalar: object) -> TokenAmount:
        """Multiply by an int scalar.

        Raises:
            Underflow: If scalar is negative
            Overflow: If the product exceeds 2^128-1
        """
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        return TokenAmount(self._atto * _require_scalar(scalar, "TokenAmount.__mul__"))

    __rmul__ = __mul__

    def __floordiv__(self, scalar: object) -> TokenAmount:
        """Floor-divide by an int scalar.

        Raises:
            DivisionByZero: If scalar is zero
            Underflow: If scalar is negative
        """
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        if scalar == 0:
            raise DivisionByZero(f"Division by zero: {self._atto} // 0")
        if scalar < 0:
            raise Underflow(f"Division by negative scalar: {self._atto} // {scalar}")
        return TokenAmount(self._atto // scalar)

    def __mod__(self, scalar: object) -> TokenAmount:
        """Remainder of floor division by an int scalar.

        Raises:
            DivisionByZero: If scalar is zero
            Underflow: If scalar is negative
        """
        if isinstance(scalar, bool) or not isinstance(scalar, int):
            return NotImplemented
        if scalar == 0:
            raise DivisionByZero(f"Modulo by zero: {self._atto} % 0")
        if scalar < 0:
            raise Underflow(f"Modulo by negative scalar: {self._atto} % {scalar}")
        return TokenAmount(self._atto % scalar)

    def __truediv__(self, other: object) -> TokenAmount:
        raise TypeError("TokenAmount does not support true division; use floor division (//)")

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenAmount):
            return NotImplemented
        return self._atto == other._atto

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TokenAmount):
            return NotImplemented
        return self._atto < other._atto

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TokenAmount):
            return NotImplemented
        return self._atto <= other._atto

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TokenAmount):
            return NotImplemented
        return self._atto > other._atto

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TokenAmount):
            return NotImplemented
        return self._atto >= other._atto

    def __hash__(self) -> int:
        return hash(self._atto)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._atto != 0

    # --- Text ---

    def to_string(self) -> str:
        """Canonical display form, e.g. "10.00 UNC".

        The amount is shown in whole tokens with exactly two fractional
        digits. Precision below 0.01 UNC is truncated, so the displayed value
        never exceeds the stored one.
        """
        hundredths = self._atto // DISPLAY_STEP
        return f"{hundredths // 100}.{hundredths % 100:02d} {UNIT_SUFFIX}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TokenAmount({self._atto})"

    @classmethod
    def parse(cls, text: str, config: ParseConfig = DEFAULT_PARSE_CONFIG) -> TokenAmount:
        """Parse an amount such as "1.5 UNC", "250 milliunc" or "7 attounc".

        Unit suffixes are case-insensitive. Text without a suffix is read in
        config.unsuffixed (whole tokens by default) or rejected when that is
        None.

        Raises:
            InvalidNumber: Malformed numeric part
            LongWhole: Value exceeds 2^128-1 once scaled
            LongFractional: More fractional digits than the unit resolves
            InvalidTokenUnit: Unknown unit, or missing unit in strict mode
        """
        return cls(parse_amount(text, config))

    @classmethod
    def from_str(cls, text: str) -> TokenAmount:
        """Parse with the default configuration."""
        return cls.parse(text)

    # --- Serialization ---

    def to_decimal_string(self) -> str:
        """Atto-unit count as a decimal string, the structured-data encoding."""
        return encode_decimal(self._atto)

    @classmethod
    def from_decimal_string(cls, value: str) -> TokenAmount:
        """Inverse of to_decimal_string.

        Raises:
            DeserializationError: If value is not a decimal integer string
                within the 128-bit range
        """
        return cls(decode_decimal(value))

    def to_bytes(self) -> bytes:
        """16-byte little-endian encoding of the atto-unit count."""
        return encode_le128(self._atto)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> TokenAmount:
        """Inverse of to_bytes.

        Raises:
            DeserializationError: If data is not exactly 16 bytes
        """
        return cls(decode_le128(data))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return token_amount_core_schema(cls)


TokenAmount.ZERO = TokenAmount(0)
TokenAmount.ONE_UNC = TokenAmount.from_whole(1)
TokenAmount.ONE_MILLIUNC = TokenAmount.from_milli(1)
TokenAmount.ONE_MICROUNC = TokenAmount.from_micro(1)
TokenAmount.ONE_ATTOUNC = TokenAmount.from_atto(ONE_ATTOUNC)
TokenAmount.MAX = TokenAmount(U128_MAX)
