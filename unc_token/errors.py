"""Token amount error classes.

Arithmetic errors derive from ArithmeticError, parse and deserialization
errors from ValueError, so callers can catch either the builtin category
or TokenAmountError for everything raised by this package.
"""


class TokenAmountError(Exception):
    """Base error for token amount operations."""

    pass


class TokenArithmeticError(TokenAmountError, ArithmeticError):
    """Base class for arithmetic failures on token amounts."""

    pass


class Overflow(TokenArithmeticError):
    """Result exceeds the unsigned 128-bit range."""

    pass


class Underflow(TokenArithmeticError):
    """Result would be negative."""

    pass


class DivisionByZero(TokenArithmeticError):
    """Division or modulo by zero."""

    pass


class TokenParseError(TokenAmountError, ValueError):
    """Base class for errors raised while parsing a textual amount.

    Attributes:
        value: The offending piece of input text
    """

    prefix = "invalid token amount"

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"{self.prefix}: {value}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenParseError):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self), self.value))


class DecimalNumberParsingError(TokenParseError):
    """The numeric part of an amount could not be converted."""

    pass


class InvalidNumber(DecimalNumberParsingError):
    """Malformed decimal number syntax."""

    prefix = "invalid number"


class LongWhole(DecimalNumberParsingError):
    """Whole part does not fit in 128 bits once scaled."""

    prefix = "too long whole part"


class LongFractional(DecimalNumberParsingError):
    """More fractional digits than the denomination can represent."""

    prefix = "too long fractional part"


class InvalidTokenUnit(TokenParseError):
    """Unit suffix is missing or not recognized."""

    prefix = "invalid token unit"


class DeserializationError(TokenAmountError, ValueError):
    """Serialized payload is not a valid token amount."""

    pass
