"""UNC token amounts - fixed-point atto-unit arithmetic, parsing and formatting."""

from unc_token.config import DEFAULT_PARSE_CONFIG, STRICT_PARSE_CONFIG, ParseConfig
from unc_token.constants import (
    ONE_ATTOUNC,
    ONE_MICROUNC,
    ONE_MILLIUNC,
    ONE_UNC,
    U128_MAX,
    Denomination,
)
from unc_token.errors import (
    DecimalNumberParsingError,
    DeserializationError,
    DivisionByZero,
    InvalidNumber,
    InvalidTokenUnit,
    LongFractional,
    LongWhole,
    Overflow,
    TokenAmountError,
    TokenArithmeticError,
    TokenParseError,
    Underflow,
)
from unc_token.token import TokenAmount

__version__ = "0.1.0"
__all__ = [
    "TokenAmount",
    "Denomination",
    "ParseConfig",
    "DEFAULT_PARSE_CONFIG",
    "STRICT_PARSE_CONFIG",
    "ONE_UNC",
    "ONE_MILLIUNC",
    "ONE_MICROUNC",
    "ONE_ATTOUNC",
    "U128_MAX",
    "TokenAmountError",
    "TokenArithmeticError",
    "Overflow",
    "Underflow",
    "DivisionByZero",
    "TokenParseError",
    "DecimalNumberParsingError",
    "InvalidNumber",
    "LongWhole",
    "LongFractional",
    "InvalidTokenUnit",
    "DeserializationError",
    "__version__",
]
