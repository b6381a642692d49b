"""Denomination constants for UNC token amounts.

All amounts are stored as integers counting atto-units (10^-24 UNC).
Scale factors are plain module constants so range checks stay simple
comparisons against U128_MAX.
"""

from enum import Enum

# Maximum unsigned 128-bit value
U128_MAX = 2**128 - 1

# Decimal digits in U128_MAX; longer digit strings (ignoring leading zeros) are out of range
U128_MAX_DIGITS = len(str(U128_MAX))

# Atto-units per unit of each denomination
ONE_UNC = 10**24
ONE_MILLIUNC = 10**21
ONE_MICROUNC = 10**18
ONE_ATTOUNC = 1

# Atto-units per displayed hundredth of a token
DISPLAY_STEP = 10**22

UNIT_SUFFIX = "UNC"


class Denomination(str, Enum):
    """Denominations an amount can be expressed in."""

    WHOLE = "whole"
    MILLI = "milli"
    MICRO = "micro"
    ATTO = "atto"

    @property
    def scale(self) -> int:
        """Atto-units per one unit of this denomination."""
        return _SCALES[self]

    @property
    def max_fractional_digits(self) -> int:
        """Number of fractional digits this denomination can resolve exactly."""
        return len(str(self.scale)) - 1


_SCALES = {
    Denomination.WHOLE: ONE_UNC,
    Denomination.MILLI: ONE_MILLIUNC,
    Denomination.MICRO: ONE_MICROUNC,
    Denomination.ATTO: ONE_ATTOUNC,
}

# Accepted unit suffixes (upper case) for parsing
UNIT_ALIASES = {
    "UNC": Denomination.WHOLE,
    "N": Denomination.WHOLE,
    "MILLIUNC": Denomination.MILLI,
    "MUNC": Denomination.MILLI,
    "MICROUNC": Denomination.MICRO,
    "UUNC": Denomination.MICRO,
    "ATTOUNC": Denomination.ATTO,
    "AUNC": Denomination.ATTO,
    "YOCTOUNC": Denomination.ATTO,
    "YUNC": Denomination.ATTO,
    "YN": Denomination.ATTO,
}
