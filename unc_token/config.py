"""Parsing configuration for token amounts."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from unc_token.constants import Denomination

UNSUFFIXED_ENV_VAR = "UNC_TOKEN_UNSUFFIXED"

# Environment value that disables unsuffixed input
REJECT_UNSUFFIXED = "reject"


@dataclass(frozen=True)
class ParseConfig:
    """Configuration for turning text into token amounts.

    Attributes:
        unsuffixed: Denomination used for input that carries no unit suffix.
            Defaults to whole tokens. None rejects unsuffixed input with
            InvalidTokenUnit, so atto-unit precision always needs an explicit
            suffix or an explicit config.
    """

    unsuffixed: Denomination | None = Denomination.WHOLE

    @property
    def accepts_unsuffixed(self) -> bool:
        """True if input without a unit suffix is allowed."""
        return self.unsuffixed is not None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ParseConfig:
        """Build a config from environment variables.

        UNC_TOKEN_UNSUFFIXED may be one of whole, milli, micro, atto or reject.

        Raises:
            ValueError: If the variable holds an unknown value
        """
        env = os.environ if environ is None else environ
        raw = env.get(UNSUFFIXED_ENV_VAR, Denomination.WHOLE.value).strip().lower()
        if raw == REJECT_UNSUFFIXED:
            return cls(unsuffixed=None)
        try:
            return cls(unsuffixed=Denomination(raw))
        except ValueError as err:
            raise ValueError(f"Invalid {UNSUFFIXED_ENV_VAR} value: '{raw}'") from err


# Default configuration instance
DEFAULT_PARSE_CONFIG = ParseConfig()

# Requires a unit suffix on every input
STRICT_PARSE_CONFIG = ParseConfig(unsuffixed=None)
