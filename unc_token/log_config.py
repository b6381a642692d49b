"""structlog setup for command-line entry points."""

import logging
import os

import structlog

LOG_LEVEL_ENV_VAR = "UNC_TOKEN_LOG_LEVEL"


def resolve_log_level(verbose: bool = False) -> int:
    """Pick the log level: DEBUG when verbose, else UNC_TOKEN_LOG_LEVEL (default WARNING)."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(log_level: int) -> None:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )
