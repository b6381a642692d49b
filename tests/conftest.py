"""Pytest configuration and fixtures."""

import pytest
import structlog

from unc_token import TokenAmount


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from the caller's environment and logging setup."""
    monkeypatch.delenv("UNC_TOKEN_UNSUFFIXED", raising=False)
    monkeypatch.delenv("UNC_TOKEN_LOG_LEVEL", raising=False)
    yield
    structlog.reset_defaults()


@pytest.fixture
def ten_unc() -> TokenAmount:
    """Ten whole tokens."""
    return TokenAmount.from_whole(10)


@pytest.fixture
def max_amount() -> TokenAmount:
    """Largest representable amount (2^128-1 atto-units)."""
    return TokenAmount.MAX
