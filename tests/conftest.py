"""Shared test setup."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging config between tests so loggers never hold a closed stream."""
    yield
    structlog.reset_defaults()
