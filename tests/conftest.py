"""Pytest configuration and fixtures."""

import pytest
import structlog

from exactnum import NumberConfig


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog.configure() a test (e.g. the CLI) performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def scale_4() -> NumberConfig:
    """Config keeping 4 fractional digits."""
    return NumberConfig(scale=4)


@pytest.fixture
def e_20() -> str:
    """Euler's number truncated to 20 fractional digits."""
    return "2.71828182845904523536"
