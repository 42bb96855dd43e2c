"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from tests.vectors import ALL_CONFIGS, CHECK_MESSAGE, AnyConfig


@pytest.fixture
def check_message() -> bytes:
    """The standard check message "123456789"."""
    return CHECK_MESSAGE


@pytest.fixture(params=ALL_CONFIGS, ids=lambda config: config.name)
def any_config(request: pytest.FixtureRequest) -> AnyConfig:
    """Every catalog configuration plus the extra-width CRCs."""
    config: AnyConfig = request.param
    return config


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload spanning all byte values."""
    return bytes(range(256)) + b"Hello, world!"
