"""
Global pytest configuration and fixtures for all tests.

Provides:
- Testing environment and logging configuration
- Settings cache isolation
"""

import os

os.environ.setdefault("POLICY_VALIDATORS_ENVIRONMENT", "test")

import pytest  # noqa: E402

from policy_validators.core.config import get_settings  # noqa: E402
from policy_validators.core.enums import Environment, LogLevel  # noqa: E402
from policy_validators.core.logging import LogConfig, configure_logging  # noqa: E402

configure_logging(LogConfig(level=LogLevel.DEBUG, environment=Environment.TESTING))


@pytest.fixture
def clean_settings():
    """Clear the cached settings before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
