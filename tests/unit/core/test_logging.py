"""
Tests for structured logging configuration.

Tests cover:
- LogConfig validation and environment defaults
- LoggerFactory processor chain, handler routing and logger caching
- Deferred module loggers and the fallback for malformed settings
- Validator rejections logged through structlog, once
"""

import io
import logging

import pytest
import structlog

from policy_validators.core.enums import Environment, LogFormat, LogLevel
from policy_validators.core.errors import ConfigurationError
from policy_validators.core.logging import (
    PACKAGE_LOGGER,
    DeferredLogger,
    LogConfig,
    LoggerFactory,
    clear_context,
    configure_logging,
    get_logger,
    log_context,
)
from policy_validators.validators.domain import DomainValidator


def testing_config(**kwargs) -> LogConfig:
    return LogConfig(level=LogLevel.DEBUG, environment=Environment.TESTING, **kwargs)


@pytest.fixture
def restore_logging():
    """Reinstall the test logging configuration after the test."""
    yield
    configure_logging(testing_config())


@pytest.mark.unit
class TestLogConfig:
    """Test logging configuration."""

    def test_testing_defaults(self):
        config = LogConfig(environment=Environment.TESTING, format=LogFormat.JSON)

        assert config.format is LogFormat.PLAIN
        assert config.enable_timestamps is False

    def test_development_defaults(self):
        config = LogConfig(environment=Environment.DEVELOPMENT)

        assert config.format is LogFormat.CONSOLE
        assert config.enable_caller_info is True

    def test_production_defaults(self):
        config = LogConfig(environment=Environment.PRODUCTION, format=LogFormat.CONSOLE)

        assert config.format is LogFormat.JSON
        assert config.enable_caller_info is False

    def test_rejects_invalid_level(self):
        with pytest.raises(ConfigurationError):
            LogConfig(level="DEBUG")

    def test_to_dict(self):
        config = LogConfig(level=LogLevel.WARNING, environment=Environment.STAGING)

        assert config.to_dict()["level"] == "WARNING"
        assert config.to_dict()["environment"] == "staging"


@pytest.mark.unit
class TestLoggerFactory:
    """Test processor chains and logger creation."""

    def test_loggers_are_cached(self):
        factory = LoggerFactory(testing_config(stream=io.StringIO()))

        assert factory.get_logger("policy_validators.test") is factory.get_logger(
            "policy_validators.test"
        )

    @pytest.mark.parametrize(
        ("environment", "renderer"),
        [
            (Environment.PRODUCTION, structlog.processors.JSONRenderer),
            (Environment.TESTING, structlog.processors.KeyValueRenderer),
            (Environment.DEVELOPMENT, structlog.dev.ConsoleRenderer),
        ],
    )
    def test_renderer_follows_format(self, environment, renderer):
        processors = LoggerFactory(LogConfig(environment=environment)).build_processors()

        assert isinstance(processors[-1], renderer)

    def test_timestamps_follow_config(self):
        production = LoggerFactory(LogConfig()).build_processors()
        testing = LoggerFactory(testing_config()).build_processors()

        assert any(isinstance(p, structlog.processors.TimeStamper) for p in production)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in testing)


@pytest.mark.unit
class TestGlobalConfiguration:
    """Test the process-wide logging setup."""

    def test_module_logger_is_deferred(self):
        logger = get_logger(__name__)

        assert isinstance(logger, DeferredLogger)
        assert get_logger(__name__) is logger

    def test_root_logger_is_untouched(self, restore_logging):
        root_handlers = list(logging.getLogger().handlers)

        configure_logging(testing_config(stream=io.StringIO()))

        assert logging.getLogger().handlers == root_handlers

    def test_stream_handler_replaced_on_reconfigure(self, restore_logging):
        first, second = io.StringIO(), io.StringIO()

        configure_logging(testing_config(stream=first))
        configure_logging(testing_config(stream=second))
        get_logger("policy_validators.test").info("routed")

        package_handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert len(package_handlers) == 1
        assert first.getvalue() == ""
        assert "routed" in second.getvalue()

    def test_no_stream_handler_without_stream(self, restore_logging):
        configure_logging(testing_config())

        assert logging.getLogger(PACKAGE_LOGGER).handlers == []

    def test_malformed_settings_fall_back_to_defaults(
        self, monkeypatch, clean_settings, restore_logging
    ):
        monkeypatch.setenv("POLICY_VALIDATORS_LOG_LEVEL", "verbose")

        configure_logging()

        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO


@pytest.mark.unit
class TestValidatorLogging:
    """Test that rejected inputs are logged."""

    def test_rejection_is_logged_once(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            assert not DomainValidator().is_valid("")

        messages = [
            record.getMessage()
            for record in caplog.records
            if "rejected input" in record.getMessage().lower()
        ]
        assert len(messages) == 1
        assert "DomainValidator" in messages[0]

    def test_context_binding(self):
        log_context(request_id="abc")
        try:
            context = structlog.contextvars.get_contextvars()
            assert context["request_id"] == "abc"
        finally:
            clear_context()

        assert "request_id" not in structlog.contextvars.get_contextvars()

    def test_policy_logger_level(self):
        assert logging.getLogger(PACKAGE_LOGGER).isEnabledFor(logging.DEBUG)
