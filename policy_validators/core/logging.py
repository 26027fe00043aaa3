# ruff: noqa: A005
"""Structured logging configuration.

Validators log through structlog on top of the standard library logging
module. Logging is configured once per process, either explicitly through
``configure_logging`` or lazily on the first log call using the
environment settings.

Architecture:
- LogConfig: Configuration with validation and environment defaults
- LoggerFactory: structlog processor chain installation and logger caching
- DeferredLogger: import-safe module logger handle
- log_context / clear_context: context variables bound to subsequent records

Note: This module name intentionally shadows the standard library 'logging' module
inside the package namespace.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars

from policy_validators.core.enums import Environment, LogFormat, LogLevel
from policy_validators.core.errors import ConfigurationError

# =====================================================================================
# CONFIGURATION
# =====================================================================================


@dataclass
class LogConfig:
    """
    Logging configuration with validation and environment defaults.

    Usage Example:
        config = LogConfig(level=LogLevel.DEBUG, environment=Environment.TESTING)
        configure_logging(config)
    """

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.JSON)
    environment: Environment = field(default=Environment.PRODUCTION)

    enable_timestamps: bool = field(default=True)
    enable_caller_info: bool = field(default=False)
    enable_exception_info: bool = field(default=True)
    stream: Any = field(default=None)

    def __post_init__(self):
        """Post-initialization validation and setup."""
        self.validate()
        self.apply_environment_defaults()

    def validate(self) -> None:
        """
        Validate logging configuration parameters.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(self.level, LogLevel):
            raise ConfigurationError(f"Invalid log level: {self.level!r}")

        if not isinstance(self.format, LogFormat):
            raise ConfigurationError(f"Invalid log format: {self.format!r}")

        if not isinstance(self.environment, Environment):
            raise ConfigurationError(f"Invalid environment: {self.environment!r}")

    def apply_environment_defaults(self) -> None:
        """Apply environment-specific defaults."""
        if self.environment == Environment.DEVELOPMENT:
            self.format = LogFormat.CONSOLE
            self.enable_caller_info = True

        elif self.environment == Environment.TESTING:
            self.format = LogFormat.PLAIN
            self.enable_timestamps = False

        elif self.environment == Environment.PRODUCTION:
            self.format = LogFormat.JSON
            self.enable_caller_info = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "level": self.level.level_name,
            "format": self.format.value,
            "environment": self.environment.value,
            "enable_timestamps": self.enable_timestamps,
            "enable_caller_info": self.enable_caller_info,
            "enable_exception_info": self.enable_exception_info,
        }


# =====================================================================================
# LOGGER FACTORY
# =====================================================================================

PACKAGE_LOGGER = "policy_validators"
_HANDLER_NAME = "policy_validators.stream"

_RENDERERS = {
    LogFormat.JSON: structlog.processors.JSONRenderer,
    LogFormat.CONSOLE: lambda: structlog.dev.ConsoleRenderer(colors=False),
    LogFormat.PLAIN: structlog.processors.KeyValueRenderer,
}


class LoggerFactory:
    """Installs the structlog processor chain and hands out bound loggers."""

    def __init__(self, config: LogConfig):
        self.config = config
        self._loggers: dict[str, Any] = {}
        self._configured = False

    def build_processors(self) -> list[Any]:
        """Processor chain for validator log records, ending in the renderer."""
        processors: list[Any] = [
            merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
        ]

        if self.config.enable_timestamps:
            processors.append(structlog.processors.TimeStamper(fmt="iso"))

        if self.config.enable_caller_info:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=[
                        structlog.processors.CallsiteParameter.MODULE,
                        structlog.processors.CallsiteParameter.LINENO,
                    ]
                )
            )

        if self.config.enable_exception_info:
            processors.append(structlog.processors.format_exc_info)

        processors.append(_RENDERERS[self.config.format]())
        return processors

    def _install_handler(self) -> None:
        """
        Route package records to ``config.stream`` when one is given.

        Without a stream, records propagate to whatever handlers the
        application configured. The root logger is never touched.
        """
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(self.config.level.to_logging_level())

        for handler in list(package_logger.handlers):
            if handler.get_name() == _HANDLER_NAME:
                package_logger.removeHandler(handler)

        if self.config.stream is not None:
            handler = logging.StreamHandler(self.config.stream)
            handler.set_name(_HANDLER_NAME)
            handler.setFormatter(logging.Formatter("%(message)s"))
            package_logger.addHandler(handler)

    def configure_logging(self) -> None:
        """Install the processor chain and the package logger settings."""
        if self._configured:
            return

        structlog.configure(
            processors=self.build_processors(),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        self._install_handler()

        self._configured = True

    def get_logger(self, name: str) -> Any:
        """Get or create a bound structlog logger."""
        if not self._configured:
            self.configure_logging()

        if name not in self._loggers:
            self._loggers[name] = structlog.get_logger(name)

        return self._loggers[name]


class DeferredLogger:
    """
    Module-level logger handle.

    Nothing is configured when the handle is created; the first logging call
    configures logging from the settings and forwards to the real logger.
    """

    def __init__(self, name: str):
        self.name = name

    def __getattr__(self, attr: str) -> Any:
        return getattr(_get_factory().get_logger(self.name), attr)

    def __repr__(self) -> str:
        return f"DeferredLogger({self.name!r})"


# =====================================================================================
# GLOBAL CONFIGURATION AND FACTORY
# =====================================================================================

_logger_factory: LoggerFactory | None = None
_handles: dict[str, DeferredLogger] = {}


def _config_from_settings() -> LogConfig:
    from policy_validators.core.config import get_settings

    try:
        settings = get_settings()
    except ConfigurationError:
        # Malformed settings must not stop validation
        return LogConfig()

    return LogConfig(
        level=settings.log_level,
        format=settings.log_format,
        environment=settings.environment,
    )


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Configure global logging system.

    Args:
        config: Logging configuration (read from settings if not provided,
            falling back to defaults when the settings are malformed)
    """
    global _logger_factory  # noqa: PLW0603

    _logger_factory = LoggerFactory(config or _config_from_settings())
    _logger_factory.configure_logging()


def _get_factory() -> LoggerFactory:
    if _logger_factory is None:
        configure_logging()
    return _logger_factory


def get_logger(name: str) -> DeferredLogger:
    """
    Get structured logger instance.

    Safe to call at import time; configuration happens on the first log call.

    Args:
        name: Logger name (usually __name__)
    """
    if name not in _handles:
        _handles[name] = DeferredLogger(name)
    return _handles[name]


# =====================================================================================
# CONVENIENCE FUNCTIONS
# =====================================================================================


def log_context(**kwargs: Any) -> None:
    """Add context variables to all subsequent logs in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "DeferredLogger",
    "LogConfig",
    "LoggerFactory",
    "clear_context",
    "configure_logging",
    "get_logger",
    "log_context",
]
