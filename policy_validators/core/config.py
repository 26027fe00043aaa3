"""Runtime settings loaded from the environment.

Settings are read from ``POLICY_VALIDATORS_*`` environment variables, with an
optional ``.env`` file supplying values that are not already set.

Architecture:
- EnvironmentLoader: Environment variable loading with type conversion
- Settings: Process-wide settings (environment, logging, phone defaults)
- get_settings: Cached settings accessor
"""

import os
from enum import Enum
from functools import lru_cache

from policy_validators.core.enums import Environment, LogFormat, LogLevel
from policy_validators.core.errors import ConfigurationError

ENV_PREFIX = "POLICY_VALIDATORS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


# =====================================================================================
# ENVIRONMENT LOADER
# =====================================================================================


class EnvironmentLoader:
    """
    Environment variable loader with type conversion and validation.

    Keys are looked up with the ``POLICY_VALIDATORS_`` prefix. Process
    environment variables take precedence over the environment file, and only
    prefixed keys are read from the file. The process environment is never
    modified.
    """

    def __init__(self, env_file: str = ".env", prefix: str = ENV_PREFIX):
        """
        Initialize environment loader.

        Args:
            env_file: Optional environment file to load
            prefix: Prefix prepended to every key
        """
        self.env_file = env_file
        self.prefix = prefix
        self._file_values: dict[str, str] = {}
        self._load_env_file()

    def _load_env_file(self) -> None:
        """Load prefixed variables from the environment file if it exists."""
        if not self.env_file or not os.path.exists(self.env_file):
            return

        try:
            with open(self.env_file, encoding="utf-8") as f:
                for raw_line in f:
                    line = raw_line.strip()

                    if not line or line.startswith("#") or "=" not in line:
                        continue

                    key, value = line.split("=", 1)
                    key = key.strip()
                    if not key.startswith(self.prefix):
                        continue

                    value = value.strip()
                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    self._file_values[key] = value

        except OSError as e:
            raise ConfigurationError(
                f"Failed to load environment file {self.env_file}: {e}"
            ) from e

    def _raw(self, key: str) -> str | None:
        name = f"{self.prefix}{key}"
        value = os.environ.get(name)
        if value is None:
            value = self._file_values.get(name)
        return value

    def get_string(
        self, key: str, default: str | None = None, required: bool = False
    ) -> str | None:
        """Get string value from environment."""
        value = self._raw(key)
        if value is None or not value.strip():
            if required:
                raise ConfigurationError(f"{self.prefix}{key} is required")
            return default
        return value.strip()

    def get_boolean(
        self, key: str, default: bool | None = None, required: bool = False
    ) -> bool | None:
        """Get boolean value from environment."""
        value = self.get_string(key, None, required)
        if value is None:
            return default

        normalized = value.lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"{self.prefix}{key} must be a boolean, got {value!r}")

    def get_enum(
        self,
        key: str,
        enum_class: type[Enum],
        default: Enum | None = None,
        required: bool = False,
    ) -> Enum | None:
        """Get enum value from environment, using ``from_string`` when available."""
        value = self.get_string(key, None, required)
        if value is None:
            return default

        try:
            if hasattr(enum_class, "from_string"):
                return enum_class.from_string(value)
            return enum_class(value)
        except ValueError as e:
            raise ConfigurationError(
                f"{self.prefix}{key} has an invalid value {value!r}"
            ) from e


# =====================================================================================
# SETTINGS
# =====================================================================================


class Settings:
    """
    Process-wide settings.

    Usage Example:
        settings = get_settings()
        if settings.environment.is_testing:
            ...
    """

    def __init__(self, env_file: str = ".env"):
        self.env_loader = EnvironmentLoader(env_file)

        self.environment = self.env_loader.get_enum(
            "ENVIRONMENT", Environment, Environment.PRODUCTION
        )
        self.log_level = self.env_loader.get_enum("LOG_LEVEL", LogLevel, LogLevel.INFO)
        self.log_format = self.env_loader.get_enum("LOG_FORMAT", LogFormat, LogFormat.JSON)
        self.default_phone_region = self.env_loader.get_string("DEFAULT_PHONE_REGION")

        self._validate_configuration()

    def _validate_configuration(self) -> None:
        if self.default_phone_region is not None:
            region = self.default_phone_region
            if len(region) != 2 or not region.isalpha():
                raise ConfigurationError(
                    f"Default phone region must be a two letter region code, got {region!r}"
                )
            self.default_phone_region = region.upper()

    def to_dict(self) -> dict[str, str | None]:
        return {
            "environment": self.environment.value,
            "log_level": self.log_level.level_name,
            "log_format": self.log_format.value,
            "default_phone_region": self.default_phone_region,
        }


@lru_cache
def get_settings(env_file: str = ".env") -> Settings:
    """
    Get cached settings instance.

    Args:
        env_file: Environment file to load
    """
    return Settings(env_file)


__all__ = [
    "ENV_PREFIX",
    "EnvironmentLoader",
    "Settings",
    "get_settings",
]
