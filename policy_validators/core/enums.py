"""Core enumerations shared by every validator.

Policy switches are closed enumerations so that each validator can branch on
them exhaustively. String parsing is provided for configuration loading.
"""

from enum import Enum


class Environment(Enum):
    """Runtime environment types."""

    DEVELOPMENT = "dev"
    TESTING = "test"
    STAGING = "staging"
    PRODUCTION = "prod"

    @property
    def is_production(self) -> bool:
        """Check if environment is production."""
        return self == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if environment is testing."""
        return self == Environment.TESTING

    @property
    def allows_debug_logging(self) -> bool:
        """Check if environment allows debug logging."""
        return self in (Environment.DEVELOPMENT, Environment.TESTING)

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """Create Environment from its value or member name."""
        normalized = value.strip().lower()
        for environment in cls:
            if normalized in (environment.value, environment.name.lower()):
                return environment
        raise ValueError(f"Invalid environment: {value}")


class LogLevel(Enum):
    """Logging levels with priority mapping."""

    DEBUG = ("DEBUG", 10)
    INFO = ("INFO", 20)
    WARNING = ("WARNING", 30)
    ERROR = ("ERROR", 40)
    CRITICAL = ("CRITICAL", 50)

    def __init__(self, level_name: str, priority: int):
        self.level_name = level_name
        self.priority = priority

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """Create LogLevel from string representation."""
        level_str = level_str.upper()
        for level in cls:
            if level.level_name == level_str:
                return level
        raise ValueError(f"Invalid log level: {level_str}")

    def to_logging_level(self) -> int:
        """Convert to standard logging module level."""
        return self.priority


class LogFormat(Enum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"

    def __str__(self) -> str:
        return self.value


# =====================================================================================
# POLICY SWITCHES
# =====================================================================================


class TriAllow(Enum):
    """
    Tri-state policy for an optional structural feature.

    MUST requires the feature, ALLOW accepts either shape and DISALLOW forbids
    the feature. MUST also answers ``allow()`` since the feature is present.
    """

    MUST = "must"
    ALLOW = "allow"
    DISALLOW = "disallow"

    def allow(self) -> bool:
        """Whether the feature may be present."""
        return self != TriAllow.DISALLOW

    def must(self) -> bool:
        """Whether the feature is required."""
        return self == TriAllow.MUST

    def disallow(self) -> bool:
        """Whether the feature must be absent."""
        return self == TriAllow.DISALLOW

    @classmethod
    def from_string(cls, value: str) -> "TriAllow":
        """Parse ``must``, ``allow`` or ``disallow`` (``not_allow`` accepted)."""
        normalized = value.strip().lower().replace("-", "_")
        if normalized == "not_allow":
            return cls.DISALLOW
        for option in cls:
            if option.value == normalized:
                return option
        raise ValueError(f"Invalid tri-state option: {value}")

    def __str__(self) -> str:
        return self.value


class BiAllow(Enum):
    """Bi-state policy: a feature is either permitted or forbidden."""

    ALLOW = "allow"
    DISALLOW = "disallow"

    def allow(self) -> bool:
        return self == BiAllow.ALLOW

    def must(self) -> bool:
        # No bi-state value requires presence.
        return False

    def disallow(self) -> bool:
        return self == BiAllow.DISALLOW

    @classmethod
    def from_string(cls, value: str) -> "BiAllow":
        """Parse ``allow`` or ``disallow`` (``not_allow`` accepted)."""
        normalized = value.strip().lower().replace("-", "_")
        if normalized == "not_allow":
            return cls.DISALLOW
        for option in cls:
            if option.value == normalized:
                return option
        raise ValueError(f"Invalid bi-state option: {value}")

    def __str__(self) -> str:
        return self.value


class CaseOption(Enum):
    """Required letter case of a parsed token."""

    ANY = "any"
    UPPER = "upper"
    LOWER = "lower"

    def any(self) -> bool:
        return self == CaseOption.ANY

    def upper(self) -> bool:
        return self == CaseOption.UPPER

    def lower(self) -> bool:
        return self == CaseOption.LOWER

    @classmethod
    def from_string(cls, value: str) -> "CaseOption":
        """Parse ``any``, ``upper`` or ``lower``."""
        normalized = value.strip().lower()
        for option in cls:
            if option.value == normalized:
                return option
        raise ValueError(f"Invalid case option: {value}")

    def __str__(self) -> str:
        return self.value


class Protocol(Enum):
    """URL schemes recognised by the URL validators."""

    HTTP = "http"
    HTTPS = "https"
    FTP = "ftp"

    @property
    def is_secure(self) -> bool:
        """Check if the protocol is TLS protected."""
        return self == Protocol.HTTPS

    @classmethod
    def from_string(cls, value: str) -> "Protocol":
        """Create Protocol from a scheme, ignoring case and a trailing colon."""
        normalized = value.strip().lower().rstrip(":")
        for protocol in cls:
            if protocol.value == normalized:
                return protocol
        raise ValueError(f"Invalid protocol: {value}")

    def __str__(self) -> str:
        return self.value


__all__ = [
    "BiAllow",
    "CaseOption",
    "Environment",
    "LogFormat",
    "LogLevel",
    "Protocol",
    "TriAllow",
]
