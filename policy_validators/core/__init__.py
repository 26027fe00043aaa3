"""Core building blocks shared by every validator.

Components:
- enums: Policy switches (TriAllow, BiAllow, CaseOption) and runtime enums
- options: Parameterized policies (SeparatorOption, RangeOption)
- errors: Error hierarchy and the per-format error taxonomy
- logging: structlog configuration
- config: Environment-driven settings
"""

from policy_validators.core.enums import (
    BiAllow,
    CaseOption,
    Environment,
    LogFormat,
    LogLevel,
    Protocol,
    TriAllow,
)
from policy_validators.core.errors import (
    ConfigurationError,
    ErrorSeverity,
    PolicyValidatorsError,
    ValidatorError,
)
from policy_validators.core.options import (
    RangeKind,
    RangeOption,
    RangeViolation,
    SeparatorOption,
)

__all__ = [
    "BiAllow",
    "CaseOption",
    "ConfigurationError",
    "Environment",
    "ErrorSeverity",
    "LogFormat",
    "LogLevel",
    "PolicyValidatorsError",
    "Protocol",
    "RangeKind",
    "RangeOption",
    "RangeViolation",
    "SeparatorOption",
    "TriAllow",
    "ValidatorError",
]
