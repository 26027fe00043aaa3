"""Error classes for policy validators.

Every format has one exception class whose ``kind`` names the policy axis that
rejected the input. Kinds other than ``INVALID`` and ``PARSE_ERROR`` state a
fact that was established while parsing (for example ``LOCAL_MUST`` means the
locality of the input was determined and found to be public).
"""

import logging
from enum import Enum
from typing import Any


class ErrorSeverity(Enum):
    """Error severity levels used to pick the log level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PolicyValidatorsError(Exception):
    """
    Base exception for all policy validator errors.

    Carries a machine readable code, a human message and structured details,
    and logs itself on creation.
    """

    default_code: str = "ERROR"
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = kwargs.get("details") or {}
        self.context = kwargs.get("context") or {}
        self.__cause__ = kwargs.get("cause")

        self._log_error()

    def _log_error(self) -> None:
        """Log error with structured data."""
        logger = logging.getLogger(f"policy_validators.errors.{self.__class__.__name__}")
        log_data = {
            "code": self.code,
            "error_message": self.message,
            "severity": self.severity.value,
            "details": self.details,
            "error_class": self.__class__.__name__,
        }

        if self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error", extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error", extra=log_data)
        else:
            logger.info("Low severity error", extra=log_data)

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Serialize error for logging or API responses.

        Args:
            include_details: Include error details
        """
        data = {
            "error": self.code,
            "message": self.message,
        }

        if include_details and self.details:
            data["details"] = dict(self.details)

        if self.context:
            data["context"] = dict(self.context)

        return data

    def with_context(self, **context: Any) -> "PolicyValidatorsError":
        """Add context to error and return self for chaining."""
        self.context.update(context)
        return self

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PolicyValidatorsError):
    """Raised for malformed or contradictory policy configuration."""

    default_code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.HIGH


class ValidatorError(PolicyValidatorsError):
    """
    Base class of every per-format validation error.

    Subclasses set ``kind_type`` to their kind enumeration. When an external
    parser failed, ``kind`` is ``PARSE_ERROR`` and ``cause`` holds the
    parser's own exception unchanged.
    """

    default_code = "VALIDATION_ERROR"
    severity = ErrorSeverity.LOW
    format_name: str = "value"
    kind_type: type[Enum]

    def __init__(self, kind: Enum, cause: Exception | None = None, **kwargs: Any) -> None:
        if not isinstance(kind, self.kind_type):
            raise TypeError(
                f"{self.__class__.__name__} expects a {self.kind_type.__name__}, got {kind!r}"
            )

        self.kind = kind
        self.cause = cause
        message = f"{kind.value}: {cause}" if cause is not None and str(cause) else kind.value
        details = {"format": self.format_name, "kind": kind.name}
        super().__init__(
            message,
            code=f"{self.format_name.upper()}_{kind.name}",
            details=details,
            cause=cause,
            **kwargs,
        )

    def _log_error(self) -> None:
        """Rejections are logged once, by the validator that raised them."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.name}, {self.message!r})"


# =====================================================================================
# HOST-LIKE FORMATS
# =====================================================================================


class DomainErrorKind(Enum):
    INVALID = "invalid domain"
    IPV4_MUST = "must use an IPv4"
    IPV4_DISALLOW = "must not use an IPv4"
    LOCAL_MUST = "must be local"
    LOCAL_DISALLOW = "must not be local"
    AT_LEAST_TWO_LABELS_MUST = "must have at least two labels"
    AT_LEAST_TWO_LABELS_DISALLOW = "must have only one label"
    PORT_MUST = "port not found"
    PORT_DISALLOW = "port not allowed"


class DomainError(ValidatorError):
    format_name = "domain"
    kind_type = DomainErrorKind


class HostErrorKind(Enum):
    INVALID = "invalid domain or IP"
    LOCAL_MUST = "must be local"
    LOCAL_DISALLOW = "must not be local"
    AT_LEAST_TWO_LABELS_MUST = "must have at least two labels"
    AT_LEAST_TWO_LABELS_DISALLOW = "must have only one label"
    PORT_MUST = "port not found"
    PORT_DISALLOW = "port not allowed"


class HostError(ValidatorError):
    format_name = "host"
    kind_type = HostErrorKind


class EmailErrorKind(Enum):
    INVALID = "invalid email"
    COMMENT_DISALLOW = "must not contain comments"
    IP_MUST = "must use an IP"
    IP_DISALLOW = "must not use an IP"
    LOCAL_MUST = "must be local"
    LOCAL_DISALLOW = "must not be local"
    AT_LEAST_TWO_LABELS_MUST = "must have at least two labels"
    AT_LEAST_TWO_LABELS_DISALLOW = "must have only one label"


class EmailError(ValidatorError):
    format_name = "email"
    kind_type = EmailErrorKind


class IpErrorKind(Enum):
    INVALID = "invalid IP"
    LOCAL_MUST = "must be local"
    LOCAL_DISALLOW = "must not be local"
    PORT_MUST = "port not found"
    PORT_DISALLOW = "port not allowed"


class Ipv4Error(ValidatorError):
    format_name = "ipv4"
    kind_type = IpErrorKind


class Ipv6Error(ValidatorError):
    format_name = "ipv6"
    kind_type = IpErrorKind


class IpError(ValidatorError):
    format_name = "ip"
    kind_type = IpErrorKind


# =====================================================================================
# URLS
# =====================================================================================


class UrlErrorKind(Enum):
    PARSE_ERROR = "invalid URL"
    PROTOCOL_ERROR = "protocol not permitted"
    LOCAL_MUST = "must be local"
    LOCAL_DISALLOW = "must not be local"
    PORT_MUST = "port not found"
    PORT_DISALLOW = "port not allowed"


class HttpUrlError(ValidatorError):
    format_name = "http_url"
    kind_type = UrlErrorKind


class HttpFtpUrlError(ValidatorError):
    format_name = "http_ftp_url"
    kind_type = UrlErrorKind


class UrlError(ValidatorError):
    format_name = "url"
    kind_type = UrlErrorKind


# =====================================================================================
# BINARY-TO-TEXT ENCODINGS
# =====================================================================================


class BaseXxErrorKind(Enum):
    INVALID = "invalid encoded text"
    PADDING_MUST = "padding not found"
    PADDING_DISALLOW = "padding not allowed"
    DECODE = "decoded incorrectly"


class Base32Error(ValidatorError):
    format_name = "base32"
    kind_type = BaseXxErrorKind


class Base64Error(ValidatorError):
    format_name = "base64"
    kind_type = BaseXxErrorKind


class Base64UrlError(ValidatorError):
    format_name = "base64_url"
    kind_type = BaseXxErrorKind


# =====================================================================================
# HEX IDENTIFIERS
# =====================================================================================


class HexIdentifierErrorKind(Enum):
    INVALID = "invalid identifier"
    SEPARATOR_MUST = "separators not found"
    SEPARATOR_DISALLOW = "separators not allowed"
    UPPER_CASE_MUST = "must be upper case"
    LOWER_CASE_MUST = "must be lower case"


class MacAddressError(ValidatorError):
    format_name = "mac_address"
    kind_type = HexIdentifierErrorKind


class UuidError(ValidatorError):
    format_name = "uuid"
    kind_type = HexIdentifierErrorKind


# =====================================================================================
# NUMBERS AND COLLECTIONS
# =====================================================================================


class IntegerErrorKind(Enum):
    PARSE_ERROR = "invalid integer"
    TOO_LARGE = "integer is too large"
    TOO_SMALL = "integer is too small"
    FORBIDDEN = "integer is forbidden"


class IntegerError(ValidatorError):
    format_name = "integer"
    kind_type = IntegerErrorKind


class NumberErrorKind(Enum):
    PARSE_ERROR = "invalid number"
    NAN_MUST = "must be NaN"
    NAN_DISALLOW = "must not be NaN"
    TOO_LARGE = "number is too large"
    TOO_SMALL = "number is too small"
    FORBIDDEN = "number is forbidden"


class NumberError(ValidatorError):
    format_name = "number"
    kind_type = NumberErrorKind


class LengthErrorKind(Enum):
    INVALID = "value has no length"
    TOO_LARGE = "collection is too large"
    TOO_SMALL = "collection is too small"
    FORBIDDEN = "collection length is forbidden"


class LengthError(ValidatorError):
    format_name = "length"
    kind_type = LengthErrorKind


# =====================================================================================
# DELEGATED GRAMMARS AND TEXT
# =====================================================================================


class SemverErrorKind(Enum):
    PARSE_ERROR = "invalid semantic version"


class SemverError(ValidatorError):
    format_name = "semver"
    kind_type = SemverErrorKind


class SemverReqError(ValidatorError):
    format_name = "semver_req"
    kind_type = SemverErrorKind


class PhoneErrorKind(Enum):
    PARSE_ERROR = "unparsable phone number"
    INVALID = "invalid phone number"
    INVALID_COUNTRY = "phone number not valid for the accepted countries"


class PhoneError(ValidatorError):
    format_name = "phone"
    kind_type = PhoneErrorKind


class BooleanErrorKind(Enum):
    INVALID = "invalid boolean"


class BooleanError(ValidatorError):
    format_name = "boolean"
    kind_type = BooleanErrorKind


class LineErrorKind(Enum):
    INVALID = "invalid line"
    EMPTY_MUST = "non-empty line after trimming"
    EMPTY_DISALLOW = "empty line after trimming"


class LineError(ValidatorError):
    format_name = "line"
    kind_type = LineErrorKind


class TextErrorKind(Enum):
    INVALID = "invalid text"
    EMPTY_MUST = "non-empty text after trimming"
    EMPTY_DISALLOW = "empty text after trimming"


class TextError(ValidatorError):
    format_name = "text"
    kind_type = TextErrorKind


class RegexErrorKind(Enum):
    INVALID = "invalid format"


class RegexError(ValidatorError):
    format_name = "regex"
    kind_type = RegexErrorKind


class JsonErrorKind(Enum):
    PARSE_ERROR = "invalid JSON"
    TYPE_MISMATCH = "unexpected JSON type"


class JsonError(ValidatorError):
    format_name = "json"
    kind_type = JsonErrorKind


__all__ = [
    "Base32Error",
    "Base64Error",
    "Base64UrlError",
    "BaseXxErrorKind",
    "BooleanError",
    "BooleanErrorKind",
    "ConfigurationError",
    "DomainError",
    "DomainErrorKind",
    "EmailError",
    "EmailErrorKind",
    "ErrorSeverity",
    "HexIdentifierErrorKind",
    "HostError",
    "HostErrorKind",
    "HttpFtpUrlError",
    "HttpUrlError",
    "IntegerError",
    "IntegerErrorKind",
    "IpError",
    "IpErrorKind",
    "Ipv4Error",
    "Ipv6Error",
    "JsonError",
    "JsonErrorKind",
    "LengthError",
    "LengthErrorKind",
    "LineError",
    "LineErrorKind",
    "MacAddressError",
    "NumberError",
    "NumberErrorKind",
    "PhoneError",
    "PhoneErrorKind",
    "PolicyValidatorsError",
    "RegexError",
    "RegexErrorKind",
    "SemverError",
    "SemverErrorKind",
    "SemverReqError",
    "TextError",
    "TextErrorKind",
    "UrlError",
    "UrlErrorKind",
    "UuidError",
    "ValidatorError",
]
