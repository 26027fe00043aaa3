"""Policy-driven validators for network identifiers, encodings, numbers and more.

Usage Example:
    from policy_validators import DomainValidator, TriAllow

    validator = DomainValidator(local=TriAllow.DISALLOW)
    domain = validator.parse("example.com:8080")
"""

from policy_validators.core.enums import BiAllow, CaseOption, Protocol, TriAllow
from policy_validators.core.errors import (
    Base32Error,
    Base64Error,
    Base64UrlError,
    BaseXxErrorKind,
    BooleanError,
    BooleanErrorKind,
    ConfigurationError,
    DomainError,
    DomainErrorKind,
    EmailError,
    EmailErrorKind,
    HexIdentifierErrorKind,
    HostError,
    HostErrorKind,
    HttpFtpUrlError,
    HttpUrlError,
    IntegerError,
    IntegerErrorKind,
    IpError,
    IpErrorKind,
    Ipv4Error,
    Ipv6Error,
    JsonError,
    JsonErrorKind,
    LengthError,
    LengthErrorKind,
    LineError,
    LineErrorKind,
    MacAddressError,
    NumberError,
    NumberErrorKind,
    PhoneError,
    PhoneErrorKind,
    PolicyValidatorsError,
    RegexError,
    RegexErrorKind,
    SemverError,
    SemverErrorKind,
    SemverReqError,
    TextError,
    TextErrorKind,
    UrlError,
    UrlErrorKind,
    UuidError,
    ValidatorError,
)
from policy_validators.core.options import RangeKind, RangeOption, SeparatorOption
from policy_validators.shared.value_objects import Host, HostKind
from policy_validators.validators import (
    Base32DecodedValidator,
    Base32Validator,
    Base64DecodedValidator,
    Base64UrlDecodedValidator,
    Base64UrlValidator,
    Base64Validator,
    BooleanValidator,
    Domain,
    DomainValidator,
    Email,
    EmailValidator,
    HostAddress,
    HostValidator,
    HttpFtpUrl,
    HttpFtpUrlValidator,
    HttpUrl,
    HttpUrlValidator,
    IpEndpoint,
    IpValidator,
    Ipv4Validator,
    Ipv6Validator,
    JsonValidator,
    LengthValidator,
    LineValidator,
    MacAddress,
    MacAddressValidator,
    NumberValidator,
    PhoneNumber,
    PhoneValidator,
    RegexValidator,
    SemverReqValidator,
    SemverValidator,
    SignedIntegerValidator,
    TextValidator,
    UnsignedIntegerValidator,
    Url,
    UrlValidator,
    Uuid,
    UuidValidator,
    Validator,
    ValidatorFactory,
)

__version__ = "0.1.0"

__all__ = [
    "Base32DecodedValidator",
    "Base32Error",
    "Base32Validator",
    "Base64DecodedValidator",
    "Base64Error",
    "Base64UrlDecodedValidator",
    "Base64UrlError",
    "Base64UrlValidator",
    "Base64Validator",
    "BaseXxErrorKind",
    "BiAllow",
    "BooleanError",
    "BooleanErrorKind",
    "BooleanValidator",
    "CaseOption",
    "ConfigurationError",
    "Domain",
    "DomainError",
    "DomainErrorKind",
    "DomainValidator",
    "Email",
    "EmailError",
    "EmailErrorKind",
    "EmailValidator",
    "HexIdentifierErrorKind",
    "Host",
    "HostAddress",
    "HostError",
    "HostErrorKind",
    "HostKind",
    "HostValidator",
    "HttpFtpUrl",
    "HttpFtpUrlError",
    "HttpFtpUrlValidator",
    "HttpUrl",
    "HttpUrlError",
    "HttpUrlValidator",
    "IntegerError",
    "IntegerErrorKind",
    "IpEndpoint",
    "IpError",
    "IpErrorKind",
    "IpValidator",
    "Ipv4Error",
    "Ipv4Validator",
    "Ipv6Error",
    "Ipv6Validator",
    "JsonError",
    "JsonErrorKind",
    "JsonValidator",
    "LengthError",
    "LengthErrorKind",
    "LengthValidator",
    "LineError",
    "LineErrorKind",
    "LineValidator",
    "MacAddress",
    "MacAddressError",
    "MacAddressValidator",
    "NumberError",
    "NumberErrorKind",
    "NumberValidator",
    "PhoneError",
    "PhoneErrorKind",
    "PhoneNumber",
    "PhoneValidator",
    "PolicyValidatorsError",
    "Protocol",
    "RangeKind",
    "RangeOption",
    "RegexError",
    "RegexErrorKind",
    "RegexValidator",
    "SemverError",
    "SemverErrorKind",
    "SemverReqError",
    "SemverReqValidator",
    "SemverValidator",
    "SeparatorOption",
    "SignedIntegerValidator",
    "TextError",
    "TextErrorKind",
    "TextValidator",
    "TriAllow",
    "UnsignedIntegerValidator",
    "Url",
    "UrlError",
    "UrlErrorKind",
    "UrlValidator",
    "Uuid",
    "UuidError",
    "UuidValidator",
    "Validator",
    "ValidatorError",
    "ValidatorFactory",
]
