"""Format validators.

Every validator is a frozen dataclass whose fields are its policies. Use
``parse`` for the normalized value, ``validate`` to only check, and
``is_valid`` for a boolean answer.

Modules:
- domain, host, email: Host-like formats sharing the locality/label/port rules
- ip: IPv4, IPv6 and either
- url: HTTP, HTTP/FTP and generic absolute URLs
- base_xx: Base32 / Base64 / Base64-URL, plain and decoded
- mac_address, uuid: Separated hexadecimal identifiers
- number, length: Integers, floats and lengths with range policies
- semver, phone: Wrappers around semantic_version and phonenumbers
- boolean, text, json_text: Boolean words, single lines, regexes and JSON
- factory: Validators built from configuration mappings
"""

from .base import Validator
from .base_xx import (
    Base32DecodedValidator,
    Base32Validator,
    Base64DecodedValidator,
    Base64UrlDecodedValidator,
    Base64UrlValidator,
    Base64Validator,
)
from .boolean import BooleanValidator
from .domain import Domain, DomainValidator
from .email import Email, EmailValidator
from .factory import ValidatorFactory
from .host import HostAddress, HostValidator
from .ip import IpEndpoint, IpValidator, Ipv4Validator, Ipv6Validator
from .json_text import JsonValidator
from .length import LengthValidator
from .mac_address import MacAddress, MacAddressValidator
from .number import NumberValidator, SignedIntegerValidator, UnsignedIntegerValidator
from .phone import PhoneNumber, PhoneValidator
from .semver import SemverReqValidator, SemverValidator
from .text import LineValidator, RegexValidator, TextValidator
from .url import HttpFtpUrl, HttpFtpUrlValidator, HttpUrl, HttpUrlValidator, Url, UrlValidator
from .uuid import Uuid, UuidValidator

__all__ = [
    "Base32DecodedValidator",
    "Base32Validator",
    "Base64DecodedValidator",
    "Base64UrlDecodedValidator",
    "Base64UrlValidator",
    "Base64Validator",
    "BooleanValidator",
    "Domain",
    "DomainValidator",
    "Email",
    "EmailValidator",
    "HostAddress",
    "HostValidator",
    "HttpFtpUrl",
    "HttpFtpUrlValidator",
    "HttpUrl",
    "HttpUrlValidator",
    "IpEndpoint",
    "IpValidator",
    "Ipv4Validator",
    "Ipv6Validator",
    "JsonValidator",
    "LengthValidator",
    "LineValidator",
    "MacAddress",
    "MacAddressValidator",
    "NumberValidator",
    "PhoneNumber",
    "PhoneValidator",
    "RegexValidator",
    "SemverReqValidator",
    "SemverValidator",
    "SignedIntegerValidator",
    "TextValidator",
    "UnsignedIntegerValidator",
    "Url",
    "UrlValidator",
    "Uuid",
    "UuidValidator",
    "Validator",
    "ValidatorFactory",
]
