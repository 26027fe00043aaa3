"""
Validator Factory

Builds validators from plain mappings, such as those loaded from JSON, YAML or
TOML configuration files.

Usage Example:
    factory = ValidatorFactory()
    domain = factory.build({"validator": "domain", "ipv4": "disallow"})
    registry = factory.build_all({
        "homepage": {"validator": "http_url", "local": "disallow"},
        "age": {"validator": "unsigned_integer", "range": {"kind": "inside", "max": 150}},
    })
"""

import dataclasses
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from policy_validators.core.config import Settings, get_settings
from policy_validators.core.enums import BiAllow, CaseOption, TriAllow
from policy_validators.core.errors import ConfigurationError
from policy_validators.core.logging import get_logger
from policy_validators.core.options import RangeKind, RangeOption, SeparatorOption

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
from .domain import DomainValidator
from .email import EmailValidator
from .host import HostValidator
from .ip import IpValidator, Ipv4Validator, Ipv6Validator
from .json_text import JsonValidator
from .length import LengthValidator
from .mac_address import MacAddressValidator
from .number import NumberValidator, SignedIntegerValidator, UnsignedIntegerValidator
from .phone import PhoneValidator
from .semver import SemverReqValidator, SemverValidator
from .text import LineValidator, RegexValidator, TextValidator
from .url import HttpFtpUrlValidator, HttpUrlValidator, UrlValidator
from .uuid import UuidValidator

logger = get_logger(__name__)

VALIDATOR_KEY = "validator"

VALIDATORS: dict[str, type[Validator]] = {
    "base32": Base32Validator,
    "base32_decoded": Base32DecodedValidator,
    "base64": Base64Validator,
    "base64_decoded": Base64DecodedValidator,
    "base64_url": Base64UrlValidator,
    "base64_url_decoded": Base64UrlDecodedValidator,
    "boolean": BooleanValidator,
    "domain": DomainValidator,
    "email": EmailValidator,
    "host": HostValidator,
    "http_ftp_url": HttpFtpUrlValidator,
    "http_url": HttpUrlValidator,
    "ip": IpValidator,
    "ipv4": Ipv4Validator,
    "ipv6": Ipv6Validator,
    "json": JsonValidator,
    "length": LengthValidator,
    "line": LineValidator,
    "mac_address": MacAddressValidator,
    "number": NumberValidator,
    "phone": PhoneValidator,
    "regex": RegexValidator,
    "semver": SemverValidator,
    "semver_req": SemverReqValidator,
    "signed_integer": SignedIntegerValidator,
    "text": TextValidator,
    "unsigned_integer": UnsignedIntegerValidator,
    "url": UrlValidator,
    "uuid": UuidValidator,
}


# =====================================================================================
# OPTION CONVERSION
# =====================================================================================


def _to_range(value: Any) -> RangeOption:
    if isinstance(value, RangeOption):
        return value
    if isinstance(value, str):
        if value.strip().lower() != RangeKind.UNLIMITED.value:
            raise ValueError(f"Range must be a mapping or 'unlimited', got {value!r}")
        return RangeOption.unlimited()
    if not isinstance(value, Mapping):
        raise ValueError(f"Range must be a mapping, got {type(value).__name__}")

    unknown = set(value) - {"kind", "min", "max", "inclusive"}
    if unknown:
        raise ValueError(f"Unknown range keys: {', '.join(sorted(unknown))}")
    return RangeOption(
        kind=RangeKind(str(value.get("kind", RangeKind.INSIDE.value)).lower()),
        min=value.get("min"),
        max=value.get("max"),
        inclusive=bool(value.get("inclusive", True)),
    )


def _to_separator(value: Any) -> SeparatorOption:
    if isinstance(value, SeparatorOption):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a separator option string, got {value!r}")
    return SeparatorOption.from_string(value)


def _enum_converter(enum_class: type[Enum]) -> Callable[[Any], Enum]:
    def convert(value: Any) -> Enum:
        if isinstance(value, enum_class):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Expected a {enum_class.__name__} name, got {value!r}")
        return enum_class.from_string(value)

    return convert


# Keyed by the type of a field's default value
_CONVERTERS: dict[type, Callable[[Any], Any]] = {
    TriAllow: _enum_converter(TriAllow),
    BiAllow: _enum_converter(BiAllow),
    CaseOption: _enum_converter(CaseOption),
    SeparatorOption: _to_separator,
    RangeOption: _to_range,
    frozenset: frozenset,
}


def _convert_option(field: dataclasses.Field, value: Any) -> Any:
    if field.default is dataclasses.MISSING:
        return value
    converter = _CONVERTERS.get(type(field.default))
    if converter is None:
        return value
    return converter(value)


# =====================================================================================
# FACTORY
# =====================================================================================


class ValidatorFactory:
    """Factory for creating validators from configuration mappings."""

    def __init__(self, settings: Settings | None = None):
        """
        Initialize validator factory.

        Args:
            settings: Settings supplying defaults; the cached settings when omitted
        """
        self.settings = settings or get_settings()

    @staticmethod
    def available() -> list[str]:
        """Names accepted in the ``validator`` key."""
        return sorted(VALIDATORS)

    def create(self, name: str, options: Mapping[str, Any] | None = None) -> Validator:
        """
        Create a validator by name.

        Args:
            name: Registered validator name, e.g. ``"domain"``
            options: Policy values keyed by field name

        Raises:
            ConfigurationError: Unknown name, unknown option or invalid value
        """
        validator_class = VALIDATORS.get(name)
        if validator_class is None:
            raise ConfigurationError(
                f"Unknown validator: {name!r}",
                details={"available": self.available()},
            )

        options = dict(options or {})
        fields = {field.name: field for field in dataclasses.fields(validator_class)}
        unknown = sorted(set(options) - set(fields))
        if unknown:
            raise ConfigurationError(
                f"Unknown options for {name}: {', '.join(unknown)}",
                details={"validator": name, "options": sorted(fields)},
            )

        if validator_class is PhoneValidator and options.get("default_region") is None:
            options["default_region"] = self.settings.default_phone_region

        try:
            kwargs = {key: _convert_option(fields[key], value) for key, value in options.items()}
            validator = validator_class(**kwargs)
        except ConfigurationError:
            raise
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Invalid options for {name}: {e}",
                details={"validator": name},
            ) from e

        logger.info("validator created", validator=name, options=sorted(kwargs))
        return validator

    def build(self, mapping: Mapping[str, Any]) -> Validator:
        """
        Build a validator from a mapping naming it under ``"validator"``.

        The remaining keys are its options.
        """
        if not isinstance(mapping, Mapping) or VALIDATOR_KEY not in mapping:
            raise ConfigurationError(f"Validator mapping needs a {VALIDATOR_KEY!r} key")
        options = {key: value for key, value in mapping.items() if key != VALIDATOR_KEY}
        return self.create(mapping[VALIDATOR_KEY], options)

    def build_all(self, mappings: Mapping[str, Mapping[str, Any]]) -> dict[str, Validator]:
        """Build a named registry of validators."""
        registry: dict[str, Validator] = {}
        for key, mapping in mappings.items():
            try:
                registry[key] = self.build(mapping)
            except ConfigurationError as e:
                raise e.with_context(entry=key)
        logger.info("validator registry built", count=len(registry))
        return registry


__all__ = [
    "VALIDATORS",
    "ValidatorFactory",
]
