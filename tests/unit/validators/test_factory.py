"""
Tests for the validator factory.

Tests cover:
- Building validators from plain mappings with option conversion
- Named registries
- Settings defaults for the phone validator
- Configuration errors for unknown names, options and values
"""

import pytest

from policy_validators.core.config import Settings
from policy_validators.core.enums import BiAllow, CaseOption, TriAllow
from policy_validators.core.errors import ConfigurationError
from policy_validators.core.options import RangeOption, SeparatorOption
from policy_validators.validators.domain import DomainValidator
from policy_validators.validators.email import EmailValidator
from policy_validators.validators.factory import VALIDATORS, ValidatorFactory
from policy_validators.validators.mac_address import MacAddressValidator
from policy_validators.validators.number import NumberValidator, SignedIntegerValidator
from policy_validators.validators.phone import PhoneValidator
from policy_validators.validators.text import RegexValidator


@pytest.fixture
def settings(monkeypatch):
    monkeypatch.delenv("POLICY_VALIDATORS_DEFAULT_PHONE_REGION", raising=False)
    return Settings(env_file="")


@pytest.fixture
def factory(settings):
    return ValidatorFactory(settings)


@pytest.mark.unit
class TestValidatorFactory:
    """Test building validators from mappings."""

    def test_build_domain(self, factory):
        validator = factory.build(
            {"validator": "domain", "ipv4": "disallow", "local": "not_allow", "port": "MUST"}
        )

        assert validator == DomainValidator(
            ipv4=TriAllow.DISALLOW, local=TriAllow.DISALLOW, port=TriAllow.MUST
        )

    def test_build_email_with_bi_state_options(self, factory):
        validator = factory.build({"validator": "email", "comment": "disallow"})

        assert validator == EmailValidator(comment=BiAllow.DISALLOW)

    def test_build_mac_address(self, factory):
        validator = factory.build(
            {"validator": "mac_address", "case": "upper", "separator": "must(-)"}
        )

        assert validator == MacAddressValidator(
            case=CaseOption.UPPER, separator=SeparatorOption.must("-")
        )
        assert validator.is_valid("00-1A-2B-3C-4D-5E")

    def test_build_integer_with_range_and_forbidden(self, factory):
        validator = factory.build(
            {
                "validator": "signed_integer",
                "range": {"kind": "inside", "min": 0, "max": 10, "inclusive": False},
                "forbidden": [3, 4],
                "bits": 16,
            }
        )

        assert validator == SignedIntegerValidator(
            range=RangeOption.inside(0, 10, inclusive=False),
            forbidden=frozenset({3, 4}),
            bits=16,
        )

    def test_build_with_option_objects(self, factory):
        validator = factory.create(
            "number", {"nan": TriAllow.DISALLOW, "range": RangeOption.inside(0.0, 1.0)}
        )

        assert validator == NumberValidator(
            nan=TriAllow.DISALLOW, range=RangeOption.inside(0.0, 1.0)
        )

    def test_unlimited_range_string(self, factory):
        validator = factory.create("length", {"range": "unlimited"})

        assert validator.range == RangeOption.unlimited()

    def test_options_without_defaults_pass_through(self, factory):
        validator = factory.build({"validator": "regex", "pattern": "[0-9]+"})

        assert validator == RegexValidator(pattern="[0-9]+")

    def test_phone_default_region_from_settings(self, settings):
        settings.default_phone_region = "TW"
        validator = ValidatorFactory(settings).build({"validator": "phone"})

        assert isinstance(validator, PhoneValidator)
        assert validator.default_region == "TW"

    def test_explicit_phone_region_wins(self, settings):
        settings.default_phone_region = "TW"
        validator = ValidatorFactory(settings).create("phone", {"default_region": "US"})

        assert validator.default_region == "US"

    def test_build_all(self, factory):
        registry = factory.build_all(
            {
                "homepage": {"validator": "http_url", "local": "disallow"},
                "age": {"validator": "unsigned_integer", "range": {"max": 150}},
            }
        )

        assert set(registry) == {"homepage", "age"}
        assert not registry["homepage"].is_valid("http://localhost/")
        assert registry["age"].is_valid("42")
        assert not registry["age"].is_valid("151")

    def test_every_registered_validator_builds_with_defaults(self, factory):
        for name in VALIDATORS:
            if name == "regex":
                continue
            assert factory.create(name) is not None

    def test_available(self):
        assert "domain" in ValidatorFactory.available()
        assert ValidatorFactory.available() == sorted(ValidatorFactory.available())


@pytest.mark.unit
class TestValidatorFactoryErrors:
    """Test configuration failures."""

    def test_unknown_validator(self, factory):
        with pytest.raises(ConfigurationError) as exc_info:
            factory.build({"validator": "isbn"})

        assert "available" in exc_info.value.details

    def test_missing_validator_key(self, factory):
        with pytest.raises(ConfigurationError):
            factory.build({"ipv4": "allow"})

    def test_unknown_option(self, factory):
        with pytest.raises(ConfigurationError):
            factory.build({"validator": "domain", "ipv6": "allow"})

    @pytest.mark.parametrize(
        "mapping",
        [
            {"validator": "domain", "local": "sometimes"},
            {"validator": "domain", "local": 1},
            {"validator": "mac_address", "separator": "must"},
            {"validator": "length", "range": {"kind": "around"}},
            {"validator": "length", "range": {"min": 5, "max": 1}},
            {"validator": "length", "range": {"step": 2}},
            {"validator": "length", "range": 5},
            {"validator": "signed_integer", "bits": 7},
            {"validator": "phone", "countries": ["XX"]},
            {"validator": "regex", "pattern": "("},
            {"validator": "regex"},
        ],
    )
    def test_invalid_values(self, factory, mapping):
        with pytest.raises(ConfigurationError):
            factory.build(mapping)

    def test_conflicting_policies(self, factory):
        with pytest.raises(ConfigurationError):
            factory.build(
                {"validator": "domain", "ipv4": "must", "at_least_two_labels": "disallow"}
            )

    def test_build_all_reports_entry(self, factory):
        with pytest.raises(ConfigurationError) as exc_info:
            factory.build_all({"broken": {"validator": "nope"}})

        assert exc_info.value.context == {"entry": "broken"}
