"""
Tests for the error hierarchy.

Tests cover:
- Kind/type checking on construction
- Messages, codes and serialization
- Cause chaining for collaborator failures
- Context enrichment
"""

import logging

import pytest

from policy_validators.core.errors import (
    ConfigurationError,
    DomainError,
    DomainErrorKind,
    ErrorSeverity,
    IntegerError,
    IntegerErrorKind,
    Ipv4Error,
    IpErrorKind,
    PolicyValidatorsError,
    UrlError,
    UrlErrorKind,
    ValidatorError,
)


@pytest.mark.unit
class TestValidatorError:
    """Test the per-format error base class."""

    def test_kind_and_message(self):
        error = DomainError(DomainErrorKind.LOCAL_DISALLOW)

        assert error.kind is DomainErrorKind.LOCAL_DISALLOW
        assert error.cause is None
        assert str(error) == "must not be local"
        assert error.code == "DOMAIN_LOCAL_DISALLOW"
        assert error.details == {"format": "domain", "kind": "LOCAL_DISALLOW"}

    def test_rejects_foreign_kind(self):
        with pytest.raises(TypeError):
            DomainError(IpErrorKind.INVALID)

    def test_cause_is_kept_and_chained(self):
        cause = ValueError("invalid digit found in string")
        error = IntegerError(IntegerErrorKind.PARSE_ERROR, cause)

        assert error.cause is cause
        assert error.__cause__ is cause
        assert str(error) == "invalid integer: invalid digit found in string"

    def test_shared_kind_enumeration(self):
        error = Ipv4Error(IpErrorKind.PORT_MUST)

        assert error.code == "IPV4_PORT_MUST"
        assert isinstance(error, ValidatorError)
        assert isinstance(error, PolicyValidatorsError)

    def test_validator_errors_do_not_log_themselves(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="policy_validators"):
            UrlError(UrlErrorKind.PROTOCOL_ERROR)

        assert not [r for r in caplog.records if r.name.endswith("UrlError")]

    def test_repr(self):
        error = DomainError(DomainErrorKind.INVALID)

        assert repr(error) == "DomainError(INVALID, 'invalid domain')"


@pytest.mark.unit
class TestPolicyValidatorsError:
    """Test the common base exception."""

    def test_to_dict(self):
        error = DomainError(DomainErrorKind.PORT_MUST)

        assert error.to_dict() == {
            "error": "DOMAIN_PORT_MUST",
            "message": "port not found",
            "details": {"format": "domain", "kind": "PORT_MUST"},
        }
        assert "details" not in error.to_dict(include_details=False)

    def test_with_context_chains(self):
        error = ConfigurationError("bad option")

        assert error.with_context(entry="homepage") is error
        assert error.to_dict()["context"] == {"entry": "homepage"}

    def test_configuration_error_is_high_severity(self):
        error = ConfigurationError("bad option")

        assert error.severity is ErrorSeverity.HIGH
        assert error.code == "CONFIGURATION_ERROR"
        assert not isinstance(error, ValidatorError)
