"""
Tests for core enumerations.

Tests cover:
- TriAllow / BiAllow predicates and string parsing
- CaseOption predicates
- Protocol parsing and security flag
- Environment and LogLevel conversion
"""

import pytest

from policy_validators.core.enums import (
    BiAllow,
    CaseOption,
    Environment,
    LogLevel,
    Protocol,
    TriAllow,
)


@pytest.mark.unit
class TestTriAllow:
    """Test the tri-state policy switch."""

    @pytest.mark.parametrize(
        ("option", "allow", "must", "disallow"),
        [
            (TriAllow.MUST, True, True, False),
            (TriAllow.ALLOW, True, False, False),
            (TriAllow.DISALLOW, False, False, True),
        ],
    )
    def test_predicates(self, option, allow, must, disallow):
        """MUST also answers allow() since the feature is present."""
        assert option.allow() is allow
        assert option.must() is must
        assert option.disallow() is disallow

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("must", TriAllow.MUST),
            ("ALLOW", TriAllow.ALLOW),
            (" disallow ", TriAllow.DISALLOW),
            ("not_allow", TriAllow.DISALLOW),
            ("not-allow", TriAllow.DISALLOW),
        ],
    )
    def test_from_string(self, text, expected):
        assert TriAllow.from_string(text) is expected

    def test_from_string_rejects_unknown(self):
        with pytest.raises(ValueError):
            TriAllow.from_string("sometimes")

    def test_str(self):
        assert str(TriAllow.MUST) == "must"


@pytest.mark.unit
class TestBiAllow:
    """Test the bi-state policy switch."""

    def test_never_requires(self):
        assert BiAllow.ALLOW.must() is False
        assert BiAllow.DISALLOW.must() is False

    def test_predicates(self):
        assert BiAllow.ALLOW.allow()
        assert BiAllow.DISALLOW.disallow()
        assert not BiAllow.DISALLOW.allow()

    def test_from_string(self):
        assert BiAllow.from_string("Allow") is BiAllow.ALLOW
        assert BiAllow.from_string("not_allow") is BiAllow.DISALLOW

    def test_from_string_rejects_must(self):
        with pytest.raises(ValueError):
            BiAllow.from_string("must")


@pytest.mark.unit
class TestCaseOption:
    def test_predicates(self):
        assert CaseOption.ANY.any()
        assert CaseOption.UPPER.upper()
        assert CaseOption.LOWER.lower()
        assert not CaseOption.ANY.upper()

    def test_from_string(self):
        assert CaseOption.from_string("UPPER") is CaseOption.UPPER
        with pytest.raises(ValueError):
            CaseOption.from_string("title")


@pytest.mark.unit
class TestProtocol:
    """Test URL protocol enumeration."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("http", Protocol.HTTP), ("HTTPS:", Protocol.HTTPS), ("ftp", Protocol.FTP)],
    )
    def test_from_string(self, text, expected):
        assert Protocol.from_string(text) is expected

    def test_from_string_rejects_other_schemes(self):
        with pytest.raises(ValueError):
            Protocol.from_string("gopher")

    def test_is_secure(self):
        assert Protocol.HTTPS.is_secure
        assert not Protocol.HTTP.is_secure
        assert not Protocol.FTP.is_secure


@pytest.mark.unit
class TestRuntimeEnums:
    """Test Environment and LogLevel conversion."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("test", Environment.TESTING),
            ("testing", Environment.TESTING),
            ("PROD", Environment.PRODUCTION),
            ("development", Environment.DEVELOPMENT),
        ],
    )
    def test_environment_from_string(self, text, expected):
        assert Environment.from_string(text) is expected

    def test_environment_flags(self):
        assert Environment.PRODUCTION.is_production
        assert Environment.TESTING.is_testing
        assert Environment.DEVELOPMENT.allows_debug_logging
        assert not Environment.PRODUCTION.allows_debug_logging

    def test_log_level_conversion(self):
        assert LogLevel.from_string("debug") is LogLevel.DEBUG
        assert LogLevel.WARNING.to_logging_level() == 30

    def test_log_level_rejects_unknown(self):
        with pytest.raises(ValueError):
            LogLevel.from_string("verbose")
