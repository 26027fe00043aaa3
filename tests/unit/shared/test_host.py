"""
Tests for the Host value object.

Tests cover:
- Variant construction and type checking
- URI authority rendering
- Ordering across and within variants
- Serialization
"""

from ipaddress import IPv4Address, IPv6Address

import pytest

from policy_validators.shared.value_objects import Host, HostKind


@pytest.mark.unit
class TestHost:
    """Test Host value object."""

    def test_constructors(self):
        assert Host.domain("example.com").kind is HostKind.DOMAIN
        assert Host.ipv4(IPv4Address("1.2.3.4")).kind is HostKind.IPV4
        assert Host.ipv6(IPv6Address("::1")).kind is HostKind.IPV6

    def test_rejects_mismatched_value(self):
        with pytest.raises(TypeError):
            Host(HostKind.IPV4, "1.2.3.4")

        with pytest.raises(TypeError):
            Host(HostKind.DOMAIN, IPv4Address("1.2.3.4"))

    def test_predicates(self):
        assert Host.domain("example.com").is_domain
        assert Host.ipv6(IPv6Address("::1")).is_ip
        assert not Host.domain("example.com").is_ip

    def test_uri_authority_string(self):
        assert Host.domain("example.com").to_uri_authority_string() == "example.com"
        assert Host.ipv4(IPv4Address("1.2.3.4")).to_uri_authority_string() == "1.2.3.4"
        assert Host.ipv6(IPv6Address("::1")).to_uri_authority_string() == "[::1]"

    def test_str(self):
        assert str(Host.ipv6(IPv6Address("::1"))) == "::1"

    def test_ordering(self):
        hosts = [
            Host.ipv6(IPv6Address("::1")),
            Host.ipv4(IPv4Address("9.9.9.9")),
            Host.domain("b.example"),
            Host.ipv4(IPv4Address("1.1.1.1")),
            Host.domain("a.example"),
        ]

        assert sorted(hosts) == [
            Host.domain("a.example"),
            Host.domain("b.example"),
            Host.ipv4(IPv4Address("1.1.1.1")),
            Host.ipv4(IPv4Address("9.9.9.9")),
            Host.ipv6(IPv6Address("::1")),
        ]

    def test_equality_and_hash(self):
        assert Host.domain("example.com") == Host.domain("example.com")
        assert len({Host.domain("example.com"), Host.domain("example.com")}) == 1

    def test_immutable(self):
        host = Host.domain("example.com")

        with pytest.raises(AttributeError):
            host.value = "other.com"

    def test_to_dict(self):
        assert Host.ipv4(IPv4Address("1.2.3.4")).to_dict() == {
            "kind": 1,
            "value": "1.2.3.4",
        }
