"""Primitive locality and label classifiers.

Stateless predicates over already parsed addresses and plain strings. Every
validator that reports locality or label structure goes through these.
"""

import ipaddress
from ipaddress import IPv4Address, IPv6Address

_DOCUMENTATION_V4 = (
    ipaddress.IPv4Network("192.0.2.0/24"),
    ipaddress.IPv4Network("198.51.100.0/24"),
    ipaddress.IPv4Network("203.0.113.0/24"),
)
_PRIVATE_V4 = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)
_BROADCAST_V4 = IPv4Address("255.255.255.255")

_UNIQUE_LOCAL_V6 = ipaddress.IPv6Network("fc00::/7")
_DOCUMENTATION_V6 = ipaddress.IPv6Network("2001:db8::/32")


def is_local_ipv4(addr: IPv4Address) -> bool:
    """
    Whether ``addr`` is private, loopback, link-local, broadcast,
    documentation or unspecified.
    """
    return (
        any(addr in network for network in _PRIVATE_V4)
        or addr.is_loopback
        or addr.is_link_local
        or addr == _BROADCAST_V4
        or any(addr in network for network in _DOCUMENTATION_V4)
        or addr.is_unspecified
    )


def _embedded_ipv4(addr: IPv6Address) -> IPv4Address | None:
    # ::ffff:a.b.c.d or the deprecated ::a.b.c.d form
    if addr.ipv4_mapped is not None:
        return addr.ipv4_mapped
    value = int(addr)
    if value >> 32 == 0:
        return IPv4Address(value & 0xFFFFFFFF)
    return None


def is_local_ipv6(addr: IPv6Address) -> bool:
    """
    Whether ``addr`` is a local IPv6 address.

    Multicast is local unless its scope is global. The unspecified and loopback
    addresses, link-local and site-local prefixes, unique-local addresses and
    the documentation prefix are local. Addresses embedding an IPv4 address
    are classified by that IPv4 address.
    """
    first_segment = int(addr) >> 112

    if first_segment & 0xFF00 == 0xFF00:
        return first_segment & 0x000F != 0x000E

    if addr.is_unspecified or addr.is_loopback:
        return True

    if first_segment & 0xFFC0 in (0xFE80, 0xFEC0):
        return True

    if addr in _UNIQUE_LOCAL_V6 or addr in _DOCUMENTATION_V6:
        return True

    embedded = _embedded_ipv4(addr)
    if embedded is not None:
        return is_local_ipv4(embedded)

    return False


def is_local_ip(addr: IPv4Address | IPv6Address) -> bool:
    if isinstance(addr, IPv4Address):
        return is_local_ipv4(addr)
    return is_local_ipv6(addr)


def is_local_domain(s: str) -> bool:
    """Whether ``s``, ignoring one trailing dot, is ``localhost`` in any case."""
    if s.endswith("."):
        s = s[:-1]
    return s.lower() == "localhost"


def is_at_least_two_labels_domain(s: str) -> bool:
    """Whether ``s`` has a label separator anywhere but the final position."""
    return "." in s[:-1]


def parse_ipv4_allow_an_ended_dot(s: str) -> IPv4Address | None:
    """
    Parse a dotted-quad IPv4 address, tolerating one trailing dot.

    Returns ``None`` when ``s`` is not an IPv4 address.
    """
    if s.endswith("."):
        s = s[:-1]
    try:
        return IPv4Address(s)
    except ValueError:
        return None


__all__ = [
    "is_at_least_two_labels_domain",
    "is_local_domain",
    "is_local_ip",
    "is_local_ipv4",
    "is_local_ipv6",
    "parse_ipv4_allow_an_ended_dot",
]
