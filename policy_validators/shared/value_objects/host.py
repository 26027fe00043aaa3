"""
Host Value Object

A normalized host: a domain name, an IPv4 address or an IPv6 address.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from ipaddress import IPv4Address, IPv6Address

from .base import ValueObject


class HostKind(Enum):
    """Which variant a Host holds, in ordering precedence."""

    DOMAIN = 0
    IPV4 = 1
    IPV6 = 2


@total_ordering
@dataclass(frozen=True)
class Host(ValueObject):
    """Value object holding exactly one of a domain, an IPv4 or an IPv6 address."""

    kind: HostKind
    value: str | IPv4Address | IPv6Address

    def __post_init__(self):
        expected = {
            HostKind.DOMAIN: str,
            HostKind.IPV4: IPv4Address,
            HostKind.IPV6: IPv6Address,
        }[self.kind]
        if not isinstance(self.value, expected):
            raise TypeError(f"{self.kind.name} host needs a {expected.__name__} value")

    @classmethod
    def domain(cls, name: str) -> "Host":
        return cls(HostKind.DOMAIN, name)

    @classmethod
    def ipv4(cls, addr: IPv4Address) -> "Host":
        return cls(HostKind.IPV4, addr)

    @classmethod
    def ipv6(cls, addr: IPv6Address) -> "Host":
        return cls(HostKind.IPV6, addr)

    @property
    def is_domain(self) -> bool:
        return self.kind == HostKind.DOMAIN

    @property
    def is_ip(self) -> bool:
        return self.kind != HostKind.DOMAIN

    def to_uri_authority_string(self) -> str:
        """Render for a URI authority, bracketing IPv6 addresses."""
        if self.kind == HostKind.IPV6:
            return f"[{self.value}]"
        return str(self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Host):
            return NotImplemented
        if self.kind != other.kind:
            return self.kind.value < other.kind.value
        return self.value < other.value

    def __str__(self) -> str:
        return str(self.value)
