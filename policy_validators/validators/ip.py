"""IPv4, IPv6 and IP validators.

IPv4 accepts ``a.b.c.d`` with an optional trailing dot and optional ``:port``.
IPv6 accepts ``[addr]``, ``[addr]:port`` or a bare ``addr``. Check order:
syntax, locality, port.
"""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

from policy_validators.core.enums import TriAllow
from policy_validators.core.errors import IpError, IpErrorKind, Ipv4Error, Ipv6Error
from policy_validators.shared.value_objects import Host, ValueObject
from policy_validators.utils.classifiers import (
    is_local_ip,
    parse_ipv4_allow_an_ended_dot,
)

from .base import Validator
from .host import parse_ipv6, split_bracketed_ipv6
from .host_rules import HostRule, check_host_policies, split_port


@dataclass(frozen=True)
class IpEndpoint(ValueObject):
    """A validated IP address with optional port."""

    address: IPv4Address | IPv6Address
    port: int | None = None
    is_local: bool = False

    @property
    def version(self) -> int:
        return self.address.version

    def to_host(self) -> Host:
        if self.version == 4:
            return Host.ipv4(self.address)
        return Host.ipv6(self.address)

    def __str__(self) -> str:
        host = self.to_host().to_uri_authority_string()
        return host if self.port is None else f"{host}:{self.port}"


def parse_ipv4_text(text: str) -> tuple[IPv4Address, int | None]:
    """
    Parse ``ipv4[:port]``.

    Raises:
        ValueError: If ``text`` is not an IPv4 address with optional port
    """
    addr_text, port = split_port(text)
    addr = parse_ipv4_allow_an_ended_dot(addr_text)
    if addr is None:
        raise ValueError(f"Not an IPv4 address: {addr_text!r}")
    return addr, port


def parse_ipv6_text(text: str) -> tuple[IPv6Address, int | None]:
    """
    Parse ``[ipv6]``, ``[ipv6]:port`` or a bare ``ipv6``.

    Raises:
        ValueError: If ``text`` is not an IPv6 address with optional port
    """
    if text.startswith("["):
        return split_bracketed_ipv6(text)
    return parse_ipv6(text), None


class _IpRulesMixin:
    """Locality then port, shared by the three IP validators."""

    local: TriAllow
    port: TriAllow

    def _check(self, addr: IPv4Address | IPv6Address, port: int | None) -> IpEndpoint:
        is_local = is_local_ip(addr)
        host = Host.ipv4(addr) if addr.version == 4 else Host.ipv6(addr)
        violation: HostRule | None = check_host_policies(
            host, is_local, port, local=self.local, port_policy=self.port
        )
        if violation is not None:
            raise self._fail(violation.to_kind(IpErrorKind))
        return IpEndpoint(address=addr, port=port, is_local=is_local)


@dataclass(frozen=True)
class Ipv4Validator(_IpRulesMixin, Validator[IpEndpoint]):
    """Validates IPv4 addresses with optional port."""

    local: TriAllow = TriAllow.ALLOW
    port: TriAllow = TriAllow.ALLOW

    error_class = Ipv4Error

    def _analyze(self, raw: str) -> IpEndpoint:
        if not isinstance(raw, str) or not raw:
            raise self._fail(IpErrorKind.INVALID)
        try:
            addr, port = parse_ipv4_text(raw)
        except ValueError as e:
            raise self._fail(IpErrorKind.INVALID) from e
        return self._check(addr, port)

    def _build(self, facts: IpEndpoint) -> IpEndpoint:
        return facts


@dataclass(frozen=True)
class Ipv6Validator(_IpRulesMixin, Validator[IpEndpoint]):
    """Validates IPv6 addresses, bracketed when carrying a port."""

    local: TriAllow = TriAllow.ALLOW
    port: TriAllow = TriAllow.ALLOW

    error_class = Ipv6Error

    def _analyze(self, raw: str) -> IpEndpoint:
        if not isinstance(raw, str) or not raw:
            raise self._fail(IpErrorKind.INVALID)
        try:
            addr, port = parse_ipv6_text(raw)
        except ValueError as e:
            raise self._fail(IpErrorKind.INVALID) from e
        return self._check(addr, port)

    def _build(self, facts: IpEndpoint) -> IpEndpoint:
        return facts


@dataclass(frozen=True)
class IpValidator(_IpRulesMixin, Validator[IpEndpoint]):
    """
    Validates IPv4 or IPv6 addresses.

    IPv4 syntax is tried first, then IPv6. Policy errors come from whichever
    family parsed the input; input neither family parses is ``INVALID``.
    """

    local: TriAllow = TriAllow.ALLOW
    port: TriAllow = TriAllow.ALLOW

    error_class = IpError

    def _analyze(self, raw: str) -> IpEndpoint:
        if not isinstance(raw, str) or not raw:
            raise self._fail(IpErrorKind.INVALID)

        for parse in (parse_ipv4_text, parse_ipv6_text):
            try:
                addr, port = parse(raw)
            except ValueError:
                continue
            return self._check(addr, port)

        raise self._fail(IpErrorKind.INVALID)

    def _build(self, facts: IpEndpoint) -> IpEndpoint:
        return facts


__all__ = [
    "IpEndpoint",
    "IpValidator",
    "Ipv4Validator",
    "Ipv6Validator",
    "parse_ipv4_text",
    "parse_ipv6_text",
]
