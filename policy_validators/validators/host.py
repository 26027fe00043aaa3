"""Host validator: a domain, an IPv4 or an IPv6 address, with optional port.

Accepted shapes are ``[ipv6]``, ``[ipv6]:port``, a bare ``ipv6``,
``ipv4[:port]`` and ``domain[:port]``. Check order: syntax, locality, label
count, port.
"""

from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address

from policy_validators.core.enums import TriAllow
from policy_validators.core.errors import HostError, HostErrorKind
from policy_validators.shared.value_objects import Host, ValueObject
from policy_validators.utils.classifiers import is_local_domain, is_local_ip

from .base import Validator
from .host_rules import check_host_policies, parse_port, split_port, to_ascii_domain


@dataclass(frozen=True)
class HostAddress(ValueObject):
    """A validated host with optional port."""

    host: Host
    port: int | None = None
    is_local: bool = False

    def __str__(self) -> str:
        if self.port is None:
            return self.host.to_uri_authority_string()
        return f"{self.host.to_uri_authority_string()}:{self.port}"


def parse_ipv6(text: str) -> IPv6Address:
    """
    Parse an IPv6 address without a zone identifier.

    Raises:
        ValueError: If ``text`` is not an IPv6 address
    """
    if "%" in text:
        raise ValueError(f"Zone identifiers are not accepted: {text!r}")
    return IPv6Address(text)


def split_bracketed_ipv6(text: str) -> tuple[IPv6Address, int | None]:
    """
    Parse ``[ipv6]`` or ``[ipv6]:port``.

    Raises:
        ValueError: If the brackets, the address or the port are malformed
    """
    end = text.find("]")
    if not text.startswith("[") or end < 0:
        raise ValueError(f"Unbalanced brackets: {text!r}")

    addr = parse_ipv6(text[1:end])
    rest = text[end + 1:]
    if not rest:
        return addr, None
    if not rest.startswith(":"):
        raise ValueError(f"Unexpected text after address: {rest!r}")
    return addr, parse_port(rest[1:])


def parse_host_text(text: str) -> tuple[Host, int | None]:
    """
    Classify ``text`` as a host with optional port.

    Raises:
        ValueError: If ``text`` is not a host (``UnicodeError`` for bad names)
    """
    if text.startswith("["):
        addr, port = split_bracketed_ipv6(text)
        return Host.ipv6(addr), port

    if text.count(":") > 1:
        return Host.ipv6(parse_ipv6(text)), None

    name, port = split_port(text)
    if not name:
        raise ValueError("Empty host")

    try:
        return Host.ipv4(IPv4Address(name)), port
    except ValueError:
        pass

    ascii_name = to_ascii_domain(name)
    if ascii_name.endswith("."):
        raise ValueError(f"Fully qualified names are not hosts: {name!r}")
    return Host.domain(ascii_name), port


def is_local_host(host: Host) -> bool:
    if host.is_domain:
        return is_local_domain(host.value)
    return is_local_ip(host.value)


@dataclass(frozen=True)
class HostValidator(Validator[HostAddress]):
    """
    Validates hosts.

    Policies:
        local: whether local hosts are accepted
        at_least_two_labels: whether single-label names are accepted;
            IP addresses count as multi-label only for ``must``
        port: whether a ``:port`` suffix is accepted
    """

    local: TriAllow = TriAllow.ALLOW
    at_least_two_labels: TriAllow = TriAllow.ALLOW
    port: TriAllow = TriAllow.ALLOW

    error_class = HostError

    def _analyze(self, raw: str) -> HostAddress:
        if not isinstance(raw, str) or not raw:
            raise self._fail(HostErrorKind.INVALID)

        try:
            host, port = parse_host_text(raw)
        except ValueError as e:
            # UnicodeError is a ValueError
            raise self._fail(HostErrorKind.INVALID) from e

        is_local = is_local_host(host)
        violation = check_host_policies(
            host,
            is_local,
            port,
            local=self.local,
            at_least_two_labels=self.at_least_two_labels,
            port_policy=self.port,
        )
        if violation is not None:
            raise self._fail(violation.to_kind(HostErrorKind))

        return HostAddress(host=host, port=port, is_local=is_local)

    def _build(self, facts: HostAddress) -> HostAddress:
        return facts


__all__ = [
    "HostAddress",
    "HostValidator",
    "is_local_host",
    "parse_host_text",
    "parse_ipv6",
    "split_bracketed_ipv6",
]
