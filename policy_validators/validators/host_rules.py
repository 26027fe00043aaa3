"""Checks shared by the host-like validators (Domain, Host, Email, IP).

Policy checks run in a fixed order: locality, label count, port. The first
violated rule is reported; each validator maps a ``HostRule`` onto the member
of the same name in its own error kind.
"""

from enum import Enum

import idna

from policy_validators.core.enums import TriAllow
from policy_validators.shared.value_objects import Host
from policy_validators.utils.classifiers import is_at_least_two_labels_domain

MAX_PORT = 65535


class HostRule(Enum):
    """Host policy rules shared by several error taxonomies."""

    LOCAL_MUST = "local_must"
    LOCAL_DISALLOW = "local_disallow"
    AT_LEAST_TWO_LABELS_MUST = "at_least_two_labels_must"
    AT_LEAST_TWO_LABELS_DISALLOW = "at_least_two_labels_disallow"
    PORT_MUST = "port_must"
    PORT_DISALLOW = "port_disallow"

    def to_kind(self, kind_type: type[Enum]) -> Enum:
        return kind_type[self.name]


def parse_port(text: str) -> int:
    """
    Parse a decimal port number.

    Raises:
        ValueError: If ``text`` is not a number in ``0..=65535``
    """
    if not text or not text.isascii() or not text.isdigit():
        raise ValueError(f"Invalid port: {text!r}")
    port = int(text)
    if port > MAX_PORT:
        raise ValueError(f"Port out of range: {port}")
    return port


def split_port(text: str) -> tuple[str, int | None]:
    """
    Split ``host:port`` on the last colon.

    Only for hosts that cannot contain a colon themselves (domains and IPv4).

    Raises:
        ValueError: If a colon is present and the port is malformed
    """
    host, sep, port_text = text.rpartition(":")
    if not sep:
        return text, None
    return host, parse_port(port_text)


def to_ascii_domain(text: str) -> str:
    """
    Convert a domain to its lowercase ASCII (punycode) form.

    Applies UTS-46 mapping with STD3 rules, which bounds labels to 63 bytes and
    the whole name to 253 bytes. A single trailing dot is preserved.

    Raises:
        UnicodeError: If ``text`` is not a valid domain name
    """
    return idna.encode(text, uts46=True, std3_rules=True).decode("ascii")


def check_locality(policy: TriAllow, is_local: bool) -> HostRule | None:
    if policy.must() and not is_local:
        return HostRule.LOCAL_MUST
    if policy.disallow() and is_local:
        return HostRule.LOCAL_DISALLOW
    return None


def check_labels(policy: TriAllow, host: Host, is_local: bool) -> HostRule | None:
    """
    Label count rule.

    IP addresses are never single-label names. Local domains such as
    ``localhost`` are exempt.
    """
    if policy == TriAllow.ALLOW:
        return None

    if host.is_ip:
        return HostRule.AT_LEAST_TWO_LABELS_DISALLOW if policy.disallow() else None

    if is_local:
        return None

    has_two_labels = is_at_least_two_labels_domain(host.value)
    if policy.must() and not has_two_labels:
        return HostRule.AT_LEAST_TWO_LABELS_MUST
    if policy.disallow() and has_two_labels:
        return HostRule.AT_LEAST_TWO_LABELS_DISALLOW
    return None


def check_port(policy: TriAllow, port: int | None) -> HostRule | None:
    if policy.must() and port is None:
        return HostRule.PORT_MUST
    if policy.disallow() and port is not None:
        return HostRule.PORT_DISALLOW
    return None


def check_host_policies(
    host: Host,
    is_local: bool,
    port: int | None,
    *,
    local: TriAllow,
    at_least_two_labels: TriAllow | None = None,
    port_policy: TriAllow | None = None,
) -> HostRule | None:
    """Evaluate locality, then label count, then port. Returns the first violation."""
    violation = check_locality(local, is_local)
    if violation is None and at_least_two_labels is not None:
        violation = check_labels(at_least_two_labels, host, is_local)
    if violation is None and port_policy is not None:
        violation = check_port(port_policy, port)
    return violation


__all__ = [
    "MAX_PORT",
    "HostRule",
    "check_host_policies",
    "check_labels",
    "check_locality",
    "check_port",
    "parse_port",
    "split_port",
    "to_ascii_domain",
]
