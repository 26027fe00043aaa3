"""Domain name validator.

Check order: syntax, IPv4 policy, locality, label count, port.
"""

from dataclasses import dataclass

from policy_validators.core.enums import BiAllow, TriAllow
from policy_validators.core.errors import ConfigurationError, DomainError, DomainErrorKind
from policy_validators.shared.value_objects import Host, ValueObject
from policy_validators.utils.classifiers import (
    is_local_domain,
    is_local_ipv4,
    parse_ipv4_allow_an_ended_dot,
)

from .base import Validator
from .host_rules import check_host_policies, split_port, to_ascii_domain


@dataclass(frozen=True)
class Domain(ValueObject):
    """A validated domain (or dotted-quad IPv4 when permitted) with optional port."""

    domain: str
    port: int | None = None
    is_ipv4: bool = False
    is_local: bool = False

    @property
    def is_fully_qualified(self) -> bool:
        return self.domain.endswith(".")

    @property
    def domain_non_fully_qualified(self) -> str:
        """The domain without its trailing dot."""
        return self.domain[:-1] if self.is_fully_qualified else self.domain

    def to_host(self) -> Host:
        if self.is_ipv4:
            return Host.ipv4(parse_ipv4_allow_an_ended_dot(self.domain))
        return Host.domain(self.domain)

    def __str__(self) -> str:
        if self.port is None:
            return self.domain
        return f"{self.domain}:{self.port}"


@dataclass(frozen=True)
class DomainValidator(Validator[Domain]):
    """
    Validates domain names, optionally followed by ``:port``.

    Policies:
        ipv4: whether a dotted-quad IPv4 address is accepted in place of a name
        local: whether ``localhost`` or a local IPv4 address is accepted
        at_least_two_labels: whether a single-label name is accepted
        port: whether a ``:port`` suffix is accepted
        conflict: permit ``ipv4=MUST`` together with ``at_least_two_labels=DISALLOW``,
            a combination that rejects every input
    """

    ipv4: TriAllow = TriAllow.ALLOW
    local: TriAllow = TriAllow.ALLOW
    at_least_two_labels: TriAllow = TriAllow.ALLOW
    port: TriAllow = TriAllow.ALLOW
    conflict: BiAllow = BiAllow.DISALLOW

    error_class = DomainError

    def __post_init__(self):
        if (
            self.ipv4.must()
            and self.at_least_two_labels.disallow()
            and self.conflict.disallow()
        ):
            raise ConfigurationError(
                "ipv4=must and at_least_two_labels=disallow cannot be used together"
            )

    def _analyze(self, raw: str) -> tuple[str, int | None, bool, bool]:
        if not isinstance(raw, str) or not raw:
            raise self._fail(DomainErrorKind.INVALID)

        try:
            text, port = split_port(raw)
        except ValueError as e:
            raise self._fail(DomainErrorKind.INVALID) from e
        if not text:
            raise self._fail(DomainErrorKind.INVALID)

        ipv4 = parse_ipv4_allow_an_ended_dot(text)
        if ipv4 is not None:
            if self.ipv4.disallow():
                raise self._fail(DomainErrorKind.IPV4_DISALLOW)
            host = Host.ipv4(ipv4)
            is_local = is_local_ipv4(ipv4)
            normalized = text
        else:
            if self.ipv4.must():
                raise self._fail(DomainErrorKind.IPV4_MUST)
            try:
                normalized = to_ascii_domain(text)
            except UnicodeError as e:
                raise self._fail(DomainErrorKind.INVALID) from e
            host = Host.domain(normalized)
            is_local = is_local_domain(normalized)

        violation = check_host_policies(
            host,
            is_local,
            port,
            local=self.local,
            at_least_two_labels=self.at_least_two_labels,
            port_policy=self.port,
        )
        if violation is not None:
            raise self._fail(violation.to_kind(DomainErrorKind))

        return normalized, port, ipv4 is not None, is_local

    def _build(self, facts: tuple[str, int | None, bool, bool]) -> Domain:
        domain, port, is_ipv4, is_local = facts
        return Domain(domain=domain, port=port, is_ipv4=is_ipv4, is_local=is_local)


__all__ = ["Domain", "DomainValidator"]
