"""Email address validator.

Supports dot-atom and quoted local parts, ``[IPv4]`` and ``[IPv6:...]`` domain
literals, internationalized domains and parenthesized comments around the
local part and the domain part.

Comments are extracted here. The local part and domain literals are checked by
``email_validator``. Domain names go through the same IDNA rules as the domain
validator, so local names such as ``localhost`` reach the ``local`` policy
instead of being rejected as reserved.

Check order: syntax, comments, IP policy, locality, label count.
"""

import re
from dataclasses import dataclass
from ipaddress import IPv4Address

from email_validator import EmailNotValidError, validate_email

from policy_validators.core.enums import BiAllow, TriAllow
from policy_validators.core.errors import ConfigurationError, EmailError, EmailErrorKind
from policy_validators.shared.value_objects import Host, HostKind, ValueObject

from .base import Validator
from .host import is_local_host
from .host_rules import check_host_policies, to_ascii_domain

MAX_EMAIL_LENGTH = 320
MAX_DOMAIN_PART_LENGTH = 255

# Local parts are checked against this domain; the real domain is checked separately
STAND_IN_DOMAIN = "example.com"

_ATOM = r"[A-Za-z0-9!#$%&'*+\-/=?^_`{|}~\u0080-\U0010FFFF]+"
DOT_ATOM = re.compile(rf"{_ATOM}(?:\.{_ATOM})*")


class _Invalid(Exception):
    """Internal signal: the address is syntactically invalid."""


@dataclass(frozen=True)
class Email(ValueObject):
    """A validated email address."""

    local_part: str
    need_quoted: bool
    domain_part: Host
    comment_before_local_part: str | None = None
    comment_after_local_part: str | None = None
    comment_before_domain_part: str | None = None
    comment_after_domain_part: str | None = None
    is_local: bool = False

    @property
    def has_comments(self) -> bool:
        return any(
            comment is not None
            for comment in (
                self.comment_before_local_part,
                self.comment_after_local_part,
                self.comment_before_domain_part,
                self.comment_after_domain_part,
            )
        )

    def to_email_string(self) -> str:
        """Render the address without comments, quoting the local part if needed."""
        if self.need_quoted:
            escaped = self.local_part.replace("\\", "\\\\").replace('"', '\\"')
            local_part = f'"{escaped}"'
        else:
            local_part = self.local_part

        if self.domain_part.kind == HostKind.IPV4:
            domain_part = f"[{self.domain_part.value}]"
        elif self.domain_part.kind == HostKind.IPV6:
            domain_part = f"[IPv6:{self.domain_part.value}]"
        else:
            domain_part = self.domain_part.value

        return f"{local_part}@{domain_part}"

    def __str__(self) -> str:
        return self.to_email_string()


def _take_comment(text: str, pos: int) -> tuple[str | None, int]:
    """Consume ``(comment)`` at ``pos`` if one starts there."""
    if not text.startswith("(", pos):
        return None, pos
    end = text.find(")", pos + 1)
    if end < 0:
        raise _Invalid
    return text[pos + 1:end], end + 1


def _local_part_end(text: str, pos: int) -> int:
    if not text.startswith('"', pos):
        end = pos
        while end < len(text) and text[end] not in "@(":
            end += 1
        return end

    end = pos + 1
    while end < len(text) and text[end] != '"':
        end += 2 if text[end] == "\\" else 1
    if end >= len(text):
        raise _Invalid
    return end + 1


def _domain_part_end(text: str, pos: int) -> int:
    if text.startswith("[", pos):
        end = text.find("]", pos)
        if end < 0:
            raise _Invalid
        return end + 1
    end = text.find("(", pos)
    return len(text) if end < 0 else end


def _split_address(text: str) -> dict:
    """Split the address into local text, domain text and the four comments."""
    comment_before_local_part, pos = _take_comment(text, 0)
    end = _local_part_end(text, pos)
    local_text = text[pos:end]
    comment_after_local_part, pos = _take_comment(text, end)

    if not text.startswith("@", pos):
        raise _Invalid

    comment_before_domain_part, pos = _take_comment(text, pos + 1)
    end = _domain_part_end(text, pos)
    domain_text = text[pos:end]
    comment_after_domain_part, pos = _take_comment(text, end)

    if pos != len(text) or not domain_text:
        raise _Invalid

    return {
        "local_text": local_text,
        "domain_text": domain_text,
        "comment_before_local_part": comment_before_local_part,
        "comment_after_local_part": comment_after_local_part,
        "comment_before_domain_part": comment_before_domain_part,
        "comment_after_domain_part": comment_after_domain_part,
    }


def _parse_domain_name(domain_text: str) -> Host:
    if domain_text.endswith(".") or len(domain_text.encode("utf-8")) > MAX_DOMAIN_PART_LENGTH:
        raise _Invalid
    try:
        return Host.domain(to_ascii_domain(domain_text))
    except UnicodeError as e:
        raise _Invalid from e


def _parse_address(text: str, non_ascii: BiAllow) -> dict:
    parts = _split_address(text)
    local_text = parts.pop("local_text")
    domain_text = parts.pop("domain_text")

    if len(f"{local_text}@{domain_text}".encode("utf-8")) > MAX_EMAIL_LENGTH:
        raise _Invalid

    is_literal = domain_text.startswith("[")
    try:
        validated = validate_email(
            f"{local_text}@{domain_text if is_literal else STAND_IN_DOMAIN}",
            allow_smtputf8=non_ascii.allow(),
            allow_quoted_local=True,
            allow_domain_literal=True,
            check_deliverability=False,
            globally_deliverable=False,
        )
    except EmailNotValidError as e:
        raise _Invalid from e

    if is_literal:
        address = validated.domain_address
        host = Host.ipv4(address) if isinstance(address, IPv4Address) else Host.ipv6(address)
    else:
        host = _parse_domain_name(domain_text)

    parts["local_part"] = validated.local_part
    parts["need_quoted"] = DOT_ATOM.fullmatch(validated.local_part) is None
    parts["domain_part"] = host
    return parts


@dataclass(frozen=True)
class EmailValidator(Validator[Email]):
    """
    Validates email addresses.

    Policies:
        comment: whether parenthesized comments are accepted
        ip: whether an IP domain literal is required, accepted or rejected
        local: whether a local domain part is accepted
        at_least_two_labels: whether a single-label domain is accepted
        non_ascii: whether non-ASCII characters are accepted in the local part
        conflict: permit ``ip=MUST`` together with ``at_least_two_labels=DISALLOW``
    """

    comment: BiAllow = BiAllow.ALLOW
    ip: TriAllow = TriAllow.ALLOW
    local: TriAllow = TriAllow.ALLOW
    at_least_two_labels: TriAllow = TriAllow.ALLOW
    non_ascii: BiAllow = BiAllow.ALLOW
    conflict: BiAllow = BiAllow.DISALLOW

    error_class = EmailError

    def __post_init__(self):
        if self.ip.must() and self.at_least_two_labels.disallow() and self.conflict.disallow():
            raise ConfigurationError(
                "ip=must and at_least_two_labels=disallow cannot be used together"
            )

    def _analyze(self, raw: str) -> dict:
        if not isinstance(raw, str) or not raw:
            raise self._fail(EmailErrorKind.INVALID)

        try:
            parts = _parse_address(raw, self.non_ascii)
        except _Invalid as e:
            raise self._fail(EmailErrorKind.INVALID, e.__cause__) from e

        host = parts["domain_part"]
        has_comment = any(
            parts[key] is not None
            for key in (
                "comment_before_local_part",
                "comment_after_local_part",
                "comment_before_domain_part",
                "comment_after_domain_part",
            )
        )
        if has_comment and self.comment.disallow():
            raise self._fail(EmailErrorKind.COMMENT_DISALLOW)

        if self.ip.must() and not host.is_ip:
            raise self._fail(EmailErrorKind.IP_MUST)
        if self.ip.disallow() and host.is_ip:
            raise self._fail(EmailErrorKind.IP_DISALLOW)

        is_local = is_local_host(host)
        violation = check_host_policies(
            host,
            is_local,
            None,
            local=self.local,
            at_least_two_labels=self.at_least_two_labels,
        )
        if violation is not None:
            raise self._fail(violation.to_kind(EmailErrorKind))

        parts["is_local"] = is_local
        return parts

    def _build(self, facts: dict) -> Email:
        return Email(**facts)


__all__ = ["Email", "EmailValidator"]
