"""URL validators.

URL grammar is delegated to ``httpx.URL``. These validators restrict the
scheme, classify the host's locality and apply the port policy. Check order:
protocol, URL grammar, locality, port.
"""

import ipaddress
from dataclasses import dataclass

import httpx

from policy_validators.core.enums import Protocol, TriAllow
from policy_validators.core.errors import (
    HttpFtpUrlError,
    HttpUrlError,
    UrlError,
    UrlErrorKind,
)
from policy_validators.shared.value_objects import ValueObject
from policy_validators.utils.classifiers import is_local_domain, is_local_ip

from .base import Validator
from .host_rules import check_locality, check_port


@dataclass(frozen=True)
class Url(ValueObject):
    """A parsed absolute URL."""

    url: httpx.URL

    def __str__(self) -> str:
        return str(self.url)


@dataclass(frozen=True)
class HttpUrl(ValueObject):
    """A validated HTTP or HTTPS URL."""

    url: httpx.URL
    is_https: bool
    is_local: bool = False

    def __str__(self) -> str:
        return str(self.url)


@dataclass(frozen=True)
class HttpFtpUrl(ValueObject):
    """A validated HTTP, HTTPS or FTP URL."""

    url: httpx.URL
    protocol: Protocol
    is_local: bool = False

    def __str__(self) -> str:
        return str(self.url)


def is_local_url_host(host: str) -> bool:
    """Classify an ``httpx.URL.host`` value (IPv6 hosts come without brackets)."""
    try:
        return is_local_ip(ipaddress.ip_address(host))
    except ValueError:
        return is_local_domain(host)


def _scheme_of(raw: str) -> Protocol | None:
    scheme, sep, _ = raw.partition(":")
    if not sep:
        return None
    try:
        return Protocol.from_string(scheme)
    except ValueError:
        return None


class _WebUrlValidator(Validator):
    """Shared algorithm for the HTTP and HTTP/FTP URL validators."""

    protocols: frozenset[Protocol] = frozenset()
    local: TriAllow
    port: TriAllow

    def _parse_web_url(self, raw: str) -> tuple[httpx.URL, Protocol, bool]:
        if not isinstance(raw, str):
            raise self._fail(UrlErrorKind.PARSE_ERROR)

        protocol = _scheme_of(raw)
        if protocol not in self.protocols:
            raise self._fail(UrlErrorKind.PROTOCOL_ERROR)

        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise self._fail(UrlErrorKind.PARSE_ERROR, e) from e

        if not url.host:
            cause = httpx.InvalidURL("URL has no host")
            raise self._fail(UrlErrorKind.PARSE_ERROR, cause) from cause

        is_local = is_local_url_host(url.host)
        violation = check_locality(self.local, is_local) or check_port(self.port, url.port)
        if violation is not None:
            raise self._fail(violation.to_kind(UrlErrorKind))

        return url, protocol, is_local


@dataclass(frozen=True)
class HttpUrlValidator(_WebUrlValidator):
    """
    Validates ``http`` and ``https`` URLs.

    Policies:
        local: whether URLs to local hosts are accepted
        port: whether an explicit non-default port is accepted
    """

    local: TriAllow = TriAllow.ALLOW
    port: TriAllow = TriAllow.ALLOW

    protocols = frozenset({Protocol.HTTP, Protocol.HTTPS})
    error_class = HttpUrlError

    def _analyze(self, raw: str) -> tuple[httpx.URL, Protocol, bool]:
        return self._parse_web_url(raw)

    def _build(self, facts: tuple[httpx.URL, Protocol, bool]) -> HttpUrl:
        url, protocol, is_local = facts
        return HttpUrl(url=url, is_https=protocol.is_secure, is_local=is_local)


@dataclass(frozen=True)
class HttpFtpUrlValidator(_WebUrlValidator):
    """Validates ``http``, ``https`` and ``ftp`` URLs."""

    local: TriAllow = TriAllow.ALLOW
    port: TriAllow = TriAllow.ALLOW

    protocols = frozenset({Protocol.HTTP, Protocol.HTTPS, Protocol.FTP})
    error_class = HttpFtpUrlError

    def _analyze(self, raw: str) -> tuple[httpx.URL, Protocol, bool]:
        return self._parse_web_url(raw)

    def _build(self, facts: tuple[httpx.URL, Protocol, bool]) -> HttpFtpUrl:
        url, protocol, is_local = facts
        return HttpFtpUrl(url=url, protocol=protocol, is_local=is_local)


@dataclass(frozen=True)
class UrlValidator(Validator[Url]):
    """Validates any absolute URL."""

    error_class = UrlError

    def _analyze(self, raw: str) -> httpx.URL:
        if not isinstance(raw, str):
            raise self._fail(UrlErrorKind.PARSE_ERROR)
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise self._fail(UrlErrorKind.PARSE_ERROR, e) from e
        if not url.scheme:
            cause = httpx.InvalidURL("URL has no scheme")
            raise self._fail(UrlErrorKind.PARSE_ERROR, cause) from cause
        return url

    def _build(self, facts: httpx.URL) -> Url:
        return Url(url=facts)


__all__ = [
    "HttpFtpUrl",
    "HttpFtpUrlValidator",
    "HttpUrl",
    "HttpUrlValidator",
    "Url",
    "UrlValidator",
    "is_local_url_host",
]
