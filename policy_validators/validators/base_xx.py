"""Base32, Base64 and Base64-URL validators.

The alphabet and padding shape are checked first. Decoding is attempted only by
the ``*Decoded`` validators and only after the shape checks passed.

Shape rules:
- ``=`` may only appear as a trailing run that completes the final block
- an unpadded final block must have a length the encoding can produce
"""

import base64
import binascii
import string
from collections.abc import Callable
from dataclasses import dataclass

from policy_validators.core.enums import TriAllow
from policy_validators.core.errors import (
    Base32Error,
    Base64Error,
    Base64UrlError,
    BaseXxErrorKind,
)

from .base import Validator


@dataclass(frozen=True)
class Alphabet:
    """Character set, block size and legal final-block lengths of an encoding."""

    name: str
    characters: frozenset[str]
    block_size: int
    partial_lengths: frozenset[int]
    decoder: Callable[[str], bytes]


BASE32 = Alphabet(
    name="base32",
    characters=frozenset(string.ascii_uppercase + "234567"),
    block_size=8,
    partial_lengths=frozenset({2, 4, 5, 7}),
    decoder=base64.b32decode,
)
BASE64 = Alphabet(
    name="base64",
    characters=frozenset(string.ascii_letters + string.digits + "+/"),
    block_size=4,
    partial_lengths=frozenset({2, 3}),
    decoder=lambda text: base64.b64decode(text, validate=True),
)
BASE64_URL = Alphabet(
    name="base64_url",
    characters=frozenset(string.ascii_letters + string.digits + "-_"),
    block_size=4,
    partial_lengths=frozenset({2, 3}),
    decoder=base64.urlsafe_b64decode,
)


def check_shape(text: str, alphabet: Alphabet, padding: TriAllow) -> BaseXxErrorKind | None:
    """
    Check ``text`` against the alphabet and the padding policy.

    Returns the violated kind, or ``None`` when the shape is acceptable.
    """
    data = text.rstrip("=")
    pad_count = len(text) - len(data)

    if not data or any(ch not in alphabet.characters for ch in data):
        return BaseXxErrorKind.INVALID

    remainder = len(data) % alphabet.block_size
    if remainder and remainder not in alphabet.partial_lengths:
        return BaseXxErrorKind.INVALID

    if pad_count:
        if remainder == 0 or remainder + pad_count != alphabet.block_size:
            return BaseXxErrorKind.INVALID
        if padding.disallow():
            return BaseXxErrorKind.PADDING_DISALLOW
    elif remainder and padding.must():
        return BaseXxErrorKind.PADDING_MUST

    return None


def pad(text: str, alphabet: Alphabet) -> str:
    remainder = len(text) % alphabet.block_size
    if remainder == 0:
        return text
    return text + "=" * (alphabet.block_size - remainder)


class _BaseXxValidator(Validator):
    alphabet: Alphabet
    padding: TriAllow

    def _check_shape(self, raw: str | bytes) -> str:
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("ascii")
            except UnicodeDecodeError as e:
                raise self._fail(BaseXxErrorKind.INVALID) from e
        if not isinstance(raw, str):
            raise self._fail(BaseXxErrorKind.INVALID)

        kind = check_shape(raw, self.alphabet, self.padding)
        if kind is not None:
            raise self._fail(kind)
        return raw


class _EncodedValidator(_BaseXxValidator):
    """Shape only: the normalized value is the validated text."""

    def _analyze(self, raw: str | bytes) -> str:
        return self._check_shape(raw)

    def _build(self, facts: str) -> str:
        return facts


class _DecodedValidator(_BaseXxValidator):
    """Shape, then decoding: the normalized value is the decoded payload."""

    def _analyze(self, raw: str | bytes) -> bytes:
        text = self._check_shape(raw)
        try:
            return self.alphabet.decoder(pad(text, self.alphabet))
        except binascii.Error as e:
            raise self._fail(BaseXxErrorKind.DECODE, e) from e

    def _build(self, facts: bytes) -> bytes:
        return facts


@dataclass(frozen=True)
class Base32Validator(_EncodedValidator):
    padding: TriAllow = TriAllow.ALLOW

    alphabet = BASE32
    error_class = Base32Error


@dataclass(frozen=True)
class Base32DecodedValidator(_DecodedValidator):
    padding: TriAllow = TriAllow.ALLOW

    alphabet = BASE32
    error_class = Base32Error


@dataclass(frozen=True)
class Base64Validator(_EncodedValidator):
    padding: TriAllow = TriAllow.ALLOW

    alphabet = BASE64
    error_class = Base64Error


@dataclass(frozen=True)
class Base64DecodedValidator(_DecodedValidator):
    padding: TriAllow = TriAllow.ALLOW

    alphabet = BASE64
    error_class = Base64Error


@dataclass(frozen=True)
class Base64UrlValidator(_EncodedValidator):
    padding: TriAllow = TriAllow.ALLOW

    alphabet = BASE64_URL
    error_class = Base64UrlError


@dataclass(frozen=True)
class Base64UrlDecodedValidator(_DecodedValidator):
    padding: TriAllow = TriAllow.ALLOW

    alphabet = BASE64_URL
    error_class = Base64UrlError


__all__ = [
    "BASE32",
    "BASE64",
    "BASE64_URL",
    "Alphabet",
    "Base32DecodedValidator",
    "Base32Validator",
    "Base64DecodedValidator",
    "Base64UrlDecodedValidator",
    "Base64UrlValidator",
    "Base64Validator",
    "check_shape",
]
