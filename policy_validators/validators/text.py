"""Line, multi-line text and regular-expression validators."""

import re
from dataclasses import dataclass
from typing import ClassVar

from policy_validators.core.enums import TriAllow
from policy_validators.core.errors import (
    ConfigurationError,
    LineError,
    RegexError,
    RegexErrorKind,
    TextError,
)

from .base import Validator

# C0 controls except tab, plus DEL
LINE_CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")
# C0 controls except tab, line feed, vertical tab and carriage return, plus DEL
TEXT_CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0c\x0e-\x1f\x7f]")


class _TrimmedTextValidator(Validator[str]):
    """
    Shared ``empty`` policy handling.

    ``MUST`` requires blank text and ``DISALLOW`` requires a non-whitespace
    character. Control characters are rejected, except inside leading
    whitespace under ``DISALLOW``.
    """

    empty: TriAllow
    control_characters: ClassVar[re.Pattern]

    def _analyze(self, raw: str) -> str:
        kinds = self.error_class.kind_type
        if not isinstance(raw, str):
            raise self._fail(kinds.INVALID)

        is_blank = not raw.strip()
        if self.empty.must():
            if not is_blank:
                raise self._fail(kinds.EMPTY_MUST)
            return raw

        if self.empty.disallow():
            if is_blank:
                raise self._fail(kinds.EMPTY_DISALLOW)
            checked = raw.lstrip()
        else:
            checked = raw

        if self.control_characters.search(checked):
            raise self._fail(kinds.INVALID)
        return raw

    def _build(self, facts: str) -> str:
        return facts


@dataclass(frozen=True)
class LineValidator(_TrimmedTextValidator):
    """
    Validates one line of text.

    Policies:
        empty: ``MUST`` requires blank text, ``DISALLOW`` requires a
            non-whitespace character. Line breaks and control characters other
            than tab are rejected.
    """

    empty: TriAllow = TriAllow.ALLOW

    error_class = LineError
    control_characters = LINE_CONTROL_CHARACTERS


@dataclass(frozen=True)
class TextValidator(_TrimmedTextValidator):
    """
    Validates multi-line text.

    Same ``empty`` policy as ``LineValidator``; line feeds, carriage returns,
    tabs and vertical tabs are accepted.
    """

    empty: TriAllow = TriAllow.ALLOW

    error_class = TextError
    control_characters = TEXT_CONTROL_CHARACTERS


@dataclass(frozen=True)
class RegexValidator(Validator[str]):
    """Validates text that fully matches ``pattern``."""

    pattern: str
    flags: int = 0

    error_class = RegexError

    def __post_init__(self):
        try:
            object.__setattr__(self, "_compiled", re.compile(self.pattern, self.flags))
        except re.error as e:
            raise ConfigurationError(f"Invalid pattern {self.pattern!r}: {e}") from e

    def _analyze(self, raw: str) -> str:
        if not isinstance(raw, str) or self._compiled.fullmatch(raw) is None:
            raise self._fail(RegexErrorKind.INVALID)
        return raw

    def _build(self, facts: str) -> str:
        return facts


__all__ = ["LineValidator", "RegexValidator", "TextValidator"]
