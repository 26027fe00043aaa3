"""Shared shape checks for separated hexadecimal identifiers (MAC, UUID).

Check order: length and hex syntax, separator policy, case policy.
"""

import string
from dataclasses import dataclass
from enum import Enum

from policy_validators.core.enums import CaseOption
from policy_validators.core.errors import HexIdentifierErrorKind
from policy_validators.core.options import SeparatorOption

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class HexLayout:
    """Digit count and separator positions of a hexadecimal identifier."""

    digits: int
    separator_positions: tuple[int, ...]
    known_separators: frozenset[str]

    @property
    def separated_length(self) -> int:
        return self.digits + len(self.separator_positions)


def check_hex_identifier(
    text: str,
    layout: HexLayout,
    separator: SeparatorOption,
    case: CaseOption,
) -> tuple[Enum | None, str]:
    """
    Check ``text`` against ``layout`` and the policies.

    Returns the violated kind (or ``None``) and the bare hex digits.
    """
    if len(text) == layout.digits:
        digits = text
        has_separators = False
    elif len(text) == layout.separated_length:
        found = {text[i] for i in layout.separator_positions}
        if len(found) != 1:
            return HexIdentifierErrorKind.INVALID, ""
        (sep,) = found
        accepted = (
            layout.known_separators if separator.forbids() else {separator.separator}
        )
        if sep not in accepted:
            return HexIdentifierErrorKind.INVALID, ""
        positions = set(layout.separator_positions)
        digits = "".join(ch for i, ch in enumerate(text) if i not in positions)
        has_separators = True
    else:
        return HexIdentifierErrorKind.INVALID, ""

    if any(ch not in _HEX_DIGITS for ch in digits):
        return HexIdentifierErrorKind.INVALID, ""

    if separator.requires() and not has_separators:
        return HexIdentifierErrorKind.SEPARATOR_MUST, digits
    if separator.forbids() and has_separators:
        return HexIdentifierErrorKind.SEPARATOR_DISALLOW, digits

    if case.upper() and digits != digits.upper():
        return HexIdentifierErrorKind.UPPER_CASE_MUST, digits
    if case.lower() and digits != digits.lower():
        return HexIdentifierErrorKind.LOWER_CASE_MUST, digits

    return None, digits


__all__ = ["HexLayout", "check_hex_identifier"]
