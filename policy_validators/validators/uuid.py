"""UUID validator (``8-4-4-4-12`` grouping or 32 bare hex digits)."""

import uuid
from dataclasses import dataclass

from policy_validators.core.enums import CaseOption
from policy_validators.core.errors import HexIdentifierErrorKind, UuidError
from policy_validators.core.options import SeparatorOption
from policy_validators.shared.value_objects import ValueObject

from .base import Validator
from .hex_identifier import HexLayout, check_hex_identifier

UUID_LAYOUT = HexLayout(
    digits=32,
    separator_positions=(8, 13, 18, 23),
    known_separators=frozenset("-"),
)


@dataclass(frozen=True)
class Uuid(ValueObject):
    """A 128-bit UUID."""

    value: uuid.UUID

    def to_uuid_string(self, separator: bool = True, upper_case: bool = False) -> str:
        text = str(self.value) if separator else self.value.hex
        return text.upper() if upper_case else text

    def __str__(self) -> str:
        return self.to_uuid_string()


@dataclass(frozen=True)
class UuidValidator(Validator[Uuid]):
    """
    Validates UUIDs.

    Policies:
        case: required letter case of the hex digits
        separator: separator requirement (``-`` is the only UUID separator)
    """

    case: CaseOption = CaseOption.ANY
    separator: SeparatorOption = SeparatorOption.allow("-")

    error_class = UuidError

    def _analyze(self, raw: str) -> str:
        if not isinstance(raw, str):
            raise self._fail(HexIdentifierErrorKind.INVALID)
        kind, digits = check_hex_identifier(raw, UUID_LAYOUT, self.separator, self.case)
        if kind is not None:
            raise self._fail(kind)
        return digits

    def _build(self, facts: str) -> Uuid:
        return Uuid(uuid.UUID(hex=facts))


__all__ = ["UUID_LAYOUT", "Uuid", "UuidValidator"]
