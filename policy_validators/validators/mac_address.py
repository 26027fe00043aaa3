"""MAC address validator (``aa:bb:cc:dd:ee:ff``, ``aa-bb-...`` or ``aabbccddeeff``)."""

from dataclasses import dataclass

from policy_validators.core.enums import CaseOption
from policy_validators.core.errors import HexIdentifierErrorKind, MacAddressError
from policy_validators.core.options import SeparatorOption
from policy_validators.shared.value_objects import ValueObject

from .base import Validator
from .hex_identifier import HexLayout, check_hex_identifier

MAC_LAYOUT = HexLayout(
    digits=12,
    separator_positions=(2, 5, 8, 11, 14),
    known_separators=frozenset(":-"),
)


@dataclass(frozen=True)
class MacAddress(ValueObject):
    """A 48-bit MAC address."""

    value: int

    def to_mac_address_string(self, separator: str | None = ":", upper_case: bool = False) -> str:
        digits = f"{self.value:012x}"
        if upper_case:
            digits = digits.upper()
        octets = [digits[i:i + 2] for i in range(0, 12, 2)]
        return (separator or "").join(octets)

    def __str__(self) -> str:
        return self.to_mac_address_string()


@dataclass(frozen=True)
class MacAddressValidator(Validator[MacAddress]):
    """
    Validates MAC addresses.

    Policies:
        case: required letter case of the hex digits
        separator: separator requirement and the accepted separator character
    """

    case: CaseOption = CaseOption.ANY
    separator: SeparatorOption = SeparatorOption.allow(":")

    error_class = MacAddressError

    def _analyze(self, raw: str) -> int:
        if not isinstance(raw, str):
            raise self._fail(HexIdentifierErrorKind.INVALID)
        kind, digits = check_hex_identifier(raw, MAC_LAYOUT, self.separator, self.case)
        if kind is not None:
            raise self._fail(kind)
        return int(digits, 16)

    def _build(self, facts: int) -> MacAddress:
        return MacAddress(facts)


__all__ = ["MAC_LAYOUT", "MacAddress", "MacAddressValidator"]
