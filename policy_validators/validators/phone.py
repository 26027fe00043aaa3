"""Phone number validator backed by ``phonenumbers``."""

from dataclasses import dataclass, field

import phonenumbers
from phonenumbers import NumberParseException

from policy_validators.core.errors import ConfigurationError, PhoneError, PhoneErrorKind
from policy_validators.shared.value_objects import ValueObject

from .base import Validator


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """A valid phone number in E.164 form with the regions it was accepted for."""

    e164: str
    regions: tuple[str, ...]
    number: phonenumbers.PhoneNumber = field(compare=False, repr=False)

    def format(self, number_format: int = phonenumbers.PhoneNumberFormat.INTERNATIONAL) -> str:
        return phonenumbers.format_number(self.number, number_format)

    def to_dict(self) -> dict:
        return {"e164": self.e164, "regions": list(self.regions)}

    def __str__(self) -> str:
        return self.e164


@dataclass(frozen=True)
class PhoneValidator(Validator[PhoneNumber]):
    """
    Validates phone numbers.

    Policies:
        countries: accepted region codes (``"US"``, ``"TW"``...). When empty,
            any valid number is accepted.
        default_region: region used to read national-format numbers when no
            countries are configured; ``None`` requires the ``+`` international form
    """

    countries: frozenset[str] = frozenset()
    default_region: str | None = None

    error_class = PhoneError

    def __post_init__(self):
        countries = frozenset(country.upper() for country in self.countries)
        supported = phonenumbers.SUPPORTED_REGIONS
        unknown = sorted(country for country in countries if country not in supported)
        if unknown:
            raise ConfigurationError(f"Unknown phone regions: {', '.join(unknown)}")
        object.__setattr__(self, "countries", countries)
        if self.default_region is not None:
            object.__setattr__(self, "default_region", self.default_region.upper())

    def _parse_any(self, raw: str) -> PhoneNumber:
        try:
            number = phonenumbers.parse(raw, self.default_region)
        except NumberParseException as e:
            raise self._fail(PhoneErrorKind.PARSE_ERROR, e) from e

        if not phonenumbers.is_valid_number(number):
            raise self._fail(PhoneErrorKind.INVALID)

        region = phonenumbers.region_code_for_number(number)
        return PhoneNumber(
            e164=phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164),
            regions=(region,) if region else (),
            number=number,
        )

    def _parse_for_countries(self, raw: str) -> PhoneNumber:
        matched: list[str] = []
        accepted = None
        parse_error: NumberParseException | None = None
        valid_elsewhere = False
        parsed_any = False

        for region in sorted(self.countries):
            try:
                number = phonenumbers.parse(raw, region)
            except NumberParseException as e:
                parse_error = e
                continue

            parsed_any = True
            if not phonenumbers.is_valid_number(number):
                continue
            if phonenumbers.region_code_for_number(number) != region:
                valid_elsewhere = True
                continue

            matched.append(region)
            accepted = number

        if accepted is None:
            if valid_elsewhere:
                raise self._fail(PhoneErrorKind.INVALID_COUNTRY)
            if not parsed_any and parse_error is not None:
                raise self._fail(PhoneErrorKind.PARSE_ERROR, parse_error) from parse_error
            raise self._fail(PhoneErrorKind.INVALID)

        return PhoneNumber(
            e164=phonenumbers.format_number(accepted, phonenumbers.PhoneNumberFormat.E164),
            regions=tuple(matched),
            number=accepted,
        )

    def _analyze(self, raw: str) -> PhoneNumber:
        if not isinstance(raw, str) or not raw.strip():
            raise self._fail(PhoneErrorKind.INVALID)
        if self.countries:
            return self._parse_for_countries(raw)
        return self._parse_any(raw)

    def _build(self, facts: PhoneNumber) -> PhoneNumber:
        return facts


__all__ = ["PhoneNumber", "PhoneValidator"]
