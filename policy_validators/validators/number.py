"""Signed integer, unsigned integer and floating-point number validators.

Integers: parse, width, range, forbidden values.
Numbers: parse, NaN policy, range, forbidden values. NaN never reaches the
range comparison.
"""

import math
import re
from dataclasses import dataclass

from policy_validators.core.enums import TriAllow
from policy_validators.core.errors import (
    ConfigurationError,
    IntegerError,
    IntegerErrorKind,
    NumberError,
    NumberErrorKind,
)
from policy_validators.core.options import RangeOption, RangeViolation

from .base import Validator

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
SUPPORTED_BITS = (8, 16, 32, 64, 128)


def _range_kind(violation: RangeViolation, kind_type):
    return kind_type[violation.name]


def _integer_bounds(bits: int | None, signed: bool) -> tuple[int | None, int | None]:
    if bits is None:
        return (None, None) if signed else (0, None)
    if signed:
        return -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    return 0, (1 << bits) - 1


class _IntegerValidator(Validator[int]):
    signed: bool = True
    range: RangeOption
    forbidden: frozenset
    bits: int | None

    error_class = IntegerError

    def _normalize_policies(self) -> None:
        object.__setattr__(self, "forbidden", frozenset(self.forbidden))
        if self.bits is not None and self.bits not in SUPPORTED_BITS:
            raise ConfigurationError(f"Unsupported integer width: {self.bits}")

    def _parse_integer(self, raw: int | str) -> int:
        if isinstance(raw, bool):
            raise self._fail(IntegerErrorKind.PARSE_ERROR, TypeError("booleans are not integers"))
        if isinstance(raw, int):
            return raw
        if (
            not isinstance(raw, str)
            or not INTEGER_PATTERN.fullmatch(raw)
            or (not self.signed and raw.startswith("-"))
        ):
            cause = ValueError(f"invalid digit found in {raw!r}")
            raise self._fail(IntegerErrorKind.PARSE_ERROR, cause) from cause
        return int(raw)

    def _analyze(self, raw: int | str) -> int:
        value = self._parse_integer(raw)

        lower, upper = _integer_bounds(self.bits, self.signed)
        if (lower is not None and value < lower) or (upper is not None and value > upper):
            cause = ValueError(f"{value} does not fit in the target integer type")
            raise self._fail(IntegerErrorKind.PARSE_ERROR, cause) from cause

        violation = self.range.check(value)
        if violation is not None:
            raise self._fail(_range_kind(violation, IntegerErrorKind))

        if value in self.forbidden:
            raise self._fail(IntegerErrorKind.FORBIDDEN)

        return value

    def _build(self, facts: int) -> int:
        return facts


@dataclass(frozen=True)
class SignedIntegerValidator(_IntegerValidator):
    """
    Validates signed integers.

    Policies:
        range: accepted value range
        forbidden: individually rejected values
        bits: two's complement width, or ``None`` for unbounded
    """

    range: RangeOption = RangeOption.unlimited()
    forbidden: frozenset = frozenset()
    bits: int | None = 64

    signed = True

    def __post_init__(self):
        self._normalize_policies()


@dataclass(frozen=True)
class UnsignedIntegerValidator(_IntegerValidator):
    """Validates non-negative integers; a sign other than ``+`` is a parse error."""

    range: RangeOption = RangeOption.unlimited()
    forbidden: frozenset = frozenset()
    bits: int | None = 64

    signed = False

    def __post_init__(self):
        self._normalize_policies()


@dataclass(frozen=True)
class NumberValidator(Validator[float]):
    """
    Validates floating-point numbers.

    Policies:
        nan: whether NaN is required, accepted or rejected
        range: accepted value range (not applied to NaN)
        forbidden: individually rejected values
    """

    nan: TriAllow = TriAllow.ALLOW
    range: RangeOption = RangeOption.unlimited()
    forbidden: frozenset = frozenset()

    error_class = NumberError

    def __post_init__(self):
        object.__setattr__(self, "forbidden", frozenset(self.forbidden))

    def _parse_number(self, raw: float | int | str) -> float:
        if isinstance(raw, bool):
            raise self._fail(NumberErrorKind.PARSE_ERROR, TypeError("booleans are not numbers"))
        if isinstance(raw, (int, float)):
            try:
                return float(raw)
            except OverflowError as e:
                raise self._fail(NumberErrorKind.PARSE_ERROR, e) from e
        if not isinstance(raw, str) or raw != raw.strip() or "_" in raw:
            cause = ValueError(f"invalid float literal {raw!r}")
            raise self._fail(NumberErrorKind.PARSE_ERROR, cause) from cause
        try:
            return float(raw)
        except ValueError as e:
            raise self._fail(NumberErrorKind.PARSE_ERROR, e) from e

    def _analyze(self, raw: float | int | str) -> float:
        value = self._parse_number(raw)

        is_nan = math.isnan(value)
        if self.nan.disallow() and is_nan:
            raise self._fail(NumberErrorKind.NAN_DISALLOW)
        if self.nan.must() and not is_nan:
            raise self._fail(NumberErrorKind.NAN_MUST)
        if is_nan:
            return value

        violation = self.range.check(value)
        if violation is not None:
            raise self._fail(_range_kind(violation, NumberErrorKind))

        if value in self.forbidden:
            raise self._fail(NumberErrorKind.FORBIDDEN)

        return value

    def _build(self, facts: float) -> float:
        return facts


__all__ = [
    "NumberValidator",
    "SignedIntegerValidator",
    "UnsignedIntegerValidator",
]
