"""Parameterized policy options: separators and numeric ranges."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from policy_validators.core.enums import TriAllow


@dataclass(frozen=True)
class SeparatorOption:
    """
    Separator policy carrying the accepted separator character.

    Behaves like ``TriAllow`` for presence and additionally records which
    character is the separator (``":"`` or ``"-"`` for MAC addresses, ``"-"``
    for UUIDs). A ``DISALLOW`` option carries no separator.
    """

    policy: TriAllow
    separator: str | None = None

    def __post_init__(self):
        if self.policy.disallow():
            if self.separator is not None:
                raise ValueError("A disallowing separator option carries no separator")
        elif self.separator is None or len(self.separator) != 1:
            raise ValueError("Separator must be a single character")

    @classmethod
    def must(cls, separator: str) -> "SeparatorOption":
        return cls(TriAllow.MUST, separator)

    @classmethod
    def allow(cls, separator: str) -> "SeparatorOption":
        return cls(TriAllow.ALLOW, separator)

    @classmethod
    def disallow(cls) -> "SeparatorOption":
        return cls(TriAllow.DISALLOW)

    @classmethod
    def from_string(cls, value: str) -> "SeparatorOption":
        """Parse ``disallow``, ``must(:)`` or ``allow(-)`` style strings."""
        text = value.strip()
        if "(" not in text:
            policy = TriAllow.from_string(text)
            if not policy.disallow():
                raise ValueError(f"Separator option needs a separator: {value}")
            return cls.disallow()

        name, _, rest = text.partition("(")
        if not rest.endswith(")"):
            raise ValueError(f"Invalid separator option: {value}")
        return cls(TriAllow.from_string(name), rest[:-1])

    def allows(self) -> bool:
        """Whether a separator may be present."""
        return self.policy.allow()

    def requires(self) -> bool:
        """Whether a separator is required."""
        return self.policy.must()

    def forbids(self) -> bool:
        """Whether separators must be absent."""
        return self.policy.disallow()


class RangeKind(Enum):
    """Shape of a numeric range policy."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    UNLIMITED = "unlimited"


class RangeViolation(Enum):
    """Which range boundary rejected a value."""

    TOO_SMALL = "too_small"
    TOO_LARGE = "too_large"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class RangeOption:
    """
    Numeric range policy.

    ``INSIDE`` accepts values in ``[min, max]`` (``[min, max)`` when
    ``inclusive`` is false); ``OUTSIDE`` rejects exactly those values and
    accepts everything when both bounds are ``None``;
    ``UNLIMITED`` accepts everything. Either bound may be ``None``. The lower
    bound is always inclusive.
    """

    kind: RangeKind = RangeKind.UNLIMITED
    min: Any = None
    max: Any = None
    inclusive: bool = True

    def __post_init__(self):
        if self.kind == RangeKind.UNLIMITED and (
            self.min is not None or self.max is not None
        ):
            raise ValueError("An unlimited range has no bounds")
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"Range minimum {self.min} exceeds maximum {self.max}")

    @classmethod
    def inside(cls, min: Any = None, max: Any = None, inclusive: bool = True) -> "RangeOption":
        return cls(RangeKind.INSIDE, min, max, inclusive)

    @classmethod
    def outside(cls, min: Any = None, max: Any = None, inclusive: bool = True) -> "RangeOption":
        return cls(RangeKind.OUTSIDE, min, max, inclusive)

    @classmethod
    def unlimited(cls) -> "RangeOption":
        return cls()

    def _within(self, value: Any) -> RangeViolation | None:
        if self.min is not None and value < self.min:
            return RangeViolation.TOO_SMALL
        if self.max is not None:
            if self.inclusive and value > self.max:
                return RangeViolation.TOO_LARGE
            if not self.inclusive and value >= self.max:
                return RangeViolation.TOO_LARGE
        return None

    def check(self, value: Any) -> RangeViolation | None:
        """Return the violated boundary for ``value``, or ``None`` if accepted."""
        if self.kind == RangeKind.UNLIMITED:
            return None
        if self.kind == RangeKind.OUTSIDE and self.min is None and self.max is None:
            return None
        violation = self._within(value)
        if self.kind == RangeKind.INSIDE:
            return violation
        return RangeViolation.FORBIDDEN if violation is None else None

    def accepts(self, value: Any) -> bool:
        """Whether ``value`` satisfies this range."""
        return self.check(value) is None

    def __str__(self) -> str:
        if self.kind == RangeKind.UNLIMITED:
            return "unlimited"
        lower = "" if self.min is None else str(self.min)
        upper = "" if self.max is None else str(self.max)
        operator = "..=" if self.inclusive and self.max is not None else ".."
        return f"{self.kind.value} {lower}{operator}{upper}"


__all__ = [
    "RangeKind",
    "RangeOption",
    "RangeViolation",
    "SeparatorOption",
]
