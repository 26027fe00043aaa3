"""Bounded-length collection validator."""

from collections.abc import Sized
from dataclasses import dataclass

from policy_validators.core.errors import LengthError, LengthErrorKind
from policy_validators.core.options import RangeOption

from .base import Validator


@dataclass(frozen=True)
class LengthValidator(Validator[Sized]):
    """Applies a range policy to the element count of a collection."""

    range: RangeOption = RangeOption.unlimited()

    error_class = LengthError

    def _analyze(self, raw: Sized) -> Sized:
        if not isinstance(raw, Sized):
            raise self._fail(LengthErrorKind.INVALID)

        violation = self.range.check(len(raw))
        if violation is not None:
            raise self._fail(LengthErrorKind[violation.name])
        return raw

    def _build(self, facts: Sized) -> Sized:
        return facts


__all__ = ["LengthValidator"]
