"""Boolean validator accepting booleans, 0/1 and common boolean words."""

from dataclasses import dataclass

from policy_validators.core.errors import BooleanError, BooleanErrorKind

from .base import Validator

TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_WORDS = frozenset({"false", "f", "no", "n", "off", "0"})


@dataclass(frozen=True)
class BooleanValidator(Validator[bool]):
    error_class = BooleanError

    def _analyze(self, raw: bool | int | str) -> bool:
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, int):
            if raw in (0, 1):
                return raw == 1
            raise self._fail(BooleanErrorKind.INVALID)
        if isinstance(raw, str):
            word = raw.lower()
            if word in TRUE_WORDS:
                return True
            if word in FALSE_WORDS:
                return False
        raise self._fail(BooleanErrorKind.INVALID)

    def _build(self, facts: bool) -> bool:
        return facts


__all__ = ["BooleanValidator"]
