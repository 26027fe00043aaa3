"""JSON text validator using the standard library codec."""

import json
from dataclasses import dataclass
from typing import Any

from policy_validators.core.errors import ConfigurationError, JsonError, JsonErrorKind

from .base import Validator

_EXPECTED_TYPES = {
    "any": object,
    "object": dict,
    "array": list,
}


@dataclass(frozen=True)
class JsonValidator(Validator[Any]):
    """
    Validates JSON text.

    Policies:
        expect: ``"any"``, ``"object"`` or ``"array"``
    """

    expect: str = "any"

    error_class = JsonError

    def __post_init__(self):
        if self.expect not in _EXPECTED_TYPES:
            raise ConfigurationError(f"Unknown JSON type expectation: {self.expect!r}")

    def _analyze(self, raw: str | bytes) -> Any:
        try:
            value = json.loads(raw)
        except (TypeError, ValueError) as e:
            # JSONDecodeError and UnicodeDecodeError are ValueErrors
            raise self._fail(JsonErrorKind.PARSE_ERROR, e) from e

        if not isinstance(value, _EXPECTED_TYPES[self.expect]):
            raise self._fail(JsonErrorKind.TYPE_MISMATCH)
        return value

    def _build(self, facts: Any) -> Any:
        return facts


__all__ = ["JsonValidator"]
