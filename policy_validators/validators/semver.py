"""Semantic version and version requirement validators.

Grammar is delegated to ``semantic_version``; its errors are wrapped as
``PARSE_ERROR`` without reinterpretation.
"""

from dataclasses import dataclass

import semantic_version

from policy_validators.core.errors import SemverError, SemverErrorKind, SemverReqError

from .base import Validator


@dataclass(frozen=True)
class SemverValidator(Validator[semantic_version.Version]):
    """Validates ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]`` versions."""

    error_class = SemverError

    def _analyze(self, raw: str) -> semantic_version.Version:
        if not isinstance(raw, str):
            raise self._fail(SemverErrorKind.PARSE_ERROR)
        try:
            return semantic_version.Version(raw)
        except ValueError as e:
            raise self._fail(SemverErrorKind.PARSE_ERROR, e) from e

    def _build(self, facts: semantic_version.Version) -> semantic_version.Version:
        return facts


@dataclass(frozen=True)
class SemverReqValidator(Validator[semantic_version.SimpleSpec]):
    """Validates version requirements such as ``>=1.2.3,<2.0.0`` or ``^1.4``."""

    error_class = SemverReqError

    def _analyze(self, raw: str) -> semantic_version.SimpleSpec:
        if not isinstance(raw, str):
            raise self._fail(SemverErrorKind.PARSE_ERROR)
        try:
            return semantic_version.SimpleSpec(raw)
        except ValueError as e:
            raise self._fail(SemverErrorKind.PARSE_ERROR, e) from e

    def _build(self, facts: semantic_version.SimpleSpec) -> semantic_version.SimpleSpec:
        return facts


__all__ = ["SemverReqValidator", "SemverValidator"]
