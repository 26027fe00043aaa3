"""Validator base class.

A validator is an immutable policy configuration plus a parse algorithm.
``parse`` and ``validate`` run exactly the same checks; ``parse`` additionally
builds the normalized value from what the checks established.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from policy_validators.core.errors import ValidatorError
from policy_validators.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Validator(ABC, Generic[T]):
    """Abstract base class for format validators."""

    error_class: type[ValidatorError] = ValidatorError

    @abstractmethod
    def _analyze(self, raw: Any) -> Any:
        """Run every check on ``raw`` and return the established facts."""

    @abstractmethod
    def _build(self, facts: Any) -> T:
        """Materialize the normalized value from ``_analyze`` output."""

    def _run(self, raw: Any) -> Any:
        try:
            return self._analyze(raw)
        except ValidatorError as e:
            logger.debug(
                "validator rejected input",
                validator=self.__class__.__name__,
                kind=e.kind.name,
            )
            raise

    def parse(self, raw: Any) -> T:
        """Validate ``raw`` and return its normalized value."""
        return self._build(self._run(raw))

    def validate(self, raw: Any) -> None:
        """Validate ``raw`` without building the normalized value."""
        self._run(raw)

    def is_valid(self, raw: Any) -> bool:
        """Check if value is valid without raising exceptions."""
        try:
            self._run(raw)
            return True
        except ValidatorError:
            return False

    def _fail(self, kind: Any, cause: Exception | None = None) -> ValidatorError:
        return self.error_class(kind, cause)


__all__ = ["Validator"]
