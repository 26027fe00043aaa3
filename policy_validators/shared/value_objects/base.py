"""
Base Value Object

Provides common functionality for the normalized values produced by validators.
"""

import ipaddress
import uuid
from abc import ABC
from enum import Enum
from typing import Any


class ValueObject(ABC):
    """
    Base class for all value objects.

    Subclasses are frozen dataclasses, so equality, hashing and immutability
    come from the dataclass machinery. This base adds serialization.
    """

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = {}
        for key, value in self.__dict__.items():
            if key.startswith("_"):
                continue
            if hasattr(value, "to_dict"):
                result[key] = value.to_dict()
            elif isinstance(value, (list, tuple, set, frozenset)):
                result[key] = [
                    item.to_dict() if hasattr(item, "to_dict")
                    else self._serialize_value(item)
                    for item in value
                ]
            else:
                result[key] = self._serialize_value(value)
        return result

    def _serialize_value(self, value: Any) -> Any:
        """Serialize a single value for dictionary representation."""
        if isinstance(value, Enum):
            return value.value
        elif isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address, uuid.UUID)):
            return str(value)
        elif isinstance(value, bytes):
            return value.hex()
        return value
