"""Normalized value objects.

Value Objects:
- ValueObject: Serialization base for frozen dataclass values
- Host: Domain, IPv4 or IPv6 host produced by host-like validators
"""

from .base import ValueObject
from .host import Host, HostKind

__all__ = [
    "Host",
    "HostKind",
    "ValueObject",
]
