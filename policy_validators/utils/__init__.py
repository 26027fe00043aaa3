"""Utility functions shared across validators.

Modules:
- classifiers: Locality and label classifiers over addresses and domain strings
"""

from policy_validators.utils.classifiers import (
    is_at_least_two_labels_domain,
    is_local_domain,
    is_local_ip,
    is_local_ipv4,
    is_local_ipv6,
    parse_ipv4_allow_an_ended_dot,
)

__all__ = [
    "is_at_least_two_labels_domain",
    "is_local_domain",
    "is_local_ip",
    "is_local_ipv4",
    "is_local_ipv6",
    "parse_ipv4_allow_an_ended_dot",
]
