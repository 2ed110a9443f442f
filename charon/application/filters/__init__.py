"""Path Filters"""
from .path_filters import (
    AllOfPathFilter,
    AlwaysProcessPathFilter,
    BucketDenyListPathFilter,
    PrefixPathFilter,
    RegexPathFilter,
    SuffixPathFilter,
)

__all__ = [
    "AllOfPathFilter",
    "AlwaysProcessPathFilter",
    "BucketDenyListPathFilter",
    "PrefixPathFilter",
    "RegexPathFilter",
    "SuffixPathFilter",
]
