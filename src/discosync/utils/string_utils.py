"""
String utility functions for normalization and comparison.
"""

import re
from typing import Optional

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]")

# Markers catalogs append to collection names, e.g. "Title - Single"
_CATALOG_SUFFIXES = (
    re.compile(r"single$"),
    re.compile(r"ep$"),
    re.compile(r"-$"),
)


def normalize(s: Optional[str]) -> str:
    """
    Canonicalize text for comparison.
    
    Lowercases the input and drops every character that is not an ASCII
    letter or digit. Idempotent; None normalizes to an empty string.
    """
    if not s:
        return ""
    return _NON_ALPHANUMERIC.sub("", s.lower())


def strip_catalog_suffix(normalized: str) -> str:
    """Remove trailing "single", "ep" and separator markers from a normalized title."""
    for pattern in _CATALOG_SUFFIXES:
        normalized = pattern.sub("", normalized, count=1)
    return normalized
