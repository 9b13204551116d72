"""
Label normalization for catalog lookups.
"""

import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")


def normalize(value: Any) -> str:
    """
    Canonical form of a thickness label for equality comparison.

    Stringifies the value, strips it, lowercases it and collapses internal
    whitespace runs to a single space, so " 8'' " and "8''" compare equal.
    Only used for matching, never for display or sorting.
    """
    return _WHITESPACE.sub(" ", str(value).strip().lower())
