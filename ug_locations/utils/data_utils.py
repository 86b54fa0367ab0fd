"""
Data utility functions for name normalization and composite keys.

Every lookup table is keyed by upper-cased names, and the sibling tables use
composite keys that join hierarchy levels with a literal ``||``.
"""

import pandas as pd
from typing import Any, List, Optional


KEY_SEPARATOR = "||"


def safe_string_conversion(value: Any) -> str:
    """
    Safely convert a value to string, handling nulls and cleaning whitespace.

    Args:
        value: Value to convert to string

    Returns:
        Cleaned string value or empty string if null
    """
    if value is None or (not isinstance(value, (list, dict, tuple)) and pd.isna(value)):
        return ""

    return str(value).strip()


def normalize_name(value: Optional[str]) -> str:
    """
    Normalize a location name for table lookups.

    Only the case is changed; inner whitespace is kept as-is because the
    dataset keys are stored exactly as produced upstream.

    Args:
        value: Name as typed by a caller

    Returns:
        Upper-cased name, or empty string for None
    """
    if value is None:
        return ""
    return str(value).upper()


def normalize_query(value: Optional[str]) -> str:
    """Upper-case and trim a free-text search query."""
    return normalize_name(value).strip()


def is_null_or_empty(value: Any) -> bool:
    """
    Check if a value is null, empty, or contains only whitespace.

    Args:
        value: Value to check

    Returns:
        True if value is null/empty, False otherwise
    """
    if value is None:
        return True

    if isinstance(value, str):
        return not value.strip()

    return bool(pd.isna(value)) if not isinstance(value, (list, dict, tuple)) else False


def build_composite_key(*levels: str) -> str:
    """
    Join hierarchy level names into a composite lookup key.

    Each level is normalized first. Names that themselves contain the
    separator produce ambiguous keys; see ``contains_separator``.

    Example:
        build_composite_key('Kampala', 'Central') -> 'KAMPALA||CENTRAL'
    """
    return KEY_SEPARATOR.join(normalize_name(level) for level in levels)


def split_composite_key(key: str) -> List[str]:
    """Split a composite key back into its level names."""
    return key.split(KEY_SEPARATOR)


def contains_separator(name: Optional[str]) -> bool:
    """Check whether a name would make its composite key ambiguous."""
    return bool(name) and KEY_SEPARATOR in name
