"""
Utility functions and helpers.
"""

from .data_utils import (
    KEY_SEPARATOR,
    safe_string_conversion,
    normalize_name,
    normalize_query,
    is_null_or_empty,
    build_composite_key,
    split_composite_key,
    contains_separator
)

__all__ = [
    'KEY_SEPARATOR',
    'safe_string_conversion',
    'normalize_name',
    'normalize_query',
    'is_null_or_empty',
    'build_composite_key',
    'split_composite_key',
    'contains_separator'
]
