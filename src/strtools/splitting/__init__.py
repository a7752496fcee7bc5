# src/strtools/splitting/__init__.py
"""
splitting
=========

Does: Expose escape-aware splitting, delimiter sets, char boundary cutting and
      named split dialects.
Exports: split, split_sanitized, split_n, split_points, DelimiterSet,
         char_boundary, SplitDialect, get_dialect, load_dialects, split_with_dialect
"""

from .boundary import char_boundary, is_char_boundary
from .delimiters import DelimiterSet
from .dialects import SplitDialect, get_dialect, load_dialects, split_with_dialect
from .non_escaped import split, split_n, split_points, split_sanitized

__all__ = [
    "split",
    "split_sanitized",
    "split_n",
    "split_points",
    "DelimiterSet",
    "char_boundary",
    "is_char_boundary",
    "SplitDialect",
    "get_dialect",
    "load_dialects",
    "split_with_dialect",
]
