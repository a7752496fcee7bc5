# src/strtools/find/__init__.py
"""
find
====

Does: Expose substring search helpers.
Exports: longest_unique_range, longest_unique_substring
"""

from .substr import longest_unique_range, longest_unique_substring

__all__ = ["longest_unique_range", "longest_unique_substring"]
