# src/strtools/escape/__init__.py
"""
escape
======

Does: Expose escaping helpers.
Exports: escape_charset
"""

from .charset import escape_charset

__all__ = ["escape_charset"]
