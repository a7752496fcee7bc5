"""
strtools
========

Does: Root package for text extension operations: escape-aware splitting,
      partial numeral parsing, longest-unique-substring search and charset
      escaping.
Returns: Re-exports the public API of the `splitting`, `parse`, `find` and
         `escape` subpackages plus the error taxonomy.
Used by: All imports starting from `strtools`.
"""

from __future__ import annotations

from .errors import (
    CharBoundaryError,
    ConfigurationError,
    EmptyDelimiterSetError,
    EscapeIsDelimiterError,
    InvalidRadixError,
    MalformedInputError,
    NoMatchError,
    NotSortedError,
    ParseOverflowError,
    ParseUnderflowError,
    PartialParseError,
    StrToolsError,
    UnknownDialectError,
    UnknownKindError,
)
from .escape import escape_charset
from .find import longest_unique_range, longest_unique_substring
from .parse import (
    KINDS,
    NumeralKind,
    PartialParse,
    TextCursor,
    parse_bool_back,
    parse_bool_front,
    parse_numeral_back,
    parse_numeral_front,
)
from .splitting import (
    DelimiterSet,
    SplitDialect,
    char_boundary,
    get_dialect,
    split,
    split_n,
    split_points,
    split_sanitized,
    split_with_dialect,
)
from .util.sorted import Sorted

__version__ = "0.3.0"

__all__ = [
    # splitting
    "split",
    "split_sanitized",
    "split_n",
    "split_points",
    "DelimiterSet",
    "char_boundary",
    "SplitDialect",
    "get_dialect",
    "split_with_dialect",
    # parsing
    "parse_numeral_front",
    "parse_numeral_back",
    "parse_bool_front",
    "parse_bool_back",
    "PartialParse",
    "NumeralKind",
    "KINDS",
    "TextCursor",
    # search / escaping
    "longest_unique_range",
    "longest_unique_substring",
    "escape_charset",
    "Sorted",
    # errors
    "StrToolsError",
    "ConfigurationError",
    "EscapeIsDelimiterError",
    "EmptyDelimiterSetError",
    "InvalidRadixError",
    "UnknownKindError",
    "UnknownDialectError",
    "MalformedInputError",
    "NotSortedError",
    "CharBoundaryError",
    "PartialParseError",
    "NoMatchError",
    "ParseOverflowError",
    "ParseUnderflowError",
]
__docformat__ = "google"
