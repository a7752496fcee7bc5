# src/strtools/parse/__init__.py
"""
parse
=====

Does: Expose partial parsing: numerals from the front/back of a text under a
      radix, bool and literal prefixes/suffixes, and the consuming TextCursor.
Exports: parse_numeral_front, parse_numeral_back, PartialParse, NumeralKind,
         KINDS, resolve_kind, parse_bool_front/back, strip_literal_front/back,
         TextCursor
"""

from .kinds import (
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    I128,
    KINDS,
    U8,
    U16,
    U32,
    U64,
    U128,
    NumeralKind,
    resolve_kind,
)
from .literal import (
    TextCursor,
    parse_bool_back,
    parse_bool_front,
    strip_literal_back,
    strip_literal_front,
)
from .num import PartialParse, parse_numeral_back, parse_numeral_front

__all__ = [
    "parse_numeral_front",
    "parse_numeral_back",
    "PartialParse",
    "NumeralKind",
    "KINDS",
    "resolve_kind",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "F32",
    "F64",
    "parse_bool_front",
    "parse_bool_back",
    "strip_literal_front",
    "strip_literal_back",
    "TextCursor",
]
