# src/strtools/parse/literal.py
"""
literal.

Does: Partial parsing of fixed literals (`true`/`false`, arbitrary prefixes and
      suffixes) and a TextCursor that consumes parsed text from either end so
      consecutive parsers never see the same chars twice.
Returns: parse_bool_front/back(), strip_literal_front/back(), TextCursor.
Used by: Callers that parse small structured strings like "1-2+3-4" or
         "size=12;strict=true" imperatively.
"""

from __future__ import annotations

from strtools.errors import NoMatchError
from strtools.parse.kinds import NumeralKind
from strtools.parse.num import PartialParse, parse_numeral_back, parse_numeral_front
from strtools.util.text import TextLike, ensure_text

__all__ = [
    "parse_bool_front",
    "parse_bool_back",
    "strip_literal_front",
    "strip_literal_back",
    "TextCursor",
]

_BOOLS = (("true", True), ("false", False))


def parse_bool_front(input: TextLike) -> PartialParse:
    text = ensure_text(input)
    for literal, value in _BOOLS:
        if text.startswith(literal):
            return PartialParse(value, text[len(literal) :])
    raise NoMatchError("invalid input, expected 'true' or 'false' at the start")


def parse_bool_back(input: TextLike) -> PartialParse:
    text = ensure_text(input)
    for literal, value in _BOOLS:
        if text.endswith(literal):
            return PartialParse(value, text[: len(text) - len(literal)])
    raise NoMatchError("invalid input, expected 'true' or 'false' at the end")


def strip_literal_front(input: TextLike, literal: str) -> str | None:
    """Does: Return `input` without the leading `literal`, or None if it doesn't start with it."""
    text = ensure_text(input)
    return text[len(literal) :] if text.startswith(literal) else None


def strip_literal_back(input: TextLike, literal: str) -> str | None:
    text = ensure_text(input)
    if not literal:
        return text
    return text[: -len(literal)] if text.endswith(literal) else None


class TextCursor:
    """
    Does: Hold the not-yet-consumed part of a text. Every `yield_*` method
          either consumes what it parsed and returns it, or raises/returns
          False and leaves the remaining text untouched.
    """

    def __init__(self, text: TextLike):
        self.text = ensure_text(text)

    def __repr__(self) -> str:
        return f"TextCursor({self.text!r})"

    def __len__(self) -> int:
        return len(self.text)

    def __bool__(self) -> bool:
        return bool(self.text)

    def yield_numeral_front(self, radix: int, kind: NumeralKind | str) -> int | float:
        value, self.text = parse_numeral_front(self.text, radix, kind)
        return value

    def yield_numeral_back(self, radix: int, kind: NumeralKind | str) -> int | float:
        value, self.text = parse_numeral_back(self.text, radix, kind)
        return value

    def yield_bool_front(self) -> bool:
        value, self.text = parse_bool_front(self.text)
        return value

    def yield_bool_back(self) -> bool:
        value, self.text = parse_bool_back(self.text)
        return value

    def yield_literal_front(self, literal: str) -> bool:
        rest = strip_literal_front(self.text, literal)
        if rest is None:
            return False
        self.text = rest
        return True

    def yield_literal_back(self, literal: str) -> bool:
        rest = strip_literal_back(self.text, literal)
        if rest is None:
            return False
        self.text = rest
        return True
