# src/strtools/errors.py
"""
errors.

Does: Define the exception taxonomy shared by splitting, parsing, searching and
      escaping: configuration errors (raised before any input is scanned),
      malformed input, no-match and overflow results of partial parsing.
Returns: Exception classes only.
Used by: Every public operation in the package and the demo CLI.
"""

from __future__ import annotations

__all__ = [
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
    "InputEmptyError",
    "IndexOutOfRangeError",
    "NotCharBoundaryError",
    "PartialParseError",
    "NoMatchError",
    "ParseOverflowError",
    "ParseUnderflowError",
]


class StrToolsError(Exception):
    """Base class for every error raised by strtools."""


# ── Configuration ────────────────────────────────────────────────────────────
class ConfigurationError(StrToolsError, ValueError):
    """Raise when an operation is called with an invalid configuration."""


class EscapeIsDelimiterError(ConfigurationError):
    """Raise when the escape char is also one of the delimiters."""

    def __init__(self, escape: str):
        super().__init__(f"a delimiter cannot be its own escape char: {escape!r}")
        self.escape = escape


class EmptyDelimiterSetError(ConfigurationError):
    """Raise when a split is requested without any delimiter."""

    def __init__(self) -> None:
        super().__init__("the delimiter set must contain at least one char")


class InvalidRadixError(ConfigurationError):
    def __init__(self, radix: object):
        super().__init__(f"radix must be in [2, 36], found {radix!r}")
        self.radix = radix


def _with_suggestion(message: str, suggestion: str | None) -> str:
    return f"{message}, did you mean {suggestion!r}?" if suggestion else message


class UnknownKindError(ConfigurationError):
    """Raise when a numeral kind name is not registered."""

    def __init__(self, name: str, suggestion: str | None = None):
        super().__init__(_with_suggestion(f"unknown numeral kind {name!r}", suggestion))
        self.name = name
        self.suggestion = suggestion


class UnknownDialectError(ConfigurationError):
    """Raise when a split dialect name is not configured."""

    def __init__(self, name: str, suggestion: str | None = None):
        super().__init__(_with_suggestion(f"unknown split dialect {name!r}", suggestion))
        self.name = name
        self.suggestion = suggestion


# ── Input ────────────────────────────────────────────────────────────────────
class MalformedInputError(StrToolsError, ValueError):
    """Raise when the input is not valid UTF-8 text."""


class NotSortedError(StrToolsError, ValueError):
    """Raise when a sequence handed to ``Sorted.new`` is not in ascending order."""


# ── Char boundaries ──────────────────────────────────────────────────────────
class CharBoundaryError(StrToolsError, ValueError):
    """Base class for failed char boundary cuts."""


class InputEmptyError(CharBoundaryError):
    def __init__(self) -> None:
        super().__init__("the input must contain at least one char, but was empty")


class IndexOutOfRangeError(CharBoundaryError):
    def __init__(self, index: int, length: int):
        super().__init__(f"the index is {index}, but the length is {length}")
        self.index = index
        self.length = length


class NotCharBoundaryError(CharBoundaryError):
    def __init__(self, index: int):
        super().__init__(f"the index ({index}) was not on a UTF-8 sequence boundary")
        self.index = index


# ── Partial parsing ──────────────────────────────────────────────────────────
class PartialParseError(StrToolsError, ValueError):
    """Base class for failed partial parses."""


class NoMatchError(PartialParseError):
    """Raise when no valid representation starts at the scan origin."""


class ParseOverflowError(PartialParseError, OverflowError):
    """Raise when a valid numeral does not fit into the target kind."""


class ParseUnderflowError(ParseOverflowError):
    """Raise when a valid numeral is below the target kind's minimum."""
