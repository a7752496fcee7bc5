# src/strtools/splitting/delimiters.py
"""
delimiters.

Does: Build the de-duplicated, sorted delimiter set used by the splitters;
      validation happens once here, never per scanned char.
Returns: DelimiterSet, as_delimiter_set().
Used by: splitting/non_escaped.py, splitting/dialects.py.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from strtools.errors import ConfigurationError, EmptyDelimiterSetError
from strtools.util.sorted import Sorted
from strtools.util.text import ensure_char

__all__ = ["DelimiterSet", "as_delimiter_set"]


class DelimiterSet:
    """Immutable set of single-char delimiters kept sorted for bisect lookups."""

    __slots__ = ("_chars",)

    def __init__(self, chars: str | Iterable[str]):
        items = list(chars)
        if not items:
            raise EmptyDelimiterSetError()
        for c in items:
            ensure_char(c, "delimiter")
        self._chars: Sorted[str] = Sorted.new_unique(items)

    def __contains__(self, char: object) -> bool:
        return char in self._chars

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DelimiterSet):
            return self._chars == other._chars
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"DelimiterSet({''.join(self._chars)!r})"

    def contains_escape(self, escape: str) -> bool:
        return escape in self._chars

    def as_string(self) -> str:
        return "".join(self._chars)


def as_delimiter_set(delimiters: DelimiterSet | str | Iterable[str]) -> DelimiterSet:
    if isinstance(delimiters, DelimiterSet):
        return delimiters
    if delimiters is None:
        raise ConfigurationError("delimiters must be given")
    return DelimiterSet(delimiters)
