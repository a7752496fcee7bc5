# src/strtools/escape/charset.py
"""
charset.

Does: Prefix every char of a charset, and every escape char, with the escape
      char. Escaping the escape too keeps `\\'` from turning back into an
      unescaped `'` for consumers that read `\\\\` as `\\`.
Returns: escape_charset() -> escaped str.
Used by: Quoting user input for sinks that read backslash escapes, demo CLI.
"""

from __future__ import annotations

from collections.abc import Iterable

from strtools.util.sorted import Sorted
from strtools.util.text import TextLike, ensure_char, ensure_text

__all__ = ["escape_charset"]


def escape_charset(
    input: TextLike,
    escape_char: str,
    charset: Sorted[str] | str | Iterable[str],
) -> str:
    text = ensure_text(input)
    escape = ensure_char(escape_char, "escape char")
    chars = charset if isinstance(charset, Sorted) else Sorted.new_unique(charset)
    if not any(ch == escape or ch in chars for ch in text):
        return text
    return "".join(escape + ch if ch == escape or ch in chars else ch for ch in text)
