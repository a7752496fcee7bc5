# src/strtools/find/substr.py
"""
substr.

Does: Find the longest run of chars in which no char repeats, in one pass with
      a sliding window and a last-seen index per char.
Returns: longest_unique_range() -> range of char indices,
         longest_unique_substring() -> the substring itself.
Used by: Public `strtools.longest_unique_substring`, demo CLI.
"""

from __future__ import annotations

from strtools.errors import ConfigurationError
from strtools.util.text import TextLike, ensure_text

__all__ = ["longest_unique_range", "longest_unique_substring"]


def longest_unique_range(input: TextLike, max_len: int | None = None) -> range:
    """
    Does: Slide a window over `input`; when a char repeats inside the window the
          left edge jumps past its previous occurrence. The first longest
          window wins ties. With `max_len`, the first window reaching that
          length is returned right away.
    Returns: range(start, end) over char indices (empty range for empty input).
    """
    if max_len is not None and (isinstance(max_len, bool) or not isinstance(max_len, int) or max_len < 1):
        raise ConfigurationError(f"max_len must be a positive int, got {max_len!r}")
    text = ensure_text(input)

    last_seen: dict[str, int] = {}
    left = 0
    best = range(0, 0)
    for right, ch in enumerate(text):
        prev = last_seen.get(ch)
        if prev is not None and prev >= left:
            left = prev + 1
        last_seen[ch] = right
        if right + 1 - left > len(best):
            best = range(left, right + 1)
            if max_len is not None and len(best) == max_len:
                return best
    return best


def longest_unique_substring(input: TextLike, max_len: int | None = None) -> str:
    text = ensure_text(input)
    window = longest_unique_range(text, max_len)
    return text[window.start : window.stop]
