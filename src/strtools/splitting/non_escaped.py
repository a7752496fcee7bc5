# src/strtools/splitting/non_escaped.py
"""
non_escaped.

Does: Split text on a set of delimiter chars unless a delimiter is directly
      preceded by the escape char. One pass, one char of look-back, driven by
      a two-state machine (NORMAL / SAW_ESCAPE).
Returns: Lazy, single-use generators of segments (raw or sanitized), plus the
         positions of the splitting delimiters.
Used by: Public `strtools.split*` API, split dialects, demo CLI.

Escape policy:
- `E d` (escape directly before a delimiter) is an escape sequence: raw mode
  keeps both chars, sanitized mode drops `E`; neither splits.
- `E` before anything else is a literal char, so `E E d` reads as a literal `E`
  followed by an escaped `d`, and a trailing `E` is literal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum, auto

from strtools.errors import ConfigurationError, EscapeIsDelimiterError
from strtools.splitting.delimiters import DelimiterSet, as_delimiter_set
from strtools.util.log import debug, enabled
from strtools.util.text import TextLike, ensure_char, ensure_text

__all__ = [
    "split",
    "split_sanitized",
    "split_n",
    "split_points",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

Delimiters = DelimiterSet | str | Iterable[str]


class _State(Enum):
    NORMAL = auto()
    SAW_ESCAPE = auto()


class _Event(Enum):
    SPLIT = auto()  # index of a splitting delimiter
    ESCAPED = auto()  # index of an escape char that escapes a delimiter


# ─────────────────────────────────────────────────────────────────────────────
# Scanner
# ─────────────────────────────────────────────────────────────────────────────


def _events(
    text: str,
    escape: str,
    delimiters: DelimiterSet,
    max_splits: int | None,
) -> Iterator[tuple[_Event, int]]:
    state = _State.NORMAL
    splits = 0
    if max_splits == 0:
        return
    for i, ch in enumerate(text):
        if state is _State.SAW_ESCAPE:
            state = _State.NORMAL
            if ch in delimiters:
                yield _Event.ESCAPED, i - 1
                continue
            # the held escape was literal, `ch` is handled as usual
        if ch == escape:
            state = _State.SAW_ESCAPE
        elif ch in delimiters:
            yield _Event.SPLIT, i
            splits += 1
            if max_splits is not None and splits >= max_splits:
                return


def _segments(
    text: str,
    escape: str,
    delimiters: DelimiterSet,
    *,
    sanitize: bool,
    max_splits: int | None = None,
) -> Iterator[str]:
    trace = enabled("split")
    pieces: list[str] = []
    start = 0
    count = 0
    for event, i in _events(text, escape, delimiters, max_splits):
        if event is _Event.ESCAPED:
            if sanitize:
                pieces.append(text[start:i])
                start = i + 1
            continue
        pieces.append(text[start:i])
        segment = "".join(pieces)
        pieces = []
        start = i + 1
        count += 1
        if trace:
            debug(f"segment {count}: {segment!r} (cut at {i})", topic="split")
        yield segment
    # remainder: everything after the last split, verbatim once the limit is hit
    pieces.append(text[start:])
    segment = "".join(pieces)
    if trace:
        debug(f"segment {count + 1}: {segment!r} (tail)", topic="split")
    yield segment


def _prepare(
    input: TextLike,
    escape_char: str,
    delimiters: Delimiters,
) -> tuple[str, str, DelimiterSet]:
    """Validate configuration and input before any scanning starts."""
    escape = ensure_char(escape_char, "escape char")
    delims = as_delimiter_set(delimiters)
    if delims.contains_escape(escape):
        raise EscapeIsDelimiterError(escape)
    text = ensure_text(input)
    log.debug("split setup: escape=%r delimiters=%r len=%d", escape, delims, len(text))
    return text, escape, delims


def _check_max_splits(max_splits: int) -> None:
    if isinstance(max_splits, bool) or not isinstance(max_splits, int) or max_splits < 0:
        raise ConfigurationError(f"max_splits must be a non-negative int, got {max_splits!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────


def split(input: TextLike, escape_char: str, delimiters: Delimiters) -> Iterator[str]:
    """
    Does: Split `input` on unescaped delimiters, keeping escape sequences verbatim.
    Returns: Generator of segments; joining them with the delimiters that were
             cut reproduces `input`.
    Raises: ConfigurationError subclasses and MalformedInputError immediately,
            not on first iteration.
    """
    text, escape, delims = _prepare(input, escape_char, delimiters)
    return _segments(text, escape, delims, sanitize=False)


def split_sanitized(input: TextLike, escape_char: str, delimiters: Delimiters) -> Iterator[str]:
    """
    Does: Split like `split` but drop the escape char of every escape sequence.
    Returns: Generator of segments.
    """
    text, escape, delims = _prepare(input, escape_char, delimiters)
    return _segments(text, escape, delims, sanitize=True)


def split_n(
    input: TextLike,
    escape_char: str,
    delimiters: Delimiters,
    max_splits: int,
) -> Iterator[str]:
    """
    Does: Raw split that stops after `max_splits` cuts; the rest of the input,
          delimiters included, becomes the last segment.
    Returns: Generator of at most `max_splits + 1` segments.
    """
    _check_max_splits(max_splits)
    text, escape, delims = _prepare(input, escape_char, delimiters)
    return _segments(text, escape, delims, sanitize=False, max_splits=max_splits)


def split_points(
    input: TextLike,
    escape_char: str,
    delimiters: Delimiters,
    max_splits: int | None = None,
) -> Iterator[int]:
    """
    Does: Yield the indices of the delimiters a raw split would cut at; the
          sequential pre-pass needed before chunking input for parallel work.
    """
    if max_splits is not None:
        _check_max_splits(max_splits)
    text, escape, delims = _prepare(input, escape_char, delimiters)
    return (i for event, i in _events(text, escape, delims, max_splits) if event is _Event.SPLIT)
