# src/strtools/util/text.py
"""
text.

Does: Normalize public inputs to `str`, decoding bytes as strict UTF-8 and
      rejecting text that cannot be represented as UTF-8 (lone surrogates).
Returns: ensure_text(), ensure_char().
Used by: Every public entry point before any scanning starts.
"""

from __future__ import annotations

from strtools.errors import ConfigurationError, MalformedInputError

__all__ = ["ensure_text", "ensure_char"]

TextLike = str | bytes | bytearray | memoryview


def ensure_text(value: TextLike) -> str:
    """Return `value` as str; raise MalformedInputError if it is not valid UTF-8."""
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise MalformedInputError(f"text is not valid UTF-8: {e.reason} at {e.start}") from e
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"input is not valid UTF-8: {e.reason} at byte {e.start}") from e
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def ensure_char(value: str, what: str = "char") -> str:
    """Return `value` if it is exactly one valid character."""
    if not isinstance(value, str) or len(value) != 1:
        raise ConfigurationError(f"{what} must be a single character, got {value!r}")
    return ensure_text(value)
