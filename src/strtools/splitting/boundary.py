# src/strtools/splitting/boundary.py
"""
boundary.

Does: Cut text around the char at an index, returning the part before, the
      char itself and the part after. For `str` the index counts code points;
      for `bytes` it is a byte offset that must start a UTF-8 sequence.
Returns: char_boundary() -> (before, char, after).
"""

from __future__ import annotations

from strtools.errors import (
    IndexOutOfRangeError,
    InputEmptyError,
    MalformedInputError,
    NotCharBoundaryError,
)

__all__ = ["char_boundary", "is_char_boundary"]


def _is_continuation(byte: int) -> bool:
    return byte & 0b1100_0000 == 0b1000_0000


def is_char_boundary(data: bytes, index: int) -> bool:
    """True if `index` is 0, len(data), or the first byte of a UTF-8 sequence."""
    if index == 0 or index == len(data):
        return True
    if not 0 < index < len(data):
        return False
    return not _is_continuation(data[index])


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    if lead >> 3 == 0b11110:
        return 4
    raise MalformedInputError(f"invalid UTF-8 lead byte {lead:#04x}")


def char_boundary(
    input: str | bytes, index: int
) -> tuple[str, str, str] | tuple[bytes, str, bytes]:
    if len(input) == 0:
        raise InputEmptyError()
    if not 0 <= index < len(input):
        raise IndexOutOfRangeError(index, len(input))

    if isinstance(input, str):
        return input[:index], input[index], input[index + 1 :]

    data = bytes(input)
    if not is_char_boundary(data, index):
        raise NotCharBoundaryError(index)
    end = index + _sequence_length(data[index])
    try:
        char = data[index:end].decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInputError(f"invalid UTF-8 sequence at byte {index}") from e
    return data[:index], char, data[end:]
