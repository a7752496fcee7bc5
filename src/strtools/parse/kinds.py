# src/strtools/parse/kinds.py
"""
kinds.

Does: Describe the bounded numeric targets of partial parsing: signed and
      unsigned integers of 8..128 bits and IEEE-754 single/double floats.
Returns: NumeralKind, the predefined kinds (I8..U128, F32, F64), KINDS registry
         and resolve_kind() for name lookups.
Used by: parse/num.py, parse/literal.py (TextCursor), demo CLI.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass

from strtools.errors import UnknownKindError
from strtools.util.suggest import suggest

__all__ = [
    "NumeralKind",
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
    "KINDS",
    "resolve_kind",
]

F32_MAX = 3.4028234663852886e38


@dataclass(frozen=True)
class NumeralKind:
    name: str
    signed: bool
    bits: int
    is_float: bool = False

    @property
    def min_value(self) -> int | float:
        if self.is_float:
            return -self.max_value
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int | float:
        if self.is_float:
            return F32_MAX if self.bits == 32 else sys.float_info.max
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def allows_minus(self) -> bool:
        return self.signed or self.is_float

    def __str__(self) -> str:
        return self.name


I8 = NumeralKind("i8", signed=True, bits=8)
I16 = NumeralKind("i16", signed=True, bits=16)
I32 = NumeralKind("i32", signed=True, bits=32)
I64 = NumeralKind("i64", signed=True, bits=64)
I128 = NumeralKind("i128", signed=True, bits=128)
U8 = NumeralKind("u8", signed=False, bits=8)
U16 = NumeralKind("u16", signed=False, bits=16)
U32 = NumeralKind("u32", signed=False, bits=32)
U64 = NumeralKind("u64", signed=False, bits=64)
U128 = NumeralKind("u128", signed=False, bits=128)
F32 = NumeralKind("f32", signed=True, bits=32, is_float=True)
F64 = NumeralKind("f64", signed=True, bits=64, is_float=True)

KINDS: dict[str, NumeralKind] = {
    k.name: k for k in (I8, I16, I32, I64, I128, U8, U16, U32, U64, U128, F32, F64)
}


def resolve_kind(kind: NumeralKind | str) -> NumeralKind:
    """Return `kind` itself or the registered kind with that (case-insensitive) name."""
    if isinstance(kind, NumeralKind):
        return kind
    key = str(kind).lower().strip()
    try:
        return KINDS[key]
    except KeyError:
        raise UnknownKindError(str(kind), suggest(key, KINDS)) from None
