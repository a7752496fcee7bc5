# src/strtools/parse/num.py
"""
num.

Does: Parse the longest numeral at the front or back of a text under a radix
      (2..36) into a bounded numeric kind, leaving the rest of the text alone.
      The scan is greedy: it grows a candidate while chars could still extend
      a numeral, then backs off one char at a time until a candidate parses.
Returns: PartialParse(value, rest), or raises NoMatchError / ParseOverflowError
         (ParseUnderflowError for values below the kind's minimum).
Used by: Public `strtools.parse_numeral_*` API, TextCursor, demo CLI.

Notes:
- Digits are ASCII `0-9a-z`, case-insensitive, validated against the radix.
- Floats accept one `.` and, when `e` is not a digit of the radix (radix <= 14),
  one exponent marker `e`/`E` with an optional sign and decimal digits. The
  exponent scales by the radix.
- A numeral that overflows is reported as such; it is never shortened into a
  smaller numeral that would fit.
"""

from __future__ import annotations

import logging
import math
import struct
from fractions import Fraction
from functools import lru_cache
from typing import NamedTuple

from strtools.errors import (
    InvalidRadixError,
    NoMatchError,
    ParseOverflowError,
    ParseUnderflowError,
)
from strtools.parse.kinds import NumeralKind, resolve_kind
from strtools.util.log import debug, enabled
from strtools.util.text import TextLike, ensure_text

__all__ = [
    "PartialParse",
    "parse_numeral_front",
    "parse_numeral_back",
]

log = logging.getLogger(__name__)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_DECIMAL = frozenset("0123456789")
_SIGNS = frozenset("+-")
_EXP_MARKERS = frozenset("eE")
# int(str, radix) refuses very long strings for non power-of-two radices
_CHUNK = 1000


class PartialParse(NamedTuple):
    value: int | float
    rest: str


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=64)
def _digit_set(radix: int) -> frozenset[str]:
    chars = _DIGITS[:radix]
    return frozenset(chars + chars.upper())


def _check_radix(radix: int) -> None:
    if isinstance(radix, bool) or not isinstance(radix, int) or not 2 <= radix <= 36:
        raise InvalidRadixError(radix)


def _has_exponent(kind: NumeralKind, radix: int) -> bool:
    return kind.is_float and radix <= 14


def _split_sign(s: str) -> tuple[str, str]:
    if s[:1] in _SIGNS:
        return s[0], s[1:]
    return "", s


def _digits_to_int(digits: str, radix: int) -> int:
    value = 0
    for i in range(0, len(digits), _CHUNK):
        chunk = digits[i : i + _CHUNK]
        value = value * radix ** len(chunk) + int(chunk, radix)
    return value


def _out_of_range(candidate: str, kind: NumeralKind, negative: bool) -> ParseOverflowError:
    if negative:
        return ParseUnderflowError(f"{candidate!r} is below the minimum of {kind}")
    return ParseOverflowError(f"{candidate!r} is above the maximum of {kind}")


# ─────────────────────────────────────────────────────────────────────────────
# Candidate extent
# ─────────────────────────────────────────────────────────────────────────────


def _extent_front(text: str, radix: int, kind: NumeralKind) -> int:
    """Return the end of the longest prefix whose chars could form a numeral."""
    digits = _digit_set(radix)
    exp_ok = _has_exponent(kind, radix)
    seen_dot = False
    exp_at = -1
    end = 0
    for i, ch in enumerate(text):
        if ch in _SIGNS:
            if ch == "-" and not kind.allows_minus:
                break
            if i != 0 and not (exp_at >= 0 and i == exp_at + 1):
                break
        elif exp_at >= 0:
            if ch not in _DECIMAL:
                break
        elif ch in digits:
            pass
        elif ch == "." and kind.is_float and not seen_dot:
            seen_dot = True
        elif ch in _EXP_MARKERS and exp_ok:
            exp_at = i
        else:
            break
        end = i + 1
    return end


def _extent_back(text: str, radix: int, kind: NumeralKind) -> int:
    """Return the start of the longest suffix whose chars could form a numeral."""
    digits = _digit_set(radix)
    exp_ok = _has_exponent(kind, radix)
    seen_dot = seen_exp = False
    start = len(text)
    i = len(text) - 1
    while i >= 0:
        ch = text[i]
        # until a marker or a dot shows up, trailing digits may be exponent digits
        may_be_exponent = exp_ok and not seen_exp and not seen_dot
        if ch in _SIGNS:
            if ch == "-" and not kind.allows_minus:
                break
            start = i
            if may_be_exponent and i > 0 and text[i - 1] in _EXP_MARKERS:
                i -= 1
                continue
            # a leading sign closes the numeral
            break
        if ch in digits or (may_be_exponent and ch in _DECIMAL):
            pass
        elif ch == "." and kind.is_float and not seen_dot:
            seen_dot = True
        elif ch in _EXP_MARKERS and may_be_exponent:
            seen_exp = True
        else:
            break
        start = i
        i -= 1
    return start


# ─────────────────────────────────────────────────────────────────────────────
# Conversion: None means "not a numeral", out of range raises
# ─────────────────────────────────────────────────────────────────────────────


def _convert_int(candidate: str, radix: int, kind: NumeralKind) -> int | None:
    sign, body = _split_sign(candidate)
    digits = _digit_set(radix)
    if not body or any(c not in digits for c in body):
        return None
    negative = sign == "-"
    significant = body.lstrip("0")
    # radix >= 2, so more digits than bits is out of range for every kind
    if len(significant) > kind.bits:
        raise _out_of_range(candidate, kind, negative)
    magnitude = int(significant or "0", radix)
    value = -magnitude if negative else magnitude
    if not kind.min_value <= value <= kind.max_value:
        raise _out_of_range(candidate, kind, value < 0)
    return value


def _float_from_digits(whole: str, frac: str, exp: int, radix: int) -> float:
    mantissa = _digits_to_int(whole + frac, radix)
    if mantissa == 0:
        return 0.0
    scale = exp - len(frac)
    magnitude = scale * math.log2(radix)
    if mantissa.bit_length() - 1 + magnitude >= 1024:
        return math.inf
    if mantissa.bit_length() + magnitude < -1100:
        return 0.0
    if scale >= 0:
        exact = Fraction(mantissa * radix**scale)
    else:
        exact = Fraction(mantissa, radix**-scale)
    try:
        return float(exact)
    except OverflowError:
        return math.inf


def _convert_float(candidate: str, radix: int, kind: NumeralKind) -> float | None:
    sign, body = _split_sign(candidate)
    digits = _digit_set(radix)
    mantissa, marker, exponent = body, "", ""
    if _has_exponent(kind, radix):
        mantissa, marker, exponent = body.lower().partition("e")
    whole, _, frac = mantissa.partition(".")
    if not whole and not frac:
        return None
    if any(c not in digits for c in whole + frac):
        return None
    exp = 0
    if marker:
        exp_sign, exp_digits = _split_sign(exponent)
        if not exp_digits or any(c not in _DECIMAL for c in exp_digits):
            return None
        exp_digits = exp_digits.lstrip("0") or "0"
        # anything this large over- or underflows regardless of the mantissa
        exp = int(exp_digits) if len(exp_digits) <= 9 else 10**9
        if exp_sign == "-":
            exp = -exp

    negative = sign == "-"
    if radix == 10:
        value = float(candidate)
    else:
        value = _float_from_digits(whole, frac, exp, radix)
        if negative:
            value = -value

    if math.isinf(value):
        raise _out_of_range(candidate, kind, negative)
    if kind.bits == 32:
        try:
            value = struct.unpack("<f", struct.pack("<f", value))[0]
        except OverflowError:
            raise _out_of_range(candidate, kind, negative) from None
    return value


def _convert(candidate: str, radix: int, kind: NumeralKind) -> int | float | None:
    if kind.is_float:
        return _convert_float(candidate, radix, kind)
    return _convert_int(candidate, radix, kind)


# ─────────────────────────────────────────────────────────────────────────────
# Public API
# ─────────────────────────────────────────────────────────────────────────────


def _prepare(input: TextLike, radix: int, kind: NumeralKind | str) -> tuple[str, NumeralKind]:
    _check_radix(radix)
    resolved = resolve_kind(kind)
    return ensure_text(input), resolved


def parse_numeral_front(input: TextLike, radix: int, kind: NumeralKind | str) -> PartialParse:
    """
    Does: Parse the longest valid `kind` numeral in `radix` at the start of `input`.
    Returns: PartialParse(value, rest) where rest is `input` minus the numeral.
    Raises: NoMatchError, ParseOverflowError/ParseUnderflowError,
            InvalidRadixError, UnknownKindError, MalformedInputError.
    """
    text, nkind = _prepare(input, radix, kind)
    for end in range(_extent_front(text, radix, nkind), 0, -1):
        candidate = text[:end]
        value = _convert(candidate, radix, nkind)
        if value is not None:
            if enabled("parse"):
                debug(f"front {nkind} r{radix}: {candidate!r} -> {value!r}", topic="parse")
            return PartialParse(value, text[end:])
    log.debug("No %s numeral (radix %d) at the front of %r", nkind, radix, text[:32])
    raise NoMatchError(f"no {nkind} numeral in radix {radix} at the start of the input")


def parse_numeral_back(input: TextLike, radix: int, kind: NumeralKind | str) -> PartialParse:
    """
    Does: Parse the longest valid `kind` numeral in `radix` at the end of `input`.
    Returns: PartialParse(value, rest) where rest is `input` minus the numeral.
    """
    text, nkind = _prepare(input, radix, kind)
    for start in range(_extent_back(text, radix, nkind), len(text)):
        candidate = text[start:]
        value = _convert(candidate, radix, nkind)
        if value is not None:
            if enabled("parse"):
                debug(f"back {nkind} r{radix}: {candidate!r} -> {value!r}", topic="parse")
            return PartialParse(value, text[:start])
    log.debug("No %s numeral (radix %d) at the back of %r", nkind, radix, text[-32:])
    raise NoMatchError(f"no {nkind} numeral in radix {radix} at the end of the input")
