# tests/test_split_non_escaped.py
from __future__ import annotations

import pytest

from strtools.errors import (
    ConfigurationError,
    EmptyDelimiterSetError,
    EscapeIsDelimiterError,
    MalformedInputError,
)
from strtools.splitting import DelimiterSet
from strtools.splitting import non_escaped as N

ESC = "\\"


def _raw(text, delims=":"):
    return list(N.split(text, ESC, delims))


def _sanitized(text, delims=":"):
    return list(N.split_sanitized(text, ESC, delims))


def _rejoin(text, delims=":"):
    """Join raw segments back with the delimiters that were cut."""
    segments = _raw(text, delims)
    cuts = [text[i] for i in N.split_points(text, ESC, delims)]
    out = segments[0]
    for cut, seg in zip(cuts, segments[1:]):
        out += cut + seg
    return out


# ─────────────────────────────────────────────────────────────────────────────
# Raw mode
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text,expected",
    [
        (r"aaaaa:bbbbb", ["aaaaa", "bbbbb"]),
        (r"aa\:aa:bbbb", [r"aa\:aa", "bbbb"]),
        (r"\:aaaa:bbbb", [r"\:aaaa", "bbbb"]),
        (r"aaaa\::bbbb", [r"aaaa\:", "bbbb"]),
        (r"aaaa:bb\:bb", ["aaaa", r"bb\:bb"]),
        (r"aaaa:\:bbbb", ["aaaa", r"\:bbbb"]),
        (r"aaaa:bbbb\:", ["aaaa", r"bbbb\:"]),
        ("", [""]),
        ("::", ["", "", ""]),
        ("aaaa:bbbb\\", ["aaaa", "bbbb\\"]),  # trailing escape is literal
    ],
)
def test_raw_single_escape(text, expected):
    assert _raw(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        (r"aaaaa/bbb:bb", ["aaaaa", "bbb", "bb"]),
        (r"aaaaa/bbb\:bb", ["aaaaa", r"bbb\:bb"]),
        (r"aaaaa\/bbb\:bb", [r"aaaaa\/bbb\:bb"]),
    ],
)
def test_raw_multiple_delimiters(text, expected):
    assert _raw(text, "/:") == expected


def test_raw_escaped_spaces_sentence():
    text = r"this string\ is split by\ spaces unless they are\ escaped"
    assert _raw(text, " ") == [
        "this",
        r"string\ is",
        "split",
        r"by\ spaces",
        "unless",
        "they",
        r"are\ escaped",
    ]


# ─────────────────────────────────────────────────────────────────────────────
# Sanitized mode
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text,expected",
    [
        (r"aa\:aa:bbbb", ["aa:aa", "bbbb"]),
        (r"\:aaaa:bbbb", [":aaaa", "bbbb"]),
        (r"aaaa\::bbbb", ["aaaa:", "bbbb"]),
        (r"aaaa:bb\:bb", ["aaaa", "bb:bb"]),
        (r"aaaa:\:bbbb", ["aaaa", ":bbbb"]),
        (r"aaaa:bbbb\:", ["aaaa", "bbbb:"]),
    ],
)
def test_sanitized_single_escape(text, expected):
    assert _sanitized(text) == expected


def test_sanitized_escaped_spaces_sentence():
    text = r"this string\ is split by\ spaces unless they are\ escaped"
    assert _sanitized(text, " ") == [
        "this",
        "string is",
        "split",
        "by spaces",
        "unless",
        "they",
        "are escaped",
    ]


@pytest.mark.parametrize(
    "text,raw,sanitized",
    [
        # E E d: literal E, then escaped d
        (r"aaaa\\:bbbb", [r"aaaa\\:bbbb"], [r"aaaa\:bbbb"]),
        (r"aaaa\\\:bbbb", [r"aaaa\\\:bbbb"], [r"aaaa\\:bbbb"]),
        (r"aaaa\\x:bbbb", [r"aaaa\\x", "bbbb"], [r"aaaa\\x", "bbbb"]),
    ],
)
def test_consecutive_escapes(text, raw, sanitized):
    assert _raw(text) == raw
    assert _sanitized(text) == sanitized


@pytest.mark.parametrize(
    "text,expected",
    [
        (r"aa\.aa:bbbbb", [r"aa\.aa", "bbbbb"]),
        (r"\.aaaa:bbbbb", [r"\.aaaa", "bbbbb"]),
        (r"aaaa\.:bbbbb", [r"aaaa\.", "bbbbb"]),
        (r"aaaa:\.bbbbb", ["aaaa", r"\.bbbbb"]),
        (r"aaaa:bbbbb\.", ["aaaa", r"bbbbb\."]),
    ],
)
def test_escapes_before_other_chars_are_literal(text, expected):
    assert _raw(text) == expected
    assert _sanitized(text) == expected


# Inputs from parsing `<regex-rule>/<regex-replace>` user rules
@pytest.mark.parametrize(
    "text,expected",
    [
        (r"test\d", [r"test\d"]),
        (r"^b\/(.*)$/d\/$1", [r"^b/(.*)$", "d/$1"]),
        (r".*s(\d\d)e(\d\d[a-d])/S$1E$2", [r".*s(\d\d)e(\d\d[a-d])", "S$1E$2"]),
    ],
)
def test_sanitized_regex_rules(text, expected):
    assert _sanitized(text, "/") == expected


# ─────────────────────────────────────────────────────────────────────────────
# Bounded splitting
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text,n,expected",
    [
        ("a:b:c:d", 0, ["a:b:c:d"]),
        ("a:b:c:d", 1, ["a", "b:c:d"]),
        ("a:b:c:d", 2, ["a", "b", "c:d"]),
        ("a:b:c:d", 10, ["a", "b", "c", "d"]),
        (r"a:b\:c:d", 1, ["a", r"b\:c:d"]),
        ("", 3, [""]),
    ],
)
def test_split_n(text, n, expected):
    assert list(N.split_n(text, ESC, ":", n)) == expected


@pytest.mark.parametrize("bad", [-1, 1.5, None, True])
def test_split_n_rejects_bad_limits(bad):
    with pytest.raises(ConfigurationError):
        N.split_n("a:b", ESC, ":", bad)


# ─────────────────────────────────────────────────────────────────────────────
# Configuration & input errors (raised before iteration)
# ─────────────────────────────────────────────────────────────────────────────


def test_escape_is_delimiter_raises_on_call():
    with pytest.raises(EscapeIsDelimiterError) as ei:
        N.split("", ESC, [":", ESC])
    assert ei.value.escape == ESC
    with pytest.raises(EscapeIsDelimiterError):
        N.split_sanitized("", ESC, ESC)


def test_empty_delimiters_raise():
    with pytest.raises(EmptyDelimiterSetError):
        N.split("a:b", ESC, "")
    with pytest.raises(EmptyDelimiterSetError):
        N.split("a:b", ESC, [])


@pytest.mark.parametrize("escape", ["", "ab", 5])
def test_escape_must_be_single_char(escape):
    with pytest.raises(ConfigurationError):
        N.split("a:b", escape, ":")


@pytest.mark.parametrize("bad", [b"a:\xff", "a:\ud800"])
def test_malformed_input_rejected(bad):
    with pytest.raises(MalformedInputError):
        N.split(bad, ESC, ":")


def test_bytes_are_decoded():
    assert _raw("ö:ü".encode()) == ["ö", "ü"]


# ─────────────────────────────────────────────────────────────────────────────
# Iterator behavior
# ─────────────────────────────────────────────────────────────────────────────


def test_segments_are_lazy_and_single_use():
    it = N.split("a:b:c", ESC, ":")
    assert next(it) == "a"
    assert list(it) == ["b", "c"]
    assert list(it) == []


def test_split_points():
    assert list(N.split_points(r"a:b\:c:d", ESC, ":")) == [1, 6]
    assert list(N.split_points("a:b:c", ESC, ":", max_splits=1)) == [1]


def test_accepts_delimiter_set_instance():
    delims = DelimiterSet([":", "/", ":"])
    assert len(delims) == 2
    assert list(delims) == ["/", ":"]
    assert _raw("a/b:c", delims) == ["a", "b", "c"]


# ─────────────────────────────────────────────────────────────────────────────
# Properties
# ─────────────────────────────────────────────────────────────────────────────

SAMPLES = [
    "",
    ":",
    "plain",
    r"a\:b:c",
    r"\\::\\",
    "trailing\\",
    r"x\y:z\\\:w",
    "日本:語\\:ö:",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_raw_round_trip(text):
    assert ":".join(_raw(text)) == text


@pytest.mark.parametrize("text", ["a/b:c", r"a\/b:c/d", "//::", r"\\/x"])
def test_raw_round_trip_multiple_delimiters(text):
    assert _rejoin(text, "/:") == text


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("n", [0, 1, 2, 5])
def test_split_n_segment_bound(text, n):
    assert len(list(N.split_n(text, ESC, ":", n))) <= n + 1


@pytest.mark.parametrize("text", ["", "a:b", "::x::", "no delimiters", "ö:日本"])
def test_without_escapes_modes_agree(text):
    assert _raw(text) == _sanitized(text)


def test_multibyte_chars_are_never_split():
    assert _raw("häll◊:wörld:日本語") == ["häll◊", "wörld", "日本語"]
    # multi-byte delimiter and escape
    assert list(N.split("a◊b§◊c", "§", "◊")) == ["a", "b§◊c"]
    assert list(N.split_sanitized("a◊b§◊c", "§", "◊")) == ["a", "b◊c"]
