# tests/test_parse_literal.py
from __future__ import annotations

import pytest

from strtools.errors import InvalidRadixError, NoMatchError, ParseOverflowError
from strtools.parse import literal as L
from strtools.parse.num import parse_numeral_back, parse_numeral_front

# ─────────────────────────────────────────────────────────────────────────────
# Bools & literals
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text,expected",
    [("true;", (True, ";")), ("false", (False, "")), ("truex", (True, "x"))],
)
def test_bool_front(text, expected):
    assert L.parse_bool_front(text) == expected


@pytest.mark.parametrize(
    "text,expected",
    [(";false", (False, ";")), ("true", (True, "")), ("x=true", (True, "x="))],
)
def test_bool_back(text, expected):
    assert L.parse_bool_back(text) == expected


@pytest.mark.parametrize("text", ["", "tru", "True", " false"])
def test_bool_front_no_match(text):
    with pytest.raises(NoMatchError):
        L.parse_bool_front(text)


def test_strip_literal():
    assert L.strip_literal_front("key=1", "key=") == "1"
    assert L.strip_literal_front("key=1", "val=") is None
    assert L.strip_literal_back("1.json", ".json") == "1"
    assert L.strip_literal_back("1.json", ".yaml") is None
    assert L.strip_literal_back("abc", "") == "abc"
    assert L.strip_literal_front("abc", "") == "abc"


# ─────────────────────────────────────────────────────────────────────────────
# TextCursor
# ─────────────────────────────────────────────────────────────────────────────


def test_cursor_front_alternating_signs():
    c = L.TextCursor("1-2+3-4")
    assert c.yield_numeral_front(10, "u8") == 1
    assert c.yield_numeral_front(10, "i8") == -2
    assert c.yield_numeral_front(10, "u8") == 3
    assert c.yield_numeral_front(10, "i8") == -4
    assert c.text == ""
    assert not c


def test_cursor_back_alternating_signs():
    c = L.TextCursor("-4+3-2+1")
    assert c.yield_numeral_back(10, "u8") == 1
    assert c.yield_numeral_back(10, "i8") == -2
    assert c.yield_numeral_back(10, "u8") == 3
    assert c.yield_numeral_back(10, "i8") == -4
    assert len(c) == 0


def test_cursor_key_value_record():
    c = L.TextCursor("size=12;strict=true")
    assert c.yield_literal_front("size=")
    assert c.yield_numeral_front(10, "u16") == 12
    assert c.yield_literal_front(";strict=")
    assert c.yield_bool_front() is True
    assert c.text == ""


def test_cursor_version_from_the_back():
    c = L.TextCursor("v1.2.3")
    parts = []
    while True:
        parts.append(c.yield_numeral_back(10, "u8"))
        if not c.yield_literal_back("."):
            break
    assert parts[::-1] == [1, 2, 3]
    assert c.text == "v"
    assert c.yield_literal_front("v")
    assert repr(c) == "TextCursor('')"


def test_cursor_failures_leave_text_untouched():
    c = L.TextCursor("abc")
    with pytest.raises(NoMatchError):
        c.yield_numeral_front(10, "u8")
    with pytest.raises(NoMatchError):
        c.yield_bool_back()
    assert not c.yield_literal_front("x")
    assert c.text == "abc"

    c = L.TextCursor("300;")
    with pytest.raises(ParseOverflowError):
        c.yield_numeral_front(10, "u8")
    assert c.text == "300;"


def test_cursor_radix():
    c = L.TextCursor("ff:10")
    assert c.yield_numeral_front(16, "u8") == 255
    assert c.yield_literal_front(":")
    assert c.yield_numeral_front(2, "u8") == 2


def test_cursor_takes_radix_then_kind_like_the_parsers():
    text = "7fx1f"
    c = L.TextCursor(text)
    assert c.yield_numeral_front(16, "u8") == parse_numeral_front(text, 16, "u8").value
    assert c.yield_numeral_back(16, "u8") == parse_numeral_back(text, 16, "u8").value
    assert c.text == "x"

    with pytest.raises(InvalidRadixError):
        c.yield_numeral_front("u8", 16)
    assert c.text == "x"
