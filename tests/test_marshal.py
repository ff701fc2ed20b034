"""Tests for serialization back to .env text."""

from __future__ import annotations

import pytest

from dotenvkit import marshal, parse
from dotenvkit.environ import MemoryEnvironment
from dotenvkit.marshal import format_value


def test_sorted_and_integers_unquoted():
    assert marshal({"PORT": "3000", "HOST": "localhost"}) == 'HOST="localhost"\nPORT=3000\n'


def test_empty_mapping():
    assert marshal({}) == ""


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("42", "42"),
        ("-42", "-42"),
        ("007", "007"),
        ("4.2", '"4.2"'),
        ("-", '"-"'),
        ("", '""'),
        ("1e3", '"1e3"'),
        ("$HOME", '"$HOME"'),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_escaping():
    value = 'say "hi"\\ \n\t\r'
    assert marshal({"A": value}) == 'A="say \\"hi\\"\\\\ \\n\\t\\r"\n'


def test_sort_is_by_code_point():
    assert marshal({"b": "1", "B": "2", "a": "3"}).splitlines() == ["B=2", "a=3", "b=1"]


ROUND_TRIP = {
    "PLAIN": "plain",
    "SPACES": "  padded value  ",
    "HASH": "has # hash",
    "QUOTES": "she said \"yes\" and 'no'",
    "BACKSLASH": "C:\\new\\table",
    "MULTILINE": "first\nsecond\r\nthird",
    "TAB": "a\tb",
    "EMPTY": "",
    "INT": "123",
    "NEG": "-7",
    "UNICODE": "caf\u00e9",
    "SEPARATORS": "a=b:c",
}


def test_round_trip():
    assert parse(marshal(ROUND_TRIP), environ=MemoryEnvironment({"HOME": "/h"})) == ROUND_TRIP


def test_canonical_form_is_fixed_point():
    once = marshal(ROUND_TRIP)
    assert marshal(parse(once, environ=MemoryEnvironment())) == once
