# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Split a single .env line into key, raw value and quote style.

Handles:
  - blank lines and ``#`` comment lines (skipped)
  - ``export KEY=VALUE`` prefix
  - ``=`` or ``:`` as the key/value separator (first unquoted one wins)
  - single- and double-quoted values (quotes stripped, content left raw)
  - inline comments after unquoted values (`` #`` starts a comment)

Escape sequences are not interpreted here; see :mod:`dotenvkit.decoder`.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from dotenvkit.errors import ParseError
from dotenvkit.lines import RawLine

_EXPORT_RE = re.compile(r"export +")
_INLINE_COMMENT_RE = re.compile(r"\s#")

SEPARATORS = "=:"


class QuoteStyle(Enum):
    """How the value of an assignment was written."""

    UNQUOTED = "unquoted"
    SINGLE = "single"
    DOUBLE = "double"


class LexedEntry(NamedTuple):
    """An assignment with its value still undecoded."""

    key: str
    raw_value: str
    style: QuoteStyle
    line: int


def find_separator(text: str) -> int:
    """Return the index of the first ``=`` or ``:`` outside quotes, or -1."""
    quote: str | None = None
    for i, ch in enumerate(text):
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch in SEPARATORS:
            return i
    return -1


def is_valid_key(key: str) -> bool:
    """True if ``key=value`` would lex back to *key*."""
    if not key or key.startswith("#"):
        return False
    return not any(ch.isspace() or ch in SEPARATORS or ch in "'\"" for ch in key)


def lex_line(raw: RawLine) -> LexedEntry | None:
    """Lex one trimmed line. Returns ``None`` for blank and comment lines."""
    text = raw.text
    if not text or text.startswith("#"):
        return None

    m = _EXPORT_RE.match(text)
    if m is not None:
        text = text[m.end():]

    sep = find_separator(text)
    if sep == -1:
        raise ParseError(raw.number, f"missing '=' or ':' separator in {text!r}")

    key = text[:sep].strip()
    if not key:
        raise ParseError(raw.number, "empty key")
    if any(ch.isspace() for ch in key):
        raise ParseError(raw.number, f"invalid key {key!r}: whitespace is not allowed")

    rest = text[sep + 1:]
    value = rest.lstrip()
    if value[:1] == "'":
        raw_value, tail = _split_single(value, raw.number)
        style = QuoteStyle.SINGLE
    elif value[:1] == '"':
        raw_value, tail = _split_double(value, raw.number)
        style = QuoteStyle.DOUBLE
    else:
        # Searched in ``rest`` so that ``KEY= # note`` is an empty value.
        comment = _INLINE_COMMENT_RE.search(rest)
        if comment is not None:
            rest = rest[: comment.start()]
        return LexedEntry(key, rest.strip(), QuoteStyle.UNQUOTED, raw.number)

    tail = tail.lstrip()
    if tail and not tail.startswith("#"):
        raise ParseError(raw.number, f"unexpected text after closing quote: {tail!r}")
    return LexedEntry(key, raw_value, style, raw.number)


def _split_single(value: str, line: int) -> tuple[str, str]:
    close = value.find("'", 1)
    if close == -1:
        raise ParseError(line, "unterminated single-quoted value")
    return value[1:close], value[close + 1:]


def _split_double(value: str, line: int) -> tuple[str, str]:
    i = 1
    while i < len(value):
        ch = value[i]
        if ch == "\\":
            i += 2
            continue
        if ch == '"':
            return value[1:i], value[i + 1:]
        i += 1
    raise ParseError(line, "unterminated double-quoted value")
