# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn a lexed raw value into its literal text."""

from __future__ import annotations

from dotenvkit.lexer import QuoteStyle

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def decode_value(raw: str, style: QuoteStyle) -> str:
    """Decode *raw* according to *style*, without expansion.

    Single-quoted and unquoted values are kept as-is. Double-quoted values
    have their backslash escapes resolved: ``\\n``, ``\\t`` and ``\\r`` become
    control characters and any other escaped character stands for itself.
    """
    if style is not QuoteStyle.DOUBLE:
        return raw

    buf: list[str] = []
    i = 0
    while i < len(raw):
        ch = raw[i]
        if ch == "\\" and i + 1 < len(raw):
            nxt = raw[i + 1]
            buf.append(_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        buf.append(ch)
        i += 1
    return "".join(buf)


def is_expandable(style: QuoteStyle) -> bool:
    """Single-quoted values are never expanded."""
    return style is not QuoteStyle.SINGLE
