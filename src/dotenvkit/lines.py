# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Split raw .env text into numbered, trimmed lines."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple


class RawLine(NamedTuple):
    """One physical line: 1-based line number and its trimmed text."""

    number: int
    text: str


class LineScanner:
    """Lazy line iterator over .env text.

    Iterating again starts over from the first line. Only ``\\n`` splits
    lines; a ``\\r`` left over from CRLF endings is removed by trimming.
    A final newline does not produce an extra empty line.
    """

    def __init__(self, content: str) -> None:
        self.content = content

    def __iter__(self) -> Iterator[RawLine]:
        content = self.content
        start = 0
        number = 1
        while start < len(content):
            end = content.find("\n", start)
            if end == -1:
                end = len(content)
            yield RawLine(number, content[start:end].strip())
            start = end + 1
            number += 1


def iter_lines(content: str) -> Iterator[RawLine]:
    """Iterate the trimmed lines of *content*."""
    return iter(LineScanner(content))
