# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env text into entries and key-value dicts.

Each line goes through the lexer, the value decoder and the expander in
turn. Expansion only sees entries defined on earlier lines (plus the
ambient environment). The first malformed line raises
:class:`~dotenvkit.errors.ParseError`; there is no partial result.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from dotenvkit.decoder import decode_value, is_expandable
from dotenvkit.environ import Environment, OsEnvironment
from dotenvkit.expand import Expander
from dotenvkit.lexer import lex_line
from dotenvkit.lines import LineScanner


@dataclass(frozen=True)
class Entry:
    """A fully decoded and expanded assignment."""

    key: str
    value: str
    line: int


class Parser:
    """Document parser bound to an ambient environment."""

    def __init__(self, environ: Environment | None = None) -> None:
        self.environ = environ if environ is not None else OsEnvironment()

    def parse_entries(self, content: str) -> list[Entry]:
        """Return every assignment in *content*, in file order."""
        resolved: dict[str, str] = {}
        expander = Expander(resolved, self.environ)
        entries: list[Entry] = []
        for raw in LineScanner(content):
            lexed = lex_line(raw)
            if lexed is None:
                continue
            value = decode_value(lexed.raw_value, lexed.style)
            if is_expandable(lexed.style):
                value = expander.expand(value)
            resolved[lexed.key] = value
            entries.append(Entry(lexed.key, value, lexed.line))
        return entries

    def parse(self, content: str) -> dict[str, str]:
        """Return the key-value mapping of *content*; later duplicates win."""
        return to_mapping(self.parse_entries(content))


def to_mapping(entries: Iterable[Entry]) -> dict[str, str]:
    result: dict[str, str] = {}
    for entry in entries:
        result[entry.key] = entry.value
    return result


def parse_entries(content: str, environ: Environment | None = None) -> list[Entry]:
    """Parse *content* into an ordered list of :class:`Entry`."""
    return Parser(environ).parse_entries(content)


def parse(content: str, environ: Environment | None = None) -> dict[str, str]:
    """Parse *content* into a dict.

    Args:
        content: .env text.
        environ: Environment consulted for placeholders not defined earlier
            in *content*. Defaults to the process environment.

    Raises:
        ParseError: on the first malformed line.
    """
    return Parser(environ).parse(content)
