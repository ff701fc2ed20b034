# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Placeholder expansion: ``${NAME}``, ``$(NAME)`` and ``$NAME``.

Names resolve against entries already parsed from the same document, then
against the ambient environment, and otherwise to the empty string.
Expansion is a single left-to-right pass; substituted text is never
expanded again. Malformed placeholders are copied through unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from dotenvkit.environ import Environment, OsEnvironment

_BARE_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_CLOSERS = {"{": "}", "(": ")"}


class Expander:
    """Expands placeholders against *resolved* entries, then *environ*.

    *resolved* is read live, so a dict the caller keeps filling in is seen
    as it grows.
    """

    def __init__(self, resolved: Mapping[str, str], environ: Environment) -> None:
        self.resolved = resolved
        self.environ = environ

    def lookup(self, name: str) -> str:
        if name in self.resolved:
            return self.resolved[name]
        value = self.environ.get(name)
        return value if value is not None else ""

    def expand(self, text: str) -> str:
        out: list[str] = []
        i = 0
        while True:
            dollar = text.find("$", i)
            if dollar == -1:
                out.append(text[i:])
                break
            out.append(text[i:dollar])
            name, end = _match_placeholder(text, dollar)
            if name is None:
                out.append("$")
            else:
                out.append(self.lookup(name))
            i = end
        return "".join(out)


def _match_placeholder(text: str, dollar: int) -> tuple[str | None, int]:
    """Match a placeholder at *dollar*; return ``(name, end)`` or ``(None, dollar + 1)``."""
    opener = text[dollar + 1:dollar + 2]
    if opener in _CLOSERS:
        close = text.find(_CLOSERS[opener], dollar + 2)
        if close > dollar + 2:
            return text[dollar + 2:close], close + 1
        return None, dollar + 1
    m = _BARE_NAME_RE.match(text, dollar + 1)
    if m is not None:
        return m.group(0), m.end()
    return None, dollar + 1


def expand(
    text: str,
    resolved: Mapping[str, str] | None = None,
    environ: Environment | None = None,
) -> str:
    """Expand the placeholders in *text*."""
    return Expander(resolved or {}, environ if environ is not None else OsEnvironment()).expand(text)
