# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Serialize a mapping to canonical .env text."""

from __future__ import annotations

import re
from collections.abc import Mapping

_INTEGER_RE = re.compile(r"-?[0-9]+")

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def format_value(value: str) -> str:
    """Format a value: integers bare, everything else double-quoted and escaped."""
    if _INTEGER_RE.fullmatch(value):
        return value
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in value) + '"'


def marshal(mapping: Mapping[str, str]) -> str:
    """Return ``KEY=VALUE`` lines for *mapping*, sorted by key.

    Values without ``$`` parse back unchanged, and marshaling the parsed
    result again gives the same text. ``$`` is written as-is, so a parse
    of the output expands it.
    """
    return "".join(f"{key}={format_value(mapping[key])}\n" for key in sorted(mapping))
