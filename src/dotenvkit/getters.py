# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Typed reads from the environment.

Every getter takes the variable name followed by optional fallback values.
When the variable is unset, the first fallback is returned (``get_list``
returns all of them); with no fallback a :class:`MissingVariableError` is
raised. Values that do not convert raise :class:`CoercionError`.

>>> from dotenvkit.getters import get_int, get_list
>>> get_int("PORT", 8080)
8080
>>> get_list("HOSTS", "a", "b")
['a', 'b']
"""

from __future__ import annotations

from dotenvkit.environ import Environment, OsEnvironment
from dotenvkit.errors import CoercionError, MissingVariableError

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _lookup(key: str, environ: Environment | None) -> str | None:
    return (environ if environ is not None else OsEnvironment()).get(key)


def get_str(key: str, *fallback: str, environ: Environment | None = None) -> str:
    value = _lookup(key, environ)
    if value is not None:
        return value
    if fallback:
        return fallback[0]
    raise MissingVariableError(key)


def get_int(key: str, *fallback: int, environ: Environment | None = None) -> int:
    value = _lookup(key, environ)
    if value is None:
        if fallback:
            return fallback[0]
        raise MissingVariableError(key)
    try:
        return int(value.strip(), 10)
    except ValueError:
        raise CoercionError(key, value, "integer") from None


def get_float(key: str, *fallback: float, environ: Environment | None = None) -> float:
    value = _lookup(key, environ)
    if value is None:
        if fallback:
            return fallback[0]
        raise MissingVariableError(key)
    try:
        return float(value.strip())
    except ValueError:
        raise CoercionError(key, value, "float") from None


def get_bool(key: str, *fallback: bool, environ: Environment | None = None) -> bool:
    """Accepts ``1/true/yes/on`` and ``0/false/no/off`` in any case."""
    value = _lookup(key, environ)
    if value is None:
        if fallback:
            return fallback[0]
        raise MissingVariableError(key)
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise CoercionError(key, value, "boolean")


def split_list(value: str, sep: str = ",") -> list[str]:
    """Split *value* on *sep*, trimming items. An empty string is an empty list."""
    if not value.strip():
        return []
    return [item.strip() for item in value.split(sep)]


def get_list(
    key: str,
    *fallback: str,
    sep: str = ",",
    environ: Environment | None = None,
) -> list[str]:
    """Unset variable returns all of *fallback* as the list."""
    value = _lookup(key, environ)
    if value is None:
        if fallback:
            return list(fallback)
        raise MissingVariableError(key)
    return split_list(value, sep)


def split_dict(key: str, value: str, sep: str = ",") -> dict[str, str]:
    """Parse ``k1=v1,k2:v2`` into a dict. Each item needs ``=`` or ``:``."""
    result: dict[str, str] = {}
    for item in split_list(value, sep):
        positions = [p for p in (item.find("="), item.find(":")) if p != -1]
        if not positions:
            raise CoercionError(key, value, "dict")
        cut = min(positions)
        name = item[:cut].strip()
        if not name:
            raise CoercionError(key, value, "dict")
        result[name] = item[cut + 1:].strip()
    return result


def get_dict(
    key: str,
    *fallback: str,
    sep: str = ",",
    environ: Environment | None = None,
) -> dict[str, str]:
    """Unset variable parses the first fallback string the same way as a value."""
    value = _lookup(key, environ)
    if value is None:
        if not fallback:
            raise MissingVariableError(key)
        value = fallback[0]
    return split_dict(key, value, sep)
