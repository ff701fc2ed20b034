# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Access to the ambient environment as a swappable object.

The parser reads placeholders through :meth:`Environment.get` and the loader
writes through :meth:`Environment.set`, so both can run against an in-memory
:class:`MemoryEnvironment` instead of ``os.environ``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Protocol

from dotenvkit.errors import EnvError


class Environment(Protocol):
    """Read/write interface over a table of environment variables."""

    def get(self, name: str) -> str | None:
        ...

    def set(self, name: str, value: str, overwrite: bool = True) -> bool:
        """Set *name*; return False if it existed and *overwrite* is false."""
        ...

    def snapshot(self) -> dict[str, str]:
        ...


def _check_name(name: str) -> None:
    if not name or "=" in name or "\0" in name:
        raise EnvError(f"invalid environment variable name: {name!r}")


class OsEnvironment:
    """The live process environment."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)

    def set(self, name: str, value: str, overwrite: bool = True) -> bool:
        _check_name(name)
        if not overwrite and name in os.environ:
            return False
        try:
            os.environ[name] = value
        except (ValueError, OSError) as e:
            raise EnvError(f"cannot set {name!r}: {e}") from e
        return True

    def snapshot(self) -> dict[str, str]:
        return dict(os.environ)


class MemoryEnvironment:
    """Dict-backed environment for tests and sandboxed loading."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def get(self, name: str) -> str | None:
        return self.values.get(name)

    def set(self, name: str, value: str, overwrite: bool = True) -> bool:
        _check_name(name)
        if "\0" in value:
            raise EnvError(f"cannot set {name!r}: embedded null byte")
        if not overwrite and name in self.values:
            return False
        self.values[name] = value
        return True

    def snapshot(self) -> dict[str, str]:
        return dict(self.values)
