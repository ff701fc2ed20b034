# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception types raised by dotenvkit.

File I/O errors are never wrapped: callers see the ``OSError`` raised by
:mod:`pathlib` unchanged.
"""

from __future__ import annotations


class DotenvError(Exception):
    """Base class for every dotenvkit error."""


class ParseError(DotenvError):
    """Malformed assignment line. Aborts the whole parse."""

    def __init__(self, line: int, reason: str, path: str | None = None) -> None:
        self.line = line
        self.reason = reason
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        if self.path:
            return f"{self.path}:{self.line}: {self.reason}"
        return f"line {self.line}: {self.reason}"

    def with_path(self, path: str) -> ParseError:
        """Return a copy of this error that names the file it came from."""
        return ParseError(self.line, self.reason, path=path)


class EnvError(DotenvError):
    """Reading or writing the process environment failed."""


class MissingVariableError(EnvError, KeyError):
    """A getter was asked for an unset variable and given no fallback."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"environment variable {key!r} is not set")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class CoercionError(EnvError, ValueError):
    """A variable's value could not be converted to the requested type."""

    def __init__(self, key: str, value: str, kind: str) -> None:
        self.key = key
        self.value = value
        self.kind = kind
        super().__init__(f"environment variable {key!r} is not a valid {kind}: {value!r}")
