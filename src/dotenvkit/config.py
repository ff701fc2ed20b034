# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".dotenvkit.toml configuration loading.

Searches upward from cwd for ``.dotenvkit.toml`` and merges with CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".dotenvkit.toml"
DEFAULT_FILES: tuple[str, ...] = (".env",)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class DotenvConfig:
    """Resolved configuration for the current invocation."""

    files: list[str] = field(default_factory=lambda: list(DEFAULT_FILES))
    override: bool = False
    encoding: str = "utf-8"
    config_path: Path | None = None

    def resolve_files(self, files: tuple[str, ...] | list[str] | None = None) -> list[str]:
        """Explicit *files*, then ``DOTENVKIT_FILES``, then the config file."""
        if files:
            return list(files)
        from_env = os.environ.get("DOTENVKIT_FILES")
        if from_env:
            return [f.strip() for f in from_env.split(",") if f.strip()]
        return list(self.files)

    def resolve_override(self, override: bool | None = None) -> bool:
        """Explicit *override*, then ``DOTENVKIT_OVERRIDE``, then the config file."""
        if override is not None:
            return override
        from_env = os.environ.get("DOTENVKIT_OVERRIDE")
        if from_env:
            return from_env.strip().lower() in _TRUTHY
        return self.override


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.dotenvkit.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> DotenvConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return DotenvConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("dotenvkit", {})

    files = section.get("files", list(DEFAULT_FILES))
    if isinstance(files, str):
        files = [files]
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        raise ValueError(f"{path}: dotenvkit.files must be a string or a list of strings")

    return DotenvConfig(
        files=files,
        override=bool(section.get("override", False)),
        encoding=section.get("encoding", "utf-8"),
        config_path=path,
    )
