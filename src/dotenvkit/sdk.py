# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Load .env files into the environment (python-dotenv style API)."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from dotenvkit.config import load_config
from dotenvkit.environ import Environment, MemoryEnvironment, OsEnvironment
from dotenvkit.errors import ParseError
from dotenvkit.marshal import marshal
from dotenvkit.parser import Entry, Parser, to_mapping

logger = logging.getLogger(__name__)


def _resolve_paths(paths: Sequence[str | Path]) -> list[Path]:
    """Explicit paths, then ``DOTENVKIT_FILES``, then config, then ``.env``."""
    if paths:
        return [Path(p) for p in paths]
    return [Path(p) for p in load_config().resolve_files()]


def read_documents(
    *paths: str | Path,
    environ: Environment | None = None,
    encoding: str = "utf-8",
) -> list[list[Entry]]:
    """Read and parse each file, returning one entry list per file.

    Every file is parsed before anything is returned, so a malformed file
    fails the whole call. ``OSError`` from reading is not wrapped.

    Raises:
        ParseError: with ``path`` set to the offending file.
    """
    parser = Parser(environ)
    documents: list[list[Entry]] = []
    for path in _resolve_paths(paths):
        logger.debug("reading %s", path)
        content = path.read_text(encoding=encoding)
        try:
            documents.append(parser.parse_entries(content))
        except ParseError as e:
            raise e.with_path(str(path)) from None
    return documents


def load_into(
    documents: Iterable[Iterable[Entry]],
    override: bool = False,
    environ: Environment | None = None,
) -> int:
    """Set every entry of *documents*, in order, into *environ*.

    Stops at the first failing write; variables already set stay set.
    Returns the number of variables written.

    Raises:
        EnvError: if the environment rejects a variable.
    """
    target = environ if environ is not None else OsEnvironment()
    count = 0
    for document in documents:
        for entry in document:
            if target.set(entry.key, entry.value, overwrite=override):
                count += 1
            else:
                logger.debug("%s already set, keeping existing value", entry.key)
    return count


def dotenv_values(
    *paths: str | Path,
    environ: Environment | None = None,
    encoding: str = "utf-8",
) -> dict[str, str]:
    """Return the merged variables of *paths* without modifying the environment.

    Later files win over earlier ones. With no paths, files come from
    ``DOTENVKIT_FILES`` or ``.dotenvkit.toml``, else ``.env``.

    Examples
    --------
    >>> from dotenvkit import dotenv_values
    >>> dotenv_values(".env", ".env.local")
    {'HOST': 'localhost', 'PORT': '3000'}
    """
    merged: dict[str, str] = {}
    for document in read_documents(*paths, environ=environ, encoding=encoding):
        merged.update(to_mapping(document))
    return merged


def load_dotenv(
    *paths: str | Path,
    override: bool | None = None,
    environ: Environment | None = None,
    encoding: str | None = None,
) -> bool:
    """Load variables from .env files into the environment.

    Parameters
    ----------
    *paths : str or Path
        Files to load, in order. Defaults from ``DOTENVKIT_FILES``, then
        ``.dotenvkit.toml``, then ``.env``.
    override : bool, optional
        If True, overwrite variables that are already set. If False, only
        set missing ones (matches python-dotenv semantics). Defaults from
        ``DOTENVKIT_OVERRIDE`` or config, else False.
    environ : Environment, optional
        Target environment. Defaults to ``os.environ``. Placeholders are
        resolved against the same environment.
    encoding : str, optional
        File encoding. Defaults from config, else utf-8.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.

    Examples
    --------
    >>> from dotenvkit import load_dotenv
    >>> load_dotenv()
    True
    >>> load_dotenv(".env", ".env.local", override=True)
    True
    """
    cfg = load_config()
    documents = read_documents(
        *paths,
        environ=environ,
        encoding=encoding or cfg.encoding,
    )
    return load_into(documents, override=cfg.resolve_override(override), environ=environ) > 0


def write_dotenv(mapping: Mapping[str, str], path: str | Path, encoding: str = "utf-8") -> None:
    """Write *mapping* to *path* in canonical sorted form."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(marshal(mapping), encoding=encoding)
    logger.debug("wrote %d variable(s) to %s", len(mapping), path)


def run_with_env(
    command: Sequence[str],
    *paths: str | Path,
    override: bool = True,
    encoding: str = "utf-8",
) -> int:
    """Run *command* with the variables of *paths* added to its environment.

    The current process environment is left untouched. Returns the exit
    code of the command.
    """
    env = MemoryEnvironment(os.environ)
    documents = read_documents(*paths, environ=env, encoding=encoding)
    load_into(documents, override=override, environ=env)
    logger.debug("running %s", " ".join(command))
    return subprocess.run(list(command), env=env.snapshot(), check=False).returncode
