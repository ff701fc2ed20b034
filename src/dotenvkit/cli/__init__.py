# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""dotenvkit CLI -- inspect, export, edit and run with .env files.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_read_files``, ``_mask``,
etc.) live here so every command module can import them.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from dotenvkit import __version__
from dotenvkit.config import load_config
from dotenvkit.errors import DotenvError
from dotenvkit.parser import Entry
from dotenvkit.sdk import read_documents

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _read_files(ctx: click.Context) -> list[list[Entry]]:
    """Parse the selected files, turning failures into click errors."""
    files = ctx.obj["files"]
    try:
        return read_documents(*files, encoding=ctx.obj["config"].encoding)
    except DotenvError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"{e.filename or files}: {e.strerror or e}")


def _merged(ctx: click.Context) -> dict[str, str]:
    merged: dict[str, str] = {}
    for document in _read_files(ctx):
        for entry in document:
            merged[entry.key] = entry.value
    return merged


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logger = logging.getLogger("dotenvkit")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--file", "-f", "files", multiple=True,
    help="Path to a .env file; repeat for several (default: DOTENVKIT_FILES, config, else .env).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(ctx: click.Context, files: tuple[str, ...], verbose: bool) -> None:
    """Parse, inspect and load .env files."""
    _configure_logging(verbose)
    cfg = load_config()
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["files"] = cfg.resolve_files(files)
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from dotenvkit.cli import (  # noqa: E402, F401
    check_cmd,
    crud_cmd,
    export_cmd,
    list_cmd,
    run_cmd,
)
