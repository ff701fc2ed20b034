# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit get``, ``dotenvkit set``, ``dotenvkit unset`` commands.

``set`` and ``unset`` rewrite the first selected file in canonical form
(sorted keys, values quoted by :func:`dotenvkit.marshal.marshal`).
"""

from __future__ import annotations

from pathlib import Path

import click

from dotenvkit.cli import _merged, cli, console
from dotenvkit.errors import DotenvError
from dotenvkit.lexer import is_valid_key
from dotenvkit.parser import Parser
from dotenvkit.sdk import write_dotenv


def _read_target(ctx: click.Context) -> tuple[Path, dict[str, str]]:
    path = Path(ctx.obj["files"][0])
    if not path.is_file():
        return path, {}
    try:
        return path, Parser().parse(path.read_text(encoding=ctx.obj["config"].encoding))
    except DotenvError as e:
        raise click.ClickException(f"{path}: {e}")


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print the value of a single variable."""
    values = _merged(ctx)
    if key not in values:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(values[key])


@cli.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def set_key(ctx: click.Context, key: str, value: str) -> None:
    """Set a variable in the first file."""
    if not is_valid_key(key):
        raise click.ClickException(
            f"Invalid key '{key}': keys cannot be empty, start with '#', "
            "or contain whitespace, quotes, '=' or ':'."
        )
    path, data = _read_target(ctx)
    data[key] = value
    write_dotenv(data, path, encoding=ctx.obj["config"].encoding)
    console.print(f"[green]Set {key} in {path}[/green]", soft_wrap=True)


@cli.command()
@click.argument("key")
@click.pass_context
def unset(ctx: click.Context, key: str) -> None:
    """Remove a variable from the first file."""
    path, data = _read_target(ctx)
    if key not in data:
        raise click.ClickException(f"Key '{key}' not found in {path}.")
    del data[key]
    write_dotenv(data, path, encoding=ctx.obj["config"].encoding)
    console.print(f"[green]Removed {key} from {path}[/green]", soft_wrap=True)
