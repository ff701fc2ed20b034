# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit check`` command."""

from __future__ import annotations

import click

from dotenvkit.cli import _read_files, cli, console


@cli.command()
@click.pass_context
def check(ctx: click.Context) -> None:
    """Validate the syntax of the selected files."""
    documents = _read_files(ctx)
    for path, document in zip(ctx.obj["files"], documents):
        console.print(f"[green]{path}: {len(document)} variable(s) OK[/green]", soft_wrap=True)
