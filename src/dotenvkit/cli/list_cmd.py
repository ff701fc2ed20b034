# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit list`` command."""

from __future__ import annotations

import click
from rich.table import Table

from dotenvkit.cli import _mask, _read_files, cli, console


@cli.command("list")
@click.option("--show-values", is_flag=True, help="Show values instead of masking them.")
@click.pass_context
def list_keys(ctx: click.Context, show_values: bool) -> None:
    """List variables defined in the selected files."""
    documents = _read_files(ctx)
    table = Table(title="Variables")
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Key", style="white", no_wrap=True)
    table.add_column("Value" if show_values else "Value (masked)", style="dim")
    has_rows = False
    for path, document in zip(ctx.obj["files"], documents):
        for entry in document:
            shown = entry.value if show_values else _mask(entry.value)
            table.add_row(str(path), str(entry.line), entry.key, shown)
            has_rows = True
    if not has_rows:
        console.print("[yellow]No variables found.[/yellow]")
        return
    console.print(table)
