# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit export`` and ``dotenvkit unexport`` commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console

from dotenvkit.cli import HAS_YAML, _merged, cli, console
from dotenvkit.marshal import marshal

if HAS_YAML:
    import yaml


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------

@cli.command("export")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "unix", "win", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, canonical KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Export the merged variables of the selected files.

    Default format is dotenv: sorted, with non-integer values double-quoted,
    so the output parses back to the same values. Use --format unix for shell
    sourcing: eval "$(dotenvkit export --format unix)". Use --format win for
    PowerShell: dotenvkit export --format win | Invoke-Expression (or iex).
    """
    pairs = _merged(ctx)
    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install dotenvkit[yaml]")

    if output:
        path = Path(output)
        with path.open("w") as f:
            if fmt == "json":
                f.write(json.dumps(pairs, indent=2, sort_keys=True))
                f.write("\n")
            elif fmt == "yaml":
                yaml.dump(pairs, f, default_flow_style=False, sort_keys=True)
            elif fmt == "dotenv":
                f.write(marshal(pairs))
            else:
                for line in _format_export_lines(pairs, fmt):
                    f.write(line + "\n")
        console.print(f"[green]Exported {len(pairs)} variable(s) to {output}[/green]", soft_wrap=True)
    else:
        out = Console(file=sys.stdout, highlight=False, markup=False, soft_wrap=True)
        if fmt == "json":
            out.print(json.dumps(pairs, indent=2, sort_keys=True))
        elif fmt == "yaml":
            yaml.dump(pairs, sys.stdout, default_flow_style=False, sort_keys=True)
        elif fmt == "dotenv":
            click.echo(marshal(pairs), nl=False)
        else:
            for line in _format_export_lines(pairs, fmt):
                out.print(line)


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}<>*?~"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in sorted(pairs.items()):
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{_powershell_escape(value)}'")
    return lines


# ---------------------------------------------------------------------------
# unexport
# ---------------------------------------------------------------------------

@cli.command("unexport")
@click.option(
    "--format", "fmt",
    type=click.Choice(["unix", "win"]),
    default="unix",
    help="Output format. Default: unix (unset KEY). Use win for PowerShell (Remove-Item Env:KEY).",
)
@click.pass_context
def unexport(ctx: click.Context, fmt: str) -> None:
    """Output shell unset commands for all variables that export would set."""
    out = Console(file=sys.stdout, highlight=False, markup=False, soft_wrap=True)
    for key in sorted(_merged(ctx)):
        if fmt == "win":
            out.print(f"Remove-Item Env:{key} -ErrorAction SilentlyContinue")
        else:
            out.print(f"unset {key}")
