# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``dotenvkit run`` -- run a command with the selected files loaded."""

from __future__ import annotations

import click

from dotenvkit.cli import cli
from dotenvkit.errors import DotenvError
from dotenvkit.sdk import run_with_env


@cli.command(context_settings={"ignore_unknown_options": True})
@click.option(
    "--override/--no-override", default=True,
    help="Let file values replace variables already set (default: override).",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, override: bool, command: tuple[str, ...]) -> None:
    """Run COMMAND with the variables from the selected files.

    Use ``--`` to separate options meant for COMMAND:
    dotenvkit -f .env.test run -- pytest -x
    """
    try:
        code = run_with_env(
            command, *ctx.obj["files"], override=override,
            encoding=ctx.obj["config"].encoding,
        )
    except DotenvError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"{e.filename}: {e.strerror}")
    ctx.exit(code)
