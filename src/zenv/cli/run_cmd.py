# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``zenv run`` command."""

from __future__ import annotations

import click
from rich.markup import escape

from zenv.cli import _load_values, cli, console
from zenv.runner import RunnerError, run_command


@cli.command(context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False})
@click.argument("binary")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, binary: str, args: tuple[str, ...]) -> None:
    """Run BINARY with ARGS, adding the .env values to its environment.

    Values from the file take precedence over variables already set in the
    environment. zenv exits with the command's exit code.

    \b
    Examples:
        zenv -f .env run -- node index.js
        zenv -f .env run -- terraform apply
    """
    values = _load_values(ctx)
    try:
        code = run_command(binary, list(args), values)
    except RunnerError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)
    ctx.exit(code)
