# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``zenv get`` command."""

from __future__ import annotations

import click

from zenv.cli import _load_values, cli


@cli.command()
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, key: str) -> None:
    """Print a single resolved value."""
    value = _load_values(ctx).get(key)
    if value is None:
        raise click.ClickException(f"Key '{key}' not found.")
    click.echo(value)
