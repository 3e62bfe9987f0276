# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``zenv list`` command."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from zenv.cli import _load_document, _mask, cli, console


@cli.command("list")
@click.option("--show-values", is_flag=True, help="Show values instead of masking them.")
@click.pass_context
def list_keys(ctx: click.Context, show_values: bool) -> None:
    """List variables in the .env file with masked values."""
    doc = _load_document(ctx)
    values = doc.expand() if ctx.obj["expand"] else doc.to_dict()
    # quote style of the entry that wins the fold
    quotes = {entry.key: entry.quote for entry in doc}

    table = Table(title=f"Variables (file: {escape(str(ctx.obj['path']))})")
    table.add_column("Key", style="cyan")
    table.add_column("Quote", style="dim")
    table.add_column("Value" if show_values else "Value (masked)", style="white")
    if not values:
        table.add_row("(empty)", "", "(empty)")
    else:
        for key in doc.keys():
            val = values[key]
            shown = val if show_values else (_mask(val) if val else "(empty)")
            table.add_row(escape(key), quotes[key].value, escape(shown))
    console.print(table)
