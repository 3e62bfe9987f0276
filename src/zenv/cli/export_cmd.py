# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``zenv export`` and ``zenv unexport`` commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from zenv.cli import HAS_YAML, _load_document, _load_values, cli, console

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
    help="Output format: dotenv (default, KEY=value), unix (export KEY=value), win (PowerShell), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@click.pass_context
def export(ctx: click.Context, fmt: str, output: str | None) -> None:
    """Print the resolved variables to stdout or a file.

    Use --format unix for shell sourcing: eval "$(zenv -x export --format unix)".
    Use --format win for PowerShell: zenv export --format win | Invoke-Expression.
    """
    pairs = _load_values(ctx)

    if fmt == "yaml" and not HAS_YAML:
        console.print("[red]PyYAML is not installed. Install with: pip install pyyaml[/red]")
        ctx.exit(1)

    if output:
        path = Path(output)
        count = len(pairs)
        with path.open("w", encoding="utf-8") as f:
            if fmt == "json":
                f.write(json.dumps(pairs, indent=2))
                f.write("\n")
            elif fmt == "yaml":
                yaml.dump(pairs, f, default_flow_style=False, sort_keys=True)
            else:
                lines = _format_export_lines(pairs, fmt)
                count = len(lines)
                for line in lines:
                    f.write(line + "\n")
        console.print(f"[green]Exported {count} variable(s) to {escape(output)}[/green]")
    else:
        out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
        if fmt == "json":
            out.print(json.dumps(pairs, indent=2))
        elif fmt == "yaml":
            yaml.dump(pairs, sys.stdout, default_flow_style=False, sort_keys=True)
        else:
            for line in _format_export_lines(pairs, fmt):
                out.print(line)


def _shell_escape(value: str) -> str:
    """Escape for Unix sh: single-quote wrapped, internal ' -> '\\''."""
    if not value or any(c in value for c in " \t\n'\"\\$`!#&|;(){}<>*?"):
        return "'" + value.replace("'", "'\\''") + "'"
    return value


def _powershell_escape(value: str) -> str:
    """Escape for PowerShell single-quoted string: ' -> ''."""
    return value.replace("'", "''")


def _dotenv_escape(value: str) -> str | None:
    """Quote *value* so it reads back unchanged, or return None if no quoting can.

    Unquoted values are trimmed and cut at ``#``; single quotes are literal but
    cannot hold ``'`` or a newline; double quotes only understand ``\\n`` and
    ``\\\\`` and are expanded with ``-x``, so ``"`` and ``$`` rule them out.
    """
    if not any(c in value for c in "\n#") and value == value.strip() and not value.startswith(("'", '"')):
        return value
    if "'" not in value and "\n" not in value:
        return f"'{value}'"
    if '"' not in value and "$" not in value:
        return '"' + value.replace("\\", "\\\\").replace("\n", "\\n") + '"'
    return None


def _format_export_lines(pairs: dict[str, str], fmt: str) -> list[str]:
    lines: list[str] = []
    for key, value in sorted(pairs.items()):
        if fmt == "unix":
            lines.append(f"export {key}={_shell_escape(value)}")
        elif fmt == "win":
            lines.append(f"$env:{key} = '{_powershell_escape(value)}'")
        else:
            quoted = _dotenv_escape(value)
            if quoted is None:
                console.print(f"[yellow]Skipping {escape(key)}: value cannot be written to a .env file[/yellow]")
                continue
            lines.append(f"{key}={quoted}")
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
    """Output shell unset commands for all variables that export would set.

    Unix: eval "$(zenv unexport)". Win: zenv unexport --format win | Invoke-Expression.
    """
    keys = _load_document(ctx).keys()

    out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
    for key in sorted(keys):
        if fmt == "win":
            out.print(f"Remove-Item Env:{key} -ErrorAction SilentlyContinue")
        else:
            out.print(f"unset {key}")
