# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""zenv CLI -- load a .env file and run commands with it.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``_load_values``, ``_mask``)
live here so every command module can import them.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from zenv import __version__
from zenv.config import load_config
from zenv.env_file import Document, EnvFileNotFoundError, read_env_file

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger("zenv")
    root.handlers.clear()
    root.addHandler(RichHandler(console=console, show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _load_document(ctx: click.Context) -> Document:
    """Read and parse the .env file selected by --file / ZENV_FILE / config."""
    path = ctx.obj["path"]
    try:
        return Document.from_text(read_env_file(path))
    except EnvFileNotFoundError as e:
        raise click.ClickException(str(e))
    except OSError as e:
        raise click.ClickException(f"Unable to read {path}: {e.strerror or e}")
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Unable to read {path}: not valid UTF-8 ({e.reason} at byte {e.start})")


def _load_values(ctx: click.Context) -> dict[str, str]:
    """Return the resolved mapping, expanded when --expand is in effect."""
    doc = _load_document(ctx)
    if ctx.obj["expand"]:
        return doc.expand()
    return doc.to_dict()


def _mask(value: str) -> str:
    if len(value) <= 6:
        return "****"
    return value[:3] + "****" + value[-3:]


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--file", "-f", "path", default=None, help="Path to .env file (default: ZENV_FILE, config, else .env).")
@click.option(
    "--expand", "-x", is_flag=True,
    help="Enable variable expansion in double-quoted values (default: ZENV_EXPAND or config).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    path: str | None,
    expand: bool,
    verbose: bool,
) -> None:
    """Load a .env file and run commands with its variables.

    \b
    Examples:
        zenv -f .env run -- node index.js
        zenv -f .env -x run -- npm run dev
        zenv -x export --format json
    """
    _configure_logging(verbose)
    try:
        cfg = load_config()
        ctx.ensure_object(dict)
        ctx.obj["path"] = cfg.resolve_file(path)
        ctx.obj["expand"] = cfg.resolve_expand(True if expand else None)
    except ValueError as e:
        raise click.UsageError(str(e))


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from zenv.cli import (  # noqa: E402, F401
    run_cmd,
    export_cmd,
    list_cmd,
    get_cmd,
)
