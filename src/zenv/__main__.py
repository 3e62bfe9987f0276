# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the zenv CLI (run via ``zenv`` or ``python -m zenv``)."""

from __future__ import annotations

import sys


def main() -> None:
    """Run the CLI."""
    try:
        from zenv.cli import cli
    except ImportError:
        sys.stderr.write("zenv CLI dependencies missing. Install with: pip install zenv\n")
        sys.exit(1)
    cli()


if __name__ == "__main__":
    main()
