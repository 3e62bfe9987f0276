# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

""".zenv.toml configuration loading.

Searches upward from cwd for ``.zenv.toml`` and merges with environment
variables and CLI flags.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_FILENAME = ".zenv.toml"
DEFAULT_ENV_FILE = ".env"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class ZenvConfig:
    """Resolved configuration for the current invocation."""

    file: str = DEFAULT_ENV_FILE
    expand: bool = False
    override: bool = True
    config_path: Path | None = None

    def resolve_file(self, file: str | Path | None = None) -> Path:
        """Explicit *file*, then ``ZENV_FILE``, then the configured file."""
        return Path(file or os.environ.get("ZENV_FILE") or self.file)

    def resolve_expand(self, expand: bool | None = None) -> bool:
        """Explicit *expand*, then ``ZENV_EXPAND``, then the configured flag."""
        if expand is not None:
            return expand
        raw = os.environ.get("ZENV_EXPAND")
        if raw:
            return parse_bool(raw, "ZENV_EXPAND")
        return self.expand

    def resolve_override(self, override: bool | None = None) -> bool:
        """Explicit *override*, then the configured flag."""
        if override is not None:
            return override
        return self.override


def parse_bool(raw: str, name: str) -> bool:
    """Parse a boolean flag from text such as ``1``, ``true`` or ``off``."""
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


def _get_bool(section: dict[str, Any], name: str, default: bool) -> bool:
    value = section.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{name}' in {CONFIG_FILENAME} must be true or false, got {value!r}")
    return value


def find_config_file(start: Path | None = None) -> Path | None:
    """Walk upward from *start* (default cwd) looking for ``.zenv.toml``."""
    cur = (start or Path.cwd()).resolve()
    while True:
        candidate = cur / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            return None
        cur = cur.parent


def load_config(path: Path | None = None) -> ZenvConfig:
    """Load and return config.  Returns defaults if no file found."""
    if path is None:
        path = find_config_file()
    if path is None:
        return ZenvConfig()

    raw: dict[str, Any] = tomllib.loads(path.read_text())
    section = raw.get("zenv", {})

    return ZenvConfig(
        file=section.get("file", DEFAULT_ENV_FILE),
        expand=_get_bool(section, "expand", False),
        override=_get_bool(section, "override", True),
        config_path=path,
    )
