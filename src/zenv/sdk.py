# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""SDK for loading .env files into the environment (python-dotenv style)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from zenv.config import ZenvConfig, load_config
from zenv.env_file import EnvFileNotFoundError, parse_env_file
from zenv.expansion import EnvLookup

logger = logging.getLogger(__name__)


class Zenv:
    """Load and configure environment variables from one .env file.

    Examples
    --------
    >>> Zenv(".env").configure()
    3
    >>> Zenv(".env.development", expand=True).parse()["DATABASE_URL"]
    'postgres://localhost/dev'
    """

    def __init__(
        self,
        path: str | Path = ".env",
        expand: bool = False,
        lookup: EnvLookup | None = None,
    ) -> None:
        self.path = Path(path)
        self.expand = expand
        self._lookup = lookup

    def __repr__(self) -> str:
        return f"Zenv(path={str(self.path)!r}, expand={self.expand!r})"

    def parse(self) -> dict[str, str]:
        """Read and parse the file; raises ``EnvFileNotFoundError`` if missing."""
        return parse_env_file(self.path, expand=self.expand, lookup=self._lookup)

    def configure(self, override: bool = True) -> int:
        """Parse the file and write its values into ``os.environ``.

        Returns the number of variables set. With ``override=False`` keys that
        already exist in the environment are left alone.
        """
        count = 0
        for key, value in self.parse().items():
            if key in os.environ and not override:
                continue
            os.environ[key] = value
            count += 1
        logger.debug("Set %d variable(s) from %s", count, self.path)
        return count


def _resolve(path: str | Path | None, expand: bool | None) -> tuple[ZenvConfig, Zenv]:
    """Resolve path and expand flag from args, env, and config (same as CLI)."""
    cfg = load_config()
    return cfg, Zenv(cfg.resolve_file(path), expand=cfg.resolve_expand(expand))


def dotenv_values(
    path: str | Path | None = None,
    expand: bool | None = None,
) -> dict[str, str]:
    """Return the file's values as a dict without modifying os.environ.

    Parameters
    ----------
    path : str or Path, optional
        .env file to read. Defaults from ZENV_FILE, then ``.zenv.toml``, then ``.env``.
    expand : bool, optional
        Expand ``$VAR`` references in double-quoted values. Defaults from
        ZENV_EXPAND, then ``.zenv.toml``, then False.

    Raises
    ------
    EnvFileNotFoundError
        If the file does not exist.
    """
    _, z = _resolve(path, expand)
    return z.parse()


def load_dotenv(
    path: str | Path | None = None,
    expand: bool | None = None,
    override: bool | None = None,
) -> bool:
    """Load the file's values into os.environ (python-dotenv compatible API).

    A missing file is not an error here: a warning is logged and False returned.

    Parameters
    ----------
    override : bool, optional
        Replace variables that are already set. Defaults from ``.zenv.toml``,
        then True.

    Returns
    -------
    bool
        True if at least one variable was set, False otherwise.
    """
    cfg, z = _resolve(path, expand)
    try:
        return z.configure(override=cfg.resolve_override(override)) > 0
    except EnvFileNotFoundError as e:
        logger.warning("%s", e)
        return False
