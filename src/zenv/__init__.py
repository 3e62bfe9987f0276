# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Zenv -- load .env files, expand variables, and run commands with them."""

from zenv.env_file import (
    EMPTY,
    Document,
    EnvFileNotFoundError,
    KeyVal,
    Quote,
    parse_env_file,
    parse_line,
)
from zenv.expansion import expand
from zenv.sdk import Zenv, dotenv_values, load_dotenv

__all__ = [
    "__version__",
    "EMPTY",
    "Document",
    "EnvFileNotFoundError",
    "KeyVal",
    "Quote",
    "Zenv",
    "dotenv_values",
    "expand",
    "load_dotenv",
    "parse_env_file",
    "parse_line",
]
__version__ = "0.1.0"
