# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Launch a child command with .env values merged into its environment."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


class RunnerError(Exception):
    """Base class for failures launching or waiting on a child command."""


class SpawnError(RunnerError):
    """The command could not be started (not found, not executable, ...)."""

    def __init__(self, binary: str, reason: str) -> None:
        self.binary = binary
        super().__init__(f"Unable to spawn program '{binary}': {reason}")


class ExitCodeError(RunnerError):
    """The command ended without an exit code (terminated by a signal)."""

    def __init__(self, binary: str, returncode: int) -> None:
        self.binary = binary
        self.signal = -returncode
        super().__init__(f"Failed to grab the exit code of '{binary}': terminated by signal {self.signal}")


def build_environment(
    overrides: Mapping[str, str],
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Return *base* (default ``os.environ``) with *overrides* applied on top."""
    env = dict(os.environ if base is None else base)
    for key, value in overrides.items():
        if not key or "=" in key or "\0" in key:
            logger.warning("Skipping invalid environment variable name %r", key)
            continue
        env[key] = value
    return env


def run_command(
    binary: str,
    args: Sequence[str] = (),
    overrides: Mapping[str, str] | None = None,
) -> int:
    """Run *binary* with *args*, inheriting stdio, and return its exit code."""
    env = build_environment(overrides or {})
    logger.debug("Running %s with %d override(s)", binary, len(overrides or {}))
    try:
        proc = subprocess.run([binary, *args], env=env, check=False)
    except OSError as e:
        raise SpawnError(binary, e.strerror or str(e)) from e
    if proc.returncode < 0:
        raise ExitCodeError(binary, proc.returncode)
    return proc.returncode
