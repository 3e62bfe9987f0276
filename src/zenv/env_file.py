# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Parse .env files into ordered key-value entries.

Handles:
  - blank lines and lines starting with ``#``
  - ``KEY=value`` with only the first ``=`` splitting
  - single-quoted values (literal, raw newlines re-escaped as ``\\n``)
  - double-quoted values (``\\n`` and ``\\\\`` escapes resolved, eligible for expansion)
  - inline comments after unquoted values
  - unterminated quotes, which keep the quote character as literal text

A line never fails to parse: anything that is not a key-value pair is ``EMPTY``.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zenv.expansion import EnvLookup

logger = logging.getLogger(__name__)

LF = "\n"
HASH = "#"
BACKSLASH = "\\"
S_QUOTE = "'"
D_QUOTE = '"'


class EnvFileNotFoundError(FileNotFoundError):
    """The .env file path does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Unable to find file - {self.path}")


class Quote(enum.Enum):
    """Quoting style of a parsed value."""

    NO = "no"
    SINGLE = "single"
    DOUBLE = "double"


@dataclass(frozen=True)
class KeyVal:
    """One parsed ``key=value`` line."""

    key: str
    value: str
    quote: Quote = Quote.NO


class Empty:
    """Result for blank, comment, and ``=``-less lines."""

    _instance: Empty | None = None

    def __new__(cls) -> Empty:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty()


def normalize_escapes(text: str) -> str:
    """Resolve ``\\n`` to a newline and ``\\\\`` to one backslash.

    Any other backslash pair is kept as written, as is a trailing backslash.
    """
    out: list[str] = []
    saw_backslash = False
    for ch in text:
        if saw_backslash:
            if ch == "n":
                out.append(LF)
            elif ch == BACKSLASH:
                out.append(BACKSLASH)
            else:
                out.append(BACKSLASH + ch)
            saw_backslash = False
        elif ch == BACKSLASH:
            saw_backslash = True
        else:
            out.append(ch)
    if saw_backslash:
        out.append(BACKSLASH)
    return "".join(out)


def _escape_lf(text: str) -> str:
    return text.replace(LF, "\\n")


def _strip_comment(raw: str) -> str:
    return raw.split(HASH, 1)[0].strip()


def _find_closing_dquote(raw: str) -> int:
    """Index of the first unescaped ``"`` after the opener, or -1."""
    i = 1
    while i < len(raw):
        ch = raw[i]
        if ch == BACKSLASH:
            i += 2
            continue
        if ch == D_QUOTE:
            return i
        i += 1
    return -1


def parse_line(line: str) -> KeyVal | Empty:
    """Parse one physical line of a .env file."""
    if not line or line.startswith(HASH):
        return EMPTY

    key, sep, raw = line.partition("=")
    if not sep:
        return EMPTY
    key = key.strip()

    if raw.startswith(D_QUOTE):
        end = _find_closing_dquote(raw)
        if end == -1:
            return KeyVal(key, _strip_comment(raw), Quote.NO)
        return KeyVal(key, normalize_escapes(raw[1:end]), Quote.DOUBLE)

    if raw.startswith(S_QUOTE):
        end = raw.find(S_QUOTE, 1)
        if end == -1:
            return KeyVal(key, _escape_lf(_strip_comment(raw)), Quote.NO)
        return KeyVal(key, _escape_lf(raw[1:end]), Quote.SINGLE)

    return KeyVal(key, _escape_lf(_strip_comment(raw)), Quote.NO)


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n`` and ``\\r\\n`` only; other line-break characters stay in values."""
    lines = text.split(LF)
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass(frozen=True)
class Document:
    """Ordered key-value entries of one .env file."""

    entries: tuple[KeyVal, ...] = ()

    @classmethod
    def from_text(cls, text: str) -> Document:
        entries = []
        for line in _split_lines(text):
            parsed = parse_line(line)
            if isinstance(parsed, KeyVal):
                entries.append(parsed)
        return cls(tuple(entries))

    def __iter__(self) -> Iterator[KeyVal]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        """Unique keys in first-seen order."""
        return list(dict.fromkeys(e.key for e in self.entries))

    def to_dict(self) -> dict[str, str]:
        """Fold entries into a mapping; the last entry for a key wins."""
        return {e.key: e.value for e in self.entries}

    def expand(self, lookup: EnvLookup | None = None) -> dict[str, str]:
        """Fold and expand ``$VAR`` / ``${VAR}`` in double-quoted values."""
        from zenv.expansion import expand

        return expand(self, lookup)


def read_env_file(path: str | Path) -> str:
    """Return the full text of *path*.

    Raises ``EnvFileNotFoundError`` when the file does not exist; any other
    ``OSError`` from reading propagates unchanged, as does ``UnicodeDecodeError``
    for a file that is not UTF-8.
    """
    p = Path(path)
    if not p.exists():
        raise EnvFileNotFoundError(p)
    with p.open(encoding="utf-8", newline="") as f:
        return f.read()


def parse_env_file(
    path: str | Path,
    expand: bool = False,
    lookup: EnvLookup | None = None,
) -> dict[str, str]:
    """Read a .env file and return its resolved key-value pairs."""
    doc = Document.from_text(read_env_file(path))
    logger.debug("Parsed %d entries from %s", len(doc), path)
    if expand:
        return doc.expand(lookup)
    return doc.to_dict()
