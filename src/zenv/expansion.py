# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Variable expansion for double-quoted .env values.

``$NAME`` and ``${NAME}`` references are resolved against the file's keys
first (last definition wins) and the ambient environment second; unknown
names become ``""``. Double-quoted values are rewritten top to bottom, so a
value sees the expanded form of a key whose winning definition is above it
and the raw form of one defined further down.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import TYPE_CHECKING

from zenv.env_file import Quote

if TYPE_CHECKING:
    from zenv.env_file import Document

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], str | None]


def _is_name_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def expand_value(value: str, resolve: Callable[[str], str]) -> str:
    """Replace every ``$NAME`` / ``${NAME}`` in *value* using *resolve*.

    A bare name ends at the first character that is not alphanumeric or
    ``_``; that character is copied as-is and scanning resumes after it, so
    ``$A$B`` expands only ``A``. Substituted text is not scanned again.
    """
    out: list[str] = []
    i = 0
    n = len(value)
    while i < n:
        ch = value[i]
        if ch != "$":
            out.append(ch)
            i += 1
            continue

        if i + 1 < n and value[i + 1] == "{":
            close = value.find("}", i + 2)
            if close == -1:
                out.append(resolve(value[i + 2:]))
                i = n
            else:
                out.append(resolve(value[i + 2:close]))
                i = close + 1
            continue

        start = i + 1
        end = start
        while end < n and _is_name_char(value[end]):
            end += 1
        out.append(resolve(value[start:end]))
        if end < n:
            out.append(value[end])
        i = end + 1
    return "".join(out)


def expand(document: Document, lookup: EnvLookup | None = None) -> dict[str, str]:
    """Fold *document* into a mapping and expand its double-quoted values.

    References resolve against the folded mapping (values rewritten earlier in
    the pass included), then *lookup* (``os.environ.get`` by default), then
    ``""``. Only the entry that wins the fold for its key is rewritten. The
    document itself is never modified.
    """
    if lookup is None:
        lookup = os.environ.get

    resolved = document.to_dict()
    winners = {entry.key: entry for entry in document}

    for entry in document:
        if entry.quote is not Quote.DOUBLE or winners[entry.key] is not entry:
            continue

        def resolve(name: str, _key: str = entry.key) -> str:
            if name in resolved:
                return resolved[name]
            found = lookup(name)
            if found is None:
                logger.debug("No value for $%s in %s, using empty string", name, _key)
                return ""
            return found

        resolved[entry.key] = expand_value(entry.value, resolve)

    return resolved
