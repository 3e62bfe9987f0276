"""Shared fixtures for zenv tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in its own cwd with no ZENV_* overrides leaking in.

    Without this, a ``.zenv.toml`` or ``.env`` in the developer's checkout (or
    ZENV_FILE / ZENV_EXPAND in their shell) would change what the CLI and SDK load.
    """
    monkeypatch.delenv("ZENV_FILE", raising=False)
    monkeypatch.delenv("ZENV_EXPAND", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def sample_env(tmp_path):
    """Create a sample .env file and return its path."""
    content = """\
BASIC=basic

# previous line intentionally left blank
AFTER_LINE=after_line
EMPTY=
SINGLE_QUOTES='single_quotes'
SINGLE_QUOTES_SPACED='    single_quotes    '
DOUBLE_QUOTES="double_quotes"
DOUBLE_QUOTES_SPACED="    double_quotes    "
EXPAND_NEWLINES="expand\\nnew\\nlines"
DONT_EXPAND_UNQUOTED=dont\\nexpand\\nnew\\nlines
DONT_EXPAND_SQUOTED='dont\\nexpand\\nnew\\nlines'
# COMMENTS=work
INLINE_COMMENTS=inline comments # work #very #well
EQUAL_SIGNS=equals==
RETAIN_INNER_QUOTES={"foo": "bar"}
RETAIN_INNER_QUOTES_AS_STRING='{"foo": "bar"}'
TRIM_SPACE_FROM_UNQUOTED=    some spaced out string
USERNAME=therealnerdybeast@example.tld
    SPACED_KEY = parsed
"""
    p = tmp_path / ".env"
    p.write_text(content)
    return p


@pytest.fixture()
def expanded_env(tmp_path):
    """Create a .env file exercising variable expansion and return its path."""
    content = """\
BASIC=basic
EXPANDED="$BASIC-expanded"
DOUBLE_EXPANDED="$BASIC-$EXPANDED"
EXPANDED_NEW="${BASIC}_expanded"
DOUBLE_EXPANDED_NEW="${BASIC}_${DOUBLE_EXPANDED}"
LITERAL='$BASIC'
UNQUOTED=$BASIC
"""
    p = tmp_path / ".env.expanded"
    p.write_text(content)
    return p
