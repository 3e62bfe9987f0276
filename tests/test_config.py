"""Tests for .zenv.toml config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from zenv.config import ZenvConfig, find_config_file, load_config, parse_bool


def test_load_config_defaults():
    cfg = load_config(path=None)
    assert cfg.file == ".env"
    assert cfg.expand is False
    assert cfg.override is True
    assert cfg.config_path is None


def test_load_config_from_file(tmp_path):
    toml = tmp_path / ".zenv.toml"
    toml.write_text("""\
[zenv]
file = ".env.development"
expand = true
override = false
""")
    cfg = load_config(toml)
    assert cfg.file == ".env.development"
    assert cfg.expand is True
    assert cfg.override is False
    assert cfg.config_path == toml


def test_load_config_missing_section(tmp_path):
    toml = tmp_path / ".zenv.toml"
    toml.write_text("[other]\nkey = 1\n")
    assert load_config(toml) == ZenvConfig(config_path=toml)


def test_load_config_invalid_toml_syntax(tmp_path):
    toml = tmp_path / ".zenv.toml"
    toml.write_text("[zenv\nfile = \"x\"")  # unclosed bracket
    with pytest.raises(ValueError):  # TOMLDecodeError subclasses ValueError
        load_config(toml)


def test_load_config_non_boolean_expand(tmp_path):
    toml = tmp_path / ".zenv.toml"
    toml.write_text("[zenv]\nexpand = \"yes\"\n")
    with pytest.raises(ValueError, match="expand"):
        load_config(toml)


def test_find_config_file_walks_upward(tmp_path):
    toml = tmp_path / ".zenv.toml"
    toml.write_text("[zenv]\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) == toml.resolve()


def test_load_config_uses_cwd(tmp_path):
    (tmp_path / ".zenv.toml").write_text("[zenv]\nfile = \"from-cwd.env\"\n")
    assert load_config().file == "from-cwd.env"


def test_resolve_file_precedence(monkeypatch):
    cfg = ZenvConfig(file="config.env")
    assert cfg.resolve_file() == Path("config.env")
    monkeypatch.setenv("ZENV_FILE", "env.env")
    assert cfg.resolve_file() == Path("env.env")
    assert cfg.resolve_file("flag.env") == Path("flag.env")


def test_resolve_expand_precedence(monkeypatch):
    cfg = ZenvConfig(expand=False)
    assert cfg.resolve_expand() is False
    monkeypatch.setenv("ZENV_EXPAND", "on")
    assert cfg.resolve_expand() is True
    assert cfg.resolve_expand(False) is False


def test_resolve_override_precedence():
    cfg = ZenvConfig(override=False)
    assert cfg.resolve_override() is False
    assert cfg.resolve_override(True) is True
    assert ZenvConfig().resolve_override() is True


@pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
def test_parse_bool_true(raw):
    assert parse_bool(raw, "X") is True


@pytest.mark.parametrize("raw", ["0", "False", "no", "OFF"])
def test_parse_bool_false(raw):
    assert parse_bool(raw, "X") is False


def test_parse_bool_invalid():
    with pytest.raises(ValueError, match="ZENV_EXPAND"):
        parse_bool("maybe", "ZENV_EXPAND")
