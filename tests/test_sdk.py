"""Tests for the python-dotenv-style loader API."""

from __future__ import annotations

import os
import sys

import pytest

from dotenvkit import (
    EnvError,
    ParseError,
    dotenv_values,
    load_dotenv,
    load_into,
    marshal,
    write_dotenv,
)
from dotenvkit.environ import MemoryEnvironment
from dotenvkit.parser import Entry
from dotenvkit.sdk import read_documents, run_with_env


def test_load_dotenv_sets_variables(sample_env, memory_env):
    assert load_dotenv(sample_env, environ=memory_env) is True
    assert memory_env.get("HOST") == "localhost"
    assert memory_env.get("GREETING") == "hello world"
    assert memory_env.get("URL") == "http://localhost:3000/api"


def test_load_dotenv_override_false_keeps_existing(sample_env):
    env = MemoryEnvironment({"HOST": "preset"})
    assert load_dotenv(sample_env, environ=env) is True
    assert env.get("HOST") == "preset"
    # Expansion sees the file's own HOST, not the preset one.
    assert env.get("URL") == "http://localhost:3000/api"


def test_load_dotenv_override_true(sample_env):
    env = MemoryEnvironment({"HOST": "preset"})
    load_dotenv(sample_env, override=True, environ=env)
    assert env.get("HOST") == "localhost"


def test_load_dotenv_returns_false_when_nothing_set(tmp_path):
    p = tmp_path / ".env"
    p.write_text("A=1\n")
    env = MemoryEnvironment({"A": "0"})
    assert load_dotenv(p, environ=env) is False
    assert env.get("A") == "0"


def test_load_dotenv_expands_against_target_environment(tmp_path):
    p = tmp_path / ".env"
    p.write_text("DATA=$HOME/data\n")
    env = MemoryEnvironment({"HOME": "/home/u"})
    load_dotenv(p, environ=env)
    assert env.get("DATA") == "/home/u/data"


def test_parse_error_in_any_file_sets_nothing(tmp_path, memory_env):
    good = tmp_path / "good.env"
    good.write_text("A=1\n")
    bad = tmp_path / "bad.env"
    bad.write_text("B=2\nBROKEN\n")
    with pytest.raises(ParseError) as exc:
        load_dotenv(good, bad, environ=memory_env)
    assert exc.value.line == 2
    assert exc.value.path == str(bad)
    assert str(exc.value) == f"{bad}:2: {exc.value.reason}"
    assert memory_env.values == {}


def test_missing_file_raises_os_error(tmp_path, memory_env):
    with pytest.raises(FileNotFoundError):
        load_dotenv(tmp_path / "nope.env", environ=memory_env)


def test_load_dotenv_into_os_environ(tmp_path):
    p = tmp_path / ".env"
    p.write_text("DOTENVKIT_SDK_A=1\nDOTENVKIT_SDK_B='two'\n")
    os.environ.pop("DOTENVKIT_SDK_A", None)
    os.environ.pop("DOTENVKIT_SDK_B", None)
    try:
        assert load_dotenv(p) is True
        assert os.environ["DOTENVKIT_SDK_A"] == "1"
        assert os.environ["DOTENVKIT_SDK_B"] == "two"
    finally:
        os.environ.pop("DOTENVKIT_SDK_A", None)
        os.environ.pop("DOTENVKIT_SDK_B", None)


def test_default_path_is_dot_env(tmp_path, memory_env):
    (tmp_path / ".env").write_text("FROM_DEFAULT=yes\n")
    assert load_dotenv(environ=memory_env) is True
    assert memory_env.get("FROM_DEFAULT") == "yes"


def test_default_paths_from_env_var(tmp_path, monkeypatch, memory_env):
    (tmp_path / "a.env").write_text("A=1\n")
    (tmp_path / "b.env").write_text("B=2\n")
    monkeypatch.setenv("DOTENVKIT_FILES", "a.env, b.env")
    assert dotenv_values(environ=memory_env) == {"A": "1", "B": "2"}


def test_defaults_from_config_file(tmp_path):
    (tmp_path / ".dotenvkit.toml").write_text('[dotenvkit]\nfiles = ["base.env"]\noverride = true\n')
    (tmp_path / "base.env").write_text("A=from-file\n")
    env = MemoryEnvironment({"A": "preset"})
    load_dotenv(environ=env)
    assert env.get("A") == "from-file"


def test_override_env_var(tmp_path, monkeypatch):
    p = tmp_path / ".env"
    p.write_text("A=from-file\n")
    monkeypatch.setenv("DOTENVKIT_OVERRIDE", "1")
    env = MemoryEnvironment({"A": "preset"})
    load_dotenv(p, environ=env)
    assert env.get("A") == "from-file"


def test_dotenv_values_later_files_win(tmp_path, memory_env):
    base = tmp_path / "base.env"
    base.write_text("A=1\nB=1\n")
    local = tmp_path / "local.env"
    local.write_text("B=2\nC=2\n")
    assert dotenv_values(base, local, environ=memory_env) == {"A": "1", "B": "2", "C": "2"}
    assert memory_env.values == {}


def test_read_documents_keeps_files_separate(tmp_path, memory_env):
    one = tmp_path / "one.env"
    one.write_text("A=1\n")
    two = tmp_path / "two.env"
    two.write_text("\nB=$A\n")
    # Expansion does not cross files.
    assert read_documents(one, two, environ=memory_env) == [
        [Entry("A", "1", 1)],
        [Entry("B", "", 2)],
    ]


def test_load_into_order_and_override():
    documents = [[Entry("A", "1", 1)], [Entry("A", "2", 1)]]
    keep_first = MemoryEnvironment()
    assert load_into(documents, override=False, environ=keep_first) == 1
    assert keep_first.get("A") == "1"
    take_last = MemoryEnvironment()
    assert load_into(documents, override=True, environ=take_last) == 2
    assert take_last.get("A") == "2"


def test_load_into_stops_at_first_failure():
    env = MemoryEnvironment()
    documents = [[Entry("A", "1", 1), Entry("B", "bad\0value", 2), Entry("C", "3", 3)]]
    with pytest.raises(EnvError):
        load_into(documents, environ=env)
    assert env.values == {"A": "1"}


def test_write_dotenv(tmp_path):
    target = tmp_path / "nested" / ".env"
    data = {"PORT": "3000", "HOST": "localhost"}
    write_dotenv(data, target)
    assert target.read_text() == marshal(data)
    assert dotenv_values(target, environ=MemoryEnvironment()) == data


def test_run_with_env(tmp_path):
    p = tmp_path / ".env"
    p.write_text("DOTENVKIT_RUN_VAR=yes\n")
    script = "import os, sys; sys.exit(0 if os.environ.get('DOTENVKIT_RUN_VAR') == 'yes' else 3)"
    assert run_with_env([sys.executable, "-c", script], p) == 0
    assert "DOTENVKIT_RUN_VAR" not in os.environ


def test_run_with_env_encoding(tmp_path):
    p = tmp_path / ".env"
    p.write_bytes("DOTENVKIT_RUN_CAFE=café\n".encode("latin-1"))
    script = "import os, sys; sys.exit(0 if os.environ.get('DOTENVKIT_RUN_CAFE') == 'caf\\u00e9' else 3)"
    assert run_with_env([sys.executable, "-c", script], p, encoding="latin-1") == 0
