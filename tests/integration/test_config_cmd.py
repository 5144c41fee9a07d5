"""Integration tests: vocablists config --show / --set."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vocablists.commands.config_cmd import run as config_run
from vocablists.config import global_config_path, load_config


def _config(show: bool = False, set_key: str | None = None, config: Path | None = None) -> None:
    args = type("Args", (), {"show": show, "set_key": set_key, "config": config})()
    config_run(args)


def test_show_outputs_json(capsys) -> None:
    _config(show=True)
    out = capsys.readouterr().out
    start = out.find("{")
    assert start >= 0, "Expected JSON in config output"
    data = json.loads(out[start:])
    assert data["store"]["backend"] == "sqlite"


def test_set_writes_global_config() -> None:
    _config(set_key="validation.word_pattern=^[a-z']+$")
    _config(set_key="logging.file=null")
    saved = json.loads(global_config_path().read_text(encoding="utf-8"))
    assert saved == {"validation": {"word_pattern": "^[a-z']+$"}, "logging": {"file": None}}
    assert load_config()["validation"]["word_pattern"] == "^[a-z']+$"


def test_set_writes_explicit_config(tmp_path: Path) -> None:
    target = tmp_path / "project.json"
    _config(set_key="store.backend=memory", config=target)
    assert json.loads(target.read_text(encoding="utf-8")) == {"store": {"backend": "memory"}}
    assert not global_config_path().exists()


def test_requires_an_option(capsys) -> None:
    with pytest.raises(SystemExit):
        _config()
    assert "--show or --set" in capsys.readouterr().err
