"""Integration tests: vocablists export / import."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from vocablists.commands.export import run as export_run
from vocablists.commands.import_cmd import run as import_run
from vocablists.lists import ListStore
from vocablists.storage import SQLiteStore


@pytest.fixture
def db(tmp_path: Path) -> Path:
    with SQLiteStore(tmp_path / "words.db") as st:
        lists = ListStore(st)
        lists.create_custom_list("fruit")
        for w in ("Apple", "pear", "APPLE"):
            lists.add_custom_word("fruit", w)
    return tmp_path / "words.db"


def _export(db: Path, name: str, output: Path | None = None) -> None:
    args = type("Args", (), {"store": db, "config": None, "list_name": name, "output": output})()
    export_run(args)


def _import(db: Path, source: str) -> None:
    args = type("Args", (), {"store": db, "config": None, "file": source})()
    import_run(args)


def test_export_to_stdout(db: Path) -> None:
    buf = io.StringIO()
    with patch("vocablists.commands.export.sys.stdout", buf):
        _export(db, "fruit")
    assert json.loads(buf.getvalue()) == {"name": "fruit", "words": ["apple", "pear"]}


def test_export_to_file_then_import_under_new_name(db: Path, tmp_path: Path, capsys) -> None:
    out = tmp_path / "exports" / "fruit.json"
    _export(db, "fruit", out)
    data = json.loads(out.read_text(encoding="utf-8"))
    data["name"] = "fruit 2"
    src = tmp_path / "fruit2.json"
    src.write_text(json.dumps(data), encoding="utf-8")
    _import(db, str(src))
    assert "Imported list 'fruit 2' (2 words)." in capsys.readouterr().out
    with SQLiteStore(db) as st:
        assert ListStore(st).get_custom_list("fruit 2") == ["apple", "pear"]


def test_import_from_stdin(db: Path) -> None:
    with patch("vocablists.commands.import_cmd.sys.stdin", io.StringIO('{"name": "veg", "words": ["Kale"]}')):
        _import(db, "-")
    with SQLiteStore(db) as st:
        assert ListStore(st).get_custom_list("veg") == ["kale"]


def test_import_existing_name_exits(db: Path, tmp_path: Path, capsys) -> None:
    src = tmp_path / "fruit.json"
    src.write_text('{"name": "fruit", "words": []}', encoding="utf-8")
    with pytest.raises(SystemExit):
        _import(db, str(src))
    assert "already a custom list" in capsys.readouterr().err


def test_import_invalid_exits(db: Path, tmp_path: Path, capsys) -> None:
    src = tmp_path / "bad.json"
    src.write_text('{"name": "x", "words": [1]}', encoding="utf-8")
    with pytest.raises(SystemExit):
        _import(db, str(src))
    assert "JSON data is invalid" in capsys.readouterr().err


def test_import_missing_file_exits(db: Path, tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit):
        _import(db, str(tmp_path / "nope.json"))
    assert "file not found" in capsys.readouterr().err


def test_export_missing_list_exits(db: Path, capsys) -> None:
    with pytest.raises(SystemExit):
        _export(db, "nope")
    assert "not a custom list" in capsys.readouterr().err


def test_import_non_utf8_file_exits(db: Path, tmp_path: Path, capsys) -> None:
    src = tmp_path / "latin1.json"
    src.write_bytes('{"name": "café", "words": []}'.encode("latin-1"))
    with pytest.raises(SystemExit) as exc:
        _import(db, str(src))
    assert exc.value.code == 1
    assert "not UTF-8" in capsys.readouterr().err
