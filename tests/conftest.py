"""Shared fixtures: keep tests away from the real ~/.vocablists."""

from __future__ import annotations

from pathlib import Path

import pytest

from vocablists import config as vocab_config


@pytest.fixture(autouse=True)
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config directory at a temp dir."""
    home = tmp_path / "home"
    monkeypatch.setattr(vocab_config, "_global_config_dir", lambda: home / ".vocablists")
    return home
