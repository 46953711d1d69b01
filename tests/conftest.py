"""Shared test fixtures for the quick-aliases test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from quick_aliases.display import make_console
from quick_aliases.preferences import Preferences


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``Path.home()`` at a temporary directory."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: fake_home)
    return fake_home


@pytest.fixture
def aliases_path(home: Path) -> Path:
    """Location of the aliases file under the fake home."""
    return home / ".config" / "quick-aliases" / "aliases.json"


@pytest.fixture
def console():
    """Plain (uncolored) console writing to the captured stdout."""
    return make_console(color=False)


@pytest.fixture
def prefs() -> Preferences:
    return Preferences()
