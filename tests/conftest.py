"""Shared fixtures: every test gets its own fake HOME."""

import pytest


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch):
    """Point HOME at a temp dir so the real ~/.config/sesh is never read."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def sesh_toml(home):
    """Path of the main config file inside the fake HOME (not created)."""
    return home / ".config" / "sesh" / "sesh.toml"


@pytest.fixture
def write():
    def _write(path, text):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return _write
