"""
Pytest configuration and shared fixtures.
"""

import os

import pytest

from bichig.app.translit import reset_cache
from bichig.app.utils import config as config_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test against default settings and an empty cache."""
    for name in list(os.environ):
        if name.upper().startswith("BICHIG_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("BICHIG_CONFIG", str(tmp_path / "missing.toml"))
    monkeypatch.chdir(tmp_path)

    config_module.reset_config()
    reset_cache()
    yield
    config_module.reset_config()
    reset_cache()


@pytest.fixture
def write_config(tmp_path):
    """Write a TOML config file and return its path."""

    def _write(content: str, name: str = "bichig.toml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
