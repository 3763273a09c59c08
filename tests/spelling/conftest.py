"""Shared fixtures for hashspell tests."""

import os

import pytest

from hashspell.config_logging import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from HASHSPELL_* variables and cached config."""
    for key in list(os.environ):
        if key.startswith('HASHSPELL_'):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(name: str, content: str):
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write
