"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep NUMTEXT_* variables from the developer's shell out of the tests."""
    for name in ("NUMTEXT_IGNORE_CASE", "NUMTEXT_STRIP_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("numtext.converter._default", None)
    yield
