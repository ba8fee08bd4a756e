# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """
    cli.main() reconfigures the root logger; put it back after each test
    so handler changes do not leak between tests.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def home(tmp_path, monkeypatch) -> str:
    """A throwaway HOME directory."""
    monkeypatch.setenv("HOME", str(tmp_path))
    return str(tmp_path)
