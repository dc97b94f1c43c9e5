"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from store.state_store import StateStore
from tests.fakes import FakeController


@pytest.fixture
def store(tmp_path: Path) -> StateStore:
    return StateStore(tmp_path / "state" / "windows.json")


@pytest.fixture
def controller() -> FakeController:
    return FakeController()
