"""Picker selection tests."""

from __future__ import annotations

import logging

import pytest

from actions.restore_engine import RestoreEngine
from actions.selection_flow import SelectionFlow, picker_label
from store.state_store import StateStore
from tests.fakes import FakeController, FakePicker, record


def three_windows(store: StateStore) -> StateStore:
    store.append(record("0xAA", "kitty", "one"))
    store.append(record("0xBB", "firefox", "two"))
    store.append(record("0xCC", "code", "three"))
    return store


def run(store: StateStore, controller: FakeController, picker: FakePicker) -> dict:
    flow = SelectionFlow(store, picker, RestoreEngine(controller, store))
    return flow.choose_and_restore()


def test_index_maps_to_record(controller: FakeController, store: StateStore) -> None:
    picker = FakePicker("1\n")
    result = run(three_windows(store), controller, picker)

    assert result["key"] == "0xBB"
    assert picker.shown == [["kitty - one", "firefox - two", "code - three"]]
    assert [r.key for r in store.load()] == ["0xAA", "0xCC"]


def test_empty_output_is_cancel(controller: FakeController, store: StateStore) -> None:
    result = run(three_windows(store), controller, FakePicker(""))
    assert result["success"] is True
    assert controller.calls == []
    assert len(store.load()) == 3


@pytest.mark.parametrize("output", ["5", "-1", "abc"])
def test_bad_output_logs_and_restores_nothing(
    output: str, controller: FakeController, store: StateStore, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR, logger="veil"):
        result = run(three_windows(store), controller, FakePicker(output))

    assert result["success"] is False
    assert controller.calls == []
    assert len(store.load()) == 3
    assert caplog.records


def test_picker_spawn_failure_is_logged(
    controller: FakeController, store: StateStore, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR, logger="veil"):
        result = run(three_windows(store), controller, FakePicker(fail=True))
    assert result["success"] is False
    assert "walker not found" in caplog.text


def test_no_records_skips_picker(controller: FakeController, store: StateStore) -> None:
    picker = FakePicker("0")
    run(store, controller, picker)
    assert picker.shown == []


def test_label_is_single_line() -> None:
    assert picker_label(record("0x1", "kitty", "a\nb")) == "kitty - a b"
