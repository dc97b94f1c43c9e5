"""hyprctl controller tests with a stubbed command runner."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from os_controller import hyprland_controller
from os_controller.base_controller import ControllerError
from os_controller.hyprland_controller import HyprlandController


class ScriptedRunner:
    def __init__(self, *responses: tuple[int, str, str]) -> None:
        self.responses = list(responses)
        self.commands: list[list[str]] = []

    def __call__(self, command: list[str], cwd=None, input_text=None) -> tuple[int, str, str]:
        self.commands.append(command)
        return self.responses.pop(0)


def install(monkeypatch: pytest.MonkeyPatch, *responses: tuple[int, str, str]) -> ScriptedRunner:
    runner = ScriptedRunner(*responses)
    monkeypatch.setattr(hyprland_controller, "run_command", runner)
    return runner


def test_active_window_parses_snapshot(monkeypatch: pytest.MonkeyPatch) -> None:
    payload = {
        "address": "0x5f00",
        "class": "org.mozilla.firefox",
        "title": 'A "quoted", title',
        "at": [12, 40],
        "size": [1280, 720],
        "workspace": {"id": 2, "name": "2"},
    }
    runner = install(monkeypatch, (0, json.dumps(payload), ""))

    snap = HyprlandController().active_window()

    assert runner.commands == [["hyprctl", "activewindow", "-j"]]
    assert snap.address == "0x5f00"
    assert snap.window_class == "org.mozilla.firefox"
    assert snap.title == 'A "quoted", title'
    assert snap.geometry() == "12,40 1280x720"


@pytest.mark.parametrize(
    "response",
    [(1, "", "socket gone"), (0, "Invalid", ""), (0, "{}", ""), (0, "[]", "")],
)
def test_active_window_failures_raise(monkeypatch: pytest.MonkeyPatch, response: tuple[int, str, str]) -> None:
    install(monkeypatch, response)
    with pytest.raises(ControllerError):
        HyprlandController().active_window()


def test_active_workspace_id(monkeypatch: pytest.MonkeyPatch) -> None:
    install(monkeypatch, (0, '{"id": 4, "name": "4"}', ""), (0, '{"name": "x"}', ""))
    controller = HyprlandController()
    assert controller.active_workspace() == "4"
    assert controller.active_workspace() == "1"


def test_active_workspace_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    install(monkeypatch, (127, "", "No such file or directory"))
    with pytest.raises(ControllerError):
        HyprlandController().active_workspace()


def test_dispatch_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    runner = install(monkeypatch, (0, "ok", ""), (0, "ok", ""), (0, "ok", ""))
    controller = HyprlandController(hyprctl="/usr/bin/hyprctl", hidden_workspace="stash")

    assert controller.hide_window("0xAA").success
    assert controller.move_to_workspace("0xAA", "2").success
    assert controller.focus_window("0xAA").success

    assert runner.commands == [
        ["/usr/bin/hyprctl", "dispatch", "movetoworkspacesilent", "special:stash,address:0xAA"],
        ["/usr/bin/hyprctl", "dispatch", "movetoworkspace", "2,address:0xAA"],
        ["/usr/bin/hyprctl", "dispatch", "focuswindow", "address:0xAA"],
    ]


def test_dispatch_error_on_stdout_is_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    install(monkeypatch, (0, "Error: window not found", ""))
    result = HyprlandController().focus_window("0xAA")
    assert result.success is False
    assert result.stdout == "Error: window not found"


def test_undecodable_title_bytes_are_replaced(tmp_path: Path) -> None:
    script = tmp_path / "hyprctl"
    script.write_bytes(
        b"#!/bin/sh\nprintf '{\"address\":\"0xAA\",\"class\":\"kitty\",\"title\":\"\\377\"}'\n"
    )
    script.chmod(0o755)

    snap = HyprlandController(hyprctl=str(script)).active_window()

    assert snap.address == "0xAA"
    assert snap.title == "\ufffd"
