"""Hyprland controller backed by hyprctl."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from executor.command_executor import run_command
from os_controller.base_controller import (
    BaseController,
    ControllerError,
    DispatchResult,
    WindowSnapshot,
)

DEFAULT_WORKSPACE = "1"


class HyprlandController(BaseController):
    """Queries and dispatches through the hyprctl CLI."""

    def __init__(self, hyprctl: str = "hyprctl", hidden_workspace: str = "minimum") -> None:
        self.hyprctl = hyprctl
        self.hidden_workspace = hidden_workspace
        self.logger = logging.getLogger("veil.hyprland")

    def _query(self, what: str) -> dict[str, Any]:
        code, stdout, stderr = run_command([self.hyprctl, what, "-j"])
        if code != 0:
            raise ControllerError(f"hyprctl {what} failed: {stderr.strip()}")
        try:
            data = json.loads(stdout)
        except json.JSONDecodeError as exc:
            raise ControllerError(f"hyprctl {what} returned invalid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ControllerError(f"hyprctl {what} returned no object")
        return data

    def _dispatch(self, *args: str) -> DispatchResult:
        code, stdout, stderr = run_command([self.hyprctl, "dispatch", *args])
        # hyprctl reports some dispatch errors on stdout with exit code 0.
        success = code == 0 and not stdout.strip().lower().startswith("error")
        return DispatchResult(success=success, stdout=stdout.strip(), stderr=stderr.strip())

    def active_window(self) -> WindowSnapshot:
        data = self._query("activewindow")
        try:
            snapshot = WindowSnapshot.model_validate(data)
        except ValidationError as exc:
            raise ControllerError(f"active window has no usable address: {exc}") from exc
        if not snapshot.address:
            raise ControllerError("active window has an empty address")
        return snapshot

    def active_workspace(self) -> str:
        data = self._query("activeworkspace")
        workspace_id = data.get("id")
        if isinstance(workspace_id, bool) or not isinstance(workspace_id, (int, str)):
            self.logger.debug("activeworkspace has no id; using %s", DEFAULT_WORKSPACE)
            return DEFAULT_WORKSPACE
        return str(workspace_id)

    def hide_window(self, key: str) -> DispatchResult:
        return self._dispatch(
            "movetoworkspacesilent", f"special:{self.hidden_workspace},address:{key}"
        )

    def move_to_workspace(self, key: str, workspace: str) -> DispatchResult:
        return self._dispatch("movetoworkspace", f"{workspace},address:{key}")

    def focus_window(self, key: str) -> DispatchResult:
        return self._dispatch("focuswindow", f"address:{key}")
