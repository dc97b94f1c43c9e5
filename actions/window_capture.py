"""Minimize: record the focused window and move it out of sight."""

from __future__ import annotations

import logging

from actions.icons import IconTable
from core.results import ActionResult, failed, ok
from os_controller.base_controller import (
    BaseController,
    CaptureError,
    ControllerError,
    RegionCapture,
    WindowSnapshot,
)
from store.record_codec import MinimizedWindowRecord
from store.state_store import StateStore

logger = logging.getLogger("veil.minimize")


def build_display_label(icon: str, snapshot: WindowSnapshot) -> str:
    short_key = snapshot.address[-4:]
    return f"{icon} {snapshot.window_class} - {snapshot.title} [{short_key}]"


class WindowCapture:
    """Captures the active window into the store and hides it."""

    def __init__(
        self,
        controller: BaseController,
        capture: RegionCapture,
        store: StateStore,
        icons: IconTable,
        picker_class: str = "walker",
    ) -> None:
        self.controller = controller
        self.capture = capture
        self.store = store
        self.icons = icons
        self.picker_class = picker_class

    def minimize_active(self) -> ActionResult:
        try:
            snapshot = self.controller.active_window()
        except ControllerError as exc:
            logger.error("minimize: %s", exc)
            return failed("minimize", str(exc))
        return self.minimize(snapshot)

    def minimize(self, snapshot: WindowSnapshot) -> ActionResult:
        """Hide one window and store its record once the hide succeeded."""
        if snapshot.window_class.lower() == self.picker_class.lower():
            return ok("minimize", "picker window is never minimized", snapshot.address)

        record = MinimizedWindowRecord(
            key=snapshot.address,
            display_label=build_display_label(self.icons.icon_for(snapshot.window_class), snapshot),
            window_class=snapshot.window_class,
            original_title=snapshot.title,
            preview_path=self._preview(snapshot),
        )

        result = self.controller.hide_window(snapshot.address)
        if not result.success:
            logger.error(
                "minimize: movetoworkspacesilent failed for class=%s address=%s - stdout=%s stderr=%s",
                snapshot.window_class,
                snapshot.address,
                result.stdout,
                result.stderr,
            )
            return failed("minimize", "hide dispatch failed", snapshot.address)

        self.store.append(record)
        return ok("minimize", f"minimized {snapshot.window_class}", snapshot.address)

    def _preview(self, snapshot: WindowSnapshot) -> str | None:
        geometry = snapshot.geometry()
        if geometry is None:
            return None
        try:
            return str(self.capture.capture_region(geometry, snapshot.address))
        except CaptureError as exc:
            logger.warning("minimize: no preview for %s: %s", snapshot.address, exc)
            return None
