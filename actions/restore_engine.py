"""Restore minimized windows onto the current workspace."""

from __future__ import annotations

import logging

from core.results import ActionResult, failed, ok
from os_controller.base_controller import BaseController, ControllerError
from store.state_store import StateStore

logger = logging.getLogger("veil.restore")


class RestoreEngine:
    """Brings windows back and forgets their records."""

    def __init__(self, controller: BaseController, store: StateStore) -> None:
        self.controller = controller
        self.store = store

    def restore(self, key: str) -> ActionResult:
        """Move and focus a window, then drop its record.

        The record is removed even if the move or focus dispatch failed.
        Only a failed workspace query leaves the store untouched.
        """
        try:
            workspace = self.controller.active_workspace()
        except ControllerError as exc:
            logger.error("restore: activeworkspace failed for address=%s - %s", key, exc)
            return failed("restore", str(exc), key)

        problems: list[str] = []
        moved = self.controller.move_to_workspace(key, workspace)
        if not moved.success:
            logger.error(
                "restore: movetoworkspace failed for address=%s - stdout=%s stderr=%s",
                key,
                moved.stdout,
                moved.stderr,
            )
            problems.append("move")

        focused = self.controller.focus_window(key)
        if not focused.success:
            logger.error(
                "restore: focuswindow failed for address=%s - stdout=%s stderr=%s",
                key,
                focused.stdout,
                focused.stderr,
            )
            problems.append("focus")

        if not self.store.remove_by_key(key):
            logger.debug("restore: %s was not in the store", key)

        if problems:
            return failed("restore", f"{' and '.join(problems)} failed", key)
        return ok("restore", f"restored to workspace {workspace}", key)

    def restore_last(self) -> ActionResult:
        record = self.store.last()
        if record is None:
            return ok("restore-last", "nothing minimized")
        return self.restore(record.key)

    def restore_all(self) -> list[ActionResult]:
        return [self.restore(record.key) for record in self.store.load()]
