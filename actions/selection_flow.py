"""Interactive restore through the picker."""

from __future__ import annotations

import logging

from actions.restore_engine import RestoreEngine
from core.results import ActionResult, failed, ok
from os_controller.base_controller import ChoicePrompt, PickerError
from store.record_codec import MinimizedWindowRecord
from store.state_store import StateStore

logger = logging.getLogger("veil.select")


def picker_label(record: MinimizedWindowRecord) -> str:
    label = f"{record.window_class} - {record.original_title}"
    return " ".join(label.splitlines())


class SelectionFlow:
    def __init__(self, store: StateStore, picker: ChoicePrompt, engine: RestoreEngine) -> None:
        self.store = store
        self.picker = picker
        self.engine = engine

    def choose_and_restore(self) -> ActionResult:
        records = self.store.load()
        if not records:
            return ok("restore", "nothing minimized")

        try:
            raw = self.picker.prompt([picker_label(r) for r in records])
        except PickerError as exc:
            logger.error("restore: %s", exc)
            return failed("restore", str(exc))

        raw = raw.strip()
        if not raw:
            return ok("restore", "cancelled")

        try:
            index = int(raw)
        except ValueError:
            logger.error("restore: could not parse picker output %r as index", raw)
            return failed("restore", f"bad picker output {raw!r}")

        if not 0 <= index < len(records):
            logger.error(
                "restore: picker returned index %d but only %d windows are minimized",
                index,
                len(records),
            )
            return failed("restore", f"index {index} out of range")

        return self.engine.restore(records[index].key)
