"""Per-action result records reported by the CLI dispatcher."""

from __future__ import annotations

from typing import TypedDict


class ActionResult(TypedDict):
    success: bool
    action: str
    outcome: str
    key: str | None


def ok(action: str, outcome: str, key: str | None = None) -> ActionResult:
    return {"success": True, "action": action, "outcome": outcome, "key": key}


def failed(action: str, outcome: str, key: str | None = None) -> ActionResult:
    return {"success": False, "action": action, "outcome": outcome, "key": key}
