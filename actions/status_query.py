"""Status-bar summary of the store."""

from __future__ import annotations

import json
from typing import TypedDict

from core.policy_runtime import DEFAULT_CONFIG
from store.state_store import StateStore


class StatusPayload(TypedDict):
    text: str
    # "class" is the key Waybar reads for CSS styling.
    tag: str
    tooltip: str


def build_status(count: int, glyph: str = DEFAULT_CONFIG["status"]["glyph"]) -> StatusPayload:
    if count == 0:
        return {"text": glyph, "tag": "empty", "tooltip": "No minimized windows"}
    return {
        "text": f"{glyph} {count}",
        "tag": "has-windows",
        "tooltip": f"{count} minimized windows",
    }


def status_line(payload: StatusPayload) -> str:
    """Render the payload as one Waybar JSON line."""
    return json.dumps(
        {"text": payload["text"], "class": payload["tag"], "tooltip": payload["tooltip"]},
        ensure_ascii=False,
    )


def query_status(store: StateStore, glyph: str = DEFAULT_CONFIG["status"]["glyph"]) -> StatusPayload:
    return build_status(len(store.load()), glyph)
