"""Application icon lookup."""

from __future__ import annotations

from collections.abc import Sequence

from core.policy_runtime import DEFAULT_CONFIG

DEFAULT_ICONS: list[tuple[str, str]] = [(name, glyph) for name, glyph in DEFAULT_CONFIG["icons"]]
DEFAULT_GLYPH: str = DEFAULT_CONFIG["default_icon"]


class IconTable:
    """Ordered (class fragment, glyph) pairs; the first matching entry wins."""

    def __init__(
        self,
        entries: Sequence[Sequence[str]] | None = None,
        default: str = DEFAULT_GLYPH,
    ) -> None:
        source = DEFAULT_ICONS if entries is None else entries
        self.entries = [(str(name).lower(), str(glyph)) for name, glyph in source]
        self.default = default

    def icon_for(self, window_class: str) -> str:
        lowered = window_class.lower()
        for fragment, glyph in self.entries:
            if fragment and fragment in lowered:
                return glyph
        return self.default


def icon_for(window_class: str) -> str:
    """Look up a glyph in the built-in table."""
    return IconTable().icon_for(window_class)
