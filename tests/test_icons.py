"""Icon lookup tests."""

from __future__ import annotations

from actions.icons import DEFAULT_GLYPH, IconTable, icon_for


def test_firefox_matches_by_substring() -> None:
    assert icon_for("org.mozilla.firefox") == "\uf269"


def test_unknown_class_gets_default_glyph() -> None:
    assert icon_for("unknown-app") == DEFAULT_GLYPH


def test_match_is_case_insensitive() -> None:
    assert icon_for("Alacritty") == icon_for("alacritty")
    assert icon_for("STEAM_APP") == "\uf1b6"


def test_first_entry_wins_on_overlap() -> None:
    table = IconTable([("code", "A"), ("vscode", "B")], default="?")
    assert table.icon_for("VSCode") == "A"
    assert table.icon_for("emacs") == "?"
