"""Configuration tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.policy_runtime import (
    DEFAULT_CONFIG,
    default_config_path,
    ensure_runtime_dirs,
    load_effective_config,
    merge_dicts,
)


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}


def test_user_yaml_overrides_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("picker:\n  command: fuzzel\nicons:\n  - [foot, F]\n", encoding="utf-8")

    config = load_effective_config(cfg)

    assert config["picker"]["command"] == "fuzzel"
    assert config["picker"]["prompt"] == "Restore window:"
    assert config["icons"] == [["foot", "F"]]
    assert DEFAULT_CONFIG["picker"]["command"] == "walker"


def test_missing_config_file_gives_defaults(tmp_path: Path) -> None:
    assert load_effective_config(tmp_path / "absent.yaml") == DEFAULT_CONFIG


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_effective_config(cfg)


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEIL_CONFIG", str(tmp_path / "v.yaml"))
    assert default_config_path() == tmp_path / "v.yaml"
    monkeypatch.delenv("VEIL_CONFIG")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_config_path() == tmp_path / "veil" / "config.yaml"


def test_ensure_runtime_dirs_is_idempotent(tmp_path: Path) -> None:
    config = merge_dicts(
        DEFAULT_CONFIG,
        {
            "paths": {
                "state_dir": str(tmp_path / "state"),
                "store_file": str(tmp_path / "state" / "windows.json"),
                "preview_dir": str(tmp_path / "previews"),
                "log_file": str(tmp_path / "veil.log"),
            }
        },
    )
    first = ensure_runtime_dirs(config)
    second = ensure_runtime_dirs(config)
    assert first == second
    assert first["state_dir"].is_dir()
    assert first["preview_dir"].is_dir()
