"""Configuration loading and runtime directory bootstrapping."""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "paths": {
        "state_dir": "/tmp/minimize-state",
        "store_file": "/tmp/minimize-state/windows.json",
        "preview_dir": "/tmp/window-previews",
        "log_file": "/tmp/veil.log",
    },
    "hyprland": {
        "hyprctl": "hyprctl",
        "hidden_workspace": "minimum",
    },
    "capture": {
        "grim": "grim",
        "thumbnail_width": 200,
        "thumbnail_height": 150,
    },
    "picker": {
        "command": "walker",
        "window_class": "walker",
        "prompt": "Restore window:",
    },
    "status": {
        "glyph": "\U000f0638",
    },
    "icons": [
        ["firefox", "\uf269"],
        ["alacritty", "\uf120"],
        ["discord", "\U000f066f"],
        ["steam", "\uf1b6"],
        ["chromium", "\uf268"],
        ["code", "\U000f0a1e"],
        ["spotify", "\uf1bc"],
        ["ghostty", "\uf120"],
        ["kitty", "\uf120"],
    ],
    "default_icon": "\U000f05b2",
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def default_config_path() -> Path:
    """Return the user config path from $VEIL_CONFIG or the XDG config dir."""
    explicit = os.environ.get("VEIL_CONFIG")
    if explicit:
        return Path(explicit).expanduser()
    xdg_home = os.environ.get("XDG_CONFIG_HOME") or "~/.config"
    return Path(xdg_home).expanduser() / "veil" / "config.yaml"


def load_effective_config(config_path: Path | None = None) -> dict[str, Any]:
    """Merge the user YAML file over the built-in defaults."""
    user_cfg = load_yaml(config_path or default_config_path())
    return merge_dicts(copy.deepcopy(DEFAULT_CONFIG), user_cfg)


def ensure_runtime_dirs(config: dict[str, Any]) -> dict[str, Path]:
    """Ensure state and preview directories exist and return resolved paths."""
    paths_cfg = config.get("paths", {})
    state_dir = Path(paths_cfg.get("state_dir", "/tmp/minimize-state")).expanduser()
    store_file = Path(
        paths_cfg.get("store_file", state_dir / "windows.json")
    ).expanduser()
    preview_dir = Path(paths_cfg.get("preview_dir", "/tmp/window-previews")).expanduser()
    log_file = Path(paths_cfg.get("log_file", "/tmp/veil.log")).expanduser()

    state_dir.mkdir(parents=True, exist_ok=True)
    store_file.parent.mkdir(parents=True, exist_ok=True)
    preview_dir.mkdir(parents=True, exist_ok=True)

    return {
        "state_dir": state_dir,
        "store_file": store_file,
        "preview_dir": preview_dir,
        "log_file": log_file,
    }
