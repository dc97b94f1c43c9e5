"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from actions.icons import IconTable
from actions.restore_engine import RestoreEngine
from actions.selection_flow import SelectionFlow
from actions.window_capture import WindowCapture
from core.error_log import configure_logging
from core.policy_runtime import ensure_runtime_dirs, load_effective_config
from os_controller.base_controller import BaseController, ChoicePrompt, RegionCapture
from os_controller.hyprland_controller import HyprlandController
from os_controller.picker import WalkerPicker
from os_controller.screen_capture import GrimCapture
from store.state_store import StateStore


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    paths: dict[str, Path]
    store: StateStore
    capture: WindowCapture
    restore: RestoreEngine
    selection: SelectionFlow


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(
        self,
        config_path: Path | None = None,
        verbose: bool = False,
        controller: BaseController | None = None,
        region_capture: RegionCapture | None = None,
        picker: ChoicePrompt | None = None,
    ) -> None:
        self.config_path = config_path
        self.verbose = verbose
        self.controller = controller
        self.region_capture = region_capture
        self.picker = picker

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.config_path)
        paths = ensure_runtime_dirs(config)
        configure_logging(paths["log_file"], verbose=self.verbose)

        store = StateStore(paths["store_file"])
        store.ensure_exists()

        hypr_cfg = config.get("hyprland", {})
        capture_cfg = config.get("capture", {})
        picker_cfg = config.get("picker", {})

        controller = self.controller or HyprlandController(
            hyprctl=hypr_cfg.get("hyprctl", "hyprctl"),
            hidden_workspace=hypr_cfg.get("hidden_workspace", "minimum"),
        )
        region_capture = self.region_capture or GrimCapture(
            preview_dir=paths["preview_dir"],
            grim=capture_cfg.get("grim", "grim"),
            thumbnail_size=(
                int(capture_cfg.get("thumbnail_width", 200)),
                int(capture_cfg.get("thumbnail_height", 150)),
            ),
        )
        picker = self.picker or WalkerPicker(
            command=picker_cfg.get("command", "walker"),
            prompt_text=picker_cfg.get("prompt", "Restore window:"),
        )
        icons = IconTable(config.get("icons"), default=config.get("default_icon", IconTable().default))

        restore = RestoreEngine(controller=controller, store=store)
        return RuntimeBundle(
            config=config,
            paths=paths,
            store=store,
            capture=WindowCapture(
                controller=controller,
                capture=region_capture,
                store=store,
                icons=icons,
                picker_class=picker_cfg.get("window_class", "walker"),
            ),
            restore=restore,
            selection=SelectionFlow(store=store, picker=picker, engine=restore),
        )
