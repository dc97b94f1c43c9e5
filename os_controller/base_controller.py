"""Capability interfaces for the window manager, capture tool and picker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ControllerError(RuntimeError):
    """A window-manager query could not be answered."""


class CaptureError(RuntimeError):
    """A preview image could not be produced."""


class PickerError(RuntimeError):
    """The interactive picker could not be run."""


class WindowSnapshot(BaseModel):
    """Active window as reported by the window manager."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    address: str
    window_class: str = Field(default="", alias="class")
    title: str = ""
    at: list[int] | None = None
    size: list[int] | None = None

    def geometry(self) -> str | None:
        """Return the region as ``"x,y wxh"`` or None when unknown."""
        if not self.at or not self.size or len(self.at) < 2 or len(self.size) < 2:
            return None
        x, y = self.at[0], self.at[1]
        width, height = self.size[0], self.size[1]
        return f"{x},{y} {width}x{height}"


class DispatchResult(BaseModel):
    """Outcome of one window-manager dispatch."""

    success: bool
    stdout: str = ""
    stderr: str = ""


class BaseController(ABC):
    """Window-manager query and dispatch interface."""

    @abstractmethod
    def active_window(self) -> WindowSnapshot:
        """Return the focused window; raise ControllerError on failure."""

    @abstractmethod
    def active_workspace(self) -> str:
        """Return the focused workspace id; raise ControllerError on failure."""

    @abstractmethod
    def hide_window(self, key: str) -> DispatchResult:
        """Move a window into the hidden workspace without following it."""

    @abstractmethod
    def move_to_workspace(self, key: str, workspace: str) -> DispatchResult:
        """Move a window onto a workspace."""

    @abstractmethod
    def focus_window(self, key: str) -> DispatchResult:
        """Focus a window."""


class RegionCapture(ABC):
    """Screen region capture interface."""

    @abstractmethod
    def capture_region(self, geometry: str, key: str) -> Path:
        """Write a thumbnail for the region and return its path."""


class ChoicePrompt(ABC):
    """Interactive picker interface."""

    @abstractmethod
    def prompt(self, labels: list[str]) -> str:
        """Show labels and return the raw picker output (an index or "")."""
