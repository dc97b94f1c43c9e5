"""Typer command handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer

from actions.status_query import query_status, status_line
from core.orchestrator import Orchestrator, RuntimeBundle
from core.results import ActionResult
from store.record_codec import encode

logger = logging.getLogger("veil.cli")

USAGE = """\
veil - window minimizer for Hyprland

Usage: veil [--config PATH] [--verbose] <command> [window_address]

Commands:
  minimize       Hide the focused window into special:minimum
  restore        Open the picker to restore a window
  restore [addr] Restore a specific window by address
  restore-last   Restore the most recently minimized window
  restore-all    Restore all minimized windows
  list           Print the minimized windows as JSON
  show           Print Waybar-compatible JSON status
"""

def _build_bundle(**kwargs: Any) -> RuntimeBundle:
    return Orchestrator(**kwargs).build()


# Tests swap this for a factory with fake backends.
bundle_factory: Callable[..., RuntimeBundle] = _build_bundle

_options: dict[str, Any] = {}


def configure(config_path: Path | None, verbose: bool) -> None:
    """Remember global options for the command that follows."""
    _options["config_path"] = config_path
    _options["verbose"] = verbose


def _runtime() -> RuntimeBundle:
    try:
        return bundle_factory(**_options)
    except OSError as exc:
        typer.echo(f"veil: cannot prepare state: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _guard_store(action: Callable[[], Any]) -> Any:
    """Run an action; store I/O errors end the invocation with exit 1."""
    try:
        return action()
    except OSError as exc:
        logger.error("store unavailable: %s", exc)
        typer.echo(f"veil: store unavailable: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _report(result: ActionResult) -> None:
    if result["success"]:
        logger.debug("%s: %s", result["action"], result["outcome"])
    else:
        logger.info("%s did not complete: %s", result["action"], result["outcome"])


def usage() -> None:
    """Prepare state like any other command, then print usage."""
    _runtime()
    typer.echo(USAGE, err=True)


def minimize() -> None:
    """Capture and hide the focused window."""
    bundle = _runtime()
    _report(_guard_store(bundle.capture.minimize_active))


def restore(key: str | None) -> None:
    """Restore a window by key, or ask the picker."""
    bundle = _runtime()
    if key:
        _report(_guard_store(lambda: bundle.restore.restore(key)))
    else:
        _report(_guard_store(bundle.selection.choose_and_restore))


def restore_last() -> None:
    bundle = _runtime()
    _report(_guard_store(bundle.restore.restore_last))


def restore_all() -> None:
    bundle = _runtime()
    for result in _guard_store(bundle.restore.restore_all):
        _report(result)


def show() -> None:
    """Print the status-bar line."""
    bundle = _runtime()
    glyph = bundle.config.get("status", {}).get("glyph", "")
    payload = _guard_store(lambda: query_status(bundle.store, glyph))
    typer.echo(status_line(payload))


def list_windows() -> None:
    bundle = _runtime()
    typer.echo(encode(_guard_store(bundle.store.load)))
