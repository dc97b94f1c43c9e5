"""CLI entrypoint for veil."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from ui.cli import commands

app = typer.Typer(
    help="Minimize and restore Hyprland windows",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Also log to stderr"),
) -> None:
    """Window minimizer for Hyprland."""
    commands.configure(config_path=config, verbose=verbose)
    if ctx.invoked_subcommand is None:
        commands.usage()
        raise typer.Exit(code=0)


@app.command("minimize")
def minimize_cmd() -> None:
    """Hide the focused window."""
    commands.minimize()


@app.command("restore")
def restore_cmd(
    key: Optional[str] = typer.Argument(None, help="Window address; omit to open the picker"),
) -> None:
    """Restore a window by address or through the picker."""
    commands.restore(key=key)


@app.command("restore-last")
def restore_last_cmd() -> None:
    """Restore the most recently minimized window."""
    commands.restore_last()


@app.command("restore-all")
def restore_all_cmd() -> None:
    """Restore every minimized window."""
    commands.restore_all()


@app.command("show")
def show_cmd() -> None:
    """Print Waybar-compatible JSON status."""
    commands.show()


@app.command("list")
def list_cmd() -> None:
    """Print minimized windows as JSON."""
    commands.list_windows()


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
