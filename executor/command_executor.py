"""Command execution wrapper."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger("veil.executor")

SPAWN_FAILED = 127


def run_command(
    command: list[str],
    cwd: Path | None = None,
    input_text: str | None = None,
) -> tuple[int, str, str]:
    """Run command and return (exit_code, stdout, stderr).

    A command that cannot be spawned is reported as exit code 127 with the
    OS error text on stderr instead of raising. Undecodable output bytes
    become U+FFFD.
    """
    logger.debug("exec: %s", " ".join(command))
    try:
        proc = subprocess.run(
            command,
            cwd=cwd,
            input=input_text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        return SPAWN_FAILED, "", str(exc)
    return proc.returncode, proc.stdout, proc.stderr
