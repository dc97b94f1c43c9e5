"""Walker dmenu picker."""

from __future__ import annotations

from executor.command_executor import SPAWN_FAILED, run_command
from os_controller.base_controller import ChoicePrompt, PickerError


class WalkerPicker(ChoicePrompt):
    """Runs walker in dmenu index mode.

    Index mode (``-i``) makes walker print the zero-based position of the
    chosen line, so labels can contain glyphs walker would otherwise strip.
    Cancelling prints nothing.
    """

    def __init__(self, command: str = "walker", prompt_text: str = "Restore window:") -> None:
        self.command = command
        self.prompt_text = prompt_text

    def prompt(self, labels: list[str]) -> str:
        code, stdout, stderr = run_command(
            [self.command, "-d", "-i", "-p", self.prompt_text],
            input_text="\n".join(labels),
        )
        if code == SPAWN_FAILED and not stdout:
            raise PickerError(f"failed to run {self.command}: {stderr.strip()}")
        return stdout.strip()
