"""Text editor adapter - subprocess wrapper for the configured editor."""

import logging
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

# Editors that accept `file:line` to open at a line
LINE_AWARE_EDITORS = {"hx", "helix"}


class SubprocessEditor:
    """
    Editor subprocess adapter.

    Implements EditorService protocol.
    """

    def __init__(self, command: str):
        self.command = command

    def build_args(self, path: Path, line: int | None = None) -> list[str]:
        target = str(path)
        if line is not None and Path(self.command).name in LINE_AWARE_EDITORS:
            target = f"{path}:{line}"
        return [self.command, target]

    def open(self, path: Path, line: int | None = None) -> None:
        """Open a file and wait for the editor to exit."""
        args = self.build_args(path, line)
        logger.debug(f"Launching editor: {args}")
        try:
            proc = subprocess.run(args)
        except FileNotFoundError:
            raise RuntimeError(f"Editor '{self.command}' not found. Set EDITOR in jotter.conf")
        if proc.returncode != 0:
            raise RuntimeError(f"Editor '{self.command}' exited with status {proc.returncode}")
