"""Text editor interface."""

from pathlib import Path
from typing import Protocol


class EditorService(Protocol):
    """Interface for opening a month file for editing."""

    def open(self, path: Path, line: int | None = None) -> None:
        """Open a file, jumping to a line where the editor supports it."""
        ...
