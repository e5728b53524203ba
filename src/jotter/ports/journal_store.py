"""Journal storage interface."""

from datetime import date, datetime
from pathlib import Path
from typing import Protocol

from ..config import Config
from ..core.journal import HeadingIndex
from ..core.search import SearchMode, SearchResult


class JournalStore(Protocol):
    """Interface for reading month files and appending new entries."""

    def path_for(self, year: int, month: int) -> Path:
        """Path of the month file for a year and month."""
        ...

    def headings(self, year: int, month: int) -> HeadingIndex:
        """Date headings of a month file. Raises JournalNotFound if missing."""
        ...

    def tags(self, year: int, month: int) -> list[str]:
        """Every tag of a month file; empty if the file is missing."""
        ...

    def entry(self, day: date, add_weekday: bool = True) -> str | None:
        """Rendered entry for a date. Returns None if not found."""
        ...

    def search(
        self, word: str, when: date, mode: SearchMode, tolerance: int = 0
    ) -> SearchResult:
        """Search the month file holding ``when``. Raises JournalNotFound if missing."""
        ...

    def month_files(self, year: int) -> dict[int, Path]:
        """Month files of a year keyed by ascending month number."""
        ...

    def add_entry_heading(self, day: date, config: Config, now: datetime | None = None) -> bool:
        """Append a heading for a date unless it exists. Returns True if appended."""
        ...
