"""File-based journal storage adapter."""

import logging
import re
from datetime import date, datetime
from pathlib import Path

from ..config import Config
from ..core.errors import JournalNotFound
from ..core.journal import (
    FOOD_TAG,
    HeadingIndex,
    extract_tags,
    month_file_path,
    render_entry,
    scan_headings,
    weekday_name,
)
from ..core.search import SearchMode, SearchResult, search_lines

logger = logging.getLogger(__name__)

_MONTH_FILE = re.compile(r"^(\d{4})_(\d{2})\.md$")


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each month gets a markdown file under
    its year's directory: ``{root}/{year}/{year}_{MM}.md``.
    """

    def __init__(self, journal_root: Path | str):
        self.journal_root = Path(journal_root).expanduser()

    def path_for(self, year: int, month: int) -> Path:
        """Get the month file path for a year and month."""
        return month_file_path(self.journal_root, year, month)

    def read_lines(self, path: Path) -> list[str]:
        """
        Read a file line by line without trailing newlines.

        A line that cannot be decoded is logged and read as an empty line.
        """
        if not path.is_file():
            raise JournalNotFound(path)

        lines = []
        with open(path, "rb") as f:
            for line_no, raw in enumerate(f, start=1):
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError as e:
                    logger.warning(f"{path}:{line_no}: unreadable line ({e}), treating as empty")
                    line = ""
                lines.append(line.rstrip("\r\n"))
        return lines

    def headings(self, year: int, month: int) -> HeadingIndex:
        """Date headings and their line numbers. Raises JournalNotFound if missing."""
        return scan_headings(self.read_lines(self.path_for(year, month)))

    def tags(self, year: int, month: int) -> list[str]:
        """All tags in a month file. Returns [] if the file is missing."""
        path = self.path_for(year, month)
        try:
            return extract_tags(self.read_lines(path))
        except JournalNotFound:
            logger.warning(f"No month file at {path}, counting no tags")
            return []

    def entry(self, day: date, add_weekday: bool = True) -> str | None:
        """Rendered entry for a date. Returns None if not found."""
        try:
            lines = self.read_lines(self.path_for(day.year, day.month))
        except JournalNotFound:
            return None
        return render_entry(lines, day, add_weekday)

    def search(
        self,
        word: str,
        when: date,
        mode: SearchMode = SearchMode.TAG,
        tolerance: int = 0,
    ) -> SearchResult:
        """Search the month file holding ``when``. Raises JournalNotFound if missing."""
        path = self.path_for(when.year, when.month)
        result = search_lines(self.read_lines(path), word, mode, tolerance)
        logger.debug(f"{len(result)} match(es) for {word!r} in {path}")
        return result

    def month_files(self, year: int) -> dict[int, Path]:
        """
        Month files of a year keyed by month, in ascending month order.

        Files not following the ``{year}_{MM}.md`` convention are skipped.
        Raises JournalNotFound if the year directory is missing.
        """
        year_dir = self.journal_root / str(year)
        if not year_dir.is_dir():
            raise JournalNotFound(year_dir)

        found = {}
        for path in year_dir.iterdir():
            m = _MONTH_FILE.match(path.name)
            if not m or not path.is_file():
                logger.debug(f"Skipping {path}: not a month file")
                continue
            file_year, month = int(m.group(1)), int(m.group(2))
            if file_year != year or not 1 <= month <= 12:
                logger.debug(f"Skipping {path}: does not belong to {year}")
                continue
            found[month] = path
        return {month: found[month] for month in sorted(found)}

    def ensure_month_file(self, year: int, month: int) -> bool:
        """
        Create the month file if needed. Returns True if it was created.

        Raises JournalNotFound if the year directory does not exist.
        """
        path = self.path_for(year, month)
        if path.exists():
            return False
        if not path.parent.is_dir():
            raise JournalNotFound(path.parent)
        path.touch()
        return True

    def add_entry_heading(self, day: date, config: Config, now: datetime | None = None) -> bool:
        """
        Append the heading block for a date unless the file already has it.

        The block holds the weekday/timestamp marker and the food line as
        configured. Returns True if something was appended.
        """
        path = self.path_for(day.year, day.month)
        if self.headings(day.year, day.month).line_for(day) is not None:
            return False

        now = now or datetime.now()
        block = ""
        if config.add_weekday:
            block += f"\n### {weekday_name(day)}"
            if config.add_timestamp:
                block += f" ({now.strftime('%H:%M:%S')})"
        elif config.add_timestamp:
            block += f"\n### ({now.strftime('%H:%M:%S')})"
        block += f"\n# {day.isoformat()}"
        if config.add_food_column:
            block += f"\n- [{FOOD_TAG}] | | | "

        with open(path, "a", encoding="utf-8") as f:
            f.write(block)
        return True

    def event_lines(self) -> list[str] | None:
        """Lines of the events file, or None if there is none."""
        try:
            return self.read_lines(self.journal_root / "events.md")
        except JournalNotFound:
            return None
