"""Shared workflow layer between the CLI and the journal store.

Each function drives the store for one query and hands back plain data
(aggregates, reports, events) for the CLI to render.
"""

import logging
from datetime import date, datetime

from .adapters.file_journal import FileJournalStore
from .config import Config
from .core.errors import FoodSearchError
from .core.events import Event, classify_events, parse_events
from .core.journal import FOOD_TAG, FoodRecord, parse_food_line
from .core.report import (
    Aggregate,
    MonthReport,
    Scope,
    YearReport,
    build_month_report,
    build_year_report,
    combine_results,
)
from .core.search import SearchMode
from .ports.editor import EditorService
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)


def get_journal(config: Config) -> FileJournalStore:
    """Resolve the journal store from config."""
    return FileJournalStore(config.journal_root)


def find_matches(
    store: JournalStore,
    word: str,
    scope: Scope,
    mode: SearchMode = SearchMode.TAG,
    tolerance: int = 0,
) -> Aggregate:
    """
    Search one month file, or every month file of a year.

    Year-wide results are sorted by (month, day) and highlights are keyed
    in ascending month order, whatever order the directory lists files in.
    Raises JournalNotFound for a missing month file or year directory, and
    FoodSearchError for a free-text ``food`` query before any file is read.
    """
    if mode is SearchMode.TEXT and word == FOOD_TAG:
        raise FoodSearchError()

    if not scope.year_wide:
        when = date(scope.year, scope.month, 1)
        return combine_results([store.search(word, when, mode, tolerance)])

    per_file = []
    for month in store.month_files(scope.year):
        per_file.append(store.search(word, date(scope.year, month, 1), mode, tolerance))
    logger.debug(f"Searched {len(per_file)} month file(s) of {scope.year} for {word!r}")
    return combine_results(per_file)


def food_records(aggregate: Aggregate) -> list[FoodRecord]:
    """Four-column breakdown of every matched ``[food]`` line."""
    return [parse_food_line(line) for line in aggregate.matches]


def month_report(store: JournalStore, year: int, month: int, config: Config) -> MonthReport:
    """Entry count, entry days and top tags of a month. Raises JournalNotFound."""
    index = store.headings(year, month)
    tags = store.tags(year, month)
    return build_month_report(year, month, index, tags, config.max_rows)


def year_report(store: JournalStore, year: int, config: Config) -> YearReport:
    """Per-month counts and the year's top tags. Raises JournalNotFound."""
    months = {}
    for month in store.month_files(year):
        months[month] = (store.headings(year, month), store.tags(year, month))
    return build_year_report(year, months, config.max_rows)


def recent_events(
    store: FileJournalStore,
    as_of: date | None = None,
) -> tuple[list[Event], list[Event]] | None:
    """
    Upcoming and recently completed events, or None without an events file.

    Raises MalformedEventError for an impossible date in the file.
    """
    as_of = as_of or date.today()
    lines = store.event_lines()
    if lines is None:
        logger.debug(f"No events file in {store.journal_root}")
        return None
    return classify_events(parse_events(lines, as_of.year), as_of)


def open_entry(
    store: FileJournalStore,
    editor: EditorService,
    day: date,
    config: Config,
    now: datetime | None = None,
) -> bool:
    """
    Open the entry for a date in the editor, adding its heading if needed.

    Returns True if a new month file was created. Raises JournalNotFound
    when the year directory is missing.
    """
    created = store.ensure_month_file(day.year, day.month)
    store.add_entry_heading(day, config, now)
    line = store.headings(day.year, day.month).line_for(day)
    editor.open(store.path_for(day.year, day.month), line)
    return created
