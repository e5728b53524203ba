"""Functional core - pure journal logic with no I/O."""

from .errors import (
    JournalError,
    JournalNotFound,
    TagCollisionError,
    FoodSearchError,
    MalformedEventError,
)
from .journal import (
    HeadingIndex,
    FoodRecord,
    month_file_path,
    scan_headings,
    extract_tags,
    render_entry,
    parse_food_line,
    parse_entry_date,
)
from .search import SearchMode, SearchResult, search_lines
from .report import (
    Scope,
    Aggregate,
    MonthReport,
    YearReport,
    resolve_scope,
    combine_results,
    tag_frequencies,
)
from .calendar import render_month, render_months
from .events import Event, parse_events, classify_events

__all__ = [
    # Errors
    "JournalError",
    "JournalNotFound",
    "TagCollisionError",
    "FoodSearchError",
    "MalformedEventError",
    # Journal structure
    "HeadingIndex",
    "FoodRecord",
    "month_file_path",
    "scan_headings",
    "extract_tags",
    "render_entry",
    "parse_food_line",
    "parse_entry_date",
    # Search
    "SearchMode",
    "SearchResult",
    "search_lines",
    # Reports
    "Scope",
    "Aggregate",
    "MonthReport",
    "YearReport",
    "resolve_scope",
    "combine_results",
    "tag_frequencies",
    # Calendar
    "render_month",
    "render_months",
    # Events
    "Event",
    "parse_events",
    "classify_events",
]
