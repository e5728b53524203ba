"""Pure aggregation of search results and tag counts - no I/O dependencies."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date

from .journal import HeadingIndex
from .search import SearchResult


@dataclass(frozen=True)
class Scope:
    """Which month files a query covers."""

    year: int
    month: int
    year_wide: bool = False
    fell_back: bool = False  # The requested year/month was invalid


def resolve_scope(year: int | None, month: int | None, today: date | None = None) -> Scope:
    """
    Turn command-line year/month values into a scope.

    ``None`` means "not provided" and ``0`` means "provided, use the current
    one". A year without a month covers the whole year. An impossible
    year/month pair falls back to today's month.
    """
    today = today or date.today()
    year_wide = year is not None and month is None
    resolved_year = year or today.year
    resolved_month = month or today.month

    if not (MINYEAR <= resolved_year <= MAXYEAR and 1 <= resolved_month <= 12):
        return Scope(today.year, today.month, year_wide=year_wide, fell_back=True)
    return Scope(resolved_year, resolved_month, year_wide=year_wide)


def _date_part(date_str: str, index: int) -> int:
    try:
        return int(date_str.split("-")[index])
    except (IndexError, ValueError):
        return 0


def day_of(date_str: str) -> int:
    """Day from ``YYYY-MM-DD``; malformed strings give 0."""
    return _date_part(date_str, 2)


def month_of(date_str: str) -> int:
    """Month from ``YYYY-MM-DD``; malformed strings give 0."""
    return _date_part(date_str, 1)


@dataclass
class Aggregate:
    """Matches across one or more month files plus the days they fall on."""

    result: SearchResult = field(default_factory=SearchResult)
    highlights: dict[int, list[int]] = field(default_factory=dict)

    @property
    def dates(self) -> list[str]:
        return self.result.dates

    @property
    def matches(self) -> list[str]:
        return self.result.matches

    def days(self) -> list[int]:
        """Every highlighted day, regardless of month."""
        return [day for days in self.highlights.values() for day in days]


def highlight_days(dates: list[str]) -> dict[int, list[int]]:
    """Group matched dates into month -> days, keyed in ascending month order."""
    by_month: dict[int, list[int]] = {}
    for date_str in dates:
        if not date_str:
            continue
        by_month.setdefault(month_of(date_str), []).append(day_of(date_str))
    return {month: by_month[month] for month in sorted(by_month)}


def combine_results(per_file: list[SearchResult]) -> Aggregate:
    """
    Concatenate per-file results and sort them by (month, day).

    The sort is stable, so matches within one day keep their file order and
    the outcome never depends on directory listing order.
    """
    pairs = [pair for result in per_file for pair in result.pairs()]
    pairs.sort(key=lambda p: (month_of(p[0]), day_of(p[0])))

    combined = SearchResult()
    for entry_date, text in pairs:
        combined.add(entry_date, text)
    return Aggregate(result=combined, highlights=highlight_days(combined.dates))


def tag_frequencies(tags: list[str], max_rows: int) -> list[tuple[str, int]]:
    """
    Most used tags, most frequent first.

    Ties keep the order in which the tags were first seen.
    """
    counts = Counter(tags)
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return ranked[: max(max_rows, 0)]


@dataclass
class MonthReport:
    """Entry count, entry days and top tags of one month."""

    year: int
    month: int
    entry_count: int
    days: list[int]
    top_tags: list[tuple[str, int]]


@dataclass
class YearReport:
    """Per-month entry counts and days, plus the year's top tags."""

    year: int
    total_entries: int
    monthly_counts: dict[int, int]
    month_days: dict[int, list[int]]
    top_tags: list[tuple[str, int]]


def build_month_report(
    year: int,
    month: int,
    index: HeadingIndex,
    tags: list[str],
    max_rows: int,
) -> MonthReport:
    return MonthReport(
        year=year,
        month=month,
        entry_count=len(index),
        days=[day_of(d) for d in index.dates()],
        top_tags=tag_frequencies(tags, max_rows),
    )


def build_year_report(
    year: int,
    months: dict[int, tuple[HeadingIndex, list[str]]],
    max_rows: int,
) -> YearReport:
    """
    Fold per-month headings and tags into a year report.

    ``months`` maps month number to that file's heading index and tags.
    Output mappings are keyed in ascending month order.
    """
    all_tags: list[str] = []
    monthly_counts = {}
    month_days = {}
    for month in sorted(months):
        index, tags = months[month]
        monthly_counts[month] = len(index)
        month_days[month] = [day_of(d) for d in index.dates()]
        all_tags.extend(tags)

    return YearReport(
        year=year,
        total_entries=sum(monthly_counts.values()),
        monthly_counts=monthly_counts,
        month_days=month_days,
        top_tags=tag_frequencies(all_tags, max_rows),
    )
