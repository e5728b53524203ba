"""Pure month-file structure logic - no I/O dependencies.

A month file is a sequence of sections. Each section starts at a date
heading (``# YYYY-MM-DD``) and may be preceded by a weekday marker
(``### TUE (08:12:44)``), which is metadata rather than content.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Iterable

import click

WEEKDAYS = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")

_BRACKET_SPLIT = re.compile(r"(?<=[\[\]])")


def month_number(month: int) -> str:
    """Zero-padded month for file names; anything outside 1-12 maps to ``00``."""
    if 1 <= month <= 12:
        return f"{month:02d}"
    return "00"


def month_file_path(root: Path, year: int, month: int) -> Path:
    """Path of the month file: ``{root}/{year}/{year}_{MM}.md``."""
    return Path(root) / str(year) / f"{year}_{month_number(month)}.md"


def is_heading(line: str) -> bool:
    """A date heading starts with a bare ``# ``."""
    return line.startswith("# ")


def is_marker(line: str) -> bool:
    """Weekday/timestamp marker lines are skipped everywhere."""
    return line.startswith("### ")


def heading_date(line: str) -> str:
    """Text of a heading without the ``#``, e.g. ``2025-04-01``."""
    return line[1:].strip()


def weekday_name(day: date) -> str:
    return WEEKDAYS[day.weekday()]


def parse_entry_date(text: str) -> date | None:
    """Parse ``YYYY-MM-DD``; None tells the caller to ask for another date."""
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


@dataclass
class HeadingIndex:
    """Headings of one month file and their 1-based line numbers."""

    headings: list[str] = field(default_factory=list)
    line_numbers: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.headings)

    def dates(self) -> list[str]:
        return [heading_date(h) for h in self.headings]

    def line_for(self, day: date | str) -> int | None:
        """Line number of the heading for a date, or None if it has none."""
        target = day.isoformat() if isinstance(day, date) else day
        for heading, line_no in zip(self.headings, self.line_numbers):
            if heading_date(heading) == target:
                return line_no
        return None


def scan_headings(lines: Iterable[str]) -> HeadingIndex:
    """
    Collect every date heading and the line it sits on.

    Pure function - no I/O.
    """
    index = HeadingIndex()
    for line_no, line in enumerate(lines, start=1):
        if is_heading(line):
            index.headings.append(line)
            index.line_numbers.append(line_no)
    return index


def split_brackets(line: str) -> list[str]:
    """Split a line after every ``[`` and ``]``, keeping the bracket."""
    return [part for part in _BRACKET_SPLIT.split(line) if part]


def extract_tags(lines: Iterable[str]) -> list[str]:
    """
    Every tag in order of appearance, duplicates kept.

    Pure function - no I/O.
    """
    tags = []
    for line in lines:
        if "[" not in line:
            continue
        for part in split_brackets(line):
            if part.endswith("]"):
                tags.append(part[:-1])
    return tags


def decorate_tags(line: str) -> str:
    """Colour the text of every tag on a line, leaving the brackets as is."""
    if "[" not in line:
        return line
    out = []
    for part in split_brackets(line):
        if part.endswith("]"):
            out.append(click.style(part[:-1], fg="cyan") + "]")
        else:
            out.append(part)
    return "".join(out)


class EntryState(Enum):
    """Where the entry scanner is relative to the target section."""

    BEFORE = "before"
    IN_ENTRY = "in_entry"
    AFTER = "after"


def entry_title(day: date, add_weekday: bool) -> str:
    title = click.style(day.isoformat(), fg="yellow", bold=True, underline=True)
    if add_weekday:
        title += f" ({click.style(weekday_name(day), fg='magenta')})"
    return title


def render_entry(lines: Iterable[str], day: date, add_weekday: bool = True) -> str | None:
    """
    Render the section for a date with its title and tags decorated.

    Returns None when the file has no heading for the date.
    Pure function - no I/O.
    """
    target = day.isoformat()
    state = EntryState.BEFORE
    out: list[str] = []

    for line in lines:
        if is_marker(line):
            continue
        if state is EntryState.BEFORE:
            if is_heading(line) and heading_date(line) == target:
                state = EntryState.IN_ENTRY
                out.append(entry_title(day, add_weekday))
        elif state is EntryState.IN_ENTRY:
            if is_heading(line):
                state = EntryState.AFTER
                break
            out.append(decorate_tags(line))

    if state is EntryState.BEFORE:
        return None
    return "\n".join(out) + "\n"


FOOD_TAG = "food"
FOOD_FIELDS = ("breakfast", "lunch", "dinner", "other")


@dataclass
class FoodRecord:
    """The four meal columns of a ``[food]`` line."""

    breakfast: str = ""
    lunch: str = ""
    dinner: str = ""
    other: str = ""

    def as_list(self) -> list[str]:
        return [self.breakfast, self.lunch, self.dinner, self.other]


def parse_food_line(line: str) -> FoodRecord:
    """
    Split ``- [food] | b | l | d | o`` into its four fields.

    Missing fields are empty and surplus pipes fold into ``other``, so a
    malformed line never raises.
    """
    text = click.unstyle(line).replace(f"[{FOOD_TAG}]", "", 1).strip()
    if text.startswith("- "):
        text = text[2:].strip()
    if text.startswith("|"):
        text = text[1:]
    parts = [p.strip() for p in text.split("|")]
    if len(parts) > len(FOOD_FIELDS):
        parts = parts[:3] + [" | ".join(p for p in parts[3:] if p)]
    parts += [""] * (len(FOOD_FIELDS) - len(parts))
    return FoodRecord(*parts)
