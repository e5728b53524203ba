"""Pure calendar rendering - no I/O dependencies."""

import calendar
from datetime import date
from typing import Iterable

import click

WEEK_HEADER = "Mo Tu We Th Fr Sa Su"
GRID_WIDTH = 23  # Columns one rendered month takes when laid out side by side


def month_name(month: int) -> str:
    """English month name; out-of-range numbers fall back to January."""
    if 1 <= month <= 12:
        return calendar.month_name[month]
    return calendar.month_name[1]


def render_month(year: int, month: int, highlighted_days: Iterable[int] = ()) -> str:
    """
    Render a Monday-first month grid.

    Each day is right-aligned to width 2 and followed by a space; days in
    ``highlighted_days`` are drawn bold green. Weeks end after Sunday.

    Pure function - no I/O.
    """
    highlighted = set(highlighted_days)
    first_weekday = date(year, month, 1).weekday()
    last_day = calendar.monthrange(year, month)[1]

    title = click.style(month_name(month), fg="cyan", bold=True, underline=True)
    title += " " + click.style(str(year), fg="cyan", bold=True, underline=True)

    out = [f"     {title}\n", click.style(WEEK_HEADER, fg="bright_yellow") + "\n"]
    out.append("   " * first_weekday)
    for day in range(1, last_day + 1):
        cell = f"{day:>2}"
        if day in highlighted:
            cell = click.style(cell, fg="green", bold=True)
        out.append(cell + " ")
        if (first_weekday + day) % 7 == 0:
            out.append("\n")
    # A month ending on Sunday already closed its last week
    if (first_weekday + last_day) % 7 != 0:
        out.append("\n")
    return "".join(out)


def render_months(year: int, highlights: dict[int, list[int]]) -> dict[int, str]:
    """Rendered grids keyed by month number, in ascending month order."""
    return {
        month: render_month(year, month, highlights[month])
        for month in sorted(highlights)
        if 1 <= month <= 12
    }
