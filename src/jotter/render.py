"""Terminal tables and calendar layout for CLI output."""

import shutil

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Config
from .core.calendar import GRID_WIDTH
from .core.journal import FoodRecord
from .core.report import Aggregate


def terminal_width() -> int:
    return shutil.get_terminal_size((100, 30)).columns


def to_text(renderable, width: int | None = None) -> str:
    """Render a rich object to an ANSI string so it can be echoed or paged."""
    console = Console(
        width=width or terminal_width(),
        force_terminal=True,
        color_system="standard",
        highlight=False,
    )
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


def _table(*headers: str) -> Table:
    table = Table(box=box.ROUNDED, show_lines=True, header_style="green")
    for header in headers:
        table.add_column(header)
    return table


def tags_table(aggregate: Aggregate) -> Table:
    """Date and record of every match, latest first."""
    table = _table("Date of Entry", "Record")
    for entry_date, text in reversed(aggregate.result.pairs()):
        table.add_row(entry_date, Text.from_ansi(text))
    return table


def food_table(dates: list[str], records: list[FoodRecord]) -> Table:
    """One row per ``[food]`` line, latest first."""
    table = _table("Date of Entry", "Breakfast", "Lunch", "Dinner", "Other")
    for entry_date, record in reversed(list(zip(dates, records))):
        table.add_row(entry_date, *record.as_list())
    return table


def frequency_table(top_tags: list[tuple[str, int]]) -> Table:
    table = _table("Tag", "Frequency")
    for tag, count in top_tags:
        table.add_row(tag, str(count))
    return table


def config_table(config: Config) -> Table:
    table = _table("Setting", "Value")
    for name, value in config.rows():
        table.add_row(name, value)
    return table


def calendar_grid(grids: dict[int, str], width: int | None = None) -> Table:
    """
    Lay rendered month grids side by side, as many per row as fit.

    Months are placed in ascending month order.
    """
    per_row = max((width or terminal_width()) // GRID_WIDTH, 1)
    months = [grids[m] for m in sorted(grids)]
    grid = Table.grid(padding=(0, 1))
    for _ in range(min(per_row, len(months))):
        grid.add_column(no_wrap=True)
    for start in range(0, len(months), per_row):
        row = [Text.from_ansi(m.rstrip("\n")) for m in months[start : start + per_row]]
        grid.add_row(*row)
    return grid
