"""jotter CLI - a journal kept in monthly markdown files."""

import logging
import os
import sys
from datetime import date

import click

from . import render
from .adapters.editor import SubprocessEditor
from .config import CONFIG_FILE, Config, load_config
from .core.calendar import month_name, render_month, render_months
from .core.errors import (
    FoodSearchError,
    JournalNotFound,
    MalformedEventError,
    TagCollisionError,
)
from .core.events import describe_distance
from .core.journal import FOOD_TAG, parse_entry_date
from .core.report import Scope, resolve_scope
from .core.search import SearchMode
from .workflows import (
    find_matches,
    food_records,
    get_journal,
    month_report,
    open_entry,
    recent_events,
    year_report,
)

PAGER_ROWS = 5

year_option = click.option(
    "--year", "-y", type=int, is_flag=False, flag_value=0, default=None,
    help="Year (YYYY); a bare -y means the current year. Without --month, covers the whole year.",
)
month_option = click.option(
    "--month", "-m", type=int, is_flag=False, flag_value=0, default=None,
    help="Month (MM); a bare -m means the current month.",
)


def _fail(message: str) -> None:
    click.echo(click.style(message, fg="red"), err=True)
    sys.exit(1)


def _ask_date() -> date:
    try:
        value = click.prompt(
            "Select a date to search for its entry",
            default=date.today().isoformat(),
            type=click.DateTime(formats=["%Y-%m-%d"]),
        )
    except click.Abort:
        click.echo(click.style("Cancelling...", fg="red"))
        sys.exit(0)
    return value.date()


def _resolve_date(value: str | None) -> date:
    """Parse a YYYY-MM-DD argument, asking for one when missing or malformed."""
    if value is None:
        return _ask_date()
    parsed = parse_entry_date(value)
    if parsed is None:
        click.echo(click.style("Please provide date in appropriate format: YYYY-MM-DD", fg="red"), err=True)
        return _ask_date()
    return parsed


def _emit(text: str, rows: int, config: Config) -> None:
    """Echo output, through the pager when configured to."""
    use_pager = config.when_pager == "always" or (
        config.when_pager == "default" and rows >= PAGER_ROWS
    )
    if use_pager:
        os.environ["PAGER"] = config.pager
        click.echo_via_pager(text)
    else:
        click.echo(text, nl=False)


def _scope_label(scope: Scope) -> str:
    if scope.year_wide:
        return str(scope.year)
    return f"{month_name(scope.month)}, {scope.year}"


def _resolve_scope(year: int | None, month: int | None) -> Scope:
    scope = resolve_scope(year, month)
    if scope.fell_back:
        click.echo(click.style("Invalid year/month provided. Defaulting to today.", fg="red"), err=True)
    return scope


@click.group(invoke_without_command=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option()
@click.pass_context
def main(ctx, debug: bool):
    """jotter - a journal kept in monthly markdown files.

    Without a command, opens today's entry in the editor.
    """
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config()
    if ctx.invoked_subcommand is None:
        _open_in_editor(ctx.obj, date.today())


def _open_in_editor(config: Config, day: date) -> None:
    store = get_journal(config)
    try:
        created = open_entry(store, SubprocessEditor(config.editor), day, config)
    except JournalNotFound as e:
        _fail(f"There doesn't seem to be a folder for {e.path}. Please create it.")
    except RuntimeError as e:
        _fail(f"Error: {e}")
    else:
        if created:
            click.echo(f"Made a new file: {store.path_for(day.year, day.month)}")


@main.command()
@click.argument("target_date", required=False)
@click.pass_obj
def entry(config: Config, target_date: str | None):
    """Print the entry for a date (YYYY-MM-DD)."""
    day = _resolve_date(target_date)
    text = get_journal(config).entry(day, config.add_weekday)
    if text is None:
        _fail(f"Entry does not exist for {day.isoformat()}")
    click.echo(text, nl=False)


@main.command("open")
@click.argument("target_date", required=False)
@click.pass_obj
def open_cmd(config: Config, target_date: str | None):
    """Open an existing entry (YYYY-MM-DD) in the editor."""
    day = _resolve_date(target_date)
    if get_journal(config).entry(day, config.add_weekday) is None:
        _fail(f"Entry does not exist for {day.isoformat()}")
    _open_in_editor(config, day)


def _run_query(
    config: Config,
    word: str,
    year: int | None,
    month: int | None,
    mode: SearchMode,
    tolerance: int = 0,
) -> None:
    scope = _resolve_scope(year, month)
    is_food = mode is SearchMode.TAG and word == FOOD_TAG
    if is_food and scope.year_wide:
        _fail("This will fill up your terminal. Check month-wise instead.")

    store = get_journal(config)
    try:
        aggregate = find_matches(store, word, scope, mode, tolerance)
    except JournalNotFound as e:
        _fail(str(e))
    except FoodSearchError as e:
        _fail(str(e))
    except TagCollisionError:
        click.echo(f"No matches for '{click.style(word, fg='magenta')}' found in {_scope_label(scope)}", err=True)
        click.echo(click.style("Help:", fg="green", bold=True), err=True)
        click.echo(
            f"There exists a {click.style('tag', fg='red', underline=True)} with a similar name: "
            f"{click.style(word, fg='bright_yellow', bold=True)}",
            err=True,
        )
        click.echo("Perhaps you meant to get the tag?", err=True)
        sys.exit(1)

    if not aggregate.dates:
        kind = "" if mode is SearchMode.TEXT else "the tag "
        colour = "magenta" if mode is SearchMode.TEXT else "cyan"
        click.echo(f"No matches for {kind}'{click.style(word, fg=colour)}' found in {_scope_label(scope)}")
        return

    if is_food:
        table = render.food_table(aggregate.dates, food_records(aggregate))
    else:
        table = render.tags_table(aggregate)
    _emit(render.to_text(table), len(aggregate.dates), config)

    if scope.year_wide:
        grids = render_months(scope.year, aggregate.highlights)
        click.echo(render.to_text(render.calendar_grid(grids)), nl=False)
    else:
        click.echo(render_month(scope.year, scope.month, aggregate.days()))


@main.command()
@click.argument("tag_name")
@year_option
@month_option
@click.pass_obj
def tag(config: Config, tag_name: str, year: int | None, month: int | None):
    """List every record carrying [TAG_NAME].

    Searches the current month by default. The special tag `food` shows
    breakfast, lunch, dinner and other columns.
    """
    _run_query(config, tag_name, year, month, SearchMode.TAG)


@main.command()
@click.argument("word")
@year_option
@month_option
@click.option(
    "--approx", "-a", type=int, is_flag=False, flag_value=-1, default=0,
    help="Also match words within this edit distance; a bare -a uses APPROX_VARIATION.",
)
@click.pass_obj
def search(config: Config, word: str, year: int | None, month: int | None, approx: int):
    """Find WORD in records, ignoring case and simple inflections."""
    tolerance = config.approx_variation if approx < 0 else approx
    _run_query(config, word, year, month, SearchMode.TEXT, tolerance)


@main.command()
@year_option
@month_option
@click.pass_obj
def report(config: Config, year: int | None, month: int | None):
    """Summarise a month (or a whole year with only --year)."""
    scope = _resolve_scope(year, month)
    store = get_journal(config)
    try:
        if scope.year_wide:
            _print_year_report(store, scope, config)
        else:
            _print_month_report(store, scope, config)
    except JournalNotFound as e:
        _fail(str(e))
    except MalformedEventError as e:
        _fail(f"ERROR: {e}")


def _heading(text: str) -> str:
    return click.style(text, fg="yellow", bold=True)


def _print_month_report(store, scope: Scope, config: Config) -> None:
    data = month_report(store, scope.year, scope.month, config)
    click.echo(click.style(f"Report for {month_name(data.month)}, {data.year}", fg="cyan", bold=True, underline=True))
    click.echo()
    click.echo(click.style(f"Number of entries this month: {data.entry_count}", fg="yellow"))
    click.echo()
    click.echo(render_month(data.year, data.month, data.days))
    click.echo(_heading("Most used tags:"))
    click.echo(render.to_text(render.frequency_table(data.top_tags)), nl=False)

    events = recent_events(store)
    if events is None:
        return
    upcoming, completed = events
    click.echo()
    click.echo(_heading("Upcoming Events:"))
    for event in upcoming:
        click.echo(f"[{click.style(event.date.isoformat(), fg='cyan')}] {describe_distance(event)}: {event.description}")
    click.echo()
    click.echo(_heading("Recently completed Events:"))
    for event in completed:
        click.echo(f"[{click.style(event.date.isoformat(), fg='cyan')}] {describe_distance(event)}: {event.description}")


def _print_year_report(store, scope: Scope, config: Config) -> None:
    data = year_report(store, scope.year, config)
    click.echo(click.style(f"Report for {data.year}", fg="cyan", bold=True, underline=True))
    click.echo()
    click.echo(click.style(f"Number of entries this year: {data.total_entries}", fg="yellow", underline=True))
    for month, count in data.monthly_counts.items():
        click.echo(f"{month_name(month)}: {count}")
    click.echo()
    grids = render_months(data.year, data.month_days)
    click.echo(render.to_text(render.calendar_grid(grids)))
    click.echo(_heading("Most used tags:"))
    click.echo(render.to_text(render.frequency_table(data.top_tags)), nl=False)


@main.command("config")
@click.option("--edit", is_flag=True, help="Open jotter.conf in the editor")
@click.pass_obj
def config_cmd(config: Config, edit: bool):
    """Show the configuration in use."""
    if not edit:
        click.echo(click.style("CONFIGURATION", fg="cyan", bold=True, underline=True))
        click.echo(render.to_text(render.config_table(config)), nl=False)
        return

    if not CONFIG_FILE.exists():
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_FILE.touch()
        click.echo(f"Made config file: {CONFIG_FILE}")
    try:
        SubprocessEditor(config.editor).open(CONFIG_FILE)
    except RuntimeError as e:
        _fail(f"Error: {e}")


if __name__ == "__main__":
    main()
