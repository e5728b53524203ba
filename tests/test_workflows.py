"""Tests for the shared workflow layer."""

from datetime import date, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from jotter.config import Config
from jotter.core.errors import FoodSearchError, JournalNotFound, MalformedEventError
from jotter.core.report import Scope
from jotter.core.search import SearchMode, SearchResult
from jotter.workflows import (
    find_matches,
    food_records,
    get_journal,
    month_report,
    open_entry,
    recent_events,
    year_report,
)


class TestGetJournal:
    def test_uses_configured_path(self, tmp_path):
        journal = get_journal(Config(default_path=str(tmp_path)))
        assert journal.journal_root == tmp_path / "jrnl_folder"

    def test_expands_user_path(self):
        journal = get_journal(Config(default_path="~/some/journal"))
        assert "~" not in str(journal.journal_root)
        assert journal.journal_root == Path.home() / "some" / "journal" / "jrnl_folder"


class TestFindMatches:
    def test_single_month(self, store):
        aggregate = find_matches(store, "chore", Scope(2025, 4))

        assert aggregate.dates == ["2025-04-01"]
        assert aggregate.highlights == {4: [1]}

    def test_year_wide(self, store):
        aggregate = find_matches(store, "walk", Scope(2025, 4, year_wide=True))

        assert aggregate.dates == ["2025-03-05", "2025-03-12", "2025-04-01"]
        assert aggregate.highlights == {3: [5, 12], 4: [1]}

    def test_year_wide_ignores_listing_order(self):
        fake = MagicMock()
        fake.month_files.return_value = {4: Path("2025_04.md"), 3: Path("2025_03.md")}
        fake.search.side_effect = [
            SearchResult(["2025-04-01"], ["april"]),
            SearchResult(["2025-03-05", "2025-03-12"], ["m1", "m2"]),
        ]

        aggregate = find_matches(fake, "walk", Scope(2025, 1, year_wide=True))

        assert aggregate.matches == ["m1", "m2", "april"]
        assert list(aggregate.highlights) == [3, 4]

    def test_text_mode_with_tolerance(self, store):
        aggregate = find_matches(store, "staton", Scope(2025, 3), SearchMode.TEXT, tolerance=1)
        assert aggregate.dates == ["2025-03-12"]

    def test_missing_month(self, store):
        with pytest.raises(JournalNotFound):
            find_matches(store, "walk", Scope(2025, 8))

    def test_missing_year(self, store):
        with pytest.raises(JournalNotFound):
            find_matches(store, "walk", Scope(2019, 1, year_wide=True))

    def test_text_food_rejected_before_reading(self):
        fake = MagicMock()

        with pytest.raises(FoodSearchError):
            find_matches(fake, "food", Scope(2025, 7), SearchMode.TEXT)
        fake.search.assert_not_called()
        fake.month_files.assert_not_called()


def test_food_records(store):
    aggregate = find_matches(store, "food", Scope(2025, 4))
    assert [r.as_list() for r in food_records(aggregate)] == [["toast", "soup", "pasta", ""]]


class TestReports:
    def test_month_report(self, store):
        report = month_report(store, 2025, 3, Config(max_rows=2))

        assert report.entry_count == 2
        assert report.days == [5, 12]
        assert report.top_tags == [("walk", 2), ("food", 1)]

    def test_year_report(self, store):
        report = year_report(store, 2025, Config())

        assert report.total_entries == 3
        assert report.monthly_counts == {3: 2, 4: 1}
        assert report.top_tags[0] == ("walk", 3)

    def test_month_report_missing(self, store):
        with pytest.raises(JournalNotFound):
            month_report(store, 2025, 9, Config())


class TestRecentEvents:
    def test_without_events_file(self, store):
        assert recent_events(store, date(2025, 4, 10)) is None

    def test_classifies(self, store, journal_root):
        (journal_root / "events.md").write_text(
            "- [04-12] Dentist\n- [04-01] Party\n- [12-25] Holiday\n", encoding="utf-8"
        )
        upcoming, completed = recent_events(store, date(2025, 4, 10))

        assert [e.description for e in upcoming] == ["Dentist"]
        assert [e.description for e in completed] == ["Party"]

    def test_malformed(self, store, journal_root):
        (journal_root / "events.md").write_text("- [02-31] Oops\n", encoding="utf-8")
        with pytest.raises(MalformedEventError):
            recent_events(store, date(2025, 4, 10))


class TestOpenEntry:
    @pytest.fixture
    def editor(self):
        return MagicMock()

    def test_new_month_file(self, store, editor):
        created = open_entry(store, editor, date(2025, 5, 3), Config(), datetime(2025, 5, 3, 9, 0))

        assert created is True
        path = store.path_for(2025, 5)
        lines = path.read_text(encoding="utf-8").split("\n")
        editor.open.assert_called_once_with(path, lines.index("# 2025-05-03") + 1)

    def test_existing_entry(self, store, editor):
        created = open_entry(store, editor, date(2025, 4, 1), Config())

        assert created is False
        editor.open.assert_called_once_with(store.path_for(2025, 4), 2)

    def test_missing_year_dir(self, store, editor):
        with pytest.raises(JournalNotFound):
            open_entry(store, editor, date(2031, 1, 1), Config())
        editor.open.assert_not_called()
