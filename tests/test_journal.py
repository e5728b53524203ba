"""Tests for month-file structure logic."""

from datetime import date
from pathlib import Path

import click
import pytest

from jotter.core.journal import (
    FoodRecord,
    HeadingIndex,
    decorate_tags,
    extract_tags,
    month_file_path,
    month_number,
    parse_entry_date,
    parse_food_line,
    render_entry,
    scan_headings,
    weekday_name,
)


@pytest.fixture
def lines():
    return [
        "### TUE (08:00:00)",
        "# 2025-04-01",
        "- [food] | toast | soup | pasta | ",
        "- [chore] cleaned the house",
        "",
        "### WED",
        "# 2025-04-02",
        "- [work] [chore] wrote the [report]s",
    ]


class TestMonthFilePath:
    def test_pads_month(self):
        assert month_number(3) == "03"
        assert month_number(12) == "12"

    def test_out_of_range_month_maps_to_00(self):
        assert month_number(0) == "00"
        assert month_number(20) == "00"

    def test_path_layout(self):
        assert month_file_path(Path("/j"), 2025, 4) == Path("/j/2025/2025_04.md")


class TestParseEntryDate:
    def test_valid(self):
        assert parse_entry_date("2025-04-01") == date(2025, 4, 1)

    def test_invalid(self):
        assert parse_entry_date("yesterday") is None
        assert parse_entry_date("2025-02-30") is None


class TestScanHeadings:
    def test_collects_headings_with_line_numbers(self, lines):
        index = scan_headings(lines)

        assert index.headings == ["# 2025-04-01", "# 2025-04-02"]
        assert index.line_numbers == [2, 7]
        for heading, line_no in zip(index.headings, index.line_numbers):
            assert lines[line_no - 1] == heading

    def test_markers_are_not_headings(self):
        assert len(scan_headings(["### MON", "## notes", "#hashtag"])) == 0

    def test_empty_file(self):
        index = scan_headings([])
        assert index.headings == []
        assert index.line_numbers == []

    def test_line_for(self, lines):
        index = scan_headings(lines)
        assert index.line_for(date(2025, 4, 2)) == 7
        assert index.line_for("2025-04-01") == 2
        assert index.line_for(date(2025, 4, 3)) is None

    def test_dates(self):
        index = HeadingIndex(["# 2025-04-01", "#  2025-04-09 "], [1, 4])
        assert index.dates() == ["2025-04-01", "2025-04-09"]


class TestExtractTags:
    def test_tags_in_order_with_duplicates(self, lines):
        assert extract_tags(lines) == ["food", "chore", "work", "chore", "report"]

    def test_multiple_tags_on_one_line(self):
        assert extract_tags(["- [a] text [b]"]) == ["a", "b"]

    def test_no_brackets(self):
        assert extract_tags(["plain line", "# 2025-04-01"]) == []

    def test_empty_tag_is_kept(self):
        assert extract_tags(["- [] nothing"]) == [""]


class TestRenderEntry:
    def test_renders_only_the_target_section(self, lines):
        text = render_entry(lines, date(2025, 4, 1))
        plain = click.unstyle(text)

        assert plain.startswith("2025-04-01 (TUE)\n")
        assert "- [food] | toast | soup | pasta | " in plain
        assert "- [chore] cleaned the house" in plain
        assert "2025-04-02" not in plain
        assert "wrote" not in plain

    def test_skips_markers(self, lines):
        plain = click.unstyle(render_entry(lines, date(2025, 4, 2)))
        assert "###" not in plain
        assert "wrote the [report]s" in plain

    def test_without_weekday(self, lines):
        plain = click.unstyle(render_entry(lines, date(2025, 4, 1), add_weekday=False))
        assert plain.startswith("2025-04-01\n")
        assert "(TUE)" not in plain

    def test_tags_are_decorated(self, lines):
        text = render_entry(lines, date(2025, 4, 1))
        assert "[" + click.style("chore", fg="cyan") + "]" in text

    def test_missing_date(self, lines):
        assert render_entry(lines, date(2025, 4, 3)) is None

    def test_last_entry_runs_to_end_of_file(self, lines):
        plain = click.unstyle(render_entry(lines, date(2025, 4, 2)))
        assert plain.rstrip("\n").endswith("wrote the [report]s")


class TestDecorateTags:
    def test_plain_line_untouched(self):
        assert decorate_tags("no tags here") == "no tags here"

    def test_only_tag_text_is_styled(self):
        assert click.unstyle(decorate_tags("- [a] b")) == "- [a] b"


class TestParseFoodLine:
    def test_four_fields(self):
        record = parse_food_line("- [food] | toast | soup | pasta | ")
        assert record.as_list() == ["toast", "soup", "pasta", ""]

    def test_highlighted_line(self):
        line = "[" + click.style("food", fg="cyan") + "] | eggs | rice | stew | tea"
        assert parse_food_line(line) == FoodRecord("eggs", "rice", "stew", "tea")

    def test_missing_fields_are_empty(self):
        assert parse_food_line("[food] just toast").as_list() == ["just toast", "", "", ""]

    def test_surplus_fields_fold_into_other(self):
        record = parse_food_line("[food] | a | b | c | d | e")
        assert record.as_list() == ["a", "b", "c", "d | e"]


def test_weekday_name():
    assert weekday_name(date(2025, 4, 1)) == "TUE"
    assert weekday_name(date(2025, 4, 6)) == "SUN"
