"""Pure tag and free-text search over a month file - no I/O dependencies."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

import click
from rapidfuzz.distance import OSA

from .errors import FoodSearchError, TagCollisionError
from .journal import FOOD_TAG, heading_date, is_heading, is_marker

WORD_SEPARATORS = re.compile(r"[ (),.;\-|/]")
INFLECTIONS = ("", "ed", "d", "es", "'s", "s")


class SearchMode(Enum):
    """What a query is looking for."""

    TAG = "tag"  # Lines carrying the literal [word]
    TEXT = "text"  # Free text, optionally approximate


@dataclass
class SearchResult:
    """Index-aligned matches: ``matches[i]`` was found under ``dates[i]``."""

    dates: list[str] = field(default_factory=list)
    matches: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self):
        # Unpacks as (dates, matches)
        yield self.dates
        yield self.matches

    def add(self, entry_date: str, text: str) -> None:
        self.dates.append(entry_date)
        self.matches.append(text)

    def extend(self, other: "SearchResult") -> None:
        self.dates.extend(other.dates)
        self.matches.extend(other.matches)

    def pairs(self) -> list[tuple[str, str]]:
        return list(zip(self.dates, self.matches))


def strip_list_marker(line: str) -> str:
    """Drop one leading ``- `` and surrounding whitespace."""
    line = line.strip()
    if line.startswith("- "):
        line = line[2:]
    return line.strip()


def highlight_tag(line: str, word: str) -> str:
    return line.replace(f"[{word}]", f"[{click.style(word, fg='cyan')}]")


def highlight_text(line: str, text: str) -> str:
    return line.replace(text, click.style(text, fg="magenta"))


def find_bounded(line: str, word: str) -> bool:
    """True if ``word`` occurs with no alphanumeric character on either side."""
    if not word:
        return False
    start = line.find(word)
    while start != -1:
        end = start + len(word)
        before = line[start - 1] if start > 0 else " "
        after = line[end] if end < len(line) else " "
        if not before.isalnum() and not after.isalnum():
            return True
        start = line.find(word, start + 1)
    return False


def tokenize(line: str) -> list[str]:
    return [t for t in WORD_SEPARATORS.split(line) if t]


def matches_word(token: str, word: str, tolerance: int = 0) -> bool:
    """
    Whole-word comparison, case-insensitive.

    Accepts simple inflections of ``word`` (``ed``, ``d``, ``es``, ``'s``,
    ``s``) and, with a tolerance of 1 or more, any token within that
    edit distance (an adjacent transposition counts as one edit).
    """
    token = token.lower()
    word = word.lower()
    if any(token == word + suffix for suffix in INFLECTIONS):
        return True
    if tolerance >= 1:
        return OSA.distance(token, word) <= tolerance
    return False


def match_line(line: str, word: str, tolerance: int = 0) -> str | None:
    """
    Free-text match of a single record line.

    Returns the decorated line, or None if no check is satisfied. The
    bounded-substring check runs first, then the whole-word check (which
    also covers the approximate one).
    """
    text = strip_list_marker(line)
    if find_bounded(text, word):
        return highlight_text(text, word)
    for token in tokenize(text):
        if matches_word(token, word, tolerance):
            return highlight_text(text, token)
    return None


def search_lines(
    lines: Iterable[str],
    word: str,
    mode: SearchMode = SearchMode.TAG,
    tolerance: int = 0,
) -> SearchResult:
    """
    Scan a month file for a tag or a word.

    Every match is paired with the date of the heading above it. Headings
    and weekday markers are never matches. In text mode a line carrying
    ``[word]`` aborts the whole scan with TagCollisionError.

    Pure function - no I/O.
    """
    if mode is SearchMode.TEXT and word == FOOD_TAG:
        raise FoodSearchError()

    result = SearchResult()
    tag_token = f"[{word}]"
    current_date = ""

    for line in lines:
        if is_marker(line):
            continue
        if is_heading(line):
            current_date = heading_date(line)
            continue

        if mode is SearchMode.TAG:
            if tag_token in line:
                result.add(current_date, highlight_tag(strip_list_marker(line), word))
            continue

        if tag_token in line:
            raise TagCollisionError(word)
        matched = match_line(line, word, tolerance)
        if matched is not None:
            result.add(current_date, matched)

    return result
