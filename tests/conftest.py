"""Shared fixtures: a small journal on disk."""

import pytest

from jotter.adapters.file_journal import FileJournalStore
from jotter.config import Config

MARCH = """### WED (21:00:00)
# 2025-03-05
- [walk] went for a walk in the park
- [food] | oats | salad | curry | tea

### WED
# 2025-03-12
- [walk] walked to the station
- [read] started a new book
"""

APRIL = """### TUE
# 2025-04-01
- [food] | toast | soup | pasta |
- [chore] cleaned the house
- [walk] short one after dinner
"""


@pytest.fixture
def journal_root(tmp_path):
    root = tmp_path / "jrnl_folder"
    year_dir = root / "2025"
    year_dir.mkdir(parents=True)
    (year_dir / "2025_03.md").write_text(MARCH, encoding="utf-8")
    (year_dir / "2025_04.md").write_text(APRIL, encoding="utf-8")
    return root


@pytest.fixture
def store(journal_root):
    return FileJournalStore(journal_root)


@pytest.fixture
def config(tmp_path, journal_root):
    return Config(default_path=str(tmp_path), when_pager="never")
