"""Adapters - I/O implementations of ports."""

from .file_journal import FileJournalStore
from .editor import SubprocessEditor

__all__ = [
    "FileJournalStore",
    "SubprocessEditor",
]
