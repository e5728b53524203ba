"""Ports - interfaces/protocols for external dependencies."""

from .journal_store import JournalStore
from .editor import EditorService

__all__ = [
    "JournalStore",
    "EditorService",
]
