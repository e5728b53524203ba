"""Journal errors shared by the core, the adapters and the CLI."""

from pathlib import Path


class JournalError(Exception):
    """Base class for journal failures."""

    pass


class JournalNotFound(JournalError):
    """Raised when a month file or a year directory does not exist."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"There are no entries in {self.path}")


class TagCollisionError(JournalError):
    """Raised when a free-text search hits a line carrying the word as a tag."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"There exists a tag with a similar name: {word}")


class FoodSearchError(JournalError):
    """Raised when `food` is searched as free text instead of as a tag."""

    def __init__(self):
        super().__init__("Searching for food? Try the tag instead: `jotter tag food`")


class MalformedEventError(JournalError):
    """Raised when a line of the events file carries an impossible date."""

    def __init__(self, line_number: int):
        self.line_number = line_number
        super().__init__(f"Something is wrong with your events file at line {line_number}")
