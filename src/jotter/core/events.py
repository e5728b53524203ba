"""Pure events-file logic - no I/O dependencies.

The events file holds one event per line, dated in the current year::

    - [04-15] Dentist
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .errors import MalformedEventError

UPCOMING_DAYS = 30
COMPLETED_DAYS = 30


@dataclass
class Event:
    """A dated reminder from the events file."""

    date: date
    description: str

    def days_from(self, as_of: date) -> int:
        """Days until the event (negative if it is past)."""
        return (self.date - as_of).days


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return 0


def parse_events(lines: Iterable[str], year: int) -> list[Event]:
    """
    Parse ``- [MM-DD] description`` lines.

    Lines that do not start with ``-`` or do not hold exactly one bracketed
    date are ignored. An impossible date raises MalformedEventError.
    """
    events = []
    for line_no, line in enumerate(lines, start=1):
        if not line.startswith("-"):
            continue
        parts = line.replace("]", "[").split("[")
        if len(parts) != 3:
            continue
        month_day = [_to_int(p) for p in parts[1].split("-")]
        if len(month_day) != 2:
            raise MalformedEventError(line_no)
        try:
            event_date = date(year, month_day[0], month_day[1])
        except ValueError:
            raise MalformedEventError(line_no) from None
        events.append(Event(date=event_date, description=parts[2].strip()))
    return events


def classify_events(
    events: list[Event],
    as_of: date | None = None,
) -> tuple[list[Event], list[Event]]:
    """
    Split events into upcoming (today to 30 days ahead) and recently
    completed (1 to 30 days ago).

    Upcoming events are soonest first, completed ones most recent first.
    """
    as_of = as_of or date.today()
    upcoming = [e for e in events if 0 <= e.days_from(as_of) <= UPCOMING_DAYS]
    completed = [e for e in events if -COMPLETED_DAYS <= e.days_from(as_of) < 0]
    upcoming.sort(key=lambda e: e.date)
    completed.sort(key=lambda e: e.date, reverse=True)
    return upcoming, completed


def describe_distance(event: Event, as_of: date | None = None) -> str:
    """Human wording for how far away an event is."""
    as_of = as_of or date.today()
    diff = event.days_from(as_of)
    if diff == 0:
        return "TODAY!"
    if diff == 1:
        return "1 day from now"
    if diff > 1:
        return f"{diff} days from now"
    if diff == -1:
        return "1 day ago"
    return f"{-diff} days ago"
