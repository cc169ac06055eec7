"""Display helpers shared by the event list views.

These mirror what the browser client in ``apps/web/script.js`` does
before rendering: chronological ordering, single-date filtering and
12-hour clock formatting. Stored values are never modified.
"""

from __future__ import annotations

import datetime as dt
from typing import Iterable, List, Optional

from ..storage.base import EventState


NO_EVENTS = "No events scheduled."
NO_EVENTS_FOR_DATE = "No events for this date."


def _sort_key(event: EventState) -> str:
    return f"{event.date}T{event.time}"


def sort_events(events: Iterable[EventState]) -> List[EventState]:
    # sorted() is stable, so equal timestamps keep fetch order.
    return sorted(events, key=_sort_key)


def filter_events(
    events: Iterable[EventState], filter_date: Optional[str] = None
) -> List[EventState]:
    if not filter_date:
        return list(events)
    return [event for event in events if event.date == filter_date]


def format_time(value: str) -> str:
    """Render ``HH:MM`` on a 12-hour clock; other values come back as stored."""
    if not value:
        return ""
    hours, _, minutes = value.partition(":")
    try:
        hour = int(hours)
    except ValueError:
        return value
    if not minutes:
        return value
    suffix = "PM" if hour >= 12 else "AM"
    display = hour % 12 or 12
    return f"{display}:{minutes} {suffix}"


def format_date(value: str) -> str:
    if not value:
        return ""
    try:
        parsed = dt.date.fromisoformat(value)
    except ValueError:
        return value
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def empty_placeholder(filter_date: Optional[str] = None) -> str:
    return NO_EVENTS_FOR_DATE if filter_date else NO_EVENTS
