from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from .base import EventState, EventStore


class InMemoryEventStore(EventStore):
    def __init__(self, events: Optional[Iterable[EventState]] = None) -> None:
        self._events: List[EventState] = list(events or [])
        self._lock = threading.Lock()

    def list_events(self) -> List[EventState]:
        with self._lock:
            return list(self._events)

    def add_event(self, event: EventState) -> None:
        with self._lock:
            if any(existing.id == event.id for existing in self._events):
                raise ValueError(f"Event id already exists: {event.id}")
            self._events.append(event)

    def delete_event(self, event_id: str) -> bool:
        with self._lock:
            remaining = [event for event in self._events if event.id != event_id]
            if len(remaining) == len(self._events):
                return False
            self._events = remaining
            return True
