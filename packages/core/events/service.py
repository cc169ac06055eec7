from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from ..errors import NotFoundError, ValidationError
from ..storage.base import EventState, EventStore


logger = logging.getLogger("scheduler.events")


def _is_missing(value: Optional[str]) -> bool:
    """Whitespace-only values count as missing, not just empty ones."""
    return value is None or not value.strip()


def list_events(store: EventStore) -> List[EventState]:
    return store.list_events()


def create_event(
    store: EventStore,
    date: Optional[str],
    time: Optional[str],
    description: Optional[str],
) -> EventState:
    if _is_missing(date) or _is_missing(time) or _is_missing(description):
        raise ValidationError()
    event = EventState(
        id=str(uuid.uuid4()),
        date=date,
        time=time,
        description=description,
    )
    store.add_event(event)
    logger.info("event_created id=%s date=%s time=%s", event.id, event.date, event.time)
    return event


def delete_event(store: EventStore, event_id: str) -> None:
    if not store.delete_event(event_id):
        raise NotFoundError()
    logger.info("event_deleted id=%s", event_id)
