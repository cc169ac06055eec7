from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, status

from apps.api.schemas.events import EventCreateRequest, EventResponse, MessageResponse
from packages.core.config import load_settings
from packages.core.events.service import create_event, delete_event, list_events
from packages.core.storage.base import EventState, EventStore
from packages.core.storage.json_file import JsonFileEventStore


router = APIRouter(prefix="/api/events", tags=["events"])

_STORE: Optional[EventStore] = None


def _store() -> EventStore:
    global _STORE
    if _STORE is None:
        _STORE = JsonFileEventStore(load_settings().db_path)
    return _STORE


def _to_response(event: EventState) -> EventResponse:
    return EventResponse(
        id=event.id,
        date=event.date,
        time=event.time,
        description=event.description,
    )


@router.get("", response_model=List[EventResponse])
def list_all() -> List[EventResponse]:
    return [_to_response(event) for event in list_events(_store())]


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create(payload: EventCreateRequest) -> EventResponse:
    event = create_event(
        _store(),
        date=payload.date,
        time=payload.time,
        description=payload.description,
    )
    return _to_response(event)


@router.delete("/{event_id}", response_model=MessageResponse)
def delete(event_id: str) -> MessageResponse:
    delete_event(_store(), event_id)
    return MessageResponse(message="Event deleted successfully.")
