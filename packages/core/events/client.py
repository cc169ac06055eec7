from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from ..errors import ValidationError
from ..storage.base import EventState
from .presentation import (
    empty_placeholder,
    filter_events,
    format_date,
    format_time,
    sort_events,
)


EVENTS_PATH = "/api/events"
FILL_ALL_FIELDS = "Please fill in all fields: Date, Time, and Description."


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


def _raise_for_error(response: httpx.Response) -> None:
    if response.is_success:
        return
    message = f"HTTP error! status: {response.status_code}"
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        message = str(payload["message"])
    raise ApiError(response.status_code, message)


class EventsApiClient:
    """Thin client for the ``/api/events`` routes.

    Pass ``http`` to reuse an existing ``httpx.Client`` (for example a
    FastAPI ``TestClient``); otherwise one is created for ``base_url``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        http: Optional[httpx.Client] = None,
        timeout: float = 15,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)

    def list_events(self) -> List[EventState]:
        response = self._http.get(EVENTS_PATH)
        _raise_for_error(response)
        return [EventState.from_dict(item) for item in response.json()]

    def create_event(self, date: str, time: str, description: str) -> EventState:
        payload: Dict[str, Any] = {
            "date": date,
            "time": time,
            "description": description,
        }
        response = self._http.post(EVENTS_PATH, json=payload)
        _raise_for_error(response)
        return EventState.from_dict(response.json())

    def delete_event(self, event_id: str) -> str:
        response = self._http.delete(f"{EVENTS_PATH}/{event_id}")
        _raise_for_error(response)
        return response.json().get("message", "")

    def close(self) -> None:
        if self._owns_http:
            self._http.close()


@dataclass(frozen=True)
class EventRow:
    id: str
    date: str
    time: str
    description: str


@dataclass(frozen=True)
class BoardView:
    rows: List[EventRow] = field(default_factory=list)
    placeholder: Optional[str] = None


class EventBoard:
    """Fetch, render and mutate events through the API.

    Only the most recent fetch is held. Every successful mutation is
    followed by a full refetch; nothing is updated optimistically.
    """

    def __init__(self, client: EventsApiClient) -> None:
        self._client = client
        self.events: List[EventState] = []
        self.filter_date: Optional[str] = None

    def refresh(self) -> List[EventState]:
        self.events = self._client.list_events()
        return self.events

    def render(self) -> BoardView:
        visible = filter_events(sort_events(self.refresh()), self.filter_date)
        if not visible:
            return BoardView(placeholder=empty_placeholder(self.filter_date))
        return BoardView(
            rows=[
                EventRow(
                    id=event.id,
                    date=format_date(event.date),
                    time=format_time(event.time),
                    description=event.description,
                )
                for event in visible
            ]
        )

    def add(self, date: str, time: str, description: str) -> BoardView:
        description = (description or "").strip()
        if not date or not time or not description:
            raise ValidationError(FILL_ALL_FIELDS)
        self._client.create_event(date, time, description)
        return self.render()

    def delete(self, event_id: str) -> BoardView:
        self._client.delete_event(event_id)
        return self.render()
