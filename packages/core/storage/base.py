from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Protocol, runtime_checkable


@dataclass(frozen=True)
class EventState:
    id: str
    date: str
    time: str
    description: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "EventState":
        return cls(
            id=str(payload["id"]),
            date=str(payload["date"]),
            time=str(payload["time"]),
            description=str(payload["description"]),
        )


@runtime_checkable
class EventStore(Protocol):
    def list_events(self) -> List[EventState]:
        """Return every stored event. Order is unspecified."""

    def add_event(self, event: EventState) -> None:
        """Persist a new event."""

    def delete_event(self, event_id: str) -> bool:
        """Delete an event by id. Returns True if an event was removed."""
