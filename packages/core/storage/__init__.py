from .base import EventState, EventStore
from .json_file import JsonFileEventStore
from .memory import InMemoryEventStore

__all__ = [
    "EventState",
    "EventStore",
    "InMemoryEventStore",
    "JsonFileEventStore",
]
