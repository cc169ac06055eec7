from .client import ApiError, BoardView, EventBoard, EventRow, EventsApiClient
from .service import create_event, delete_event, list_events

__all__ = [
    "ApiError",
    "BoardView",
    "EventBoard",
    "EventRow",
    "EventsApiClient",
    "create_event",
    "delete_event",
    "list_events",
]
