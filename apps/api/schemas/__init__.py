from .events import EventCreateRequest, EventResponse, MessageResponse

__all__ = [
    "EventCreateRequest",
    "EventResponse",
    "MessageResponse",
]
