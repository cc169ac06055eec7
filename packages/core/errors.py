from __future__ import annotations


class EventError(Exception):
    """Base class for event scheduling failures."""

    default_message = "Event operation failed."

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(EventError):
    """A required event field was missing on create."""

    default_message = "Date, time, and description are required."


class NotFoundError(EventError):
    default_message = "Event not found."


class StoreCorruptError(EventError):
    """The backing file is empty or does not hold a list of events.

    Handled inside the store by reinitializing the file; never reaches
    API callers.
    """

    default_message = "Event store is corrupt."


class StoreWriteError(EventError):
    default_message = "Failed to save events."
