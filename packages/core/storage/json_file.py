from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from typing import List

from ..errors import StoreCorruptError, StoreWriteError
from .base import EventState, EventStore


logger = logging.getLogger("scheduler.storage")


class JsonFileEventStore(EventStore):
    """Event collection kept as one pretty-printed JSON array on disk.

    Every mutation is a full read-modify-write of the file, serialized by
    a per-instance lock. Reads never raise: a missing file is created
    empty and an unreadable one is reset to an empty array.
    """

    def __init__(self, path: str) -> None:
        self._path = path
        self._lock = threading.RLock()
        self.ensure_directory()

    @property
    def path(self) -> str:
        return self._path

    def ensure_directory(self) -> None:
        directory = os.path.dirname(os.path.abspath(self._path))
        if os.path.isdir(directory):
            return
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError:
            # Not fatal: later file access reports the failure again.
            logger.exception("data_dir_create_failed path=%s", directory)
            return
        logger.info("data_dir_created path=%s", directory)

    def read_all(self) -> List[EventState]:
        with self._lock:
            if not os.path.exists(self._path):
                return self._initialize()
            try:
                with open(self._path, "r", encoding="utf-8") as handle:
                    raw = handle.read()
                return _decode(raw)
            except (OSError, UnicodeDecodeError, StoreCorruptError) as exc:
                logger.error("store_read_failed path=%s error=%s", self._path, exc)
                return self._reinitialize()

    def write_all(self, events: List[EventState]) -> None:
        payload = json.dumps(
            [event.to_dict() for event in events], indent=2, sort_keys=True
        )
        directory = os.path.dirname(os.path.abspath(self._path))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
            ) as handle:
                tmp_path = handle.name
                handle.write(payload)
            os.replace(tmp_path, self._path)
        except OSError as exc:
            logger.exception("store_write_failed path=%s", self._path)
            if tmp_path:
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.warning("store_tmp_cleanup_failed path=%s", tmp_path)
            raise StoreWriteError() from exc

    def list_events(self) -> List[EventState]:
        return self.read_all()

    def add_event(self, event: EventState) -> None:
        with self._lock:
            events = self.read_all()
            if any(existing.id == event.id for existing in events):
                raise ValueError(f"Event id already exists: {event.id}")
            events.append(event)
            self.write_all(events)

    def delete_event(self, event_id: str) -> bool:
        with self._lock:
            events = self.read_all()
            remaining = [event for event in events if event.id != event_id]
            if len(remaining) == len(events):
                return False
            self.write_all(remaining)
            return True

    def _initialize(self) -> List[EventState]:
        try:
            self.write_all([])
        except StoreWriteError:
            return []
        logger.info("store_initialized path=%s", self._path)
        return []

    def _reinitialize(self) -> List[EventState]:
        logger.warning("store_reinitializing path=%s", self._path)
        try:
            self.write_all([])
        except StoreWriteError:
            logger.error("store_reinitialize_failed path=%s", self._path)
        return []


def _decode(raw: str) -> List[EventState]:
    if not raw.strip():
        raise StoreCorruptError("Event store file is empty.")
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StoreCorruptError(f"Event store is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise StoreCorruptError("Event store does not hold a list.")
    try:
        return [EventState.from_dict(item) for item in payload]
    except (KeyError, TypeError) as exc:
        raise StoreCorruptError(f"Event store holds a malformed event: {exc}") from exc
