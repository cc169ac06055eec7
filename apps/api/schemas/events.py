from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class EventCreateRequest(BaseModel):
    # Optional so that missing fields reach the service and get the
    # same 400 message as blank ones.
    date: Optional[str] = Field(None, description="ISO-8601 date, YYYY-MM-DD")
    time: Optional[str] = Field(None, description="24-hour time, HH:MM")
    description: Optional[str] = None


class EventResponse(BaseModel):
    id: str
    date: str
    time: str
    description: str


class MessageResponse(BaseModel):
    message: str
