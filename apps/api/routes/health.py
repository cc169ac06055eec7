from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter(tags=["health"])

LIVENESS_MESSAGE = "Scheduler backend is running."


@router.get("/", response_class=PlainTextResponse)
def liveness() -> str:
    return LIVENESS_MESSAGE
