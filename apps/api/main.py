from __future__ import annotations

import logging
import os
from typing import Dict, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from apps.api.observability import init_observability
from apps.api.routes import events as events_routes
from apps.api.routes.events import router as events_router
from apps.api.routes.health import router as health_router
from packages.core.errors import EventError, NotFoundError, ValidationError
from packages.core.logging_config import configure_logging


WEB_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "web"))

_STATUS_BY_ERROR: Dict[Type[EventError], int] = {
    ValidationError: 400,
    NotFoundError: 404,
}

logger = logging.getLogger("scheduler.api")


configure_logging()

app = FastAPI(title="Event Scheduler API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
init_observability(app)
app.include_router(health_router)
app.include_router(events_router)
app.mount("/app", StaticFiles(directory=WEB_DIR, html=True), name="web")


@app.exception_handler(EventError)
def _event_error(request: Request, exc: EventError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(exc), 500)
    if status_code >= 500:
        logger.error("request_failed path=%s error=%s", request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
def _request_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        message = "Request body must be valid JSON."
    else:
        message = ValidationError.default_message
    return JSONResponse(status_code=400, content={"message": message})


@app.on_event("startup")
def _open_event_store() -> None:
    store = events_routes._store()
    events = store.list_events()
    logger.info(
        "event_store_ready path=%s events=%d",
        getattr(store, "path", "memory"),
        len(events),
    )
