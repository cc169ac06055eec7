from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_PORT = 3000
DEFAULT_DB_PATH = os.path.join("apps", "api", "data", "db.json")


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    db_path: str
    log_level: str
    log_destination: str
    log_file: Optional[str]
    otel_enabled: bool
    otel_endpoint: Optional[str]


def _port() -> int:
    raw = os.getenv("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT


def load_settings() -> Settings:
    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_port(),
        db_path=os.getenv("EVENTS_DB_PATH", DEFAULT_DB_PATH),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_destination=os.getenv("LOG_DESTINATION", "stdout").lower(),
        log_file=os.getenv("LOG_FILE"),
        otel_enabled=os.getenv("OTEL_ENABLED", "false").lower() == "true",
        otel_endpoint=os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT"),
    )
