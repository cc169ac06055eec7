from __future__ import annotations

import logging.config
import sys
from typing import Any, Dict, Optional

from .config import Settings, load_settings


def _handler(settings: Settings) -> Dict[str, Any]:
    if settings.log_destination == "file":
        if not settings.log_file:
            raise RuntimeError("LOG_FILE is required when LOG_DESTINATION=file")
        return {
            "class": "logging.FileHandler",
            "level": settings.log_level,
            "filename": settings.log_file,
            "formatter": "standard",
        }
    stream = sys.stdout if settings.log_destination == "stdout" else sys.stderr
    return {
        "class": "logging.StreamHandler",
        "level": settings.log_level,
        "stream": stream,
        "formatter": "standard",
    }


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
                }
            },
            "handlers": {"default": _handler(settings)},
            "loggers": {
                "scheduler": {"level": settings.log_level, "propagate": True},
            },
            "root": {"handlers": ["default"], "level": settings.log_level},
        }
    )
