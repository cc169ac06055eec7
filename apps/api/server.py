from __future__ import annotations

import logging

import uvicorn

from packages.core.config import load_settings
from packages.core.logging_config import configure_logging


def main() -> None:
    settings = load_settings()
    configure_logging(settings)
    logging.getLogger("scheduler.api").info(
        "server_starting host=%s port=%d db_path=%s",
        settings.host,
        settings.port,
        settings.db_path,
    )
    uvicorn.run(
        "apps.api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
