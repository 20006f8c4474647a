"""CLI entrypoint for launching the FastAPI service with Uvicorn."""
from __future__ import annotations

import logging

import uvicorn

from .api import app
from .config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    level = "DEBUG" if settings.log_level == "trace" else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    logger.info("JARVIS backend running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
