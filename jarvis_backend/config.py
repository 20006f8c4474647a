"""Runtime configuration helpers."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Tuple

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    cors_origins: Tuple[str, ...] = field(default=("http://localhost:3000",))


def _parse_origins(raw: str) -> Tuple[str, ...]:
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""
    host = os.getenv("JARVIS_HOST", "0.0.0.0")
    raw_port = os.getenv("JARVIS_PORT", "8000")
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"JARVIS_PORT must be an integer, got {raw_port!r}") from None
    log_level = os.getenv("JARVIS_LOG_LEVEL", "info").lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"JARVIS_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")
    cors_origins = _parse_origins(os.getenv("JARVIS_CORS_ORIGINS", "http://localhost:3000"))
    return Settings(host=host, port=port, log_level=log_level, cors_origins=cors_origins)
