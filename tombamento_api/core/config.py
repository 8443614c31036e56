"""
Configuration helpers for the Tombamentos backend.

Exposes a Settings object that reads environment variables (bind address,
data file, body limit, log level) so that routers/services do not fetch
os.environ directly. Defaults are the values the service ships with.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: str
    max_body_bytes: int
    log_level: str
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            return default
        items = tuple(item.strip() for item in value.split(",") if item.strip())
        return items or default

    max_body_mb = max(1, _int(os.getenv("MAX_BODY_MB", "50"), 50))

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        data_file=os.getenv("DATA_FILE", "data.json"),
        max_body_bytes=max_body_mb * 1024 * 1024,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
    )
