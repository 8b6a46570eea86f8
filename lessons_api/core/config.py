"""
Configuration helpers for the lessons backend.

Routers/services read settings through ``get_settings()`` so nothing else
fetches os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_IMAGES_DIR = Path(__file__).resolve().parents[2] / "public" / "images"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    host: str
    port: int
    mongo_url: str
    db_name: str
    mongo_timeout_ms: int
    images_dir: str
    cors_origins: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None, default: str) -> tuple[str, ...]:
        raw = value if value is not None else default
        return tuple(item.strip() for item in raw.split(",") if item.strip())

    return Settings(
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3000"), 3000),
        mongo_url=os.getenv("MONGO_URL", "mongodb://localhost:27017"),
        db_name=os.getenv("DB_NAME", "LessonApp"),
        mongo_timeout_ms=max(1, _int(os.getenv("MONGO_TIMEOUT_MS", "5000"), 5000)),
        images_dir=os.getenv("IMAGES_DIR", str(DEFAULT_IMAGES_DIR)),
        cors_origins=_csv(os.getenv("CORS_ORIGINS"), "*"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
