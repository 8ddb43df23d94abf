from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "NewsHub API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5000"]

    # Public site root; item links and the feed self link are built from it
    base_url: str = "http://localhost:5000"

    # Storage engine: "memory" keeps articles in-process, "database" uses SQLAlchemy
    storage_backend: Literal["memory", "database"] = "memory"
    database_url: str = "sqlite:///./newshub.db"
    seed_sample_data: bool = False

    # RSS feed
    feed_title: str = "NewsHub - News and Articles"
    feed_description: str = (
        "The latest news on technology, business, sports and more."
    )
    feed_language: str = "en"
    feed_ttl: int = 60
    feed_max_items: int = 50
    feed_image_path: str = "/logo.png"
    feed_image_width: int = 144
    feed_image_height: int = 144
    feed_managing_editor: str | None = "admin@newshub.com (NewsHub Editorial)"
    feed_web_master: str | None = "admin@newshub.com (NewsHub Technical)"

    # Image hosting (ImgBB)
    imgbb_api_key: str = ""
    imgbb_upload_url: str = "https://api.imgbb.com/1/upload"
    image_upload_timeout: float = 30.0
    max_image_size_mb: int = 5

    # Placeholder figure reported by /stats, not derived from article data
    stats_subscribers: int = 156

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # article repositories

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def feed_self_link(self) -> str:
        return f"{self.base_url.rstrip('/')}/api/v1/rss.xml"

    @property
    def max_image_size_bytes(self) -> int:
        return self.max_image_size_mb * 1024 * 1024


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
