"""Per-category log levels, applied once from Settings at startup."""

import logging
import sys

from newshub.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers whose level it sets
LOGGER_LEVELS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access"),
    "log_level_storage": ("newshub.infrastructure.storage", "newshub.infrastructure.database"),
}


def setup_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    for field_name, logger_names in LOGGER_LEVELS.items():
        level = _level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)


def _level(name: str) -> int:
    """Numeric level for ``name``; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
