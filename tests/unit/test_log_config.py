"""Unit tests for per-category logging levels."""

import logging

from newshub.config import Settings
from newshub.infrastructure.logging.log_config import setup_logging


def test_category_levels_applied():
    settings = Settings(
        _env_file=None,
        log_level="INFO",
        log_level_sql="ERROR",
        log_level_http="DEBUG",
        log_level_storage="WARNING",
    )

    setup_logging(settings)

    assert logging.getLogger().level == logging.INFO
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("httpx").level == logging.DEBUG
    assert logging.getLogger("newshub.infrastructure.storage").level == logging.WARNING


def test_unknown_level_falls_back_to_info():
    setup_logging(Settings(_env_file=None, log_level_uvicorn="LOUD"))

    assert logging.getLogger("uvicorn").level == logging.INFO
