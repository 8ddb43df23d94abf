"""Unit tests for application settings configuration."""

from pathlib import Path

from newshub.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults(monkeypatch):
    for name in ("STORAGE_BACKEND", "BASE_URL", "FEED_MAX_ITEMS", "MAX_IMAGE_SIZE_MB"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "memory"
    assert settings.feed_max_items == 50
    assert settings.feed_ttl == 60
    assert settings.max_image_size_bytes == 5 * 1024 * 1024
    assert settings.feed_self_link == "http://localhost:5000/api/v1/rss.xml"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "database")
    monkeypatch.setenv("BASE_URL", "https://news.example.com/")
    monkeypatch.setenv("FEED_MAX_ITEMS", "10")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "database"
    assert settings.feed_max_items == 10
    assert settings.feed_self_link == "https://news.example.com/api/v1/rss.xml"
