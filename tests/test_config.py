from __future__ import annotations

import pytest

from lessons_api.core import config as core_config


@pytest.fixture()
def fresh_settings(monkeypatch):
    """Clear the settings cache before and after each test."""
    for name in ("PORT", "MONGO_URL", "DB_NAME", "MONGO_TIMEOUT_MS", "CORS_ORIGINS", "LOG_LEVEL", "IMAGES_DIR"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(fresh_settings):
    settings = core_config.get_settings()
    assert settings.port == 3000
    assert settings.mongo_url == "mongodb://localhost:27017"
    assert settings.db_name == "LessonApp"
    assert settings.mongo_timeout_ms == 5000
    assert settings.cors_origins == ("*",)
    assert settings.images_dir.endswith("images")


def test_environment_overrides(fresh_settings):
    fresh_settings.setenv("PORT", "8080")
    fresh_settings.setenv("MONGO_URL", "mongodb://db:27017")
    fresh_settings.setenv("DB_NAME", "Shop")
    fresh_settings.setenv("MONGO_TIMEOUT_MS", "250")
    fresh_settings.setenv("CORS_ORIGINS", "http://a.test, http://b.test")
    fresh_settings.setenv("LOG_LEVEL", "debug")
    settings = core_config.get_settings()
    assert settings.port == 8080
    assert settings.mongo_url == "mongodb://db:27017"
    assert settings.db_name == "Shop"
    assert settings.mongo_timeout_ms == 250
    assert settings.cors_origins == ("http://a.test", "http://b.test")
    assert settings.log_level == "DEBUG"


def test_bad_numbers_fall_back_to_defaults(fresh_settings):
    fresh_settings.setenv("PORT", "abc")
    fresh_settings.setenv("MONGO_TIMEOUT_MS", "0")
    settings = core_config.get_settings()
    assert settings.port == 3000
    assert settings.mongo_timeout_ms == 1


def test_settings_only_carry_used_options(fresh_settings):
    fresh_settings.setenv("APP_ENV", "prod")
    settings = core_config.get_settings()
    assert not hasattr(settings, "app_env")
