from __future__ import annotations

import pytest

from tombamento_api.core import config as core_config


@pytest.fixture(autouse=True)
def clear_settings_cache():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("APP_ENV", "HOST", "PORT", "DATA_FILE", "MAX_BODY_MB", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)

    settings = core_config.get_settings()

    assert settings.port == 3000
    assert settings.data_file == "data.json"
    assert settings.max_body_bytes == 50 * 1024 * 1024
    assert settings.cors_origins == ("*",)
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("MAX_BODY_MB", "1")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.local, http://b.local")

    settings = core_config.get_settings()

    assert settings.port == 8080
    assert settings.max_body_bytes == 1024 * 1024
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("http://a.local", "http://b.local")


def test_invalid_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "abc")
    assert core_config.get_settings().port == 3000
