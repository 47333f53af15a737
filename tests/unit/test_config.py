"""
Unit tests for application settings.
"""

import pytest

from core.config import DEFAULT_USER_DOMAIN, Settings, get_settings


@pytest.fixture
def clean_settings():
    """Clear cached settings around a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("USER_DOMAIN", raising=False)
        settings = Settings(_env_file=None)
        assert settings.port == 60000
        assert settings.user_domain == DEFAULT_USER_DOMAIN
        assert settings.database_url is None
        assert not settings.is_production

    def test_database_configured_needs_url_and_flag(self):
        url = "postgresql+asyncpg://de:de@localhost/de"
        assert Settings(_env_file=None, database_enabled=True, database_url=url).is_database_configured
        assert not Settings(_env_file=None, database_enabled=False, database_url=url).is_database_configured
        assert not Settings(_env_file=None, database_enabled=True, database_url=None).is_database_configured

    def test_environment_overrides(self, monkeypatch, clean_settings):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("USER_DOMAIN", "example.org")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = get_settings()

        assert settings.port == 8080
        assert settings.user_domain == "example.org"
        assert settings.is_production

    def test_get_settings_is_cached(self, clean_settings):
        assert get_settings() is get_settings()
