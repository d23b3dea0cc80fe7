"""
Tests for WardSettings
"""

import pytest

from ward.core.settings import (
    WardSettings, get_ward_settings,
    WARD_PICKUP_TEST_URL, WARD_PICKUP_PRODUCTION_URL, WARD_RATE_QUOTE_URL
)


@pytest.fixture(autouse=True)
def clean_ward_env(monkeypatch):
    for name in ("WARD_PRODUCTION_MODE", "WARD_TIMEOUT", "WARD_PICKUP_TEST_URL",
                 "WARD_PICKUP_PRODUCTION_URL", "WARD_RATE_QUOTE_URL"):
        monkeypatch.delenv(name, raising=False)
    get_ward_settings.cache_clear()
    yield
    get_ward_settings.cache_clear()


class TestWardSettings:

    def test_defaults(self):
        settings = WardSettings(_env_file=None)

        assert settings.production_mode is False
        assert settings.timeout == 10
        assert settings.pickup_url == WARD_PICKUP_TEST_URL
        assert settings.rate_quote_url == WARD_RATE_QUOTE_URL

    def test_production_pickup_url(self):
        settings = WardSettings(_env_file=None, production_mode=True)

        assert settings.pickup_url == WARD_PICKUP_PRODUCTION_URL
        assert settings.rate_quote_url == WARD_RATE_QUOTE_URL

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("WARD_PRODUCTION_MODE", "true")
        monkeypatch.setenv("WARD_TIMEOUT", "25")
        monkeypatch.setenv("WARD_RATE_QUOTE_URL", "http://localhost:8080/RATEQUOTE")

        settings = WardSettings(_env_file=None)

        assert settings.production_mode is True
        assert settings.timeout == 25
        assert settings.rate_quote_url == "http://localhost:8080/RATEQUOTE"

    def test_cached_instance(self):
        assert get_ward_settings() is get_ward_settings()
