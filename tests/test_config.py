"""Tests for environment-driven settings."""

import pytest

from common.config.base_settings import BaseAppSettings


@pytest.fixture
def make_settings(monkeypatch):
    def _make(**env):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        return BaseAppSettings(_env_file=None)
    return _make


class TestCorsOrigins:
    def test_unset_allows_no_origins(self, make_settings):
        settings = make_settings()

        assert settings.CORS_ORIGINS == ""
        assert settings.get_cors_origins() == []

    def test_comma_separated_list(self, make_settings):
        settings = make_settings(CORS_ORIGINS="https://a.com, https://b.com,")

        assert settings.get_cors_origins() == ["https://a.com", "https://b.com"]

    def test_wildcard_is_explicit_opt_in(self, make_settings):
        settings = make_settings(CORS_ORIGINS="*")

        assert settings.get_cors_origins() == ["*"]

    def test_wildcard_rejected_in_production(self, make_settings):
        settings = make_settings(CORS_ORIGINS="*", ENVIRONMENT="production")

        with pytest.raises(ValueError, match="CORS_ORIGINS"):
            settings.validate_required()
