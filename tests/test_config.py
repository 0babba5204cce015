"""
Tests for settings loading.
"""

import pytest

from akhq_mcp.config import AppSettings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestGetSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        for name in ("BASE_URL", "TIMEOUT", "LOG_LEVEL", "SERVER_NAME", "SERVER_VERSION"):
            monkeypatch.delenv(f"AKHQ_MCP_{name}", raising=False)

        settings = get_settings()

        assert settings.base_url == "http://localhost:8080"
        assert settings.timeout == 30.0
        assert settings.log_level == "INFO"
        assert settings.server_name == "AKHQ"
        assert settings.server_version == "1.0.0"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("AKHQ_MCP_BASE_URL", "http://akhq.internal")
        monkeypatch.setenv("AKHQ_MCP_TIMEOUT", "12.5")
        monkeypatch.setenv("AKHQ_MCP_LOG_LEVEL", "warning")

        settings = get_settings()

        assert settings.base_url == "http://akhq.internal"
        assert settings.timeout == 12.5
        assert settings.log_level == "WARNING"

    def test_cached(self):
        assert get_settings() is get_settings()


def test_timeout_must_be_positive():
    with pytest.raises(ValueError):
        AppSettings(timeout=0)
