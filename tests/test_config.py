"""
Configuration Tests

Tests for environment-driven settings.
"""

import pytest

from Security.security_config import get_bool, get_int, load_settings

SETTING_KEYS = [
    "APP_HOST",
    "APP_PORT",
    "LOG_DIR",
    "LOG_LEVEL",
    "ACTIVITY_LOGGING_ENABLED",
    "MAX_BODY_BYTES",
    "SECURITY_HEADERS_ENABLED",
    "SECRETS_REDACTION_ENABLED",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in SETTING_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings()

        assert settings["APP_HOST"] == "0.0.0.0"
        assert settings["APP_PORT"] == 8080
        assert settings["LOG_DIR"] == "logs"
        assert settings["LOG_LEVEL"] == "INFO"
        assert settings["MAX_BODY_BYTES"] == 10 * 1024 * 1024
        assert settings["ACTIVITY_LOGGING_ENABLED"] is True
        assert settings["SECURITY_HEADERS_ENABLED"] is True

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("APP_PORT", "9090")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("SECURITY_HEADERS_ENABLED", "false")

        settings = load_settings()

        assert settings["APP_PORT"] == 9090
        assert settings["LOG_LEVEL"] == "DEBUG"
        assert settings["SECURITY_HEADERS_ENABLED"] is False

    def test_bad_integer_falls_back(self, clean_env):
        clean_env.setenv("APP_PORT", "eighty")

        assert load_settings()["APP_PORT"] == 8080

    def test_blank_string_falls_back(self, clean_env):
        clean_env.setenv("APP_HOST", "   ")

        assert load_settings()["APP_HOST"] == "0.0.0.0"


class TestHelpers:
    @pytest.mark.parametrize("raw, expected", [("true", True), ("TRUE", True), ("yes", False), ("false", False)])
    def test_get_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("DEMO_FLAG", raw)

        assert get_bool("DEMO_FLAG") is expected

    def test_get_int_default(self, monkeypatch):
        monkeypatch.delenv("DEMO_NUMBER", raising=False)

        assert get_int("DEMO_NUMBER", 7) == 7
