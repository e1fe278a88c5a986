"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from yo_cli.config.settings import LoggingSettings, Settings, UpdateCheckSettings


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert LoggingSettings().level == "DEBUG"


def test_invalid_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        LoggingSettings()


def test_update_check_settings_from_environment(monkeypatch):
    monkeypatch.setenv("UPDATE_CHECK_REGISTRY_URL", "https://registry.example/")
    monkeypatch.setenv("UPDATE_CHECK_ENABLED", "false")
    monkeypatch.setenv("UPDATE_CHECK_INTERVAL_SECONDS", "60")

    config = UpdateCheckSettings()

    assert config.registry_url == "https://registry.example"
    assert config.enabled is False
    assert config.interval_seconds == 60


def test_invalid_environment_is_rejected(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "qa")

    with pytest.raises(ValidationError):
        Settings()
