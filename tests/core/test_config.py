"""Tests for library settings."""

import pytest
from pydantic import ValidationError

from complexnum.core.config import Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.LOG_FORMAT == "text"
    assert "LOG_FILE" not in Settings.model_fields
    assert settings.FORMAT_PRECISION == 6
    assert settings.ZERO_DIVISION == "ieee"
    assert settings.DEFAULT_TOLERANCE == 0.001
    assert settings.DEFAULT_TOLERANCE_MODE == "relative"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("COMPLEXNUM_ZERO_DIVISION", "raise")
    monkeypatch.setenv("COMPLEXNUM_FORMAT_PRECISION", "10")
    settings = Settings(_env_file=None)
    assert settings.ZERO_DIVISION == "raise"
    assert settings.FORMAT_PRECISION == 10


def test_unprefixed_variables_are_ignored(monkeypatch):
    monkeypatch.setenv("ZERO_DIVISION", "raise")
    assert Settings(_env_file=None).ZERO_DIVISION == "ieee"


def test_invalid_policy_rejected(monkeypatch):
    monkeypatch.setenv("COMPLEXNUM_ZERO_DIVISION", "ignore")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("COMPLEXNUM_LOG_FORMAT=json\n", encoding="utf-8")
    assert Settings(_env_file=env_file).LOG_FORMAT == "json"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
