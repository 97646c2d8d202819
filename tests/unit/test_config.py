"""Tests for Settings validation and get_settings caching."""

import logging

import pytest
from pydantic import ValidationError

from assoc_matchers.core.config import Settings, get_settings


def test_defaults() -> None:
    """Defaults need no environment."""
    settings = Settings()
    assert settings.foreign_key_suffix == "_id"
    assert settings.database_url == ""
    assert settings.log_level_number == logging.INFO


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Variables are read with the ASSOC_MATCHERS_ prefix."""
    monkeypatch.setenv("ASSOC_MATCHERS_LOG_LEVEL", "warning")
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_level_number == logging.WARNING


def test_debug_forces_debug_level() -> None:
    """debug=True logs at DEBUG regardless of log_level."""
    assert Settings(debug=True, log_level="ERROR").log_level_number == logging.DEBUG


def test_invalid_log_level_rejected() -> None:
    """Unknown level names fail validation."""
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_empty_foreign_key_suffix_rejected() -> None:
    """The foreign key suffix must not be empty."""
    with pytest.raises(ValidationError):
        Settings(foreign_key_suffix="")


def test_get_settings_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    """get_settings returns one instance until cache_clear()."""
    first = get_settings()
    assert get_settings() is first
    monkeypatch.setenv("ASSOC_MATCHERS_FOREIGN_KEY_SUFFIX", "_fk")
    get_settings.cache_clear()
    assert get_settings().foreign_key_suffix == "_fk"
