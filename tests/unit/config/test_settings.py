"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from fixlog.config.settings import Settings, get_settings


@pytest.mark.unit
class TestSettingsValidation:
    """Tests for Settings validation."""

    def test_default_settings_are_valid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Default settings should pass all validation."""
        for var in ("FIXLOG_DEBUG", "FIXLOG_LOG_LEVEL", "FIXLOG_LOG_SUPPRESSED_MESSAGES"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.app_name == "fixlog"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_suppressed_messages is False

    def test_log_level_must_be_valid(self) -> None:
        """Log level must be one of the allowed values."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            settings = Settings(log_level=level)  # type: ignore[arg-type]
            assert settings.log_level == level

        with pytest.raises(ValidationError):
            Settings(log_level="INVALID")  # type: ignore[arg-type]

    def test_environment_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings are read from FIXLOG_ prefixed variables."""
        monkeypatch.setenv("FIXLOG_LOG_SUPPRESSED_MESSAGES", "true")
        monkeypatch.setenv("FIXLOG_LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.log_suppressed_messages is True
        assert settings.log_level == "DEBUG"


@pytest.mark.unit
class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_returns_cached_instance(self) -> None:
        """get_settings returns the same instance until the cache is cleared."""
        assert get_settings() is get_settings()
