"""Unit tests for custom exceptions."""

import pytest

from fixlog.core.exceptions import (
    ConfigurationError,
    FieldConvertError,
    FixLogError,
    SettingNotFoundError,
)


@pytest.mark.unit
class TestFixLogExceptions:
    """Tests for custom exception hierarchy."""

    def test_base_exception_is_catchable(self) -> None:
        """All custom exceptions inherit from FixLogError."""
        with pytest.raises(FixLogError):
            raise ConfigurationError("settings unavailable")

    def test_setting_not_found_is_configuration_error(self) -> None:
        """SettingNotFoundError names the setting and session."""
        with pytest.raises(ConfigurationError) as exc_info:
            raise SettingNotFoundError("LogOrderTraffic", "FIX.4.2:BANK->EXCH")

        assert "LogOrderTraffic" in str(exc_info.value)
        assert "FIX.4.2:BANK->EXCH" in str(exc_info.value)

    def test_setting_not_found_without_session(self) -> None:
        """The session part is omitted when unknown."""
        error = SettingNotFoundError("LogQuoteTraffic")

        assert error.session_id is None
        assert str(error) == "Setting not found: LogQuoteTraffic"

    def test_field_convert_error_attributes(self) -> None:
        """FieldConvertError keeps the setting and raw value."""
        error = FieldConvertError("LogQuoteTraffic", "maybe")

        assert isinstance(error, ConfigurationError)
        assert error.setting == "LogQuoteTraffic"
        assert error.value == "maybe"
        assert "'maybe'" in str(error)
