"""fixlog exception hierarchy.

Only filter creation can fail. Classification, logging decisions,
runtime overrides and registry lookups are total and never raise.
"""


class FixLogError(Exception):
    """Base exception for all fixlog errors."""

    pass


class ConfigurationError(FixLogError):
    """Raised when session settings are invalid or cannot be read.

    Raised while creating a session's log filter; the filter is not
    created and the caller should abort session creation.

    Example:
        raise ConfigurationError("FIX.4.2:BANK->EXCH: settings source unavailable")
    """

    pass


class SettingNotFoundError(ConfigurationError):
    """Raised when a required session setting is missing.

    Attributes:
        setting: Name of the missing setting.
        session_id: Session the lookup was made for, if any.
    """

    def __init__(self, setting: str, session_id: object | None = None) -> None:
        self.setting = setting
        self.session_id = session_id
        where = f" for session {session_id}" if session_id is not None else ""
        super().__init__(f"Setting not found: {setting}{where}")


class FieldConvertError(ConfigurationError):
    """Raised when a session setting value cannot be converted.

    Attributes:
        setting: Name of the setting.
        value: The raw value that failed conversion.
    """

    def __init__(self, setting: str, value: str) -> None:
        self.setting = setting
        self.value = value
        super().__init__(f"Setting {setting}: invalid boolean value {value!r}")
