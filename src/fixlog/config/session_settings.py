"""Per-session settings source.

A FIX engine keeps its settings as a default section plus one section per
session, with session values overriding defaults. The selective log filter
only needs presence checks and boolean reads from it, described by the
``SettingsSource`` protocol. ``SessionSettings`` is an in-memory
implementation; reading a settings file into it is left to the engine.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from fixlog.core.exceptions import FieldConvertError, SettingNotFoundError
from fixlog.models.session import SessionID

_TRUE_VALUES = frozenset({"y", "true"})
_FALSE_VALUES = frozenset({"n", "false"})


@runtime_checkable
class SettingsSource(Protocol):
    """Read-only view of per-session settings."""

    def is_setting(self, session_id: SessionID, name: str) -> bool: ...

    def get_bool(self, session_id: SessionID, name: str) -> bool: ...


class SessionSettings:
    """In-memory session settings with a default section.

    Values are stored as strings, the way they appear in a settings file.
    """

    def __init__(self, defaults: Mapping[str, str] | None = None) -> None:
        self._defaults: dict[str, str] = dict(defaults or {})
        self._sessions: dict[SessionID, dict[str, str]] = {}

    @classmethod
    def from_mapping(
        cls,
        defaults: Mapping[str, object] | None = None,
        sessions: Mapping[SessionID, Mapping[str, object]] | None = None,
    ) -> "SessionSettings":
        """Build settings from plain dicts; values are stringified."""
        settings = cls()
        for name, value in (defaults or {}).items():
            settings.set_default(name, value)
        for session_id, values in (sessions or {}).items():
            for name, value in values.items():
                settings.set(session_id, name, value)
        return settings

    def set_default(self, name: str, value: object) -> None:
        self._defaults[name] = _to_setting_string(value)

    def set(self, session_id: SessionID, name: str, value: object) -> None:
        self._sessions.setdefault(session_id, {})[name] = _to_setting_string(value)

    def session_ids(self) -> list[SessionID]:
        return list(self._sessions)

    def is_setting(self, session_id: SessionID, name: str) -> bool:
        """Check whether a setting is present for the session or as a default."""
        return name in self._sessions.get(session_id, {}) or name in self._defaults

    def get_string(self, session_id: SessionID, name: str) -> str:
        """Get the raw setting value.

        Raises:
            SettingNotFoundError: If neither the session nor the defaults set it.
        """
        session_values = self._sessions.get(session_id, {})
        if name in session_values:
            return session_values[name]
        if name in self._defaults:
            return self._defaults[name]
        raise SettingNotFoundError(name, session_id)

    def get_bool(self, session_id: SessionID, name: str) -> bool:
        """Get a boolean setting; accepts Y/N and true/false.

        Raises:
            SettingNotFoundError: If the setting is missing.
            FieldConvertError: If the value is not a recognised boolean.
        """
        value = self.get_string(session_id, name)
        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise FieldConvertError(name, value)


def _to_setting_string(value: object) -> str:
    if isinstance(value, bool):
        return "Y" if value else "N"
    return str(value)
