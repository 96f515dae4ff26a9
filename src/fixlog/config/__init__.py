"""Configuration module for fixlog.

Usage:
    from fixlog.config import configure_logging, get_settings

    settings = get_settings()  # Cached singleton
    configure_logging(settings)

Per-session FIX settings (the ``Log*Traffic`` flags) live in
``SessionSettings``, not in the environment-driven ``Settings``.
"""

from fixlog.config.logging import configure_logging
from fixlog.config.session_settings import SessionSettings, SettingsSource
from fixlog.config.settings import Settings, get_settings

__all__ = [
    "SessionSettings",
    "Settings",
    "SettingsSource",
    "configure_logging",
    "get_settings",
]
