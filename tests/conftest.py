"""Shared pytest fixtures for fixlog tests.

This module provides fixtures for:
- Session identities and settings
- In-memory message sinks
- Isolation of the cached application settings and registry singleton

Usage:
    @pytest.mark.unit
    def test_something(session_id, memory_sink):
        log_filter = SelectiveLogFilter(session_id, memory_sink)
"""

from collections.abc import Generator

import pytest

from fixlog.config.session_settings import SessionSettings
from fixlog.config.settings import get_settings
from fixlog.models.session import SessionID
from fixlog.services.log.registry import reset_registry
from fixlog.services.log.sinks import MemorySink


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def _isolate_singletons() -> Generator[None, None, None]:
    """Reset cached settings and the registry singleton around each test."""
    get_settings.cache_clear()
    reset_registry()
    yield
    get_settings.cache_clear()
    reset_registry()


# =============================================================================
# Session Fixtures
# =============================================================================


@pytest.fixture
def session_id() -> SessionID:
    """Provide a FIX 4.2 session identity."""
    return SessionID(begin_string="FIX.4.2", sender_comp_id="BANK", target_comp_id="EXCH")


@pytest.fixture
def other_session_id() -> SessionID:
    """Provide a second, distinct session identity."""
    return SessionID(begin_string="FIX.4.4", sender_comp_id="BANK", target_comp_id="ECN")


@pytest.fixture
def session_settings() -> SessionSettings:
    """Provide empty session settings."""
    return SessionSettings()


@pytest.fixture
def memory_sink() -> MemorySink:
    """Provide an in-memory message sink."""
    return MemorySink()
