"""Session filter registry.

Maps each session to the one selective log filter it logs through. The
session engine calls ``create`` when a session starts; the control plane
uses ``lookup`` to reach a running session's filter.
"""

import threading
from collections.abc import Callable

import structlog

from fixlog.config.session_settings import SessionSettings, SettingsSource
from fixlog.models.session import SessionID
from fixlog.services.log.filter import SelectiveLogFilter
from fixlog.services.log.sinks import MessageSink, StructlogSink

logger = structlog.get_logger(__name__)

SinkFactory = Callable[[SessionID], MessageSink]


class SessionFilterRegistry:
    """
    Thread-safe session -> selective log filter map.

    Creation happens under the registry lock, so concurrent first access
    for one session builds exactly one filter and one sink.
    """

    def __init__(
        self,
        settings: SettingsSource | None = None,
        sink_factory: SinkFactory = StructlogSink,
    ) -> None:
        """Initialize session filter registry.

        Args:
            settings: Session settings used by ``create``
            sink_factory: Builds the underlying log for a new session
        """
        self.settings: SettingsSource = (
            settings if settings is not None else SessionSettings()
        )
        self.sink_factory = sink_factory
        self._filters: dict[SessionID, SelectiveLogFilter] = {}
        self._lock = threading.Lock()

    def get_or_create(
        self,
        session_id: SessionID,
        settings: SettingsSource | None = None,
    ) -> SelectiveLogFilter:
        """
        Get the session's filter, creating it on first access.

        Args:
            session_id: Session to get the filter for
            settings: Settings to create from, defaults to the registry's

        Returns:
            The session's only filter instance

        Raises:
            ConfigurationError: If the filter has to be created and the
                settings cannot be read; nothing is registered
        """
        existing = self._filters.get(session_id)
        if existing is not None:
            return existing

        with self._lock:
            existing = self._filters.get(session_id)
            if existing is not None:
                return existing

            log_filter = SelectiveLogFilter.from_settings(
                settings if settings is not None else self.settings,
                session_id,
                self.sink_factory(session_id),
            )
            self._filters[session_id] = log_filter
            logger.info(
                "session_log_filter_registered",
                session=str(session_id),
                session_count=len(self._filters),
            )
            return log_filter

    def create(self, session_id: SessionID) -> SelectiveLogFilter:
        """Log factory entry point for the session engine."""
        return self.get_or_create(session_id)

    def lookup(self, session_id: SessionID) -> SelectiveLogFilter | None:
        """Get the session's filter, or None if it is not registered."""
        return self._filters.get(session_id)

    def remove(self, session_id: SessionID) -> SelectiveLogFilter | None:
        """Drop the session's filter on teardown."""
        with self._lock:
            log_filter = self._filters.pop(session_id, None)
        if log_filter is not None:
            logger.info("session_log_filter_removed", session=str(session_id))
        return log_filter

    def session_ids(self) -> list[SessionID]:
        with self._lock:
            return list(self._filters)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._filters

    def __len__(self) -> int:
        return len(self._filters)


_registry: SessionFilterRegistry | None = None
_registry_lock = threading.Lock()


def configure_registry(
    settings: SettingsSource | None = None,
    sink_factory: SinkFactory = StructlogSink,
) -> SessionFilterRegistry:
    """Replace the process-wide registry."""
    global _registry

    registry = SessionFilterRegistry(settings, sink_factory)
    with _registry_lock:
        _registry = registry
    logger.info("session_filter_registry_configured")
    return registry


def get_registry() -> SessionFilterRegistry:
    """Get or create the process-wide registry."""
    global _registry

    with _registry_lock:
        if _registry is None:
            _registry = SessionFilterRegistry()
        return _registry


def reset_registry() -> None:
    """Reset registry singleton (for testing)."""
    global _registry

    with _registry_lock:
        _registry = None
