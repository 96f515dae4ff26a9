"""Message sinks the selective log filter forwards to.

A sink is the session's persistent log. The filter decides whether a
message reaches it; the sink decides how it is stored.
"""

import threading
from typing import Protocol, runtime_checkable

import structlog

from fixlog.models.session import SessionID

logger = structlog.get_logger(__name__)


@runtime_checkable
class MessageSink(Protocol):
    """Session log operations."""

    def on_incoming(self, message: str) -> None: ...

    def on_outgoing(self, message: str) -> None: ...

    def on_event(self, text: str) -> None: ...

    def on_error_event(self, text: str) -> None: ...

    def clear(self) -> None: ...


class StructlogSink:
    """Writes session log records as structlog events."""

    def __init__(self, session_id: SessionID) -> None:
        self.session_id = session_id
        self._log = logger.bind(session=str(session_id))

    def on_incoming(self, message: str) -> None:
        self._log.info("fix_incoming", message=message)

    def on_outgoing(self, message: str) -> None:
        self._log.info("fix_outgoing", message=message)

    def on_event(self, text: str) -> None:
        self._log.info("fix_event", text=text)

    def on_error_event(self, text: str) -> None:
        self._log.error("fix_error_event", text=text)

    def clear(self) -> None:
        self._log.debug("fix_log_cleared")


class MemorySink:
    """
    Thread-safe in-memory session log.

    Accessors return copies, so callers can inspect the log while the
    session keeps writing to it.
    """

    def __init__(self, session_id: SessionID | None = None) -> None:
        self.session_id = session_id
        self._lock = threading.Lock()
        self._incoming: list[str] = []
        self._outgoing: list[str] = []
        self._events: list[str] = []
        self._error_events: list[str] = []

    def on_incoming(self, message: str) -> None:
        with self._lock:
            self._incoming.append(message)

    def on_outgoing(self, message: str) -> None:
        with self._lock:
            self._outgoing.append(message)

    def on_event(self, text: str) -> None:
        with self._lock:
            self._events.append(text)

    def on_error_event(self, text: str) -> None:
        with self._lock:
            self._error_events.append(text)

    def clear(self) -> None:
        with self._lock:
            self._incoming.clear()
            self._outgoing.clear()
            self._events.clear()
            self._error_events.clear()

    @property
    def incoming(self) -> list[str]:
        with self._lock:
            return list(self._incoming)

    @property
    def outgoing(self) -> list[str]:
        with self._lock:
            return list(self._outgoing)

    @property
    def events(self) -> list[str]:
        with self._lock:
            return list(self._events)

    @property
    def error_events(self) -> list[str]:
        with self._lock:
            return list(self._error_events)
