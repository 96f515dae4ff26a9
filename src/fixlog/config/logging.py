"""Logging configuration using structlog.

Records are filtered at ``log_level``. The per-message suppression trace
is emitted at debug level; when ``log_suppressed_messages`` is on it is
let through regardless of ``log_level`` so the switch works on its own.
"""

import logging
import sys
from collections.abc import Collection, MutableMapping
from typing import Any

import structlog

from fixlog.config.settings import Settings, get_settings
from fixlog.constants.log_filter import SUPPRESSED_MESSAGE_EVENT

_LEVEL_BY_METHOD: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
}


class LevelGate:
    """Processor dropping events below a level, except allowed event names."""

    def __init__(self, level: int, always_allow: Collection[str] = ()) -> None:
        self.level = level
        self.always_allow = frozenset(always_allow)

    def __call__(
        self, logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        if event_dict.get("event") in self.always_allow:
            return event_dict
        if _LEVEL_BY_METHOD.get(method_name, logging.INFO) < self.level:
            raise structlog.DropEvent
        return event_dict


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog for the application."""
    settings = settings or get_settings()

    log_level = getattr(logging, settings.log_level)

    processors: list[Any] = [structlog.contextvars.merge_contextvars]
    if settings.log_suppressed_messages:
        # Open the wrapper up to debug and filter per event instead
        wrapper_level = min(log_level, logging.DEBUG)
        processors.append(LevelGate(log_level, always_allow={SUPPRESSED_MESSAGE_EVENT}))
    else:
        wrapper_level = log_level

    processors += [
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        # Use JSON in production, pretty print in debug
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(wrapper_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=True,
    )

    # Also configure standard logging for third-party libraries
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
