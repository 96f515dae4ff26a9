"""Selective session message logging."""

from fixlog.services.log.classifier import classify, get_message_type
from fixlog.services.log.control import (
    get_custom_log_configuration,
    list_log_configurations,
    set_custom_log_configuration,
)
from fixlog.services.log.filter import AtomicFlag, SelectiveLogFilter, parse_override_bool
from fixlog.services.log.registry import (
    SessionFilterRegistry,
    configure_registry,
    get_registry,
    reset_registry,
)
from fixlog.services.log.sinks import MemorySink, MessageSink, StructlogSink

__all__ = [
    "AtomicFlag",
    "MemorySink",
    "MessageSink",
    "SelectiveLogFilter",
    "SessionFilterRegistry",
    "StructlogSink",
    "classify",
    "configure_registry",
    "get_custom_log_configuration",
    "get_message_type",
    "get_registry",
    "list_log_configurations",
    "parse_override_bool",
    "reset_registry",
    "set_custom_log_configuration",
]
