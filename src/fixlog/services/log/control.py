"""Operator control of session log filters.

Transport-agnostic entry points for an admin tool to read and change a
running session's log flags. An unknown session is reported as None.
"""

from collections.abc import Mapping

import structlog

from fixlog.models.log_filter import FilterConfiguration
from fixlog.models.session import SessionID
from fixlog.services.log.registry import SessionFilterRegistry, get_registry

logger = structlog.get_logger(__name__)


def set_custom_log_configuration(
    session_id: SessionID,
    overrides: Mapping[str, object],
    registry: SessionFilterRegistry | None = None,
) -> FilterConfiguration | None:
    """
    Apply log flag overrides to a running session.

    Args:
        session_id: Session to reconfigure
        overrides: Setting name to "true"/"false"; missing names re-enable
        registry: Registry to use, defaults to the process-wide one

    Returns:
        The new configuration, or None if the session is not registered
    """
    log_filter = _resolve(registry).lookup(session_id)
    if log_filter is None:
        logger.warning("log_configuration_session_not_found", session=str(session_id))
        return None
    return log_filter.set_custom_log_configuration(overrides)


def get_custom_log_configuration(
    session_id: SessionID,
    registry: SessionFilterRegistry | None = None,
) -> dict[str, bool] | None:
    """Get a session's log flags keyed by setting name, or None if unknown."""
    log_filter = _resolve(registry).lookup(session_id)
    if log_filter is None:
        return None
    return log_filter.get_custom_log_configuration()


def list_log_configurations(
    registry: SessionFilterRegistry | None = None,
) -> dict[str, dict[str, bool]]:
    """Get the log flags of every registered session."""
    registry = _resolve(registry)
    configurations: dict[str, dict[str, bool]] = {}
    for session_id in registry.session_ids():
        log_filter = registry.lookup(session_id)
        if log_filter is not None:  # Removed since listing
            configurations[str(session_id)] = log_filter.get_custom_log_configuration()
    return configurations


def _resolve(registry: SessionFilterRegistry | None) -> SessionFilterRegistry:
    # An empty registry is falsy, so compare with None
    return registry if registry is not None else get_registry()
