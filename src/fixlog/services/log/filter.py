"""Selective log filter for a FIX session.

Wraps a session's message sink and drops inbound/outbound messages whose
traffic category is switched off. Three categories can be switched off:
order traffic, quote traffic and market data incremental refreshes.
Everything else is always logged.

The flags can be changed at runtime from any thread while the session
keeps logging. Each flag is updated atomically, but an override touches
the three flags one after the other, so a concurrent reader may see some
flags from before the override and some from after. The categories are
independent, so that mix is acceptable.
"""

import threading
from collections.abc import Mapping

import structlog

from fixlog.config.session_settings import SettingsSource
from fixlog.config.settings import get_settings
from fixlog.constants.log_filter import (
    DEFAULT_FLAG_VALUE,
    OVERRIDE_TRUE_LITERAL,
    SETTING_LOG_MARKET_INCREMENTAL_REFRESH,
    SETTING_LOG_ORDER_TRAFFIC,
    SETTING_LOG_QUOTE_TRAFFIC,
    SETTING_NAMES,
    SUPPRESSED_MESSAGE_EVENT,
)
from fixlog.core.exceptions import ConfigurationError
from fixlog.models.log_filter import (
    SETTING_BY_CATEGORY,
    FilterConfiguration,
    TrafficCategory,
)
from fixlog.models.session import Direction, SessionID
from fixlog.services.log.classifier import classify
from fixlog.services.log.sinks import MessageSink

logger = structlog.get_logger(__name__)


class AtomicFlag:
    """Boolean cell safe to read and write from any thread."""

    def __init__(self, value: bool = DEFAULT_FLAG_VALUE) -> None:
        self._lock = threading.Lock()
        self._value = bool(value)

    def get(self) -> bool:
        with self._lock:
            return self._value

    def set(self, value: bool) -> None:
        with self._lock:
            self._value = bool(value)


def parse_override_bool(value: object) -> bool:
    """Parse an override value; only a case-insensitive "true" enables."""
    return str(value).lower() == OVERRIDE_TRUE_LITERAL


class SelectiveLogFilter:
    """
    Message sink decorator that suppresses configured traffic categories.

    One instance per session, created through the session filter registry.
    """

    def __init__(
        self,
        session_id: SessionID,
        sink: MessageSink,
        configuration: FilterConfiguration | None = None,
        log_suppressed: bool | None = None,
    ) -> None:
        """Initialize selective log filter.

        Args:
            session_id: Session this filter belongs to
            sink: Underlying session log
            configuration: Initial flags, all enabled when omitted
            log_suppressed: Emit a debug event per suppressed message,
                defaults to the application setting
        """
        configuration = configuration or FilterConfiguration()
        self.session_id = session_id
        self.sink = sink
        self._log_order_traffic = AtomicFlag(configuration.log_order_traffic)
        self._log_quote_traffic = AtomicFlag(configuration.log_quote_traffic)
        self._log_market_incremental_refresh = AtomicFlag(
            configuration.log_market_incremental_refresh
        )
        self._flags_by_setting: dict[str, AtomicFlag] = {
            SETTING_LOG_MARKET_INCREMENTAL_REFRESH: self._log_market_incremental_refresh,
            SETTING_LOG_QUOTE_TRAFFIC: self._log_quote_traffic,
            SETTING_LOG_ORDER_TRAFFIC: self._log_order_traffic,
        }
        if log_suppressed is None:
            log_suppressed = get_settings().log_suppressed_messages
        self._log_suppressed = log_suppressed

    @classmethod
    def from_settings(
        cls,
        settings: SettingsSource,
        session_id: SessionID,
        sink: MessageSink,
        log_suppressed: bool | None = None,
    ) -> "SelectiveLogFilter":
        """
        Create a filter with flags read from session settings.

        Each flag takes the configured value when the setting is present
        and defaults to enabled otherwise.

        Raises:
            ConfigurationError: If the settings source fails to answer
        """
        values: dict[str, bool] = {}
        try:
            for name in SETTING_NAMES:
                if settings.is_setting(session_id, name):
                    values[name] = settings.get_bool(session_id, name)
        except ConfigurationError:
            logger.error("log_filter_settings_invalid", session=str(session_id))
            raise
        except Exception as e:
            logger.error(
                "log_filter_settings_unavailable",
                session=str(session_id),
                error=str(e),
            )
            raise ConfigurationError(
                f"{session_id}: unable to read log filter settings: {e}"
            ) from e

        configuration = FilterConfiguration.from_settings_map(values)
        logger.info(
            "log_filter_created",
            session=str(session_id),
            **configuration.to_settings_map(),
        )
        return cls(session_id, sink, configuration, log_suppressed=log_suppressed)

    def _flag_for(self, category: TrafficCategory) -> AtomicFlag | None:
        setting = SETTING_BY_CATEGORY.get(category)
        if setting is None:
            return None
        return self._flags_by_setting[setting]

    def should_log(self, message: str, direction: Direction | None = None) -> bool:
        """
        Decide whether a wire message goes to the session log.

        The decision is the same for both directions.

        Args:
            message: Raw wire message
            direction: Only used to annotate the suppression debug event

        Returns:
            False only when the message's category is switched off
        """
        category = classify(message)
        flag = self._flag_for(category)
        if flag is None or flag.get():
            return True

        if self._log_suppressed:
            logger.debug(
                SUPPRESSED_MESSAGE_EVENT,
                session=str(self.session_id),
                direction=direction.value if direction else None,
                category=category.value,
            )
        return False

    # MessageSink

    def on_incoming(self, message: str) -> None:
        if self.should_log(message, Direction.INBOUND):
            self.sink.on_incoming(message)

    def on_outgoing(self, message: str) -> None:
        if self.should_log(message, Direction.OUTBOUND):
            self.sink.on_outgoing(message)

    def on_event(self, text: str) -> None:
        self.sink.on_event(text)

    def on_error_event(self, text: str) -> None:
        self.sink.on_error_event(text)

    def clear(self) -> None:
        self.sink.clear()

    # Runtime configuration

    def apply_overrides(self, overrides: Mapping[str, object]) -> FilterConfiguration:
        """
        Replace all three flags from an override mapping.

        Not a merge: a flag missing from ``overrides`` is re-enabled. A
        present value enables the flag only if it reads "true" ignoring
        case. Never raises on bad values.

        Args:
            overrides: Setting name to string value

        Returns:
            Snapshot of the flags after the update
        """
        for name, flag in self._flags_by_setting.items():
            if name in overrides:
                flag.set(parse_override_bool(overrides[name]))
            else:
                flag.set(DEFAULT_FLAG_VALUE)

        unknown = sorted(set(overrides) - set(SETTING_NAMES))
        if unknown:
            logger.debug(
                "log_filter_override_keys_ignored",
                session=str(self.session_id),
                keys=unknown,
            )

        configuration = self.current_configuration()
        logger.info(
            "log_filter_reconfigured",
            session=str(self.session_id),
            **configuration.to_settings_map(),
        )
        return configuration

    def current_configuration(self) -> FilterConfiguration:
        """Snapshot the flags, read one at a time."""
        return FilterConfiguration(
            log_order_traffic=self._log_order_traffic.get(),
            log_quote_traffic=self._log_quote_traffic.get(),
            log_market_incremental_refresh=self._log_market_incremental_refresh.get(),
        )

    def set_custom_log_configuration(
        self, overrides: Mapping[str, object]
    ) -> FilterConfiguration:
        """Control-plane entry point; see ``apply_overrides``."""
        return self.apply_overrides(overrides)

    def get_custom_log_configuration(self) -> dict[str, bool]:
        """Control-plane entry point: flags keyed by setting name."""
        return self.current_configuration().to_settings_map()
