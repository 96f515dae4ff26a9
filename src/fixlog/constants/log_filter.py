"""Selective message log filter constants."""

from typing import Final

# Per-session setting names
SETTING_LOG_MARKET_INCREMENTAL_REFRESH: Final[str] = "LogMarketIncrementalRefresh"
SETTING_LOG_QUOTE_TRAFFIC: Final[str] = "LogQuoteTraffic"
SETTING_LOG_ORDER_TRAFFIC: Final[str] = "LogOrderTraffic"

SETTING_NAMES: Final[tuple[str, ...]] = (
    SETTING_LOG_MARKET_INCREMENTAL_REFRESH,
    SETTING_LOG_QUOTE_TRAFFIC,
    SETTING_LOG_ORDER_TRAFFIC,
)

# Flags are opt-out: anything not configured is logged
DEFAULT_FLAG_VALUE: Final[bool] = True

# MsgType(35) tag marker; FIX is ASCII so one character is one byte
MSG_TYPE_MARKER: Final[str] = "35="
MSG_TYPE_NONE: Final[str] = ""

MSG_TYPE_NEW_ORDER_SINGLE: Final[str] = "D"
MSG_TYPE_EXECUTION_REPORT: Final[str] = "8"
MSG_TYPE_MARKET_DATA_INCREMENTAL_REFRESH: Final[str] = "X"
MSG_TYPE_QUOTE: Final[str] = "R"
MSG_TYPE_QUOTE_REQUEST: Final[str] = "S"

# Override values matching this (case-insensitive) enable a flag
OVERRIDE_TRUE_LITERAL: Final[str] = "true"

# Logging
LOG_SUPPRESSED_MESSAGES: Final[bool] = False  # DEBUG level, one event per message
SUPPRESSED_MESSAGE_EVENT: Final[str] = "fix_message_suppressed"
