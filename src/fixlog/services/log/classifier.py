"""Traffic classification of raw FIX wire messages.

Only the MsgType(35) value is inspected, found by a plain substring
search for ``35=``; the message is never parsed into fields. Unknown or
malformed messages classify as OTHER so they are always logged.
"""

from fixlog.constants.log_filter import (
    MSG_TYPE_EXECUTION_REPORT,
    MSG_TYPE_MARKER,
    MSG_TYPE_MARKET_DATA_INCREMENTAL_REFRESH,
    MSG_TYPE_NEW_ORDER_SINGLE,
    MSG_TYPE_NONE,
    MSG_TYPE_QUOTE,
    MSG_TYPE_QUOTE_REQUEST,
)
from fixlog.models.log_filter import TrafficCategory

_CATEGORY_BY_MSG_TYPE: dict[str, TrafficCategory] = {
    MSG_TYPE_NEW_ORDER_SINGLE: TrafficCategory.ORDER,
    MSG_TYPE_EXECUTION_REPORT: TrafficCategory.ORDER,
    MSG_TYPE_MARKET_DATA_INCREMENTAL_REFRESH: TrafficCategory.MARKET_INCREMENTAL_REFRESH,
    MSG_TYPE_QUOTE: TrafficCategory.QUOTE,
    MSG_TYPE_QUOTE_REQUEST: TrafficCategory.QUOTE,
}


def get_message_type(message: str | bytes) -> str:
    """Return the character following the first ``35=`` marker.

    Args:
        message: Raw wire message, any field delimiter

    Returns:
        The single message type character, or an empty string when the
        marker is absent or ends the message
    """
    if isinstance(message, bytes):
        message = message.decode("latin-1")

    idx = message.find(MSG_TYPE_MARKER)
    if idx < 0:
        return MSG_TYPE_NONE

    pos = idx + len(MSG_TYPE_MARKER)
    if pos >= len(message):
        return MSG_TYPE_NONE
    return message[pos]


def classify(message: str | bytes) -> TrafficCategory:
    """Classify a raw wire message into a traffic category."""
    return _CATEGORY_BY_MSG_TYPE.get(get_message_type(message), TrafficCategory.OTHER)
