"""Selective log filter domain models."""

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, ConfigDict

from fixlog.constants.log_filter import (
    DEFAULT_FLAG_VALUE,
    SETTING_LOG_MARKET_INCREMENTAL_REFRESH,
    SETTING_LOG_ORDER_TRAFFIC,
    SETTING_LOG_QUOTE_TRAFFIC,
)


class TrafficCategory(str, Enum):
    """Coarse classification of a wire message for log suppression."""

    ORDER = "order"  # NewOrderSingle, ExecutionReport
    QUOTE = "quote"  # Quote, QuoteRequest
    MARKET_INCREMENTAL_REFRESH = "market_incremental_refresh"
    OTHER = "other"  # Never suppressed


# Setting that governs each suppressible category; OTHER has none
SETTING_BY_CATEGORY: dict[TrafficCategory, str] = {
    TrafficCategory.ORDER: SETTING_LOG_ORDER_TRAFFIC,
    TrafficCategory.QUOTE: SETTING_LOG_QUOTE_TRAFFIC,
    TrafficCategory.MARKET_INCREMENTAL_REFRESH: SETTING_LOG_MARKET_INCREMENTAL_REFRESH,
}


class FilterConfiguration(BaseModel):
    """Snapshot of a session's three log flags.

    Taken one flag at a time, so a snapshot read during a concurrent
    override may mix old and new values across flags.
    """

    model_config = ConfigDict(frozen=True)

    log_order_traffic: bool = DEFAULT_FLAG_VALUE
    log_quote_traffic: bool = DEFAULT_FLAG_VALUE
    log_market_incremental_refresh: bool = DEFAULT_FLAG_VALUE

    def flag_for(self, category: TrafficCategory) -> bool:
        """Return the flag governing a category (always True for OTHER)."""
        setting = SETTING_BY_CATEGORY.get(category)
        if setting is None:
            return True
        return self.to_settings_map()[setting]

    def to_settings_map(self) -> dict[str, bool]:
        """Render as {setting name: flag}."""
        return {
            SETTING_LOG_MARKET_INCREMENTAL_REFRESH: self.log_market_incremental_refresh,
            SETTING_LOG_QUOTE_TRAFFIC: self.log_quote_traffic,
            SETTING_LOG_ORDER_TRAFFIC: self.log_order_traffic,
        }

    @classmethod
    def from_settings_map(cls, values: Mapping[str, bool]) -> "FilterConfiguration":
        """Build from {setting name: flag}; missing names default to enabled."""
        return cls(
            log_order_traffic=values.get(SETTING_LOG_ORDER_TRAFFIC, DEFAULT_FLAG_VALUE),
            log_quote_traffic=values.get(SETTING_LOG_QUOTE_TRAFFIC, DEFAULT_FLAG_VALUE),
            log_market_incremental_refresh=values.get(
                SETTING_LOG_MARKET_INCREMENTAL_REFRESH, DEFAULT_FLAG_VALUE
            ),
        )
