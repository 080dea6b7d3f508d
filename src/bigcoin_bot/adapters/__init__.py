"""Adapters layer - external system integrations."""

from bigcoin_bot.adapters.config import AppConfig, DisplaySettingsLoader
from bigcoin_bot.adapters.formatters import StatsFormatter
from bigcoin_bot.adapters.pollers import StatsPoller
from bigcoin_bot.adapters.redis_store import RedisMappingStore
from bigcoin_bot.adapters.stats_api import StatsHttpClient, StatsRepository

__all__ = [
    "AppConfig",
    "DisplaySettingsLoader",
    "RedisMappingStore",
    "StatsFormatter",
    "StatsHttpClient",
    "StatsPoller",
    "StatsRepository",
]
