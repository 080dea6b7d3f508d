"""Upstream stats API adapter."""

from bigcoin_bot.adapters.stats_api.http_client import StatsApiError, StatsHttpClient
from bigcoin_bot.adapters.stats_api.stats_repository import StatsRepository

__all__ = ["StatsApiError", "StatsHttpClient", "StatsRepository"]
