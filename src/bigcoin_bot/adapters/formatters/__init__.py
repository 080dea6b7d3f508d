"""Formatters for channel labels."""

from bigcoin_bot.adapters.formatters.stats_formatter import StatsFormatter

__all__ = ["StatsFormatter"]
