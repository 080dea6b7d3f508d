"""Pollers driving scheduled reconciliation."""

from bigcoin_bot.adapters.pollers.stats_poller import StatsPoller

__all__ = ["StatsPoller"]
