"""Stats source port."""

from typing import Protocol

from bigcoin_bot.domain.models.stats import Stats


class StatsSource(Protocol):
    """Port for fetching the latest metrics. Never raises."""

    async def fetch(self) -> Stats:
        """Fetch the latest stats, or ``Stats.empty()`` on failure."""
        ...
