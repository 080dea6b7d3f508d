"""Stats repository adapter: validates and normalizes the stats payload."""

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from bigcoin_bot.adapters.stats_api.http_client import StatsApiError
from bigcoin_bot.domain.models import ErrorDetails, Stats
from bigcoin_bot.domain.ports.stats_source import StatsSource

if TYPE_CHECKING:
    from bigcoin_bot.adapters.stats_api.http_client import StatsHttpClient

logger = logging.getLogger(__name__)


class StatsPayload(BaseModel):
    """Shape of the upstream response; extra fields are ignored."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    big_price: float = Field(alias="bigPrice")
    blocks_until_halving: float = Field(alias="blocksUntilHalving")


def _error_details(error: Exception) -> ErrorDetails:
    """Summarize a stats failure for the log."""
    if isinstance(error, StatsApiError):
        status_code = error.status_code
        if status_code == 429:
            reason = "Rate limit exceeded"
        elif status_code is not None and status_code >= 500:
            reason = f"Server error (HTTP {status_code})"
        elif status_code is not None:
            reason = f"HTTP {status_code}"
        else:
            reason = "Transport error"
        return ErrorDetails(status_code=status_code, reason=reason)
    if isinstance(error, ValidationError):
        return ErrorDetails(reason="Malformed payload")
    return ErrorDetails(reason="Unknown error")


class StatsRepository(StatsSource):
    """Stats source that never raises; failures yield ``Stats.empty()``."""

    def __init__(self, http_client: "StatsHttpClient") -> None:
        """Initialize with the stats HTTP client."""
        self._http_client = http_client

    @staticmethod
    def parse(payload: Any) -> Stats:
        """Validate a decoded payload and normalize it.

        Raises:
            ValidationError: If bigPrice or blocksUntilHalving is missing or not a number.
        """
        data = StatsPayload.model_validate(payload)
        return Stats(price=data.big_price, countdown=data.blocks_until_halving)

    async def fetch(self) -> Stats:
        """Fetch the latest stats, or zeros if anything goes wrong."""
        try:
            payload = await self._http_client.fetch_payload()
            stats = self.parse(payload)
        except Exception as e:
            details = _error_details(e)
            logger.error(
                f"Failed to fetch stats: {details.reason} "
                f"(status: {details.status_code}, error: {e}); using zero values"
            )
            return Stats.empty()

        logger.debug(f"Fetched stats: price={stats.price}, countdown={stats.countdown}")
        return stats
