"""HTTP client for the upstream stats API."""

import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

STATS_REQUEST_HEADERS = {"accept": "application/json"}


class StatsApiError(Exception):
    """The stats API could not be read."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StatsHttpClient:
    """Fetches the raw stats payload using a shared aiohttp session."""

    def __init__(self, session: "ClientSession", url: str, timeout_seconds: int = 10) -> None:
        """Initialize the client.

        Args:
            session: Shared aiohttp session.
            url: Stats endpoint URL.
            timeout_seconds: Total timeout for one request.
        """
        self._session = session
        self._url = url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _read_payload(self, response: "ClientResponse") -> Any:
        """Return the decoded JSON body of a successful response."""
        if not 200 <= response.status < 300:
            response_text = await response.text()
            raise StatsApiError(
                f"Stats API returned status {response.status}: {response_text[:200]}",
                status_code=response.status,
            )
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise StatsApiError(f"Stats API returned invalid JSON: {e}") from e

    async def fetch_payload(self) -> Any:
        """Fetch the stats payload.

        Raises:
            StatsApiError: On transport failure, non-2xx status or undecodable body.
        """
        logger.debug(f"GET {self._url}")
        started = time.perf_counter()
        try:
            async with self._session.get(
                self._url, headers=STATS_REQUEST_HEADERS, timeout=self._timeout
            ) as response:
                elapsed_ms = (time.perf_counter() - started) * 1000
                logger.debug(f"Stats API responded {response.status} in {elapsed_ms:.0f} ms")
                return await self._read_payload(response)
        except StatsApiError:
            raise
        except (aiohttp.ClientError, TimeoutError) as e:
            elapsed_ms = (time.perf_counter() - started) * 1000
            raise StatsApiError(
                f"Stats API request failed after {elapsed_ms:.0f} ms: {e!r}"
            ) from e
