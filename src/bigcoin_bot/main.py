"""Main entry point for the stats bot."""

import asyncio
import logging
import sys

import aiohttp
from redis.asyncio import from_url

from bigcoin_bot.adapters.config import AppConfig, DisplaySettingsLoader
from bigcoin_bot.adapters.discord_api import DiscordGateway, DiscordPlatformClient
from bigcoin_bot.adapters.formatters import StatsFormatter
from bigcoin_bot.adapters.pollers import StatsPoller
from bigcoin_bot.adapters.redis_store import RedisMappingStore
from bigcoin_bot.adapters.stats_api import StatsHttpClient, StatsRepository
from bigcoin_bot.application.services import (
    ReconcilePassService,
    ResourceReconciler,
    TenantLifecycleCoordinator,
)
from bigcoin_bot.domain.models import TenantEvent

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def run_bot(config: AppConfig) -> None:
    """Wire the adapters and services together and run until disconnected."""
    if not config.discord_token:
        raise ValueError("DISCORD_TOKEN environment variable is required")
    if not config.redis_url:
        raise ValueError("REDIS_URL environment variable is required")

    display_settings = DisplaySettingsLoader.load(config)
    redis = from_url(config.redis_url, decode_responses=True)
    events: asyncio.Queue[TenantEvent] = asyncio.Queue()

    # Create aiohttp session for the stats API
    async with aiohttp.ClientSession() as session:
        gateway = DiscordGateway(events)
        platform = DiscordPlatformClient(gateway)
        store = RedisMappingStore(redis, config.registry_key)
        stats_source = StatsRepository(
            StatsHttpClient(session, config.stats_api_url, config.stats_api_timeout)
        )

        reconciler = ResourceReconciler(platform, store, StatsFormatter(), display_settings)
        lifecycle = TenantLifecycleCoordinator(
            platform, store, reconciler, stats_source, display_settings
        )
        reconcile_pass = ReconcilePassService(
            stats_source, store, reconciler, lifecycle, display_settings
        )
        poller = StatsPoller(reconcile_pass, config.refresh_interval_seconds)
        gateway.on_ready_hook = poller.start

        consumer = asyncio.create_task(lifecycle.consume(events))
        try:
            async with gateway:
                await gateway.start(config.discord_token)
        finally:
            await poller.stop()
            consumer.cancel()
            try:
                await consumer
            except asyncio.CancelledError:
                logger.info("Lifecycle consumer cancelled")
            await store.aclose()


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        await run_bot(config)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Shutting down...")


def run() -> None:
    """Synchronous entry point for the bot."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
