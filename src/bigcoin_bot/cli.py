"""Operator CLI for inspecting stats and stored channel mappings."""

import argparse
import asyncio
import json
import sys
from typing import Any

import aiohttp
from redis.asyncio import from_url

from bigcoin_bot.adapters.config import AppConfig, DisplaySettingsLoader
from bigcoin_bot.adapters.formatters import StatsFormatter
from bigcoin_bot.adapters.redis_store import RedisMappingStore
from bigcoin_bot.adapters.stats_api import StatsHttpClient, StatsRepository
from bigcoin_bot.application.services import build_child_specs
from bigcoin_bot.domain.models import DesiredDisplayState


async def show_stats(config: AppConfig, format_json: bool = False) -> None:
    """Fetch the current stats and print them with the resulting channel names."""
    settings = DisplaySettingsLoader.load(config)
    async with aiohttp.ClientSession() as session:
        repository = StatsRepository(
            StatsHttpClient(session, config.stats_api_url, config.stats_api_timeout)
        )
        stats = await repository.fetch()

    state = DesiredDisplayState.from_stats(stats, settings.indicator_visibility)
    specs = build_child_specs(state, StatsFormatter(), settings)
    if format_json:
        result: dict[str, Any] = {
            "price": stats.price,
            "countdown": stats.countdown,
            "channels": {str(spec.role): spec.name for spec in specs},
        }
        print(json.dumps(result, indent=2, ensure_ascii=False))
        return

    print(f"Price:     {stats.price}")
    print(f"Countdown: {stats.countdown}")
    print(f"\n{settings.container_name}")
    for spec in specs:
        print(f"  {spec.position}: {spec.name}")


def _store(config: AppConfig) -> RedisMappingStore:
    if not config.redis_url:
        print("REDIS_URL environment variable is required", file=sys.stderr)
        sys.exit(1)
    return RedisMappingStore(from_url(config.redis_url, decode_responses=True), config.registry_key)


async def list_tenants(config: AppConfig, format_json: bool = False) -> None:
    """Print the registered guild ids."""
    store = _store(config)
    try:
        tenant_ids = await store.get_tenant_ids()
    finally:
        await store.aclose()
    if format_json:
        print(json.dumps(tenant_ids, indent=2))
        return
    if not tenant_ids:
        print("No guilds registered.")
        return
    print(f"\n{len(tenant_ids)} registered guild(s):\n")
    for tenant_id in tenant_ids:
        print(f"  {tenant_id}")


async def show_mapping(config: AppConfig, tenant_id: str, format_json: bool = False) -> None:
    """Print the channel ids stored for a guild."""
    store = _store(config)
    try:
        mapping = await store.get_mapping(tenant_id)
        registered = tenant_id in await store.get_tenant_ids()
    finally:
        await store.aclose()
    if format_json:
        result = {
            "tenant_id": tenant_id,
            "registered": registered,
            "group": mapping.group_id,
            "price": mapping.price_channel_id,
            "countdown": mapping.countdown_channel_id,
        }
        print(json.dumps(result, indent=2))
        return
    print(f"Guild {tenant_id} ({'registered' if registered else 'not registered'})")
    print(f"  group:     {mapping.group_id or '-'}")
    print(f"  price:     {mapping.price_channel_id or '-'}")
    print(f"  countdown: {mapping.countdown_channel_id or '-'}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Bigcoin stats bot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the bot
  bigcoin-bot run

  # Show the current stats and channel names
  bigcoin-bot stats

  # List registered guilds
  bigcoin-bot tenants

  # Show the stored channel ids of a guild
  bigcoin-bot mapping 123456789012345678
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    subparsers.add_parser("run", help="Run the bot")

    stats_parser = subparsers.add_parser("stats", help="Show current stats and channel names")
    stats_parser.add_argument("--json", action="store_true", help="Output as JSON")

    tenants_parser = subparsers.add_parser("tenants", help="List registered guilds")
    tenants_parser.add_argument("--json", action="store_true", help="Output as JSON")

    mapping_parser = subparsers.add_parser("mapping", help="Show stored channel ids of a guild")
    mapping_parser.add_argument("tenant_id", help="Guild ID")
    mapping_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    try:
        if args.command == "run":
            from bigcoin_bot.main import configure_logging, run_bot

            configure_logging(config.log_level)
            await run_bot(config)
        elif args.command == "stats":
            await show_stats(config, format_json=args.json)
        elif args.command == "tenants":
            await list_tenants(config, format_json=args.json)
        elif args.command == "mapping":
            await show_mapping(config, args.tenant_id, format_json=args.json)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
