"""Discord platform adapters."""

from bigcoin_bot.adapters.discord_api.discord_gateway import DiscordGateway, default_intents
from bigcoin_bot.adapters.discord_api.discord_platform_client import DiscordPlatformClient

__all__ = ["DiscordGateway", "DiscordPlatformClient", "default_intents"]
