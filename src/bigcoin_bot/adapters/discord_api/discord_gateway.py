"""Discord gateway client: turns guild lifecycle events into tenant events."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

import discord

from bigcoin_bot.domain.models import TenantEvent

logger = logging.getLogger(__name__)


def default_intents() -> discord.Intents:
    """Intents needed to see guild joins/leaves and channel state."""
    intents = discord.Intents.none()
    intents.guilds = True
    intents.voice_states = True
    return intents


class DiscordGateway(discord.Client):
    """discord.py client publishing guild joins and leaves onto a queue."""

    def __init__(
        self,
        events: asyncio.Queue[TenantEvent],
        on_ready_hook: Callable[[], Awaitable[None]] | None = None,
        intents: discord.Intents | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            events: Inbound queue consumed by the lifecycle coordinator.
            on_ready_hook: Called once, the first time the gateway is ready.
            intents: Gateway intents, defaults to ``default_intents()``.
        """
        super().__init__(intents=intents or default_intents())
        self.events = events
        self.on_ready_hook = on_ready_hook
        self._ready_once = False

    async def on_ready(self) -> None:
        logger.info(f"Bigcoin Price Bot Ready! Logged in as {self.user} in {len(self.guilds)} guilds")
        # on_ready fires again after every reconnect
        if self._ready_once:
            return
        self._ready_once = True
        if self.on_ready_hook is not None:
            await self.on_ready_hook()

    async def on_guild_join(self, guild: discord.Guild) -> None:
        logger.info(f"Joined guild {guild.name} ({guild.id})")
        self.events.put_nowait(TenantEvent.joined(str(guild.id)))

    async def on_guild_remove(self, guild: discord.Guild) -> None:
        logger.info(f"Removed from guild {guild.name} ({guild.id})")
        self.events.put_nowait(TenantEvent.left(str(guild.id)))
