"""Discord platform client adapter.

Tenants are guilds, the container is a channel category and the indicators
are voice channels. discord.py exceptions are translated into the domain
error taxonomy at this boundary.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import discord

from bigcoin_bot.domain.errors import PlatformError, ResourceNotFoundError, TenantNotFoundError
from bigcoin_bot.domain.models import (
    BotCapabilities,
    IndicatorVisibility,
    ObservedResource,
    ResourceKind,
)
from bigcoin_bot.domain.ports.platform_client import PlatformClient

if TYPE_CHECKING:
    from discord.abc import GuildChannel

logger = logging.getLogger(__name__)


def observe_channel(channel: GuildChannel, me: discord.Member | None) -> ObservedResource:
    """Snapshot a discord channel as an observed resource."""
    if isinstance(channel, discord.CategoryChannel):
        kind = ResourceKind.CONTAINER
    elif isinstance(channel, discord.VoiceChannel):
        kind = ResourceKind.INDICATOR
    else:
        kind = ResourceKind.OTHER
    manageable = True if me is None else channel.permissions_for(me).manage_channels
    return ObservedResource(
        id=str(channel.id),
        kind=kind,
        name=channel.name,
        parent_id=str(channel.category_id) if channel.category_id else None,
        position=channel.position,
        manageable=manageable,
    )


def private_overwrites(
    guild: discord.Guild, me: discord.Member
) -> dict[discord.Role | discord.Member, discord.PermissionOverwrite]:
    """Hide a channel from everyone while keeping it manageable by the bot."""
    return {
        guild.default_role: discord.PermissionOverwrite(
            connect=False, view_channel=False, speak=False, stream=False
        ),
        me: discord.PermissionOverwrite(manage_channels=True, view_channel=True),
    }


class DiscordPlatformClient(PlatformClient):
    """Platform client backed by a logged-in discord.py client."""

    def __init__(self, client: discord.Client) -> None:
        """Initialize with the gateway client whose cache and HTTP session are reused."""
        self._client = client

    async def _guild(self, tenant_id: str) -> discord.Guild:
        guild = self._client.get_guild(int(tenant_id))
        if guild is not None:
            return guild
        try:
            return await self._client.fetch_guild(int(tenant_id))
        except (discord.NotFound, discord.Forbidden) as e:
            raise TenantNotFoundError(tenant_id) from e
        except discord.HTTPException as e:
            raise PlatformError(f"Failed to fetch guild {tenant_id}: {e}") from e

    async def _me(self, guild: discord.Guild) -> discord.Member:
        if guild.me is not None:
            return guild.me
        if self._client.user is None:
            raise PlatformError("Client is not logged in")
        try:
            return await guild.fetch_member(self._client.user.id)
        except discord.NotFound as e:
            raise TenantNotFoundError(str(guild.id), "Bot is no longer a member") from e
        except discord.HTTPException as e:
            raise PlatformError(f"Failed to fetch own member in {guild.id}: {e}") from e

    async def _channel(self, guild: discord.Guild, resource_id: str) -> GuildChannel:
        try:
            return await guild.fetch_channel(int(resource_id))
        except discord.NotFound as e:
            raise ResourceNotFoundError(resource_id) from e
        except (discord.HTTPException, discord.InvalidData) as e:
            raise PlatformError(f"Failed to fetch channel {resource_id}: {e}") from e

    async def tenant_exists(self, tenant_id: str) -> bool:
        try:
            await self._guild(tenant_id)
        except TenantNotFoundError:
            return False
        return True

    async def fetch_capabilities(self, tenant_id: str) -> BotCapabilities:
        guild = await self._guild(tenant_id)
        me = await self._me(guild)
        permissions = me.guild_permissions
        capabilities = BotCapabilities(
            manage_channels=permissions.manage_channels,
            view_channels=permissions.view_channel,
            top_role_position=me.top_role.position,
        )
        logger.debug(f"Permissions for bot in {guild.name}: {capabilities}")
        return capabilities

    async def fetch_resource(self, tenant_id: str, resource_id: str) -> ObservedResource | None:
        guild = await self._guild(tenant_id)
        channel = await self._channel(guild, resource_id)
        return observe_channel(channel, guild.me)

    async def create_container(
        self, tenant_id: str, name: str, position: int
    ) -> ObservedResource:
        guild = await self._guild(tenant_id)
        try:
            category = await guild.create_category(name, position=position)
        except discord.HTTPException as e:
            raise PlatformError(f"Failed to create category in {guild.name}: {e}") from e
        return observe_channel(category, guild.me)

    async def create_indicator(
        self,
        tenant_id: str,
        name: str,
        parent_id: str,
        position: int,
        visibility: IndicatorVisibility,
    ) -> ObservedResource:
        guild = await self._guild(tenant_id)
        overwrites = {}
        if visibility == IndicatorVisibility.PRIVATE:
            overwrites = private_overwrites(guild, await self._me(guild))
        try:
            channel = await guild.create_voice_channel(
                name,
                category=discord.Object(id=int(parent_id)),
                position=position,
                overwrites=overwrites,
            )
        except discord.HTTPException as e:
            raise PlatformError(f"Failed to create voice channel in {guild.name}: {e}") from e
        return observe_channel(channel, guild.me)

    async def _edit(self, tenant_id: str, resource_id: str, **changes: object) -> None:
        guild = await self._guild(tenant_id)
        channel = await self._channel(guild, resource_id)
        try:
            await channel.edit(**changes)
        except discord.NotFound as e:
            raise ResourceNotFoundError(resource_id) from e
        except discord.HTTPException as e:
            raise PlatformError(f"Failed to edit channel {resource_id}: {e}") from e

    async def rename(self, tenant_id: str, resource_id: str, name: str) -> None:
        await self._edit(tenant_id, resource_id, name=name)

    async def move(self, tenant_id: str, resource_id: str, parent_id: str) -> None:
        await self._edit(tenant_id, resource_id, category=discord.Object(id=int(parent_id)))

    async def reposition(self, tenant_id: str, resource_id: str, position: int) -> None:
        await self._edit(tenant_id, resource_id, position=position)

    async def grant_self_manage(self, tenant_id: str, resource_id: str) -> None:
        guild = await self._guild(tenant_id)
        channel = await self._channel(guild, resource_id)
        me = await self._me(guild)
        try:
            await channel.set_permissions(me, manage_channels=True, view_channel=True)
        except discord.HTTPException as e:
            raise PlatformError(f"Failed to update permissions on {resource_id}: {e}") from e

    async def delete(self, tenant_id: str, resource_id: str) -> None:
        guild = await self._guild(tenant_id)
        channel = await self._channel(guild, resource_id)
        try:
            await channel.delete()
        except discord.NotFound as e:
            raise ResourceNotFoundError(resource_id) from e
        except discord.HTTPException as e:
            raise PlatformError(f"Failed to delete channel {resource_id}: {e}") from e
