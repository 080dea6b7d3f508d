"""Tests for the Discord platform adapter using mocked discord.py objects."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from bigcoin_bot.adapters.discord_api import DiscordGateway, DiscordPlatformClient
from bigcoin_bot.adapters.discord_api.discord_platform_client import observe_channel
from bigcoin_bot.domain.errors import PlatformError, ResourceNotFoundError, TenantNotFoundError
from bigcoin_bot.domain.models import (
    BotCapabilities,
    IndicatorVisibility,
    ResourceKind,
    TenantEvent,
)

GUILD_ID = "111"


def _http_error(error_type: type[discord.HTTPException], status: int) -> discord.HTTPException:
    return error_type(MagicMock(status=status, reason="error"), "error")


def _channel(spec: type, channel_id: int, name: str, category_id: int | None = None) -> MagicMock:
    channel = MagicMock(spec=spec)
    channel.id = channel_id
    channel.name = name
    channel.category_id = category_id
    channel.position = 0
    channel.permissions_for.return_value = discord.Permissions(manage_channels=True)
    channel.edit = AsyncMock()
    channel.delete = AsyncMock()
    channel.set_permissions = AsyncMock()
    return channel


@pytest.fixture
def guild() -> MagicMock:
    """Create a cached guild with the bot as member."""
    guild = MagicMock()
    guild.id = int(GUILD_ID)
    guild.name = "Test Guild"
    guild.me.guild_permissions = discord.Permissions(manage_channels=True, view_channel=True)
    guild.me.top_role.position = 2
    guild.fetch_channel = AsyncMock()
    guild.create_category = AsyncMock()
    guild.create_voice_channel = AsyncMock()
    return guild


@pytest.fixture
def client(guild: MagicMock) -> MagicMock:
    """Create a discord client whose cache holds the guild."""
    client = MagicMock()
    client.get_guild.return_value = guild
    client.fetch_guild = AsyncMock()
    return client


def test_observe_category_as_container() -> None:
    """A category maps to a container without parent."""
    category = _channel(discord.CategoryChannel, 5, "\U0001f315 BIGCOIN")

    observed = observe_channel(category, None)

    assert observed.kind == ResourceKind.CONTAINER
    assert observed.id == "5"
    assert observed.parent_id is None


def test_observe_voice_channel_as_indicator() -> None:
    """A voice channel maps to an indicator; missing manage rights are reported."""
    voice = _channel(discord.VoiceChannel, 6, "$BIG: $1.0000", category_id=5)
    voice.permissions_for.return_value = discord.Permissions.none()

    observed = observe_channel(voice, MagicMock())

    assert observed.kind == ResourceKind.INDICATOR
    assert observed.parent_id == "5"
    assert observed.manageable is False


def test_observe_text_channel_as_other() -> None:
    """Channels of any other type are neither container nor indicator."""
    text = _channel(discord.TextChannel, 7, "general")

    assert observe_channel(text, None).kind == ResourceKind.OTHER


@pytest.mark.asyncio
async def test_fetch_capabilities_reads_guild_permissions(client: MagicMock) -> None:
    """The bot's guild permissions and top role position become capabilities."""
    capabilities = await DiscordPlatformClient(client).fetch_capabilities(GUILD_ID)

    assert capabilities == BotCapabilities(
        manage_channels=True, view_channels=True, top_role_position=2
    )


@pytest.mark.parametrize("error_type", [discord.NotFound, discord.Forbidden])
@pytest.mark.asyncio
async def test_when_guild_unknown_then_tenant_not_found(
    client: MagicMock, error_type: type[discord.HTTPException]
) -> None:
    """Given a guild missing from the cache and the API, when accessed, then TenantNotFoundError is raised."""
    client.get_guild.return_value = None
    client.fetch_guild.side_effect = _http_error(error_type, 404)
    platform = DiscordPlatformClient(client)

    with pytest.raises(TenantNotFoundError):
        await platform.fetch_capabilities(GUILD_ID)
    assert await platform.tenant_exists(GUILD_ID) is False


@pytest.mark.asyncio
async def test_when_channel_not_found_then_resource_not_found(
    client: MagicMock, guild: MagicMock
) -> None:
    """Given an unknown channel id, when fetching it, then ResourceNotFoundError is raised."""
    guild.fetch_channel.side_effect = _http_error(discord.NotFound, 404)

    with pytest.raises(ResourceNotFoundError):
        await DiscordPlatformClient(client).fetch_resource(GUILD_ID, "9")


@pytest.mark.asyncio
async def test_when_channel_fetch_fails_then_platform_error(
    client: MagicMock, guild: MagicMock
) -> None:
    """Given a server error, when fetching a channel, then a generic PlatformError is raised."""
    guild.fetch_channel.side_effect = _http_error(discord.DiscordServerError, 503)

    with pytest.raises(PlatformError) as exc_info:
        await DiscordPlatformClient(client).fetch_resource(GUILD_ID, "9")
    assert not isinstance(exc_info.value, ResourceNotFoundError)


@pytest.mark.asyncio
async def test_create_private_indicator_hides_it_from_everyone(
    client: MagicMock, guild: MagicMock
) -> None:
    """A private indicator denies the default role and allows the bot."""
    guild.create_voice_channel.return_value = _channel(discord.VoiceChannel, 8, "x", 5)

    observed = await DiscordPlatformClient(client).create_indicator(
        GUILD_ID, "x", "5", 1, IndicatorVisibility.PRIVATE
    )

    assert observed.id == "8"
    kwargs = guild.create_voice_channel.call_args.kwargs
    assert kwargs["category"].id == 5
    assert kwargs["position"] == 1
    overwrites = kwargs["overwrites"]
    assert overwrites[guild.default_role].view_channel is False
    assert overwrites[guild.default_role].connect is False
    assert overwrites[guild.me].manage_channels is True


@pytest.mark.asyncio
async def test_create_public_indicator_has_no_overwrites(
    client: MagicMock, guild: MagicMock
) -> None:
    """A public indicator is created without permission overwrites."""
    guild.create_voice_channel.return_value = _channel(discord.VoiceChannel, 8, "x", 5)

    await DiscordPlatformClient(client).create_indicator(
        GUILD_ID, "x", "5", 0, IndicatorVisibility.PUBLIC
    )

    assert guild.create_voice_channel.call_args.kwargs["overwrites"] == {}


@pytest.mark.asyncio
async def test_when_create_forbidden_then_platform_error(
    client: MagicMock, guild: MagicMock
) -> None:
    """Given a forbidden category creation, when creating the container, then PlatformError is raised."""
    guild.create_category.side_effect = _http_error(discord.Forbidden, 403)

    with pytest.raises(PlatformError):
        await DiscordPlatformClient(client).create_container(GUILD_ID, "group", 0)


@pytest.mark.asyncio
async def test_rename_move_and_reposition_edit_the_channel(
    client: MagicMock, guild: MagicMock
) -> None:
    """Each drift repair issues exactly one edit."""
    channel = _channel(discord.VoiceChannel, 9, "old", 5)
    guild.fetch_channel.return_value = channel
    platform = DiscordPlatformClient(client)

    await platform.rename(GUILD_ID, "9", "new")
    await platform.move(GUILD_ID, "9", "6")
    await platform.reposition(GUILD_ID, "9", 1)

    calls = channel.edit.call_args_list
    assert calls[0].kwargs == {"name": "new"}
    assert calls[1].kwargs["category"].id == 6
    assert calls[2].kwargs == {"position": 1}


@pytest.mark.asyncio
async def test_when_deleted_concurrently_then_resource_not_found(
    client: MagicMock, guild: MagicMock
) -> None:
    """Given a channel deleted between fetch and delete, when deleting, then ResourceNotFoundError is raised."""
    channel = _channel(discord.VoiceChannel, 9, "x", 5)
    channel.delete.side_effect = _http_error(discord.NotFound, 404)
    guild.fetch_channel.return_value = channel

    with pytest.raises(ResourceNotFoundError):
        await DiscordPlatformClient(client).delete(GUILD_ID, "9")


@pytest.mark.asyncio
async def test_gateway_publishes_guild_events() -> None:
    """Guild joins and removals are put on the event queue as tenant events."""
    events: asyncio.Queue[TenantEvent] = asyncio.Queue()
    gateway = DiscordGateway(events)
    guild = MagicMock()
    guild.id = 123

    await gateway.on_guild_join(guild)
    await gateway.on_guild_remove(guild)

    assert events.get_nowait() == TenantEvent.joined("123")
    assert events.get_nowait() == TenantEvent.left("123")


@pytest.mark.asyncio
async def test_gateway_ready_hook_runs_once() -> None:
    """The ready hook starts the poller only on the first ready event."""
    hook = AsyncMock()
    gateway = DiscordGateway(asyncio.Queue(), on_ready_hook=hook)

    await gateway.on_ready()
    await gateway.on_ready()

    hook.assert_awaited_once()
