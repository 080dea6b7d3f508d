"""Redis-backed mapping store.

Layout:
    <registry_key>          JSON list of registered tenant ids
    <tenant_id>:group       channel category id
    <tenant_id>:price       price channel id
    <tenant_id>:countdown   halving countdown channel id
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from bigcoin_bot.domain.models import ResourceMapping, ResourceRole
from bigcoin_bot.domain.ports.mapping_store import MappingStore

if TYPE_CHECKING:
    from redis.asyncio import Redis

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_KEY = "guilds"


def resource_key(tenant_id: str, role: ResourceRole) -> str:
    """Redis key holding a tenant's resource id for a role."""
    return f"{tenant_id}:{role}"


class RedisMappingStore(MappingStore):
    """Mapping store adapter over ``redis.asyncio``.

    The client must be created with ``decode_responses=True``.
    """

    def __init__(self, redis: Redis, registry_key: str = DEFAULT_REGISTRY_KEY) -> None:
        self._redis = redis
        self._registry_key = registry_key

    async def get_tenant_ids(self) -> list[str]:
        raw = await self._redis.get(self._registry_key)
        if not raw:
            return []
        try:
            tenant_ids = json.loads(raw)
        except json.JSONDecodeError:
            logger.error(f"Registry key {self._registry_key} holds invalid JSON, treating as empty")
            return []
        if not isinstance(tenant_ids, list):
            logger.error(f"Registry key {self._registry_key} is not a list, treating as empty")
            return []
        return [str(tenant_id) for tenant_id in tenant_ids]

    async def _write_tenant_ids(self, tenant_ids: list[str]) -> None:
        # dict.fromkeys keeps first-seen order while removing duplicates
        await self._redis.set(self._registry_key, json.dumps(list(dict.fromkeys(tenant_ids))))

    async def add_tenant(self, tenant_id: str) -> None:
        tenant_ids = await self.get_tenant_ids()
        if tenant_id in tenant_ids:
            logger.debug(f"Tenant {tenant_id} already registered")
            return
        await self._write_tenant_ids([*tenant_ids, tenant_id])
        logger.info(f"Registered tenant {tenant_id}")

    async def remove_tenant(self, tenant_id: str) -> None:
        tenant_ids = await self.get_tenant_ids()
        if tenant_id not in tenant_ids:
            logger.debug(f"Tenant {tenant_id} was not registered")
            return
        await self._write_tenant_ids([t for t in tenant_ids if t != tenant_id])
        logger.info(f"Unregistered tenant {tenant_id}")

    async def get_resource_id(self, tenant_id: str, role: ResourceRole) -> str | None:
        resource_id = await self._redis.get(resource_key(tenant_id, role))
        return resource_id or None

    async def set_resource_id(self, tenant_id: str, role: ResourceRole, resource_id: str) -> None:
        await self._redis.set(resource_key(tenant_id, role), resource_id)

    async def delete_resource_id(self, tenant_id: str, role: ResourceRole) -> None:
        await self._redis.delete(resource_key(tenant_id, role))

    async def get_mapping(self, tenant_id: str) -> ResourceMapping:
        return ResourceMapping(
            group_id=await self.get_resource_id(tenant_id, ResourceRole.GROUP),
            price_channel_id=await self.get_resource_id(tenant_id, ResourceRole.PRICE),
            countdown_channel_id=await self.get_resource_id(tenant_id, ResourceRole.COUNTDOWN),
        )

    async def clear_mapping(self, tenant_id: str) -> None:
        await self._redis.delete(*(resource_key(tenant_id, role) for role in ResourceRole))

    async def aclose(self) -> None:
        """Close the underlying Redis connection pool."""
        await self._redis.aclose()
