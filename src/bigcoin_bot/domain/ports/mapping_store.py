"""Mapping store port."""

from typing import Protocol

from bigcoin_bot.domain.models.resource_mapping import ResourceMapping
from bigcoin_bot.domain.models.resource_role import ResourceRole


class MappingStore(Protocol):
    """Port for the persistent tenant registry and tenant->resource id mapping."""

    async def get_tenant_ids(self) -> list[str]:
        """Return the registered tenant ids."""
        ...

    async def add_tenant(self, tenant_id: str) -> None:
        """Register a tenant. Registering twice is a no-op."""
        ...

    async def remove_tenant(self, tenant_id: str) -> None:
        """Unregister a tenant. Unknown tenants are ignored."""
        ...

    async def get_resource_id(self, tenant_id: str, role: ResourceRole) -> str | None:
        """Return the stored resource id for a role, if any."""
        ...

    async def set_resource_id(self, tenant_id: str, role: ResourceRole, resource_id: str) -> None:
        """Store the resource id for a role."""
        ...

    async def delete_resource_id(self, tenant_id: str, role: ResourceRole) -> None:
        """Forget the resource id for a role."""
        ...

    async def get_mapping(self, tenant_id: str) -> ResourceMapping:
        """Return all stored resource ids of a tenant."""
        ...

    async def clear_mapping(self, tenant_id: str) -> None:
        """Forget every stored resource id of a tenant."""
        ...
