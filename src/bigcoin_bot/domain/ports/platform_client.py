"""Platform client port."""

from typing import Protocol

from bigcoin_bot.domain.models.capabilities import BotCapabilities
from bigcoin_bot.domain.models.display_state import IndicatorVisibility
from bigcoin_bot.domain.models.observed_resource import ObservedResource


class PlatformClient(Protocol):
    """Port for the chat platform hosting the display resources.

    Implementations raise ``TenantNotFoundError`` when the tenant is gone,
    ``ResourceNotFoundError`` when an addressed resource is gone and
    ``PlatformError`` for every other failure.
    """

    async def tenant_exists(self, tenant_id: str) -> bool:
        """Return whether the tenant is still reachable."""
        ...

    async def fetch_capabilities(self, tenant_id: str) -> BotCapabilities:
        """Return the bot's own permissions within the tenant."""
        ...

    async def fetch_resource(self, tenant_id: str, resource_id: str) -> ObservedResource | None:
        """Return a snapshot of a resource."""
        ...

    async def create_container(
        self, tenant_id: str, name: str, position: int
    ) -> ObservedResource:
        """Create the grouping container."""
        ...

    async def create_indicator(
        self,
        tenant_id: str,
        name: str,
        parent_id: str,
        position: int,
        visibility: IndicatorVisibility,
    ) -> ObservedResource:
        """Create an indicator under the given container."""
        ...

    async def rename(self, tenant_id: str, resource_id: str, name: str) -> None:
        """Change a resource's display name."""
        ...

    async def move(self, tenant_id: str, resource_id: str, parent_id: str) -> None:
        """Move a resource under another container."""
        ...

    async def reposition(self, tenant_id: str, resource_id: str, position: int) -> None:
        """Change a resource's display order."""
        ...

    async def grant_self_manage(self, tenant_id: str, resource_id: str) -> None:
        """Give the bot manage and view rights on a resource."""
        ...

    async def delete(self, tenant_id: str, resource_id: str) -> None:
        """Delete a resource."""
        ...
