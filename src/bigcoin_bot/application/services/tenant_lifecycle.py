"""Tenant lifecycle coordination: join, leave and purge."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from bigcoin_bot.domain.errors import PlatformError, ResourceNotFoundError, TenantNotFoundError
from bigcoin_bot.domain.models import (
    DesiredDisplayState,
    DisplaySettings,
    ReconcileOutcome,
    ReconcileStatus,
    TenantEvent,
    TenantEventKind,
)

if TYPE_CHECKING:
    from bigcoin_bot.domain.ports import (
        MappingStore,
        PlatformClient,
        ResourceReconciler,
        StatsSource,
    )

logger = logging.getLogger(__name__)


class TenantLifecycleCoordinator:
    """Reacts to tenants joining and leaving, outside the scheduled cadence."""

    def __init__(
        self,
        platform: PlatformClient,
        store: MappingStore,
        reconciler: ResourceReconciler,
        stats_source: StatsSource,
        settings: DisplaySettings | None = None,
    ) -> None:
        self._platform = platform
        self._store = store
        self._reconciler = reconciler
        self._stats_source = stats_source
        self._settings = settings or DisplaySettings()

    async def consume(self, events: asyncio.Queue[TenantEvent]) -> None:
        """Handle lifecycle events one at a time until cancelled."""
        while True:
            event = await events.get()
            try:
                await self.handle(event)
            except Exception as e:
                logger.error(f"Failed to handle {event.kind} event for tenant {event.tenant_id}: {e}")
            finally:
                events.task_done()

    async def handle(self, event: TenantEvent) -> None:
        """Dispatch a single lifecycle event."""
        if event.kind == TenantEventKind.JOINED:
            await self.on_join(event.tenant_id)
        else:
            await self.on_leave(event.tenant_id)

    async def on_join(self, tenant_id: str) -> ReconcileOutcome:
        """Register a tenant and reconcile it right away with fresh stats."""
        logger.info(f"Tenant joined: {tenant_id}")
        await self._store.add_tenant(tenant_id)

        stats = await self._stats_source.fetch()
        state = DesiredDisplayState.from_stats(stats, self._settings.indicator_visibility)
        outcome = await self._reconciler.reconcile(tenant_id, state)

        if outcome.status == ReconcileStatus.PERMISSION_DENIED:
            logger.warning(
                f"Cannot manage channels in new tenant {tenant_id} ({outcome.reason}); "
                "it stays registered and will be retried on the next pass"
            )
        elif outcome.status == ReconcileStatus.TENANT_GONE:
            await self.forget(tenant_id)
        elif not outcome.is_converged:
            logger.warning(f"Initial reconciliation of tenant {tenant_id} failed: {outcome.reason}")
        return outcome

    async def on_leave(self, tenant_id: str) -> None:
        """Unregister a tenant and tear down the channels it owns."""
        logger.info(f"Tenant left: {tenant_id}")
        await self._store.remove_tenant(tenant_id)

        mapping = await self._store.get_mapping(tenant_id)
        if not mapping.is_empty and await self._tenant_reachable(tenant_id):
            for role, resource_id in mapping.teardown_order():
                try:
                    removed = await self.delete_if_present(tenant_id, resource_id)
                except TenantNotFoundError:
                    logger.info(f"Tenant {tenant_id} vanished during teardown")
                    break
                if not removed:
                    logger.warning(f"Leaving {role} channel {resource_id} behind in {tenant_id}")

        await self._store.clear_mapping(tenant_id)
        logger.info(f"Removed channel mapping for tenant {tenant_id}")

    async def forget(self, tenant_id: str) -> None:
        """Purge all local state of a tenant without touching the platform."""
        logger.info(f"Forgetting tenant {tenant_id}")
        await self._store.remove_tenant(tenant_id)
        await self._store.clear_mapping(tenant_id)

    async def delete_if_present(self, tenant_id: str, resource_id: str) -> bool:
        """Delete a resource if it still exists.

        Returns:
            True if the resource is gone afterwards (deleted now or already absent),
            False if the deletion failed.
        """
        try:
            await self._platform.delete(tenant_id, resource_id)
        except TenantNotFoundError:
            raise
        except ResourceNotFoundError:
            logger.info(f"Resource {resource_id} already deleted or not found in {tenant_id}")
            return True
        except PlatformError as e:
            logger.error(f"Error deleting resource {resource_id} in {tenant_id}: {e}")
            return False
        logger.info(f"Deleted resource {resource_id} in {tenant_id}")
        return True

    async def _tenant_reachable(self, tenant_id: str) -> bool:
        try:
            exists = await self._platform.tenant_exists(tenant_id)
        except PlatformError as e:
            logger.warning(f"Could not check tenant {tenant_id}, attempting teardown anyway: {e}")
            return True
        if not exists:
            logger.info(f"Tenant {tenant_id} no longer exists, skipping channel deletion")
        return exists
