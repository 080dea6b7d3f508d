"""Reconciliation of a tenant's stat channels against the desired display state.

The mapping store is only a cache of belief: every stored id is re-verified
against the platform before it is trusted. Failures are scoped as follows:

- a failed container or indicator creation ends the tenant's pass,
- a failed rename (or permission fix) ends that indicator's pass only,
- a failed move or reposition is recorded as an issue and ignored.

Every mutation is issued only when the observed attribute differs from the
desired one, so reconciling an already converged tenant is free of writes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bigcoin_bot.application.services.display_specs import (
    CONTAINER_POSITION,
    build_child_specs,
)
from bigcoin_bot.domain.errors import PlatformError, ResourceNotFoundError, TenantNotFoundError
from bigcoin_bot.domain.models import (
    ChildSpec,
    DesiredDisplayState,
    DisplaySettings,
    ObservedResource,
    ReconcileOutcome,
    ResourceKind,
    ResourceRole,
)

if TYPE_CHECKING:
    from bigcoin_bot.domain.contracts.stats_formatter import StatsFormatterProtocol
    from bigcoin_bot.domain.ports import MappingStore, PlatformClient

logger = logging.getLogger(__name__)


class _CreationFailedError(Exception):
    """A resource could not be created; the tenant's pass stops here."""


class ResourceReconciler:
    """Converges one tenant's container and indicator channels."""

    def __init__(
        self,
        platform: PlatformClient,
        store: MappingStore,
        formatter: StatsFormatterProtocol,
        settings: DisplaySettings | None = None,
    ) -> None:
        """Initialize the reconciler.

        Args:
            platform: Client for the platform hosting the channels.
            store: Store holding the tenant -> channel id mapping.
            formatter: Formatter for the label values.
            settings: Label templates and container name.
        """
        self._platform = platform
        self._store = store
        self._formatter = formatter
        self._settings = settings or DisplaySettings()

    async def reconcile(self, tenant_id: str, state: DesiredDisplayState) -> ReconcileOutcome:
        """Converge a tenant's channels to the desired state."""
        try:
            capabilities = await self._platform.fetch_capabilities(tenant_id)
        except TenantNotFoundError:
            logger.info(f"Tenant {tenant_id} no longer exists, skipping reconciliation")
            return ReconcileOutcome.tenant_gone()
        except PlatformError as e:
            logger.error(f"Capability check failed in tenant {tenant_id}: {e}")
            return ReconcileOutcome.partially_failed(f"capability check failed: {e}")

        if not capabilities.can_manage:
            reason = f"missing {', '.join(capabilities.missing)}"
            logger.debug(f"Cannot manage channels in tenant {tenant_id}: {reason}")
            return ReconcileOutcome.permission_denied(reason)

        try:
            return await self._converge(tenant_id, state)
        except TenantNotFoundError:
            logger.info(f"Tenant {tenant_id} disappeared during reconciliation")
            return ReconcileOutcome.tenant_gone()

    async def _converge(self, tenant_id: str, state: DesiredDisplayState) -> ReconcileOutcome:
        issues: list[str] = []
        try:
            group_id = await self._ensure_container(tenant_id)
        except _CreationFailedError as e:
            return ReconcileOutcome.partially_failed(str(e))

        failure: str | None = None
        for spec in build_child_specs(state, self._formatter, self._settings):
            try:
                reason = await self._reconcile_child(tenant_id, group_id, spec, issues)
            except _CreationFailedError as e:
                return ReconcileOutcome.partially_failed(str(e), tuple(issues))
            if reason and failure is None:
                failure = reason

        if failure:
            return ReconcileOutcome.partially_failed(failure, tuple(issues))
        return ReconcileOutcome.converged(tuple(issues))

    async def _observe(
        self, tenant_id: str, resource_id: str, role: ResourceRole
    ) -> ObservedResource | None:
        """Fetch a stored resource, treating any failure other than a vanished tenant as absence."""
        try:
            return await self._platform.fetch_resource(tenant_id, resource_id)
        except TenantNotFoundError:
            raise
        except ResourceNotFoundError:
            logger.info(f"Stored {role} resource {resource_id} not found in tenant {tenant_id}")
        except PlatformError as e:
            logger.warning(
                f"Failed to fetch stored {role} resource {resource_id} in tenant {tenant_id}: {e}"
            )
        return None

    async def _ensure_container(self, tenant_id: str) -> str:
        """Return a verified live container id, creating the container if needed."""
        group_id = await self._store.get_resource_id(tenant_id, ResourceRole.GROUP)
        if group_id:
            observed = await self._observe(tenant_id, group_id, ResourceRole.GROUP)
            if observed is not None and observed.kind == ResourceKind.CONTAINER:
                return group_id
            if observed is not None:
                logger.warning(
                    f"Stored group {group_id} in tenant {tenant_id} is a {observed.kind}, "
                    "not a container"
                )
            await self._store.delete_resource_id(tenant_id, ResourceRole.GROUP)
        return await self._create_container(tenant_id)

    async def _create_container(self, tenant_id: str) -> str:
        try:
            created = await self._platform.create_container(
                tenant_id, self._settings.container_name, CONTAINER_POSITION
            )
        except TenantNotFoundError:
            raise
        except PlatformError as e:
            logger.error(f"Failed to create channel group in tenant {tenant_id}: {e}")
            raise _CreationFailedError(f"creating channel group failed: {e}") from e
        await self._store.set_resource_id(tenant_id, ResourceRole.GROUP, created.id)
        logger.info(f"Created channel group {created.id} in tenant {tenant_id}")
        return created.id

    async def _reconcile_child(
        self, tenant_id: str, group_id: str, spec: ChildSpec, issues: list[str]
    ) -> str | None:
        """Converge one indicator. Returns a failure reason if the indicator was left wrong."""
        live: ObservedResource | None = None
        channel_id = await self._store.get_resource_id(tenant_id, spec.role)
        if channel_id:
            observed = await self._observe(tenant_id, channel_id, spec.role)
            if observed is None:
                await self._store.delete_resource_id(tenant_id, spec.role)
            elif observed.kind != ResourceKind.INDICATOR:
                logger.error(
                    f"Stored {spec.role} channel {channel_id} in tenant {tenant_id} "
                    f"is a {observed.kind}, not an indicator"
                )
                await self._store.delete_resource_id(tenant_id, spec.role)
            else:
                live = observed

        if live is None:
            await self._create_child(tenant_id, group_id, spec)
            return None
        return await self._repair_drift(tenant_id, group_id, spec, live, issues)

    async def _create_child(self, tenant_id: str, group_id: str, spec: ChildSpec) -> None:
        try:
            created = await self._platform.create_indicator(
                tenant_id, spec.name, group_id, spec.position, spec.visibility
            )
        except TenantNotFoundError:
            raise
        except PlatformError as e:
            logger.error(f"Failed to create {spec.role} channel in tenant {tenant_id}: {e}")
            raise _CreationFailedError(f"creating {spec.role} channel failed: {e}") from e
        await self._store.set_resource_id(tenant_id, spec.role, created.id)
        logger.info(f"Created {spec.role} channel {created.id} in tenant {tenant_id}")

    async def _repair_drift(
        self,
        tenant_id: str,
        group_id: str,
        spec: ChildSpec,
        live: ObservedResource,
        issues: list[str],
    ) -> str | None:
        if not live.manageable:
            logger.info(f"{spec.role} channel not manageable in tenant {tenant_id}, fixing")
            try:
                await self._platform.grant_self_manage(tenant_id, live.id)
            except TenantNotFoundError:
                raise
            except PlatformError as e:
                logger.error(
                    f"Failed to update permissions for {spec.role} channel in tenant {tenant_id}: {e}"
                )
                return f"fixing {spec.role} channel permissions failed: {e}"

        if live.name != spec.name:
            logger.info(
                f'Renaming {spec.role} channel from "{live.name}" to "{spec.name}" '
                f"in tenant {tenant_id}"
            )
            try:
                await self._platform.rename(tenant_id, live.id, spec.name)
            except TenantNotFoundError:
                raise
            except PlatformError as e:
                logger.error(f"Failed to rename {spec.role} channel in tenant {tenant_id}: {e}")
                return f"renaming {spec.role} channel failed: {e}"

        if live.parent_id != group_id:
            logger.info(
                f"Moving {spec.role} channel from parent {live.parent_id} to {group_id} "
                f"in tenant {tenant_id}"
            )
            try:
                await self._platform.move(tenant_id, live.id, group_id)
            except TenantNotFoundError:
                raise
            except PlatformError as e:
                logger.error(f"Failed to move {spec.role} channel in tenant {tenant_id}: {e}")
                issues.append(f"moving {spec.role} channel failed: {e}")

        if live.position != spec.position:
            logger.info(
                f"Moving {spec.role} channel from position {live.position} to {spec.position} "
                f"in tenant {tenant_id}"
            )
            try:
                await self._platform.reposition(tenant_id, live.id, spec.position)
            except TenantNotFoundError:
                raise
            except PlatformError as e:
                logger.error(
                    f"Failed to reposition {spec.role} channel in tenant {tenant_id}: {e}"
                )
                issues.append(f"repositioning {spec.role} channel failed: {e}")

        return None
