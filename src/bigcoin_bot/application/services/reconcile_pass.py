"""One scheduled reconciliation pass across every registered tenant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bigcoin_bot.domain.models import (
    DesiredDisplayState,
    DisplaySettings,
    PassReport,
    ReconcileOutcome,
    ReconcileStatus,
)

if TYPE_CHECKING:
    from bigcoin_bot.application.services.tenant_lifecycle import TenantLifecycleCoordinator
    from bigcoin_bot.domain.ports import MappingStore, ResourceReconciler, StatsSource

logger = logging.getLogger(__name__)


class ReconcilePassService:
    """Fetches stats once and reconciles every registered tenant against them."""

    def __init__(
        self,
        stats_source: StatsSource,
        store: MappingStore,
        reconciler: ResourceReconciler,
        lifecycle: TenantLifecycleCoordinator,
        settings: DisplaySettings | None = None,
    ) -> None:
        """Initialize the pass service.

        Args:
            stats_source: Source of the latest stats, read once per pass.
            store: Store holding the tenant registry.
            reconciler: Reconciler applied to each tenant.
            lifecycle: Coordinator used to purge tenants that no longer exist.
            settings: Display settings providing the indicator visibility policy.
        """
        self._stats_source = stats_source
        self._store = store
        self._reconciler = reconciler
        self._lifecycle = lifecycle
        self._settings = settings or DisplaySettings()
        self._denied_tenants: set[str] = set()

    async def run_pass(self) -> PassReport:
        """Run one pass. Per-tenant failures never abort the pass."""
        stats = await self._stats_source.fetch()
        tenant_ids = await self._store.get_tenant_ids()
        logger.info(
            f"Updating price to {stats.price} and halvening to {stats.countdown} blocks "
            f"for {len(tenant_ids)} guilds"
        )

        state = DesiredDisplayState.from_stats(stats, self._settings.indicator_visibility)
        outcomes: dict[str, ReconcileOutcome] = {}
        errors: dict[str, str] = {}
        for tenant_id in tenant_ids:
            try:
                outcome = await self._reconciler.reconcile(tenant_id, state)
                outcomes[tenant_id] = outcome
                await self._after_reconcile(tenant_id, outcome)
            except Exception as e:
                logger.error(f"Unexpected error reconciling tenant {tenant_id}: {e}")
                errors[tenant_id] = str(e)

        report = PassReport(stats=stats, outcomes=outcomes, errors=errors)
        logger.debug(
            f"Pass finished: {report.count(ReconcileStatus.CONVERGED)} converged, "
            f"{report.count(ReconcileStatus.PERMISSION_DENIED)} denied, "
            f"{report.count(ReconcileStatus.PARTIALLY_FAILED)} failed, {len(errors)} errors"
        )
        return report

    async def _after_reconcile(self, tenant_id: str, outcome: ReconcileOutcome) -> None:
        if outcome.status == ReconcileStatus.PERMISSION_DENIED:
            # Denied tenants are retried every pass; only the first denial is loud.
            if tenant_id in self._denied_tenants:
                logger.debug(f"Still missing permissions in tenant {tenant_id}: {outcome.reason}")
            else:
                logger.warning(f"Missing permissions in tenant {tenant_id}: {outcome.reason}")
                self._denied_tenants.add(tenant_id)
            return

        if tenant_id in self._denied_tenants:
            logger.info(f"Permissions restored in tenant {tenant_id}")
            self._denied_tenants.discard(tenant_id)

        if outcome.status == ReconcileStatus.TENANT_GONE:
            await self._lifecycle.forget(tenant_id)
        elif outcome.status == ReconcileStatus.PARTIALLY_FAILED:
            logger.warning(f"Reconciliation of tenant {tenant_id} incomplete: {outcome.reason}")
