"""Application services (use cases) for stat channel management."""

from bigcoin_bot.application.services.display_specs import build_child_specs
from bigcoin_bot.application.services.reconcile_pass import ReconcilePassService
from bigcoin_bot.application.services.resource_reconciler import ResourceReconciler
from bigcoin_bot.application.services.tenant_lifecycle import TenantLifecycleCoordinator

__all__ = [
    "ReconcilePassService",
    "ResourceReconciler",
    "TenantLifecycleCoordinator",
    "build_child_specs",
]
