"""Resource reconciler port."""

from typing import Protocol

from bigcoin_bot.domain.models.display_state import DesiredDisplayState
from bigcoin_bot.domain.models.reconcile_outcome import ReconcileOutcome


class ResourceReconciler(Protocol):
    """Port for converging one tenant's resources to a desired display state."""

    async def reconcile(self, tenant_id: str, state: DesiredDisplayState) -> ReconcileOutcome:
        """Reconcile a single tenant."""
        ...
