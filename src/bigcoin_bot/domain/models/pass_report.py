"""Pass report domain model."""

from dataclasses import dataclass, field

from bigcoin_bot.domain.models.reconcile_outcome import ReconcileOutcome, ReconcileStatus
from bigcoin_bot.domain.models.stats import Stats


@dataclass(frozen=True)
class PassReport:
    """Summary of one scheduled reconciliation pass."""

    stats: Stats
    outcomes: dict[str, ReconcileOutcome] = field(default_factory=dict)  # tenant_id -> outcome
    errors: dict[str, str] = field(default_factory=dict)  # tenant_id -> unexpected error

    def count(self, status: ReconcileStatus) -> int:
        """Number of tenants that ended with the given status."""
        return sum(1 for outcome in self.outcomes.values() if outcome.status == status)
