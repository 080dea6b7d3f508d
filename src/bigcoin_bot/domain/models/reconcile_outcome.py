"""Reconcile outcome domain model."""

from dataclasses import dataclass, field
from enum import StrEnum


class ReconcileStatus(StrEnum):
    """Terminal status of one tenant's reconciliation."""

    CONVERGED = "converged"
    PERMISSION_DENIED = "permission_denied"
    PARTIALLY_FAILED = "partially_failed"
    TENANT_GONE = "tenant_gone"


@dataclass(frozen=True)
class ReconcileOutcome:
    """Result of reconciling one tenant."""

    status: ReconcileStatus
    reason: str | None = None
    issues: tuple[str, ...] = field(default_factory=tuple)  # Tolerated move/reposition failures

    @classmethod
    def converged(cls, issues: tuple[str, ...] = ()) -> "ReconcileOutcome":
        return cls(ReconcileStatus.CONVERGED, issues=issues)

    @classmethod
    def permission_denied(cls, reason: str) -> "ReconcileOutcome":
        return cls(ReconcileStatus.PERMISSION_DENIED, reason=reason)

    @classmethod
    def partially_failed(cls, reason: str, issues: tuple[str, ...] = ()) -> "ReconcileOutcome":
        return cls(ReconcileStatus.PARTIALLY_FAILED, reason=reason, issues=issues)

    @classmethod
    def tenant_gone(cls) -> "ReconcileOutcome":
        return cls(ReconcileStatus.TENANT_GONE, reason="tenant no longer exists")

    @property
    def is_converged(self) -> bool:
        return self.status == ReconcileStatus.CONVERGED
