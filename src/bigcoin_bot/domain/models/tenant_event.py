"""Tenant lifecycle event domain model."""

from dataclasses import dataclass
from enum import StrEnum


class TenantEventKind(StrEnum):
    """Lifecycle signals delivered by the platform."""

    JOINED = "joined"
    LEFT = "left"


@dataclass(frozen=True)
class TenantEvent:
    """A tenant joined or left."""

    kind: TenantEventKind
    tenant_id: str

    @classmethod
    def joined(cls, tenant_id: str) -> "TenantEvent":
        return cls(TenantEventKind.JOINED, tenant_id)

    @classmethod
    def left(cls, tenant_id: str) -> "TenantEvent":
        return cls(TenantEventKind.LEFT, tenant_id)
