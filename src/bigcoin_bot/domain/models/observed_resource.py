"""Observed resource domain model."""

from dataclasses import dataclass
from enum import StrEnum


class ResourceKind(StrEnum):
    """Kind of a platform resource as far as reconciliation cares."""

    CONTAINER = "container"
    INDICATOR = "indicator"
    OTHER = "other"


@dataclass(frozen=True)
class ObservedResource:
    """Snapshot of a platform resource taken during reconciliation."""

    id: str
    kind: ResourceKind
    name: str
    parent_id: str | None = None
    position: int = 0
    manageable: bool = True  # False when the bot lost manage rights on this resource
