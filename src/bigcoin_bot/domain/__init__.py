"""Domain layer - core business logic and models."""

from bigcoin_bot.domain.errors import PlatformError, ResourceNotFoundError, TenantNotFoundError
from bigcoin_bot.domain.models import (
    DesiredDisplayState,
    ReconcileOutcome,
    ResourceMapping,
    Stats,
)
from bigcoin_bot.domain.ports import MappingStore, PlatformClient, StatsSource

__all__ = [
    "DesiredDisplayState",
    "MappingStore",
    "PlatformClient",
    "PlatformError",
    "ReconcileOutcome",
    "ResourceMapping",
    "ResourceNotFoundError",
    "Stats",
    "StatsSource",
    "TenantNotFoundError",
]
