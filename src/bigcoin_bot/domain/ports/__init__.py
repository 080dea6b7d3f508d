"""Ports (interfaces) for the ports-and-adapters architecture."""

from bigcoin_bot.domain.ports.mapping_store import MappingStore
from bigcoin_bot.domain.ports.platform_client import PlatformClient
from bigcoin_bot.domain.ports.reconcile_pass import ReconcilePass
from bigcoin_bot.domain.ports.resource_reconciler import ResourceReconciler
from bigcoin_bot.domain.ports.stats_source import StatsSource

__all__ = [
    "MappingStore",
    "PlatformClient",
    "ReconcilePass",
    "ResourceReconciler",
    "StatsSource",
]
