"""Domain models for the stats bot."""

from bigcoin_bot.domain.models.capabilities import BotCapabilities
from bigcoin_bot.domain.models.display_settings import DisplaySettings
from bigcoin_bot.domain.models.display_state import (
    ChildSpec,
    DesiredDisplayState,
    IndicatorVisibility,
)
from bigcoin_bot.domain.models.error_details import ErrorDetails
from bigcoin_bot.domain.models.observed_resource import ObservedResource, ResourceKind
from bigcoin_bot.domain.models.pass_report import PassReport
from bigcoin_bot.domain.models.reconcile_outcome import ReconcileOutcome, ReconcileStatus
from bigcoin_bot.domain.models.resource_mapping import ResourceMapping
from bigcoin_bot.domain.models.resource_role import ResourceRole
from bigcoin_bot.domain.models.stats import Stats
from bigcoin_bot.domain.models.tenant_event import TenantEvent, TenantEventKind

__all__ = [
    "BotCapabilities",
    "ChildSpec",
    "DesiredDisplayState",
    "DisplaySettings",
    "ErrorDetails",
    "IndicatorVisibility",
    "ObservedResource",
    "PassReport",
    "ReconcileOutcome",
    "ReconcileStatus",
    "ResourceKind",
    "ResourceMapping",
    "ResourceRole",
    "Stats",
    "TenantEvent",
    "TenantEventKind",
]
