"""Desired display state domain models."""

from dataclasses import dataclass
from enum import StrEnum

from bigcoin_bot.domain.models.resource_role import ResourceRole
from bigcoin_bot.domain.models.stats import Stats


class IndicatorVisibility(StrEnum):
    """Access policy applied to indicator channels when they are created."""

    PRIVATE = "private"  # Hidden from and unjoinable by ordinary members
    PUBLIC = "public"  # No permission overwrites


@dataclass(frozen=True)
class DesiredDisplayState:
    """What every tenant should show after the current pass."""

    price: float
    countdown: float
    visibility: IndicatorVisibility = IndicatorVisibility.PRIVATE

    @classmethod
    def from_stats(
        cls, stats: Stats, visibility: IndicatorVisibility = IndicatorVisibility.PRIVATE
    ) -> "DesiredDisplayState":
        """Build the desired state from a stats snapshot."""
        return cls(price=stats.price, countdown=stats.countdown, visibility=visibility)


@dataclass(frozen=True)
class ChildSpec:
    """Desired attributes of one indicator channel."""

    role: ResourceRole
    name: str
    position: int
    visibility: IndicatorVisibility = IndicatorVisibility.PRIVATE
