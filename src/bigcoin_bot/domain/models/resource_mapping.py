"""Resource mapping domain model."""

from dataclasses import dataclass

from bigcoin_bot.domain.models.resource_role import ResourceRole


@dataclass(frozen=True)
class ResourceMapping:
    """Stored belief about which platform resources a tenant owns.

    Any id may be stale; the platform is the source of truth.
    """

    group_id: str | None = None
    price_channel_id: str | None = None
    countdown_channel_id: str | None = None

    def get(self, role: ResourceRole) -> str | None:
        """Return the stored id for a role."""
        if role == ResourceRole.GROUP:
            return self.group_id
        if role == ResourceRole.PRICE:
            return self.price_channel_id
        return self.countdown_channel_id

    @property
    def is_empty(self) -> bool:
        """True when no id is stored for any role."""
        return not (self.group_id or self.price_channel_id or self.countdown_channel_id)

    def teardown_order(self) -> list[tuple[ResourceRole, str]]:
        """Stored ids in deletion order: children first, container last."""
        ordered = [
            (ResourceRole.PRICE, self.price_channel_id),
            (ResourceRole.COUNTDOWN, self.countdown_channel_id),
            (ResourceRole.GROUP, self.group_id),
        ]
        return [(role, resource_id) for role, resource_id in ordered if resource_id]
