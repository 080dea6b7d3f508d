"""Bot capabilities domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BotCapabilities:
    """The bot's own permissions within a tenant."""

    manage_channels: bool
    view_channels: bool
    top_role_position: int

    @property
    def missing(self) -> list[str]:
        """Names of the requirements that are not met."""
        missing = []
        if not self.manage_channels:
            missing.append("ManageChannels")
        if not self.view_channels:
            missing.append("ViewChannel")
        if self.top_role_position == 0:
            missing.append("elevated role")
        return missing

    @property
    def can_manage(self) -> bool:
        """True when every resource mutation is expected to be allowed."""
        return not self.missing
