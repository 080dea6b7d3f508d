"""Resource role domain model."""

from enum import StrEnum


class ResourceRole(StrEnum):
    """Role of an owned resource within a tenant; also the mapping store key suffix."""

    GROUP = "group"
    PRICE = "price"
    COUNTDOWN = "countdown"
