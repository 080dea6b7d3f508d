"""Stats domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Stats:
    """Latest metric values from the upstream stats API."""

    price: float
    countdown: float  # Blocks until the next halving

    @classmethod
    def empty(cls) -> "Stats":
        """Safe default used when the stats API cannot be read."""
        return cls(price=0, countdown=0)
