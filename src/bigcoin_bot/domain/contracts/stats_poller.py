"""Protocol for the periodic reconciliation trigger."""

from typing import Protocol


class StatsPollerProtocol(Protocol):
    """Protocol for running reconciliation passes on a fixed cadence."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
