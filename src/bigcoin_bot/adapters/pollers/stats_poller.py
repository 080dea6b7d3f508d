"""Poller running a reconciliation pass on a fixed interval."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from bigcoin_bot.domain.contracts.stats_poller import StatsPollerProtocol

if TYPE_CHECKING:
    from bigcoin_bot.domain.ports import ReconcilePass

logger = logging.getLogger(__name__)


class StatsPoller(StatsPollerProtocol):
    """Fires one reconciliation pass immediately and then every interval."""

    def __init__(self, reconcile_pass: ReconcilePass, refresh_interval_seconds: int = 60) -> None:
        """Initialize the poller.

        Args:
            reconcile_pass: The pass to run on every tick.
            refresh_interval_seconds: Seconds between passes.
        """
        self.reconcile_pass = reconcile_pass
        self.refresh_interval_seconds = refresh_interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def start(self) -> None:
        """Start the poller."""
        if self.running:
            logger.warning("Stats poller already running")
            return

        self._task = asyncio.create_task(self._poll_loop())
        logger.info(f"Started stats poller ({self.refresh_interval_seconds}s interval)")

    async def stop(self) -> None:
        """Stop the poller."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Stats poller cancelled")
            logger.info("Stopped stats poller")

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        # Do initial update immediately
        await self._run_pass()

        try:
            while True:
                await asyncio.sleep(self.refresh_interval_seconds)
                await self._run_pass()
        except asyncio.CancelledError:
            logger.info("Stats poller cancelled")
            raise

    async def _run_pass(self) -> None:
        try:
            await self.reconcile_pass.run_pass()
        except Exception as e:
            # e.g. the mapping store is unreachable; the next tick retries
            logger.error(f"Reconciliation pass failed: {e}")
