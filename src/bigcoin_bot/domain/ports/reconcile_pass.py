"""Reconcile pass port."""

from typing import Protocol

from bigcoin_bot.domain.models.pass_report import PassReport


class ReconcilePass(Protocol):
    """Port for running one reconciliation pass across every registered tenant."""

    async def run_pass(self) -> PassReport:
        """Fetch stats once and reconcile every tenant against them."""
        ...
