"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from bigcoin_bot.adapters.formatters import StatsFormatter
from bigcoin_bot.application.services import build_child_specs
from bigcoin_bot.domain.models import (
    BotCapabilities,
    DesiredDisplayState,
    DisplaySettings,
    ErrorDetails,
    IndicatorVisibility,
    PassReport,
    ReconcileOutcome,
    ReconcileStatus,
    ResourceMapping,
    ResourceRole,
    Stats,
)


def test_stats_empty_is_zero() -> None:
    """The fallback snapshot shows zero values."""
    assert Stats.empty() == Stats(price=0, countdown=0)


def test_capabilities_report_every_missing_requirement() -> None:
    """All unmet requirements are listed."""
    capabilities = BotCapabilities(manage_channels=False, view_channels=False, top_role_position=0)

    assert capabilities.missing == ["ManageChannels", "ViewChannel", "elevated role"]
    assert capabilities.can_manage is False
    assert BotCapabilities(True, True, 1).can_manage is True


def test_mapping_teardown_order_children_first() -> None:
    """Teardown lists price, countdown and then the container, skipping unset roles."""
    mapping = ResourceMapping(group_id="1", price_channel_id=None, countdown_channel_id="3")

    assert mapping.teardown_order() == [
        (ResourceRole.COUNTDOWN, "3"),
        (ResourceRole.GROUP, "1"),
    ]
    assert mapping.get(ResourceRole.GROUP) == "1"
    assert not mapping.is_empty
    assert ResourceMapping().is_empty


def test_reconcile_outcome_constructors() -> None:
    """Outcome constructors set status and reason."""
    assert ReconcileOutcome.converged().is_converged
    denied = ReconcileOutcome.permission_denied("missing ManageChannels")
    assert denied.status == ReconcileStatus.PERMISSION_DENIED
    assert denied.reason == "missing ManageChannels"
    failed = ReconcileOutcome.partially_failed("boom", ("moving price channel failed",))
    assert failed.issues == ("moving price channel failed",)
    assert ReconcileOutcome.tenant_gone().status == ReconcileStatus.TENANT_GONE


def test_pass_report_counts_by_status() -> None:
    """The report counts outcomes per status."""
    report = PassReport(
        stats=Stats.empty(),
        outcomes={
            "1": ReconcileOutcome.converged(),
            "2": ReconcileOutcome.converged(),
            "3": ReconcileOutcome.permission_denied("missing ViewChannel"),
        },
    )

    assert report.count(ReconcileStatus.CONVERGED) == 2
    assert report.count(ReconcileStatus.PERMISSION_DENIED) == 1
    assert report.count(ReconcileStatus.TENANT_GONE) == 0


def test_error_details_is_immutable() -> None:
    """Error details are frozen."""
    details = ErrorDetails(status_code=429, reason="Rate limit exceeded")

    with pytest.raises(ValidationError):
        details.reason = "other"  # type: ignore[misc]


def test_child_specs_order_and_names() -> None:
    """Price comes first, countdown second, both carrying the visibility policy."""
    state = DesiredDisplayState(price=0.5, countdown=999, visibility=IndicatorVisibility.PUBLIC)

    price, countdown = build_child_specs(state, StatsFormatter(), DisplaySettings())

    assert (price.role, price.name, price.position) == (ResourceRole.PRICE, "$BIG: $0.5000", 0)
    assert (countdown.role, countdown.name, countdown.position) == (
        ResourceRole.COUNTDOWN,
        "HALVENING: 999",
        1,
    )
    assert price.visibility == countdown.visibility == IndicatorVisibility.PUBLIC
