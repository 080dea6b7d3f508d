"""Derivation of the desired child channel specs from a display state."""

from bigcoin_bot.domain.contracts.stats_formatter import StatsFormatterProtocol
from bigcoin_bot.domain.models import (
    ChildSpec,
    DesiredDisplayState,
    DisplaySettings,
    ResourceRole,
)

CONTAINER_POSITION = 0
PRICE_POSITION = 0
COUNTDOWN_POSITION = 1


def render_label(template: str, value: str) -> str:
    """Substitute the formatted value into a label template."""
    return template.replace("{value}", value)


def build_child_specs(
    state: DesiredDisplayState,
    formatter: StatsFormatterProtocol,
    settings: DisplaySettings,
) -> tuple[ChildSpec, ChildSpec]:
    """Build the price and countdown specs, in display order."""
    price = ChildSpec(
        role=ResourceRole.PRICE,
        name=render_label(settings.price_label_template, formatter.format_price(state.price)),
        position=PRICE_POSITION,
        visibility=state.visibility,
    )
    countdown = ChildSpec(
        role=ResourceRole.COUNTDOWN,
        name=render_label(
            settings.countdown_label_template, formatter.format_compact(state.countdown)
        ),
        position=COUNTDOWN_POSITION,
        visibility=state.visibility,
    )
    return price, countdown
