"""Display settings domain model."""

from dataclasses import dataclass

from bigcoin_bot.domain.models.display_state import IndicatorVisibility

DEFAULT_CONTAINER_NAME = "\U0001f315 BIGCOIN"
DEFAULT_PRICE_LABEL_TEMPLATE = "$BIG: {value}"
DEFAULT_COUNTDOWN_LABEL_TEMPLATE = "HALVENING: {value}"


@dataclass(frozen=True)
class DisplaySettings:
    """Labels and policies shared by every tenant."""

    container_name: str = DEFAULT_CONTAINER_NAME
    price_label_template: str = DEFAULT_PRICE_LABEL_TEMPLATE  # {value} is the formatted price
    countdown_label_template: str = DEFAULT_COUNTDOWN_LABEL_TEMPLATE
    indicator_visibility: IndicatorVisibility = IndicatorVisibility.PRIVATE
