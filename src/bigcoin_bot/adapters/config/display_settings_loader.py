"""Loader turning application configuration into domain display settings."""

import logging

from bigcoin_bot.adapters.config.app_config import AppConfig
from bigcoin_bot.domain.models import DisplaySettings, IndicatorVisibility

logger = logging.getLogger(__name__)


class DisplaySettingsLoader:
    """Builds DisplaySettings from environment config plus TOML overrides."""

    @staticmethod
    def load(config: AppConfig) -> DisplaySettings:
        """Load display settings.

        Values from the TOML [display] table win over environment values and are
        validated by the same rules.

        Raises:
            ValueError: If a value is invalid.
            FileNotFoundError: If the configured TOML file does not exist.
        """
        overrides = config.load_display_overrides()
        if overrides:
            logger.info(f"Applying display overrides from {config.config_file}: {sorted(overrides)}")
            config = AppConfig.model_validate({**config.model_dump(), **overrides})

        return DisplaySettings(
            container_name=config.category_name,
            price_label_template=config.price_label_template,
            countdown_label_template=config.countdown_label_template,
            indicator_visibility=IndicatorVisibility(config.indicator_visibility),
        )
