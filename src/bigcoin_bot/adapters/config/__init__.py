"""Configuration adapters."""

from bigcoin_bot.adapters.config.app_config import AppConfig
from bigcoin_bot.adapters.config.display_settings_loader import DisplaySettingsLoader

__all__ = ["AppConfig", "DisplaySettingsLoader"]
