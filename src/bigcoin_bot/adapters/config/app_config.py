"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bigcoin_bot.domain.models.display_settings import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_COUNTDOWN_LABEL_TEMPLATE,
    DEFAULT_PRICE_LABEL_TEMPLATE,
)

DISPLAY_KEYS = (
    "category_name",
    "price_label_template",
    "countdown_label_template",
    "indicator_visibility",
)


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Platform and storage
    discord_token: str | None = Field(default=None, description="Discord bot token")
    redis_url: str | None = Field(default=None, description="Redis URL for the channel mapping")
    registry_key: str = Field(
        default="guilds", description="Redis key holding the JSON list of registered guild ids"
    )

    # Stats API configuration
    stats_api_url: str = Field(
        default="https://bigpool.tech/api/stats/global",
        description="Upstream stats endpoint returning bigPrice and blocksUntilHalving",
    )
    stats_api_timeout: int = Field(default=10, description="Timeout for stats requests in seconds")
    refresh_interval_seconds: int = Field(
        default=60, description="Interval between reconciliation passes in seconds"
    )

    # Display configuration
    category_name: str = Field(
        default=DEFAULT_CONTAINER_NAME, description="Name of the channel category"
    )
    price_label_template: str = Field(
        default=DEFAULT_PRICE_LABEL_TEMPLATE,
        description="Price channel name, {value} is replaced by the formatted price",
    )
    countdown_label_template: str = Field(
        default=DEFAULT_COUNTDOWN_LABEL_TEMPLATE,
        description="Halving channel name, {value} is replaced by the compact block count",
    )
    indicator_visibility: str = Field(
        default="private",
        description="'private' hides the stat channels from members, 'public' leaves them visible",
    )

    log_level: str = Field(default="INFO", description="Root log level")

    # Optional TOML file whose [display] table overrides the display settings
    config_file: str | None = Field(default=None, description="Path to TOML configuration file")

    @field_validator("indicator_visibility")
    @classmethod
    def validate_indicator_visibility(cls, v: str) -> str:
        """Validate visibility is either 'private' or 'public'."""
        if v.lower() not in ("private", "public"):
            raise ValueError("indicator_visibility must be either 'private' or 'public'")
        return v.lower()

    @field_validator("price_label_template", "countdown_label_template")
    @classmethod
    def validate_label_template(cls, v: str) -> str:
        """Validate label templates contain the {value} placeholder."""
        if "{value}" not in v:
            raise ValueError("label templates must contain '{value}'")
        return v

    @field_validator("refresh_interval_seconds", "stats_api_timeout")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate intervals and timeouts are positive."""
        if v <= 0:
            raise ValueError("intervals and timeouts must be positive")
        return v

    def load_display_overrides(self) -> dict[str, Any]:
        """Load the [display] table of the TOML config file.

        Returns an empty dict when no config file is set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        display = toml_data.get("display", {})
        if not isinstance(display, dict):
            raise ValueError("TOML config 'display' must be a table")
        unknown = set(display) - set(DISPLAY_KEYS)
        if unknown:
            raise ValueError(f"Unknown display settings: {sorted(unknown)}")
        return display
