"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from bigcoin_bot.adapters.config import AppConfig, DisplaySettingsLoader
from bigcoin_bot.domain.models import DisplaySettings, IndicatorVisibility


DISPLAY_ENV_VARS = (
    "CATEGORY_NAME",
    "CONTAINER_NAME",
    "PRICE_LABEL_TEMPLATE",
    "COUNTDOWN_LABEL_TEMPLATE",
    "INDICATOR_VISIBILITY",
    "CONFIG_FILE",
)


@pytest.fixture(autouse=True)
def clear_display_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep display settings independent of the host environment."""
    for name in DISPLAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def _write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False, encoding="utf-8") as f:
        f.write(content)
        return f.name


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    monkeypatch.delenv("REFRESH_INTERVAL_SECONDS", raising=False)

    config = AppConfig(_env_file=None)

    assert config.stats_api_url == "https://bigpool.tech/api/stats/global"
    assert config.refresh_interval_seconds == 60
    assert config.registry_key == "guilds"
    assert config.indicator_visibility == "private"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("DISCORD_TOKEN", "token")
    monkeypatch.setenv("REDIS_URL", "redis://localhost:6379/0")
    monkeypatch.setenv("REFRESH_INTERVAL_SECONDS", "30")
    monkeypatch.setenv("INDICATOR_VISIBILITY", "PUBLIC")

    config = AppConfig(_env_file=None)

    assert config.discord_token == "token"
    assert config.redis_url == "redis://localhost:6379/0"
    assert config.refresh_interval_seconds == 30
    assert config.indicator_visibility == "public"


def test_config_validates_visibility(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given invalid visibility, when loading config, then validation error is raised."""
    monkeypatch.setenv("INDICATOR_VISIBILITY", "hidden")

    with pytest.raises(ValueError, match="indicator_visibility must be either"):
        AppConfig(_env_file=None)


def test_config_validates_label_templates() -> None:
    """Given a template without placeholder, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="label templates must contain"):
        AppConfig(_env_file=None, price_label_template="Price")


def test_config_validates_positive_interval() -> None:
    """Given a zero interval, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="must be positive"):
        AppConfig(_env_file=None, refresh_interval_seconds=0)


def test_display_settings_default_without_config_file() -> None:
    """Given no config file, when loading display settings, then the defaults apply."""
    settings = DisplaySettingsLoader.load(AppConfig(_env_file=None))

    assert settings == DisplaySettings()


def test_runtime_container_name_does_not_rename_category(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given CONTAINER_NAME set by the container runtime, when loading display settings, then the default category name is kept."""
    monkeypatch.setenv("CONTAINER_NAME", "broad-faint-urban-video")

    settings = DisplaySettingsLoader.load(AppConfig(_env_file=None))

    assert settings.container_name == "\U0001f315 BIGCOIN"


def test_category_name_read_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given CATEGORY_NAME, when loading display settings, then it names the category."""
    monkeypatch.setenv("CATEGORY_NAME", "Bigcoin Stats")

    settings = DisplaySettingsLoader.load(AppConfig(_env_file=None))

    assert settings.container_name == "Bigcoin Stats"


def test_display_settings_overridden_from_toml() -> None:
    """Given a [display] table, when loading display settings, then its values win."""
    temp_path = _write_toml(
        """
[display]
category_name = "Stats"
countdown_label_template = "Halving in {value}"
indicator_visibility = "public"
"""
    )
    try:
        settings = DisplaySettingsLoader.load(AppConfig(_env_file=None, config_file=temp_path))
    finally:
        Path(temp_path).unlink()

    assert settings.container_name == "Stats"
    assert settings.countdown_label_template == "Halving in {value}"
    assert settings.price_label_template == "$BIG: {value}"
    assert settings.indicator_visibility == IndicatorVisibility.PUBLIC


def test_display_settings_rejects_unknown_keys() -> None:
    """Given an unknown key in [display], when loading, then a ValueError names it."""
    temp_path = _write_toml('[display]\ncolour = "red"\n')
    try:
        with pytest.raises(ValueError, match="colour"):
            DisplaySettingsLoader.load(AppConfig(_env_file=None, config_file=temp_path))
    finally:
        Path(temp_path).unlink()


def test_display_settings_validates_toml_values() -> None:
    """Given an invalid template in TOML, when loading, then validation fails."""
    temp_path = _write_toml('[display]\nprice_label_template = "no placeholder"\n')
    try:
        with pytest.raises(ValueError, match="label templates must contain"):
            DisplaySettingsLoader.load(AppConfig(_env_file=None, config_file=temp_path))
    finally:
        Path(temp_path).unlink()


def test_missing_config_file_raises() -> None:
    """Given a config file path that does not exist, when loading, then FileNotFoundError is raised."""
    config = AppConfig(_env_file=None, config_file="/nonexistent/bigcoin.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        DisplaySettingsLoader.load(config)
