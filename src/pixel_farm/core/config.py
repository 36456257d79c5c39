"""Configuration management for the Pixel Farm simulation core.

Centralized configuration using pydantic-settings, supporting environment
variables, .env files, and runtime overrides.

Example:
    >>> from pixel_farm.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.simulation.max_open_orders
    3

Environment Variables:
    PIXEL_FARM_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    PIXEL_FARM_JSON_LOGS: Emit JSON log lines instead of console output
    PIXEL_FARM_SIM_TICK_SECONDS: Real seconds between scheduled ticks
    PIXEL_FARM_SIM_SEED: Seed for the simulation's random source
    PIXEL_FARM_SAVE_PATH: Path of the JSON save file
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pixel_farm.core.exceptions import ConfigurationError


class SimulationSettings(BaseSettings):
    """Tunables for the tick-driven simulation.

    Attributes:
        tick_seconds: Real seconds between scheduled ticks.
        clock_increment: Game hours added per tick.
        max_open_orders: Cap on simultaneously open market orders.
        order_spawn_chance: Per-tick probability of drawing a new order.
        emergency_chance: Probability that a drawn order is an emergency.
        event_spawn_chance: Per-tick probability of starting an event.
        seed: Optional seed for reproducible simulations.
    """

    model_config = SettingsConfigDict(
        env_prefix="PIXEL_FARM_SIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    tick_seconds: float = Field(
        default=1.0,
        gt=0,
        le=60,
        description="Real seconds between scheduled ticks",
    )
    clock_increment: float = Field(
        default=0.04,
        gt=0,
        lt=24,
        description="Game hours advanced per tick",
    )
    max_open_orders: int = Field(
        default=3,
        ge=0,
        le=10,
        description="Maximum open market orders",
    )
    order_spawn_chance: float = Field(
        default=0.05,
        ge=0,
        le=1,
        description="Per-tick order generation probability",
    )
    emergency_chance: float = Field(
        default=0.15,
        ge=0,
        le=1,
        description="Probability that a new order is an emergency",
    )
    event_spawn_chance: float = Field(
        default=0.01,
        ge=0,
        le=1,
        description="Per-tick event start probability",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducible runs",
    )


class StorageSettings(BaseSettings):
    """Configuration for the save file location.

    Attributes:
        save_path: JSON file the snapshot is written to.
    """

    model_config = SettingsConfigDict(
        env_prefix="PIXEL_FARM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    save_path: Path = Field(
        default=Path("data/pixel_farm_save.json"),
        description="Path of the JSON save file",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration domains.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON lines.
        log_file: Optional log file path.
        simulation: Simulation tunables.
        storage: Save file settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="PIXEL_FARM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Pixel Farm",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON lines",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional file that also receives log records",
    )

    simulation: SimulationSettings = Field(default_factory=SimulationSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)

    @model_validator(mode="after")
    def validate_debug_log_level(self) -> "Settings":
        """Reject a debug run that silences its own diagnostics.

        Raises:
            ConfigurationError: If debug is on but the log level hides DEBUG and INFO.
        """
        if self.debug and self.log_level in ("ERROR", "CRITICAL"):
            raise ConfigurationError(
                f"debug mode requires log_level DEBUG, INFO or WARNING, got {self.log_level}",
                config_key="log_level",
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return not self.debug


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "SimulationSettings",
    "StorageSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
