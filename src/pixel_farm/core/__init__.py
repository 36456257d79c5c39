"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        PixelFarmError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        FarmValidationError, InsufficientResourceError, NotReadyError,
        UnknownEntityError, MalformedSaveError: intent failure categories.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        configure_logging_from_settings: Set up logging from Settings.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from pixel_farm.core.config import (
    Settings,
    SimulationSettings,
    StorageSettings,
    clear_settings_cache,
    get_settings,
)
from pixel_farm.core.exceptions import (
    ConfigurationError,
    EmptyPlotError,
    FarmValidationError,
    InsufficientFundsError,
    InsufficientResourceError,
    ItemLockedError,
    LandLockedError,
    MalformedSaveError,
    MascotAlreadyOwnedError,
    MascotNotOwnedError,
    MaxExpansionReachedError,
    MissingIngredientsError,
    MissingItemsError,
    NotACropError,
    NotReadyError,
    OutOfBoundsError,
    PixelFarmError,
    PlotError,
    SpaceOccupiedError,
    UnknownEntityError,
    UnknownItemError,
    UnknownMascotError,
    UnknownOrderError,
    UnknownRecipeError,
)
from pixel_farm.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)


__all__ = [
    # Base exception
    "PixelFarmError",
    "ConfigurationError",
    # Validation
    "FarmValidationError",
    "PlotError",
    "OutOfBoundsError",
    "SpaceOccupiedError",
    "LandLockedError",
    "EmptyPlotError",
    "NotACropError",
    "ItemLockedError",
    "MaxExpansionReachedError",
    "MascotAlreadyOwnedError",
    "MascotNotOwnedError",
    # Resources
    "InsufficientResourceError",
    "InsufficientFundsError",
    "MissingItemsError",
    "MissingIngredientsError",
    # Timing
    "NotReadyError",
    # Unknown entities
    "UnknownEntityError",
    "UnknownItemError",
    "UnknownRecipeError",
    "UnknownOrderError",
    "UnknownMascotError",
    # Persistence
    "MalformedSaveError",
    # Configuration
    "Settings",
    "SimulationSettings",
    "StorageSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "bind_context",
    "clear_context",
]
