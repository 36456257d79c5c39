"""Custom exception hierarchy for the Pixel Farm simulation core.

Every rejected intent raises one of the exceptions below. All of them
inherit from PixelFarmError, so the presentation layer can catch a single
type at its boundary while still telling failure categories apart.

No exception here is fatal: an intent that raises has left the game state
exactly as it found it.

Example:
    >>> from pixel_farm.core.exceptions import InsufficientFundsError
    >>> raise InsufficientFundsError("Not enough money for seeds!", required=40, available=12)
"""

from __future__ import annotations

from typing import Any


class PixelFarmError(Exception):
    """Base exception for all Pixel Farm errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        """Return a detailed string representation of the exception."""
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationError(PixelFarmError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Validation Exceptions (bad target, bad placement, illegal transition)
# =============================================================================


class FarmValidationError(PixelFarmError):
    """Raised when an intent targets something it may not act on.

    Covers bad plot indices, occupied or locked land, non-crop seeds and
    illegal mascot/expansion transitions.
    """


class PlotError(FarmValidationError):
    """Base for placement failures that carry a plot index."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize plot error with index context.

        Args:
            message: Human-readable error description.
            index: Plot index the intent was aimed at.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if index is not None:
            combined_details["index"] = index
        super().__init__(message, details=combined_details)


class OutOfBoundsError(PlotError):
    """Raised when a plot index or a crop footprint leaves the grid."""


class SpaceOccupiedError(PlotError):
    """Raised when a footprint covers a planted or occupied cell."""


class LandLockedError(PlotError):
    """Raised when a footprint covers land above the current expansion level."""


class EmptyPlotError(PlotError):
    """Raised when harvesting a plot with nothing planted."""


class NotACropError(FarmValidationError):
    """Raised when trying to plant an item that is not a crop."""


class ItemLockedError(FarmValidationError):
    """Raised when an item or recipe is above the player's level."""

    def __init__(
        self,
        message: str,
        *,
        unlock_level: int | None = None,
        current_level: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if unlock_level is not None:
            combined_details["unlock_level"] = unlock_level
        if current_level is not None:
            combined_details["current_level"] = current_level
        super().__init__(message, details=combined_details)


class MaxExpansionReachedError(FarmValidationError):
    """Raised when the land is already fully expanded."""


class MascotAlreadyOwnedError(FarmValidationError):
    """Raised when buying a mascot the player already owns."""


class MascotNotOwnedError(FarmValidationError):
    """Raised when equipping a mascot the player does not own."""


# =============================================================================
# Resource Exceptions
# =============================================================================


class InsufficientResourceError(PixelFarmError):
    """Raised when money or inventory cannot cover an intent.

    Intents that raise this never debit a partial amount.
    """


class InsufficientFundsError(InsufficientResourceError):
    """Raised when the player cannot afford a purchase."""

    def __init__(
        self,
        message: str,
        *,
        required: int | None = None,
        available: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize funds error with cost context.

        Args:
            message: Human-readable error description.
            required: Money the intent needed.
            available: Money the player had.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if required is not None:
            combined_details["required"] = required
        if available is not None:
            combined_details["available"] = available
        super().__init__(message, details=combined_details)


class MissingItemsError(InsufficientResourceError):
    """Raised when the inventory cannot cover an order's lines."""

    def __init__(
        self,
        message: str,
        *,
        missing: dict[str, int] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize missing-items error.

        Args:
            message: Human-readable error description.
            missing: Item id to shortfall count.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if missing:
            combined_details["missing"] = missing
        super().__init__(message, details=combined_details)


class MissingIngredientsError(MissingItemsError):
    """Raised when the inventory cannot cover a recipe's inputs."""


# =============================================================================
# Timing Exceptions
# =============================================================================


class NotReadyError(PixelFarmError):
    """Raised when harvesting a crop whose growth has not completed."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        remaining_seconds: float | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = details or {}
        if index is not None:
            combined_details["index"] = index
        if remaining_seconds is not None:
            combined_details["remaining_seconds"] = round(remaining_seconds, 2)
        super().__init__(message, details=combined_details)


# =============================================================================
# Unknown Entity Exceptions
# =============================================================================


class UnknownEntityError(PixelFarmError):
    """Raised when an intent names an id that does not exist."""

    def __init__(
        self,
        message: str,
        *,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unknown entity error.

        Args:
            message: Human-readable error description.
            entity_id: The id that could not be resolved.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if entity_id is not None:
            combined_details["entity_id"] = entity_id
        super().__init__(message, details=combined_details)


class UnknownItemError(UnknownEntityError):
    """Raised for an item id missing from the catalog."""


class UnknownRecipeError(UnknownEntityError):
    """Raised for a recipe id missing from the catalog."""


class UnknownOrderError(UnknownEntityError):
    """Raised for an order id that is not currently open."""


class UnknownMascotError(UnknownEntityError):
    """Raised for a mascot id missing from the catalog."""


# =============================================================================
# Persistence Exceptions
# =============================================================================


class MalformedSaveError(PixelFarmError):
    """Raised when a save snapshot fails import validation.

    The engine's current state is preserved; nothing is partially loaded.
    """


__all__ = [
    "PixelFarmError",
    "ConfigurationError",
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
    "InsufficientResourceError",
    "InsufficientFundsError",
    "MissingItemsError",
    "MissingIngredientsError",
    "NotReadyError",
    "UnknownEntityError",
    "UnknownItemError",
    "UnknownRecipeError",
    "UnknownOrderError",
    "UnknownMascotError",
    "MalformedSaveError",
]
