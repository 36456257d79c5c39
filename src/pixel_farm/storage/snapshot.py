"""Snapshot export, import validation and legacy grid migration.

A snapshot is the JSON-compatible dict form of a GameState, keyed with the
camelCase names used by existing save files. Import is all-or-nothing: a
snapshot either becomes a fully valid GameState or raises
MalformedSaveError.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pixel_farm.core.constants import (
    GRID_SIZE,
    LEGACY_EXPANSION_LEVEL,
    LEGACY_GRID_SIZE,
    LEGACY_OFFSET,
    LEGACY_TOTAL_PLOTS,
    MILLISECOND_TIMESTAMP_FLOOR,
    TOTAL_PLOTS,
)
from pixel_farm.core.exceptions import MalformedSaveError
from pixel_farm.core.logging import get_logger
from pixel_farm.engine.grid import occupancy_violations, tier_of
from pixel_farm.models.game_state import GameState


logger = get_logger(__name__)


# =============================================================================
# Export
# =============================================================================


def export_snapshot(state: GameState) -> dict[str, Any]:
    """Serialize a state into a JSON-compatible dict with camelCase keys."""
    return state.model_dump(mode="json", by_alias=True)


# =============================================================================
# Legacy Migration
# =============================================================================


def legacy_to_current(index: int) -> int:
    """Translate a 12x12 plot index onto the 18x18 grid at the fixed offset."""
    row, col = divmod(index, LEGACY_GRID_SIZE)
    return (row + LEGACY_OFFSET) * GRID_SIZE + (col + LEGACY_OFFSET)


def migrate_legacy_plots(plots: list[Any]) -> list[dict[str, Any]]:
    """Remap a 144-plot grid onto the current grid.

    Each old cell keeps its crop and plant time at its translated position;
    ``occupiedBy`` references go through the same translation. Cells outside
    the old area start empty. Tiers and unlock flags are left for the
    caller to recompute.

    Raises:
        MalformedSaveError: If a plot entry or occupancy reference is invalid.
    """
    migrated: list[dict[str, Any]] = [{"id": index} for index in range(TOTAL_PLOTS)]

    for old_index, raw in enumerate(plots):
        if not isinstance(raw, Mapping):
            raise MalformedSaveError(
                "Invalid save file",
                details={"reason": "plot entry is not an object", "plot": old_index},
            )
        cell = {key: value for key, value in raw.items() if key not in ("occupied_by", "occupiedBy")}
        new_index = legacy_to_current(old_index)
        cell["id"] = new_index

        occupied_by = raw.get("occupiedBy", raw.get("occupied_by"))
        if occupied_by is not None:
            if (
                isinstance(occupied_by, bool)
                or not isinstance(occupied_by, int)
                or not 0 <= occupied_by < LEGACY_TOTAL_PLOTS
            ):
                raise MalformedSaveError(
                    "Invalid save file",
                    details={"reason": "bad occupiedBy reference", "plot": old_index},
                )
            cell["occupiedBy"] = legacy_to_current(occupied_by)

        migrated[new_index] = cell

    return migrated


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_seconds(container: Any, *keys: str) -> None:
    if not isinstance(container, dict):
        return
    for key in keys:
        if _is_number(container.get(key)):
            container[key] = container[key] / 1000


def legacy_timestamps_to_seconds(payload: dict[str, Any]) -> bool:
    """Convert millisecond timestamps of an older save to seconds, in place.

    Older saves stamped times in milliseconds. The unit is detected from
    ``lastSaveTime``, or from the plant times when no save time is stored.
    Plant times, the save and weather times, order deadlines and the event
    window are converted together.

    Returns:
        Whether a conversion took place.
    """
    plots = payload["plots"]
    stamps = [payload.get("lastSaveTime", payload.get("last_save_time"))]
    if not _is_number(stamps[0]):
        stamps = [plot.get("plantTime", plot.get("plant_time")) for plot in plots]
    if not any(_is_number(stamp) and stamp > MILLISECOND_TIMESTAMP_FLOOR for stamp in stamps):
        return False

    _to_seconds(payload, "lastSaveTime", "last_save_time", "weatherEndTime", "weather_end_time")
    for plot in plots:
        _to_seconds(plot, "plantTime", "plant_time")

    orders = payload.get("orders")
    if isinstance(orders, list):
        payload["orders"] = [dict(order) if isinstance(order, Mapping) else order for order in orders]
        for order in payload["orders"]:
            _to_seconds(order, "expiresAt", "expires_at")

    for key in ("activeEvent", "active_event"):
        if isinstance(payload.get(key), Mapping):
            payload[key] = dict(payload[key])
            _to_seconds(payload[key], "startTime", "start_time", "endTime", "end_time")

    return True


# =============================================================================
# Import
# =============================================================================


def _require_shape(data: Any) -> None:
    if not isinstance(data, Mapping):
        raise MalformedSaveError("Invalid save file", details={"reason": "snapshot is not an object"})

    money = data.get("money")
    if isinstance(money, bool) or not isinstance(money, (int, float)):
        raise MalformedSaveError("Invalid save file", details={"reason": "money is missing or not a number"})

    if not isinstance(data.get("plots"), list):
        raise MalformedSaveError("Invalid save file", details={"reason": "plots is missing or not a list"})


def import_snapshot(data: Any) -> GameState:
    """Validate, migrate and default a snapshot into a GameState.

    Snapshots from the 12x12 era are remapped onto the current grid and,
    when they carry no expansion level, get the level that keeps the whole
    former area unlocked. Their millisecond timestamps become seconds. Fields added after a snapshot was written take
    their defaults.

    Args:
        data: Parsed snapshot, typically straight from JSON.

    Returns:
        A new, fully validated GameState.

    Raises:
        MalformedSaveError: If the snapshot cannot be accepted. Nothing is
            partially applied.
    """
    _require_shape(data)

    payload = dict(data)
    plots = payload["plots"]

    if len(plots) == LEGACY_TOTAL_PLOTS:
        payload["plots"] = migrate_legacy_plots(plots)
        if "expansionLevel" not in payload and "expansion_level" not in payload:
            payload["expansionLevel"] = LEGACY_EXPANSION_LEVEL
        converted = legacy_timestamps_to_seconds(payload)
        logger.info(
            "Migrating legacy save",
            old_plots=LEGACY_TOTAL_PLOTS,
            new_plots=TOTAL_PLOTS,
            milliseconds=converted,
        )
    elif len(plots) != TOTAL_PLOTS:
        raise MalformedSaveError(
            "Invalid save file",
            details={"reason": "unexpected plot count", "plots": len(plots)},
        )

    try:
        state = GameState.model_validate(payload)
    except PydanticValidationError as exc:
        raise MalformedSaveError(
            "Invalid save file",
            details={"reason": "validation failed", "errors": exc.error_count()},
        ) from exc

    for index, plot in enumerate(state.plots):
        plot.id = index
        plot.tier = tier_of(index)
        plot.is_unlocked = plot.tier <= state.expansion_level

    problems = occupancy_violations(state.plots)
    if problems:
        raise MalformedSaveError(
            "Invalid save file",
            details={"reason": "inconsistent plot occupancy", "first": problems[0]},
        )

    logger.debug("Snapshot imported", money=state.money, xp=state.xp, level=state.level)
    return state


__all__ = [
    "export_snapshot",
    "legacy_to_current",
    "migrate_legacy_plots",
    "legacy_timestamps_to_seconds",
    "import_snapshot",
]
