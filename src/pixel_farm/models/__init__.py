"""Pydantic models and static catalog for the Pixel Farm simulation core.

Modules:
    enums: String enums for item, mascot, weather and notification ids.
    catalog: Immutable item, recipe, mascot and event definitions.
    progression: XP thresholds and unlock gating.
    game_state: Plot, Order, ActiveEvent and the GameState aggregate.
"""

from __future__ import annotations

from pixel_farm.models.catalog import (
    GAME_EVENTS,
    ITEMS,
    MASCOTS,
    RECIPES,
    EventDef,
    IngredientLine,
    ItemDef,
    MascotDef,
    RecipeDef,
    get_event,
    get_item,
    get_mascot,
    get_recipe,
)
from pixel_farm.models.enums import (
    ItemId,
    ItemKind,
    MascotEffect,
    MascotId,
    NotificationKind,
    WeatherType,
)
from pixel_farm.models.game_state import ActiveEvent, GameState, Order, OrderLine, Plot
from pixel_farm.models.progression import (
    LEVEL_XP,
    MAX_LEVEL,
    is_unlocked,
    level_from_xp,
    unlocked_events,
    unlocked_item_ids,
    unlocked_recipes,
    xp_for_next_level,
    xp_progress,
)


__all__ = [
    # Enums
    "ItemId",
    "ItemKind",
    "MascotEffect",
    "MascotId",
    "NotificationKind",
    "WeatherType",
    # Catalog
    "ItemDef",
    "IngredientLine",
    "RecipeDef",
    "MascotDef",
    "EventDef",
    "ITEMS",
    "RECIPES",
    "MASCOTS",
    "GAME_EVENTS",
    "get_item",
    "get_recipe",
    "get_mascot",
    "get_event",
    # Progression
    "LEVEL_XP",
    "MAX_LEVEL",
    "level_from_xp",
    "xp_for_next_level",
    "xp_progress",
    "is_unlocked",
    "unlocked_item_ids",
    "unlocked_recipes",
    "unlocked_events",
    # State
    "Plot",
    "OrderLine",
    "Order",
    "ActiveEvent",
    "GameState",
]
