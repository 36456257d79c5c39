"""Level progression and unlock gating.

Everything here is a pure function of XP or level over the static
catalog. Game state never stores the results independently; it recomputes
them from XP on every read.
"""

from __future__ import annotations

from pixel_farm.models.catalog import GAME_EVENTS, ITEMS, RECIPES, EventDef, RecipeDef
from pixel_farm.models.enums import ItemId

# =============================================================================
# XP Thresholds
# =============================================================================

# Indexed by level; index 0 and 1 both mean "level 1 starts at 0 XP".
LEVEL_XP: tuple[int, ...] = (
    0,
    0, 100, 300, 600, 1000,
    1500, 2200, 3000, 4000, 5500,
    7500, 10000, 13000, 17000, 22000,
    28000, 35000, 45000, 60000, 100000,
)

MAX_LEVEL = len(LEVEL_XP) - 1


def level_from_xp(xp: int) -> int:
    """Determine the player level for an XP total.

    Returns the highest level whose threshold is <= xp.
    """
    level = 1
    for candidate in range(2, len(LEVEL_XP)):
        if xp >= LEVEL_XP[candidate]:
            level = candidate
        else:
            break
    return level


def xp_for_next_level(current_level: int) -> int | None:
    """Get the XP threshold of the next level. Returns None at max level."""
    if current_level >= MAX_LEVEL:
        return None
    return LEVEL_XP[current_level + 1]


def xp_progress(xp: int) -> tuple[int, int]:
    """Get (xp_into_level, xp_span_of_level) for progress bar display.

    Returns:
        (0, 0) at max level.
    """
    level = level_from_xp(xp)
    if level >= MAX_LEVEL:
        return (0, 0)
    current_threshold = LEVEL_XP[level]
    next_threshold = LEVEL_XP[level + 1]
    return (xp - current_threshold, next_threshold - current_threshold)


# =============================================================================
# Unlock Gating
# =============================================================================


def is_unlocked(unlock_level: int, current_level: int) -> bool:
    return unlock_level <= current_level


def unlocked_item_ids(level: int) -> list[ItemId]:
    """Catalog items available at a level, in catalog order."""
    return [item.id for item in ITEMS.values() if is_unlocked(item.unlock_level, level)]


def unlocked_recipes(level: int) -> list[RecipeDef]:
    return [recipe for recipe in RECIPES if is_unlocked(recipe.unlock_level, level)]


def unlocked_events(level: int) -> list[EventDef]:
    return [event for event in GAME_EVENTS if is_unlocked(event.unlock_level, level)]


__all__ = [
    "LEVEL_XP",
    "MAX_LEVEL",
    "level_from_xp",
    "xp_for_next_level",
    "xp_progress",
    "is_unlocked",
    "unlocked_item_ids",
    "unlocked_recipes",
    "unlocked_events",
]
