"""Modifier resolver: mascot buffs and land-tier yield.

Exactly one mascot is active at a time, so at most one mascot multiplier
applies to any action. The land-tier yield multiplier is independent and
always applies. Weather never enters these calculations.
"""

from __future__ import annotations

import math

from pixel_farm.core.constants import (
    CRAFT_SPEED_FACTOR,
    LUCKY_DOUBLE_CHANCE,
    MONEY_BOOST_FACTOR,
    SPEED_ADVANCED_FACTOR,
    SPEED_ADVANCED_MIN_LEVEL,
    SPEED_BASIC_FACTOR,
    SPEED_BASIC_MAX_LEVEL,
    TIER_YIELD_STEP,
    XP_BOOST_FACTOR,
)
from pixel_farm.engine.chance import Chance
from pixel_farm.models.catalog import ITEMS, ItemDef, RecipeDef
from pixel_farm.models.enums import MascotEffect
from pixel_farm.models.game_state import Plot


def adjusted_growth_seconds(item: ItemDef, effect: MascotEffect | None) -> float:
    """Growth time of a crop under the active mascot."""
    seconds = item.growth_seconds
    if effect == MascotEffect.SPEED_BASIC and item.unlock_level <= SPEED_BASIC_MAX_LEVEL:
        seconds *= SPEED_BASIC_FACTOR
    elif effect == MascotEffect.SPEED_ADVANCED and item.unlock_level >= SPEED_ADVANCED_MIN_LEVEL:
        seconds *= SPEED_ADVANCED_FACTOR
    return seconds


def ready_at(plot: Plot, effect: MascotEffect | None) -> float | None:
    """Timestamp at which a root plot's crop finishes growing.

    None for plots that are not crop roots. Readiness is never stored; a
    crop is ready whenever ``now >= ready_at``.
    """
    if not plot.is_root or plot.plant_time is None:
        return None
    return plot.plant_time + adjusted_growth_seconds(ITEMS[plot.planted_crop], effect)


def adjusted_craft_seconds(recipe: RecipeDef, effect: MascotEffect | None) -> float:
    if effect == MascotEffect.CRAFT_SPEED:
        return recipe.craft_seconds * CRAFT_SPEED_FACTOR
    return recipe.craft_seconds


def adjusted_xp(base_xp: int, effect: MascotEffect | None) -> int:
    """XP after the xp-boost buff (x1.2, rounded up)."""
    if effect == MascotEffect.XP_BOOST:
        return math.ceil(base_xp * XP_BOOST_FACTOR)
    return base_xp


def adjusted_order_money(base_money: int, effect: MascotEffect | None) -> int:
    """Order money after the money-boost buff (x1.2, rounded up).

    Only order rewards go through here; sales and event rewards do not.
    """
    if effect == MascotEffect.MONEY_BOOST:
        return math.ceil(base_money * MONEY_BOOST_FACTOR)
    return base_money


def tier_yield_multiplier(tier: int) -> float:
    """1.0 at the centre, +0.2 per ring outward."""
    return 1 + tier * TIER_YIELD_STEP


def stochastic_round(value: float, chance: Chance) -> int:
    """Round down, then add one with probability equal to the fractional part.

    The expected result equals ``value``: 1.4 gives 1 sixty percent of the
    time and 2 forty percent of the time.
    """
    whole = math.floor(value)
    fraction = value - whole
    return whole + (1 if chance.random() < fraction else 0)


def harvest_yield(tier: int, effect: MascotEffect | None, chance: Chance) -> int:
    """Units gained from harvesting one crop.

    The tier multiplier is rounded stochastically first; the lucky-yield
    buff then doubles that already-rounded count with its own roll.
    """
    units = stochastic_round(tier_yield_multiplier(tier), chance)
    if effect == MascotEffect.LUCKY_YIELD and chance.roll(LUCKY_DOUBLE_CHANCE):
        units *= 2
    return units


__all__ = [
    "adjusted_growth_seconds",
    "ready_at",
    "adjusted_craft_seconds",
    "adjusted_xp",
    "adjusted_order_money",
    "tier_yield_multiplier",
    "stochastic_round",
    "harvest_yield",
]
