"""Simulation engine for Pixel Farm.

This module provides the state-update core: the grid and occupancy model,
the modifier resolver, order and event generation, weather and clock, offline
reconciliation, and the FarmEngine that ties them together behind atomic
intents.

Submodules:
    chance: Seedable random source
    grid: Plot geometry, tiers and multi-tile placement
    modifiers: Mascot buffs and land-tier yield
    orders: Procedural market orders
    events: Timed challenge events
    weather: Cosmetic weather and day clock
    reconcile: Offline reconciliation on load
    farm: FarmEngine, the single writer of the game state
    loop: Asyncio actor serializing intents and ticks

Example:
    >>> from pixel_farm.engine import FarmEngine, FarmLoop
    >>>
    >>> engine = FarmEngine()
    >>> engine.plant(114, "WHEAT")
    >>> async with FarmLoop(engine) as loop:
    ...     await loop.submit(engine.harvest_all)
"""

from __future__ import annotations

# =============================================================================
# Randomness
# =============================================================================
from pixel_farm.engine.chance import Chance

# =============================================================================
# Grid and Modifiers
# =============================================================================
from pixel_farm.engine.grid import (
    build_plots,
    can_place,
    clear,
    footprint,
    occupancy_violations,
    place,
    placement_error,
    refresh_unlocks,
    resolve_root,
    tier_of,
)
from pixel_farm.engine.modifiers import (
    adjusted_craft_seconds,
    adjusted_growth_seconds,
    adjusted_order_money,
    adjusted_xp,
    harvest_yield,
    ready_at,
    stochastic_round,
    tier_yield_multiplier,
)

# =============================================================================
# Orders, Events, Weather
# =============================================================================
from pixel_farm.engine.events import pick_event, start_event
from pixel_farm.engine.orders import generate_order, order_rewards, prune_expired, total_sell_value
from pixel_farm.engine.weather import WeatherRoll, advance_clock, is_daytime, next_weather

# =============================================================================
# Engine
# =============================================================================
from pixel_farm.engine.reconcile import OfflineReport, reconcile
from pixel_farm.engine.farm import (
    CraftResult,
    FarmEngine,
    HarvestResult,
    HarvestSummary,
    Notification,
    OrderResult,
    new_game_state,
)
from pixel_farm.engine.loop import FarmLoop


__all__ = [
    # Randomness
    "Chance",
    # Grid
    "tier_of",
    "build_plots",
    "refresh_unlocks",
    "footprint",
    "placement_error",
    "can_place",
    "place",
    "clear",
    "resolve_root",
    "occupancy_violations",
    # Modifiers
    "adjusted_growth_seconds",
    "adjusted_craft_seconds",
    "adjusted_xp",
    "adjusted_order_money",
    "ready_at",
    "tier_yield_multiplier",
    "stochastic_round",
    "harvest_yield",
    # Orders and events
    "generate_order",
    "order_rewards",
    "total_sell_value",
    "prune_expired",
    "pick_event",
    "start_event",
    # Weather
    "WeatherRoll",
    "next_weather",
    "advance_clock",
    "is_daytime",
    # Engine
    "OfflineReport",
    "reconcile",
    "Notification",
    "HarvestResult",
    "HarvestSummary",
    "CraftResult",
    "OrderResult",
    "new_game_state",
    "FarmEngine",
    "FarmLoop",
]
