"""Game state models for the Pixel Farm simulation core.

GameState is the single root aggregate. It is owned by one writer (the
FarmEngine), mutated only through engine intents and ticks, and serialized
wholesale on save. Field aliases are camelCase so snapshots keep the key
names used by existing save files.

Models:
    Plot: One cell of the farm grid.
    OrderLine: One (item, count) requirement of a market order.
    Order: A timed market order.
    ActiveEvent: A running timed challenge.
    GameState: The root aggregate.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel

from pixel_farm.core.constants import (
    INITIAL_GAME_HOUR,
    MAX_EXPANSION_LEVEL,
    MAX_TIER,
    STARTING_MONEY,
)
from pixel_farm.models.catalog import MASCOTS
from pixel_farm.models.enums import ItemId, MascotEffect, MascotId, WeatherType
from pixel_farm.models.progression import level_from_xp, unlocked_item_ids


def _default_inventory() -> dict[ItemId, int]:
    return {ItemId.WHEAT: 5}


# =============================================================================
# Plot
# =============================================================================


class Plot(BaseModel):
    """One cell of the farm grid.

    A plot is always in exactly one of three states:

    - empty: no crop, ``occupied_by`` is None
    - crop root: ``planted_crop`` set, ``occupied_by`` is None
    - occupied cell: no crop, ``occupied_by`` holds the root's index

    ``occupied_by`` is an index into the plots list, never an object
    reference, and only non-root cells carry it, so chains are at most one
    hop long.

    Attributes:
        id: Row-major grid index; reassigned from position on import.
        planted_crop: Crop growing here if this is a root.
        plant_time: When the root was planted.
        is_withered: Reserved withering flag.
        occupied_by: Root index if this cell is covered by a multi-tile crop.
        tier: Land ring, fixed at grid-build time.
        is_unlocked: Whether the ring is within the current expansion level.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )

    id: Annotated[int, Field(ge=0)] = 0
    planted_crop: ItemId | None = None
    plant_time: float | None = None
    is_withered: bool = False
    occupied_by: Annotated[int, Field(ge=0)] | None = None
    tier: Annotated[int, Field(ge=0, le=MAX_TIER)] = 0
    is_unlocked: bool = True

    @property
    def is_root(self) -> bool:
        return self.planted_crop is not None and self.occupied_by is None

    @property
    def is_empty(self) -> bool:
        return self.planted_crop is None and self.occupied_by is None


# =============================================================================
# Orders
# =============================================================================


class OrderLine(BaseModel):
    """One (item, count) requirement of an order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    item: ItemId
    count: Annotated[int, Field(ge=1)]


class Order(BaseModel):
    """A timed market order.

    Attributes:
        id: Unique order id.
        items: Requirement lines, one per distinct item.
        reward_money: Base money reward (before mascot bonus).
        reward_xp: Base XP reward (before mascot bonus).
        expires_at: Timestamp after which the order is pruned.
        requester_name: Flavor text.
        requester_quote: Flavor text.
        is_emergency: Shorter deadline, bigger reward.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str = Field(min_length=1)
    items: list[OrderLine]
    reward_money: Annotated[int, Field(ge=0)]
    reward_xp: Annotated[int, Field(ge=0)]
    expires_at: float
    requester_name: str = ""
    requester_quote: str = ""
    is_emergency: bool = False

    def requirements(self) -> dict[ItemId, int]:
        """Lines as an item -> count mapping."""
        totals: dict[ItemId, int] = {}
        for line in self.items:
            totals[line.item] = totals.get(line.item, 0) + line.count
        return totals

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at


# =============================================================================
# Events
# =============================================================================


class ActiveEvent(BaseModel):
    """A running timed challenge.

    Progress only ever increases until the event completes or expires, at
    which point the instance is removed from the game state.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )

    event_id: str = Field(min_length=1)
    start_time: float
    end_time: float
    progress: Annotated[int, Field(ge=0)] = 0

    @model_validator(mode="after")
    def validate_window(self) -> "ActiveEvent":
        if self.end_time < self.start_time:
            raise ValueError("event end_time precedes start_time")
        return self


# =============================================================================
# Game State
# =============================================================================


class GameState(BaseModel):
    """The root aggregate of a farm.

    ``level`` and ``unlocked_items`` are computed from ``xp`` on every read
    and cannot be set independently.

    Attributes:
        money: Spendable currency.
        xp: Experience points; never decreases during a session.
        inventory: Item id to non-negative count.
        plots: The full grid, row-major.
        orders: Open market orders.
        owned_mascots: Mascots bought so far.
        active_mascot: The one mascot whose buff applies.
        weather: Current cosmetic weather.
        weather_end_time: When the weather is re-rolled.
        game_time: Hour of the in-game day, in [0, 24).
        expansion_level: How many land rings are unlocked beyond the centre.
        active_event: Running challenge, if any.
        last_save_time: Timestamp of the last save.
        forest_texture: Cosmetic background reference; never read by gameplay.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        validate_assignment=True,
    )

    money: Annotated[int, Field(ge=0)] = STARTING_MONEY
    xp: Annotated[int, Field(ge=0)] = 0
    inventory: dict[ItemId, Annotated[int, Field(ge=0)]] = Field(default_factory=_default_inventory)
    plots: list[Plot] = Field(default_factory=list)
    orders: list[Order] = Field(default_factory=list)
    owned_mascots: list[MascotId] = Field(default_factory=list)
    active_mascot: MascotId | None = None
    weather: WeatherType = WeatherType.SUNNY
    weather_end_time: float = 0.0
    game_time: Annotated[float, Field(ge=0, lt=24)] = INITIAL_GAME_HOUR
    expansion_level: Annotated[int, Field(ge=0, le=MAX_EXPANSION_LEVEL)] = 0
    active_event: ActiveEvent | None = None
    last_save_time: float = 0.0
    forest_texture: str | None = None

    @computed_field(description="Level derived from xp")
    @property
    def level(self) -> int:
        return level_from_xp(self.xp)

    @computed_field(alias="unlockedItems", description="Catalog items available at the current level")
    @property
    def unlocked_items(self) -> list[ItemId]:
        return unlocked_item_ids(self.level)

    @model_validator(mode="after")
    def validate_active_mascot(self) -> "GameState":
        """The active mascot must be one the player owns."""
        if self.active_mascot is not None and self.active_mascot not in self.owned_mascots:
            raise ValueError(f"active mascot {self.active_mascot} is not owned")
        return self

    @property
    def active_effect(self) -> MascotEffect | None:
        """Buff of the active mascot, if any."""
        if self.active_mascot is None:
            return None
        return MASCOTS[self.active_mascot].effect

    def count(self, item_id: ItemId) -> int:
        return self.inventory.get(item_id, 0)

    def get_order(self, order_id: str) -> Order | None:
        for order in self.orders:
            if order.id == order_id:
                return order
        return None


__all__ = [
    "Plot",
    "OrderLine",
    "Order",
    "ActiveEvent",
    "GameState",
]
