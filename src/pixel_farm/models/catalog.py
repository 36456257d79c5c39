"""Static catalog of items, recipes, mascots and timed events.

Everything in this module is immutable reference data. Gameplay code looks
definitions up by id and never mutates them.

Models:
    ItemDef: A crop or crafted product.
    RecipeDef: A crafting recipe with multiset inputs.
    MascotDef: A purchasable companion with one buff.
    EventDef: A timed harvest challenge.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from pixel_farm.core.exceptions import (
    UnknownEntityError,
    UnknownItemError,
    UnknownMascotError,
    UnknownRecipeError,
)
from pixel_farm.models.enums import ItemId, ItemKind, MascotEffect, MascotId


# =============================================================================
# Definitions
# =============================================================================


class ItemDef(BaseModel):
    """A crop or product definition.

    Attributes:
        id: Catalog id.
        name: Display name.
        kind: CROP or PRODUCT.
        sell_price: Money received per unit sold.
        unlock_level: Player level at which the item becomes available.
        description: Flavor text.
        seed_cost: Money debited when planting (crops only).
        growth_seconds: Base growth duration (crops only).
        xp_reward: XP granted per harvest (crops only).
        width: Footprint width in plots.
        height: Footprint height in plots.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: ItemId
    name: str = Field(min_length=1)
    kind: ItemKind
    sell_price: Annotated[int, Field(ge=0)]
    unlock_level: Annotated[int, Field(ge=1, le=20)]
    description: str = ""
    seed_cost: Annotated[int, Field(ge=0)] = 0
    growth_seconds: Annotated[float, Field(ge=0)] = 0.0
    xp_reward: Annotated[int, Field(ge=0)] = 0
    width: Annotated[int, Field(ge=1)] = 1
    height: Annotated[int, Field(ge=1)] = 1

    @computed_field(description="Whether the item can be planted")
    @property
    def is_crop(self) -> bool:
        return self.kind == ItemKind.CROP


class IngredientLine(BaseModel):
    """One (item, count) requirement."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    item: ItemId
    count: Annotated[int, Field(ge=1)]


class RecipeDef(BaseModel):
    """A crafting recipe.

    Inputs use multiset semantics: each item appears on at most one line,
    and a definition that lists an item twice is folded into one line with
    the summed count.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    output: ItemId
    inputs: tuple[IngredientLine, ...]
    unlock_level: Annotated[int, Field(ge=1, le=20)]
    craft_seconds: Annotated[float, Field(ge=0)]
    xp_reward: Annotated[int, Field(ge=0)]

    @field_validator("inputs", mode="after")
    @classmethod
    def aggregate_inputs(cls, value: tuple[IngredientLine, ...]) -> tuple[IngredientLine, ...]:
        """Fold repeated items into a single line, keeping first-seen order."""
        totals: dict[ItemId, int] = {}
        for line in value:
            totals[line.item] = totals.get(line.item, 0) + line.count
        return tuple(IngredientLine(item=item, count=count) for item, count in totals.items())

    def requirements(self) -> dict[ItemId, int]:
        """Inputs as an item -> count mapping."""
        return {line.item: line.count for line in self.inputs}


class MascotDef(BaseModel):
    """A purchasable companion granting one categorical buff."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: MascotId
    name: str
    description: str
    price: Annotated[int, Field(ge=0)]
    effect: MascotEffect


class EventDef(BaseModel):
    """A timed challenge: harvest a target amount of one crop before it ends."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    title: str
    description: str
    target_item: ItemId
    target_amount: Annotated[int, Field(ge=1)]
    duration_seconds: Annotated[float, Field(gt=0)]
    unlock_level: Annotated[int, Field(ge=1, le=20)]
    reward_money: Annotated[int, Field(ge=0)]
    reward_xp: Annotated[int, Field(ge=0)]


# =============================================================================
# Data Tables
# =============================================================================


def _crop(
    item_id: ItemId,
    name: str,
    price: int,
    seed: int,
    seconds: float,
    xp: int,
    level: int,
    width: int = 1,
    height: int = 1,
    description: str = "",
) -> ItemDef:
    return ItemDef(
        id=item_id,
        name=name,
        kind=ItemKind.CROP,
        sell_price=price,
        seed_cost=seed,
        growth_seconds=seconds,
        xp_reward=xp,
        unlock_level=level,
        width=width,
        height=height,
        description=description or f"Grows in {seconds:g}s",
    )


def _product(item_id: ItemId, name: str, price: int, level: int, description: str) -> ItemDef:
    return ItemDef(
        id=item_id,
        name=name,
        kind=ItemKind.PRODUCT,
        sell_price=price,
        unlock_level=level,
        description=description,
    )


_ITEM_LIST: list[ItemDef] = [
    # Level 1-5
    _crop(ItemId.WHEAT, "Wheat", 3, 1, 5, 2, 1, description="Basic grain"),
    _crop(ItemId.LETTUCE, "Lettuce", 6, 2, 10, 4, 1, description="Crispy green"),
    _crop(ItemId.CORN, "Corn", 10, 5, 20, 6, 2, description="Sweet yellow corn"),
    _crop(ItemId.CARROT, "Carrot", 15, 7, 30, 8, 3, description="Good for eyes"),
    _crop(ItemId.TOMATO, "Tomato", 20, 10, 45, 10, 4, description="Red and juicy"),
    _crop(ItemId.POTATO, "Potato", 25, 12, 60, 12, 5, description="Boil em, mash em"),
    # Level 6-10
    _crop(ItemId.SUNFLOWER, "Sunflower", 45, 20, 90, 20, 6, 1, 2, "Tall beauty (1x2)"),
    _crop(ItemId.SUGARCANE, "Sugarcane", 35, 15, 75, 15, 6, description="Sweet stalks"),
    _crop(ItemId.EGGPLANT, "Eggplant", 50, 25, 120, 25, 7, description="Purple veg"),
    _crop(ItemId.PUMPKIN, "Pumpkin", 80, 40, 180, 40, 8, 2, 2, "Huge gourd (2x2)"),
    _crop(ItemId.MELON, "Melon", 100, 50, 240, 50, 9, 2, 2, "Sweet summer treat (2x2)"),
    _crop(ItemId.CHILI, "Chili Pepper", 60, 30, 150, 30, 10, description="Spicy!"),
    # Level 11-15
    _crop(ItemId.STRAWBERRY, "Strawberry", 70, 35, 160, 35, 11, description="Red berries"),
    _crop(ItemId.BLUEBERRY, "Blueberry", 75, 38, 170, 38, 12, description="Blue berries"),
    _crop(ItemId.GRAPE, "Grape Vine", 90, 45, 200, 45, 13, 1, 2, "Vineyard staple (1x2)"),
    _crop(ItemId.PINEAPPLE, "Pineapple", 120, 60, 300, 60, 14, description="Tropical"),
    _crop(ItemId.CAULIFLOWER, "Cauliflower", 150, 75, 360, 80, 15, 2, 2, "Pale giant (2x2)"),
    # Level 16-20
    _crop(ItemId.ANCIENT_FRUIT, "Ancient Fruit", 300, 150, 600, 150, 16, description="Mysterious glow"),
    _crop(ItemId.STARFRUIT, "Starfruit", 400, 200, 900, 200, 17, description="Celestial taste"),
    _crop(ItemId.GEM_BERRY, "Gem Berry", 600, 300, 1200, 300, 18, description="Worth a fortune"),
    _crop(ItemId.GIANT_MUSHROOM, "Giant Shroom", 800, 400, 1800, 500, 19, 2, 2, "Fungus among us (2x2)"),
    _crop(ItemId.SPIRIT_TREE, "Spirit Tree", 2000, 1000, 3600, 1000, 20, 2, 3, "Legendary Tree (2x3)"),
    # Products
    _product(ItemId.BREAD, "Bread", 15, 2, "Baked wheat"),
    _product(ItemId.SALAD, "Green Salad", 35, 3, "Healthy mix"),
    _product(ItemId.POPCORN, "Popcorn", 25, 4, "Movie snack"),
    _product(ItemId.POTATO_CHIPS, "Potato Chips", 60, 5, "Crispy snack"),
    _product(ItemId.TOMATO_SOUP, "Tomato Soup", 70, 6, "Warm soup"),
    _product(ItemId.SUGAR, "Sugar", 80, 7, "Refined cane"),
    _product(ItemId.CARROT_CAKE, "Carrot Cake", 120, 8, "Sweet dessert"),
    _product(ItemId.PIE, "Pumpkin Pie", 250, 9, "Thanksgiving staple"),
    _product(ItemId.JAM, "Berry Jam", 180, 12, "Sticky sweet"),
    _product(ItemId.WINE, "Fine Wine", 300, 14, "Aged to perfection"),
    _product(ItemId.SPICY_STEW, "Spicy Stew", 220, 11, "Hot hot hot"),
    _product(ItemId.FRUIT_SALAD, "Fruit Salad", 400, 15, "Tropical mix"),
    _product(ItemId.JUICE, "Mega Juice", 500, 16, "Energy drink"),
    _product(ItemId.PIZZA, "Veggie Pizza", 600, 13, "Everyone loves it"),
    _product(ItemId.MAGIC_ELIXIR, "Magic Elixir", 5000, 20, "Pure energy"),
]

ITEMS: dict[ItemId, ItemDef] = {item.id: item for item in _ITEM_LIST}


def _recipe(
    recipe_id: str,
    output: ItemId,
    inputs: list[tuple[ItemId, int]],
    level: int,
    seconds: float,
    xp: int,
) -> RecipeDef:
    return RecipeDef(
        id=recipe_id,
        output=output,
        inputs=tuple(IngredientLine(item=item, count=count) for item, count in inputs),
        unlock_level=level,
        craft_seconds=seconds,
        xp_reward=xp,
    )


RECIPES: tuple[RecipeDef, ...] = (
    _recipe("r_bread", ItemId.BREAD, [(ItemId.WHEAT, 3)], 2, 2, 5),
    _recipe("r_salad", ItemId.SALAD, [(ItemId.LETTUCE, 2), (ItemId.TOMATO, 1)], 3, 3, 10),
    _recipe("r_popcorn", ItemId.POPCORN, [(ItemId.CORN, 2)], 4, 2, 8),
    _recipe("r_chips", ItemId.POTATO_CHIPS, [(ItemId.POTATO, 2)], 5, 4, 15),
    _recipe("r_soup", ItemId.TOMATO_SOUP, [(ItemId.TOMATO, 3)], 6, 5, 20),
    _recipe("r_sugar", ItemId.SUGAR, [(ItemId.SUGARCANE, 2)], 7, 3, 15),
    _recipe(
        "r_cake",
        ItemId.CARROT_CAKE,
        [(ItemId.CARROT, 2), (ItemId.WHEAT, 2), (ItemId.SUGAR, 1)],
        8, 8, 30,
    ),
    _recipe(
        "r_pie",
        ItemId.PIE,
        [(ItemId.PUMPKIN, 1), (ItemId.WHEAT, 2), (ItemId.SUGAR, 1)],
        9, 10, 50,
    ),
    _recipe(
        "r_stew",
        ItemId.SPICY_STEW,
        [(ItemId.CHILI, 2), (ItemId.TOMATO, 2), (ItemId.POTATO, 2)],
        11, 12, 60,
    ),
    _recipe(
        "r_jam",
        ItemId.JAM,
        [(ItemId.STRAWBERRY, 2), (ItemId.BLUEBERRY, 2), (ItemId.SUGAR, 1)],
        12, 8, 40,
    ),
    _recipe(
        "r_pizza",
        ItemId.PIZZA,
        [(ItemId.WHEAT, 4), (ItemId.TOMATO, 2), (ItemId.LETTUCE, 1)],
        13, 15, 80,
    ),
    _recipe("r_wine", ItemId.WINE, [(ItemId.GRAPE, 3), (ItemId.SUGAR, 1)], 14, 20, 100),
    _recipe(
        "r_fruit_salad",
        ItemId.FRUIT_SALAD,
        [(ItemId.PINEAPPLE, 1), (ItemId.MELON, 1), (ItemId.STRAWBERRY, 2)],
        15, 10, 90,
    ),
    _recipe("r_juice", ItemId.JUICE, [(ItemId.STARFRUIT, 1), (ItemId.ANCIENT_FRUIT, 1)], 18, 15, 150),
    _recipe(
        "r_elixir",
        ItemId.MAGIC_ELIXIR,
        [(ItemId.GEM_BERRY, 1), (ItemId.SPIRIT_TREE, 1), (ItemId.WINE, 1)],
        20, 60, 1000,
    ),
)

_RECIPES_BY_ID: dict[str, RecipeDef] = {recipe.id: recipe for recipe in RECIPES}


MASCOTS: dict[MascotId, MascotDef] = {
    MascotId.CHICKEN: MascotDef(
        id=MascotId.CHICKEN,
        name="Speedy Chicken",
        description="Basic crops (Lvl 1-5) grow 25% faster.",
        price=500,
        effect=MascotEffect.SPEED_BASIC,
    ),
    MascotId.COW: MascotDef(
        id=MascotId.COW,
        name="Lucky Cow",
        description="15% chance to harvest double crops.",
        price=1500,
        effect=MascotEffect.LUCKY_YIELD,
    ),
    MascotId.SHEEP: MascotDef(
        id=MascotId.SHEEP,
        name="Crafty Sheep",
        description="Crafting speed increased by 20%.",
        price=3000,
        effect=MascotEffect.CRAFT_SPEED,
    ),
    MascotId.PIG: MascotDef(
        id=MascotId.PIG,
        name="Golden Pig",
        description="Gain 20% more XP from everything.",
        price=5000,
        effect=MascotEffect.XP_BOOST,
    ),
    MascotId.DOG: MascotDef(
        id=MascotId.DOG,
        name="Merchant Dog",
        description="Orders reward 20% more money.",
        price=8000,
        effect=MascotEffect.MONEY_BOOST,
    ),
    MascotId.OWL: MascotDef(
        id=MascotId.OWL,
        name="Wise Owl",
        description="Advanced crops (Lvl 10+) grow 20% faster.",
        price=12000,
        effect=MascotEffect.SPEED_ADVANCED,
    ),
}


GAME_EVENTS: tuple[EventDef, ...] = (
    EventDef(
        id="wheat_shortage",
        title="Wheat Rush",
        description="The Royal Bakery is out of flour! Harvest Wheat quickly!",
        target_item=ItemId.WHEAT,
        target_amount=20,
        duration_seconds=120,
        unlock_level=2,
        reward_money=150,
        reward_xp=100,
    ),
    EventDef(
        id="corn_festival",
        title="Corn Festival",
        description="The village needs supplies for the popcorn stand.",
        target_item=ItemId.CORN,
        target_amount=15,
        duration_seconds=180,
        unlock_level=4,
        reward_money=300,
        reward_xp=150,
    ),
    EventDef(
        id="tomato_war",
        title="Tomato War",
        description="The annual food fight is starting! We need ammo!",
        target_item=ItemId.TOMATO,
        target_amount=30,
        duration_seconds=180,
        unlock_level=6,
        reward_money=800,
        reward_xp=400,
    ),
    EventDef(
        id="pumpkin_carving",
        title="Spooky Season",
        description="The carving contest begins soon. Grow Pumpkins!",
        target_item=ItemId.PUMPKIN,
        target_amount=10,
        duration_seconds=240,
        unlock_level=9,
        reward_money=1200,
        reward_xp=600,
    ),
    EventDef(
        id="berry_smoothie",
        title="Smoothie Craze",
        description="Everyone wants Strawberry smoothies right now!",
        target_item=ItemId.STRAWBERRY,
        target_amount=25,
        duration_seconds=180,
        unlock_level=12,
        reward_money=1500,
        reward_xp=800,
    ),
    EventDef(
        id="ancient_research",
        title="Ancient Research",
        description="The Professor needs Ancient Fruits for science.",
        target_item=ItemId.ANCIENT_FRUIT,
        target_amount=5,
        duration_seconds=300,
        unlock_level=17,
        reward_money=5000,
        reward_xp=2000,
    ),
)

_EVENTS_BY_ID: dict[str, EventDef] = {event.id: event for event in GAME_EVENTS}


# =============================================================================
# Lookups
# =============================================================================


def get_item(item_id: str) -> ItemDef:
    """Look up an item definition.

    Raises:
        UnknownItemError: If the id is not in the catalog.
    """
    try:
        return ITEMS[ItemId(item_id)]
    except (KeyError, ValueError) as exc:
        raise UnknownItemError(f"Unknown item: {item_id}", entity_id=str(item_id)) from exc


def get_recipe(recipe_id: str) -> RecipeDef:
    """Look up a recipe definition.

    Raises:
        UnknownRecipeError: If the id is not in the catalog.
    """
    recipe = _RECIPES_BY_ID.get(recipe_id)
    if recipe is None:
        raise UnknownRecipeError(f"Unknown recipe: {recipe_id}", entity_id=recipe_id)
    return recipe


def get_mascot(mascot_id: str) -> MascotDef:
    """Look up a mascot definition.

    Raises:
        UnknownMascotError: If the id is not in the catalog.
    """
    try:
        return MASCOTS[MascotId(mascot_id)]
    except (KeyError, ValueError) as exc:
        raise UnknownMascotError(f"Unknown mascot: {mascot_id}", entity_id=str(mascot_id)) from exc


def get_event(event_id: str) -> EventDef:
    """Look up an event definition.

    Raises:
        UnknownEntityError: If the id is not in the catalog.
    """
    event = _EVENTS_BY_ID.get(event_id)
    if event is None:
        raise UnknownEntityError(f"Unknown event: {event_id}", entity_id=event_id)
    return event


__all__ = [
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
]
