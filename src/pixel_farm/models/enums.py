"""Enumeration types for the Pixel Farm simulation core.

String-valued enums so that ids serialize to the same literals the
existing save files use.
"""

from __future__ import annotations

from enum import StrEnum


class ItemKind(StrEnum):
    """Whether an item is grown on a plot or crafted."""

    CROP = "CROP"
    PRODUCT = "PRODUCT"


class ItemId(StrEnum):
    """Every item in the catalog."""

    # Level 1-5
    WHEAT = "WHEAT"
    LETTUCE = "LETTUCE"
    CORN = "CORN"
    CARROT = "CARROT"
    TOMATO = "TOMATO"
    POTATO = "POTATO"

    # Level 6-10, some multi-tile
    SUNFLOWER = "SUNFLOWER"
    SUGARCANE = "SUGARCANE"
    EGGPLANT = "EGGPLANT"
    PUMPKIN = "PUMPKIN"
    MELON = "MELON"
    CHILI = "CHILI"

    # Level 11-15
    STRAWBERRY = "STRAWBERRY"
    BLUEBERRY = "BLUEBERRY"
    GRAPE = "GRAPE"
    PINEAPPLE = "PINEAPPLE"
    CAULIFLOWER = "CAULIFLOWER"

    # Level 16-20
    ANCIENT_FRUIT = "ANCIENT_FRUIT"
    STARFRUIT = "STARFRUIT"
    GEM_BERRY = "GEM_BERRY"
    GIANT_MUSHROOM = "GIANT_MUSHROOM"
    SPIRIT_TREE = "SPIRIT_TREE"

    # Products
    BREAD = "BREAD"
    SALAD = "SALAD"
    POPCORN = "POPCORN"
    POTATO_CHIPS = "POTATO_CHIPS"
    TOMATO_SOUP = "TOMATO_SOUP"
    SUGAR = "SUGAR"
    CARROT_CAKE = "CARROT_CAKE"
    PIE = "PIE"
    JAM = "JAM"
    WINE = "WINE"
    SPICY_STEW = "SPICY_STEW"
    FRUIT_SALAD = "FRUIT_SALAD"
    JUICE = "JUICE"
    PIZZA = "PIZZA"
    MAGIC_ELIXIR = "MAGIC_ELIXIR"


class MascotId(StrEnum):
    """Companion animals the player can buy."""

    CHICKEN = "CHICKEN"
    COW = "COW"
    SHEEP = "SHEEP"
    PIG = "PIG"
    DOG = "DOG"
    OWL = "OWL"


class MascotEffect(StrEnum):
    """The single buff category a mascot grants while active."""

    SPEED_BASIC = "speed-basic"
    """Crops unlocked at level 5 or below grow 25% faster."""

    LUCKY_YIELD = "lucky-yield"
    """15% chance to double a harvest's yield."""

    CRAFT_SPEED = "craft-speed"
    """Crafting takes 20% less time."""

    XP_BOOST = "xp-boost"
    """All XP gains x1.2, rounded up."""

    MONEY_BOOST = "money-boost"
    """Order money rewards x1.2, rounded up."""

    SPEED_ADVANCED = "speed-advanced"
    """Crops unlocked at level 10 or above grow 20% faster."""


class WeatherType(StrEnum):
    """Ambient weather states. Cosmetic only."""

    SUNNY = "SUNNY"
    CLOUDY = "CLOUDY"
    WINDY = "WINDY"
    RAINY = "RAINY"
    SNOWY = "SNOWY"


class NotificationKind(StrEnum):
    """Categories of human-readable notifications pushed to subscribers."""

    LEVEL_UP = "level_up"
    HARVEST = "harvest"
    CRAFT = "craft"
    SALE = "sale"
    ORDER_NEW = "order_new"
    ORDER_COMPLETE = "order_complete"
    ORDER_EXPIRED = "order_expired"
    EVENT_START = "event_start"
    EVENT_COMPLETE = "event_complete"
    EVENT_FAILED = "event_failed"
    EXPANSION = "expansion"
    MASCOT = "mascot"
    WEATHER = "weather"
    OFFLINE = "offline"
    ERROR = "error"


__all__ = [
    "ItemKind",
    "ItemId",
    "MascotId",
    "MascotEffect",
    "WeatherType",
    "NotificationKind",
]
