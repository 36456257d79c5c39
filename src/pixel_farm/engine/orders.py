"""Procedural market order generation.

An order asks for one to three distinct items the player has unlocked and
pays a multiple of their combined sell value. Emergency orders pay more but
expire sooner.
"""

from __future__ import annotations

import math
from uuid import uuid4

from pixel_farm.core.constants import (
    CROP_REQUEST_MAX,
    CROP_REQUEST_MIN,
    EMERGENCY_MONEY_MULTIPLIER,
    EMERGENCY_ORDER_SECONDS,
    EMERGENCY_XP_MULTIPLIER,
    NORMAL_MONEY_MULTIPLIER,
    NORMAL_ORDER_SECONDS,
    NORMAL_XP_MULTIPLIER,
    ORDER_MAX_LINES,
    ORDER_MIN_LINES,
    REQUESTER_NAMES,
    REQUESTER_QUOTES,
)
from pixel_farm.core.logging import get_logger
from pixel_farm.engine.chance import Chance
from pixel_farm.models.catalog import ITEMS
from pixel_farm.models.enums import ItemId, ItemKind
from pixel_farm.models.game_state import Order, OrderLine
from pixel_farm.models.progression import unlocked_item_ids


logger = get_logger(__name__)


def total_sell_value(lines: list[OrderLine]) -> int:
    """Sum of sell price x count over all lines."""
    return sum(ITEMS[line.item].sell_price * line.count for line in lines)


def order_rewards(sell_value: int, *, emergency: bool) -> tuple[int, int]:
    """(money, xp) reward for an order worth ``sell_value``."""
    if emergency:
        money_mult, xp_mult = EMERGENCY_MONEY_MULTIPLIER, EMERGENCY_XP_MULTIPLIER
    else:
        money_mult, xp_mult = NORMAL_MONEY_MULTIPLIER, NORMAL_XP_MULTIPLIER
    return math.floor(sell_value * money_mult), math.floor(sell_value * xp_mult)


def new_order_id(now: float, taken: set[str]) -> str:
    """Order id unique among ``taken`` even for draws in the same millisecond."""
    while True:
        candidate = f"order_{int(now * 1000)}_{uuid4().hex[:12]}"
        if candidate not in taken:
            return candidate


def draw_lines(level: int, chance: Chance) -> list[OrderLine]:
    """Sample requirement lines, folding repeated items into one line."""
    available = unlocked_item_ids(level)
    draws = chance.randint(ORDER_MIN_LINES, ORDER_MAX_LINES)

    counts: dict[ItemId, int] = {}
    for _ in range(draws):
        item_id = chance.choice(available)
        if ITEMS[item_id].kind == ItemKind.PRODUCT:
            count = 1
        else:
            count = chance.randint(CROP_REQUEST_MIN, CROP_REQUEST_MAX)
        counts[item_id] = counts.get(item_id, 0) + count

    return [OrderLine(item=item_id, count=count) for item_id, count in counts.items()]


def generate_order(
    level: int,
    open_orders: list[Order],
    now: float,
    chance: Chance,
    *,
    emergency_chance: float = 0.15,
) -> Order:
    """Synthesize a new market order.

    Args:
        level: Player level; only items unlocked at it are requested.
        open_orders: Currently open orders, used to keep ids unique.
        now: Generation timestamp.
        chance: Random source.
        emergency_chance: Probability the order is an emergency.

    Returns:
        The new order. The caller decides whether to add it.
    """
    lines = draw_lines(level, chance)
    emergency = chance.roll(emergency_chance)
    money, xp = order_rewards(total_sell_value(lines), emergency=emergency)
    duration = EMERGENCY_ORDER_SECONDS if emergency else NORMAL_ORDER_SECONDS

    order = Order(
        id=new_order_id(now, {order.id for order in open_orders}),
        items=lines,
        reward_money=money,
        reward_xp=xp,
        expires_at=now + duration,
        requester_name=chance.choice(REQUESTER_NAMES),
        requester_quote=chance.choice(REQUESTER_QUOTES),
        is_emergency=emergency,
    )
    logger.debug(
        "Order generated",
        order_id=order.id,
        lines=len(lines),
        reward_money=money,
        emergency=emergency,
    )
    return order


def prune_expired(orders: list[Order], now: float) -> tuple[list[Order], list[Order]]:
    """Split orders into (still open, expired)."""
    kept = [order for order in orders if not order.is_expired(now)]
    expired = [order for order in orders if order.is_expired(now)]
    return kept, expired


__all__ = [
    "total_sell_value",
    "order_rewards",
    "new_order_id",
    "draw_lines",
    "generate_order",
    "prune_expired",
]
