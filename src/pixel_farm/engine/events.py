"""Timed challenge events.

At most one event runs at a time. Harvests of the target item push its
progress forward; reaching the target completes it, passing the end time
fails it. Progress is keyed by item id, never by display name.
"""

from __future__ import annotations

from pixel_farm.core.logging import get_logger
from pixel_farm.engine.chance import Chance
from pixel_farm.models.catalog import EventDef, get_event
from pixel_farm.models.enums import ItemId
from pixel_farm.models.game_state import ActiveEvent
from pixel_farm.models.progression import unlocked_events


logger = get_logger(__name__)


def pick_event(level: int, chance: Chance) -> EventDef | None:
    """Uniformly choose an event unlocked at ``level``, or None if none are."""
    candidates = unlocked_events(level)
    if not candidates:
        return None
    return chance.choice(candidates)


def start_event(definition: EventDef, now: float) -> ActiveEvent:
    return ActiveEvent(
        event_id=definition.id,
        start_time=now,
        end_time=now + definition.duration_seconds,
        progress=0,
    )


def record_progress(active: ActiveEvent, item_id: ItemId, amount: int) -> int:
    """Add harvested units of the event's target item to its progress.

    Returns:
        Units counted (0 when the item is not the target).
    """
    definition = get_event(active.event_id)
    if item_id != definition.target_item or amount <= 0:
        return 0
    active.progress += amount
    return amount


def is_complete(active: ActiveEvent) -> bool:
    return active.progress >= get_event(active.event_id).target_amount


def is_expired(active: ActiveEvent, now: float) -> bool:
    return now > active.end_time


__all__ = [
    "pick_event",
    "start_event",
    "record_progress",
    "is_complete",
    "is_expired",
]
