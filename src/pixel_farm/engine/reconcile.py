"""Offline reconciliation.

Run once on load, before the loaded state goes live. It reports what
happened while the game was closed; it never harvests anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pixel_farm.core.constants import OFFLINE_NOTICE_SECONDS
from pixel_farm.core.logging import get_logger
from pixel_farm.engine.chance import Chance
from pixel_farm.engine.modifiers import ready_at
from pixel_farm.engine.weather import next_weather
from pixel_farm.models.game_state import GameState


logger = get_logger(__name__)


@dataclass(frozen=True)
class OfflineReport:
    """Summary of the time spent away.

    Attributes:
        messages: Human-readable notices, in display order.
        ready_count: Crops whose growth completed while away.
        elapsed_seconds: Time between the last save and the load.
    """

    messages: list[str] = field(default_factory=list)
    ready_count: int = 0
    elapsed_seconds: float = 0.0


def count_grown_since(state: GameState, since: float, now: float) -> int:
    """Count root crops whose growth finished in the window (since, now]."""
    effect = state.active_effect
    grown = 0
    for plot in state.plots:
        finish = ready_at(plot, effect)
        if finish is not None and since < finish <= now:
            grown += 1
    return grown


def reconcile(state: GameState, now: float, chance: Chance) -> tuple[GameState, OfflineReport]:
    """Bring a freshly loaded state up to ``now``.

    Args:
        state: The loaded state. Not modified.
        now: Current timestamp.
        chance: Random source for the weather re-roll.

    Returns:
        The reconciled state and a report of what happened while away.
    """
    reconciled = state.model_copy(deep=True)
    elapsed = max(0.0, now - state.last_save_time)
    grown = count_grown_since(state, state.last_save_time, now)

    messages: list[str] = []
    if grown > 0:
        messages.append(f"{grown} crops finished growing while you were away!")
    if elapsed > OFFLINE_NOTICE_SECONDS:
        messages.append(f"You were away for {elapsed / 60:.0f} minutes.")

    if now > reconciled.weather_end_time:
        roll = next_weather(chance)
        reconciled.weather = roll.weather
        reconciled.weather_end_time = now + roll.duration_seconds

    reconciled.last_save_time = now

    logger.info(
        "Offline time reconciled",
        elapsed_seconds=round(elapsed, 1),
        crops_grown=grown,
        weather=reconciled.weather,
    )
    return reconciled, OfflineReport(messages=messages, ready_count=grown, elapsed_seconds=elapsed)


__all__ = [
    "OfflineReport",
    "count_grown_since",
    "reconcile",
]
