"""Ambient weather and day clock.

Purely cosmetic state: nothing in the modifier resolver reads weather or
the hour of the day.
"""

from __future__ import annotations

from dataclasses import dataclass

from pixel_farm.core.constants import (
    DAYTIME_END_HOUR,
    DAYTIME_START_HOUR,
    HOURS_PER_DAY,
    WEATHER_MAX_MINUTES,
    WEATHER_MIN_MINUTES,
)
from pixel_farm.engine.chance import Chance
from pixel_farm.models.enums import WeatherType


WEATHER_WEIGHTS: dict[WeatherType, float] = {
    WeatherType.SUNNY: 0.40,
    WeatherType.CLOUDY: 0.20,
    WeatherType.WINDY: 0.15,
    WeatherType.RAINY: 0.15,
    WeatherType.SNOWY: 0.10,
}


@dataclass(frozen=True)
class WeatherRoll:
    """A freshly rolled weather state.

    Attributes:
        weather: The new weather.
        duration_seconds: How long it lasts.
    """

    weather: WeatherType
    duration_seconds: float


def next_weather(chance: Chance) -> WeatherRoll:
    """Roll the next weather and its duration (whole minutes in [2, 5])."""
    weather = chance.weighted(list(WEATHER_WEIGHTS), list(WEATHER_WEIGHTS.values()))
    minutes = chance.randint(WEATHER_MIN_MINUTES, WEATHER_MAX_MINUTES)
    return WeatherRoll(weather=weather, duration_seconds=minutes * 60.0)


def advance_clock(hour: float, increment: float) -> float:
    """Advance the game hour, wrapping at midnight."""
    return (hour + increment) % HOURS_PER_DAY


def is_daytime(hour: float) -> bool:
    return DAYTIME_START_HOUR <= hour < DAYTIME_END_HOUR


__all__ = [
    "WEATHER_WEIGHTS",
    "WeatherRoll",
    "next_weather",
    "advance_clock",
    "is_daytime",
]
