"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Pixel Farm test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest


if TYPE_CHECKING:
    from collections.abc import Generator

    from pixel_farm.core.config import Settings
    from pixel_farm.engine.chance import Chance
    from pixel_farm.engine.farm import FarmEngine, Notification


# Row 6, column 6: inside the always-unlocked centre ring.
CENTRE_INDEX = 6 * 18 + 6

START_TIME = 1_700_000_000.0


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from pixel_farm.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "PIXEL_FARM_DEBUG": "true",
        "PIXEL_FARM_LOG_LEVEL": "DEBUG",
        "PIXEL_FARM_SIM_SEED": "7",
        "PIXEL_FARM_SIM_MAX_OPEN_ORDERS": "5",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    from pixel_farm.core.config import Settings, SimulationSettings, StorageSettings

    return Settings(
        _env_file=None,
        simulation=SimulationSettings(_env_file=None),
        storage=StorageSettings(_env_file=None),
    )


# =============================================================================
# Engine Fixtures
# =============================================================================


class FakeClock:
    """Manually advanced timestamp source."""

    def __init__(self, now: float = START_TIME) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    """Provide a clock frozen at START_TIME."""
    return FakeClock()


@pytest.fixture
def chance() -> Chance:
    """Provide a seeded random source for reproducible tests."""
    from pixel_farm.engine.chance import Chance

    return Chance(seed=42)


@pytest.fixture
def engine(settings: Settings, chance: Chance, clock: FakeClock) -> FarmEngine:
    """Provide a fresh-game engine driven by the fake clock."""
    from pixel_farm.engine.farm import FarmEngine

    return FarmEngine(settings=settings, chance=chance, clock=clock)


@pytest.fixture
def rich_engine(settings: Settings, chance: Chance, clock: FakeClock) -> FarmEngine:
    """Provide an engine with plenty of money and a level-10 player."""
    from pixel_farm.engine.farm import FarmEngine, new_game_state
    from pixel_farm.models.progression import LEVEL_XP

    state = new_game_state(clock())
    state.money = 1_000_000
    state.xp = LEVEL_XP[10]
    return FarmEngine(state, settings=settings, chance=chance, clock=clock)


@pytest.fixture
def notifications(engine: FarmEngine) -> list[Notification]:
    """Collect every notification the engine fixture emits."""
    received: list[Notification] = []
    engine.subscribe(received.append)
    return received
