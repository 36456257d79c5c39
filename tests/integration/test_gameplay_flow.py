"""Integration tests for gameplay flows.

Tests full plant, harvest, craft and trade cycles through the engine.
"""

from __future__ import annotations

import asyncio

import pytest

from pixel_farm.core.config import Settings, SimulationSettings, StorageSettings
from pixel_farm.core.constants import GRID_SIZE
from pixel_farm.core.exceptions import LandLockedError
from pixel_farm.engine import grid
from pixel_farm.engine.chance import Chance
from pixel_farm.engine.farm import FarmEngine, Notification, new_game_state
from pixel_farm.engine.loop import FarmLoop
from pixel_farm.models.enums import ItemId, MascotId, NotificationKind
from pixel_farm.models.game_state import GameState, Order, OrderLine
from pixel_farm.models.progression import LEVEL_XP


START = 1_700_000_000.0

# The first row of the centre ring, then the next.
CENTRE_CELLS = [row * GRID_SIZE + col for row in (5, 6, 7) for col in range(5, 13)]


class Clock:
    def __init__(self) -> None:
        self.now = START

    def __call__(self) -> float:
        return self.now


def quiet_settings(**simulation: object) -> Settings:
    simulation.setdefault("order_spawn_chance", 0.0)
    simulation.setdefault("event_spawn_chance", 0.0)
    return Settings(
        _env_file=None,
        simulation=SimulationSettings(_env_file=None, **simulation),
        storage=StorageSettings(_env_file=None),
    )


def build_engine(state: GameState | None = None, clock: Clock | None = None, **simulation: object) -> FarmEngine:
    clock = clock or Clock()
    if state is None:
        state = new_game_state(clock.now)
    return FarmEngine(state, settings=quiet_settings(**simulation), chance=Chance(seed=3), clock=clock)


class TestFarmingCycle:
    """Test the basic economy loop."""

    def test_wheat_to_bread(self) -> None:
        """Grow wheat up to level 2, then bake and sell bread."""
        clock = Clock()
        engine = build_engine(clock=clock)
        received: list[Notification] = []
        engine.subscribe(received.append)

        # Ten rounds of five wheat each
        for _ in range(10):
            for cell in CENTRE_CELLS[:5]:
                engine.plant(cell, ItemId.WHEAT)
            clock.now += 5
            summary = engine.harvest_all()
            assert summary.count == 5

        state = engine.state
        assert state.money == 0
        assert state.count(ItemId.WHEAT) == 55
        assert state.xp == 100
        assert state.level == 2
        assert NotificationKind.LEVEL_UP in [note.kind for note in received]

        # Bread unlocks at level 2
        engine.craft("r_bread")
        assert engine.sell(ItemId.BREAD) == 15

        state = engine.state
        assert state.count(ItemId.WHEAT) == 52
        assert state.count(ItemId.BREAD) == 0
        assert state.money == 15
        assert state.xp == 105

    def test_market_order(self) -> None:
        """Fulfil an order with harvested crops."""
        state = new_game_state(START)
        state.inventory = {}
        state.orders = [
            Order(
                id="order_flow",
                items=[OrderLine(item=ItemId.WHEAT, count=3)],
                reward_money=13,
                reward_xp=4,
                expires_at=START + 300,
                requester_name="Farmer Joe",
            )
        ]
        clock = Clock()
        engine = build_engine(state, clock=clock)

        # Grow exactly the three wheat the order asks for
        for cell in CENTRE_CELLS[:3]:
            engine.plant(cell, ItemId.WHEAT)
        clock.now += 5
        engine.harvest_all()

        result = engine.fulfill_order("order_flow")

        after = engine.state
        assert result.money_gained == 13
        assert after.money == 50 - 3 + 13
        assert after.count(ItemId.WHEAT) == 0
        assert after.orders == []

    def test_orders_spawn_and_expire(self) -> None:
        """Ticks create orders which later lapse."""
        clock = Clock()
        engine = build_engine(clock=clock, order_spawn_chance=1.0, max_open_orders=2)

        engine.tick()
        engine.tick()
        assert len(engine.state.orders) == 2

        # Normal orders last five minutes, emergencies two
        clock.now += 301
        notes = engine.tick(clock.now)

        expired = [note for note in notes if note.kind == NotificationKind.ORDER_EXPIRED]
        assert len(expired) == 2
        assert len(engine.state.orders) == 1


class TestExpansionAndMascots:
    """Test land expansion and mascot buffs in play."""

    def test_expand_then_plant_outer_ring(self) -> None:
        """Buy ring 1 and farm it."""
        state = new_game_state(START)
        state.money = 1_600
        clock = Clock()
        engine = build_engine(state, clock=clock)
        outer = 4 * GRID_SIZE + 4

        with pytest.raises(LandLockedError):
            engine.plant(outer, ItemId.WHEAT)

        engine.expand_land()
        engine.plant(outer, ItemId.WHEAT)
        clock.now += 5
        result = engine.harvest(outer)

        assert result.quantity in (1, 2)
        assert engine.state.count(ItemId.WHEAT) == 5 + result.quantity

    def test_chicken_speeds_up_wheat(self) -> None:
        """The chicken makes wheat ready after 3.75 seconds."""
        state = new_game_state(START)
        state.money = 600
        clock = Clock()
        engine = build_engine(state, clock=clock)

        engine.buy_mascot(MascotId.CHICKEN)
        engine.plant(CENTRE_CELLS[0], ItemId.WHEAT)
        clock.now += 3.75

        assert engine.harvest_all().count == 1


class TestEvents:
    """Test a challenge event from start to reward."""

    def test_wheat_rush(self) -> None:
        """Start Wheat Rush on a tick and complete it with one big harvest."""
        state = new_game_state(START)
        state.xp = LEVEL_XP[2]
        clock = Clock()
        engine = build_engine(state, clock=clock, event_spawn_chance=1.0)
        received: list[Notification] = []
        engine.subscribe(received.append)

        # The only event unlocked at level 2
        engine.tick()
        assert engine.state.active_event.event_id == "wheat_shortage"

        for cell in CENTRE_CELLS[:20]:
            engine.plant(cell, ItemId.WHEAT)
        clock.now += 5
        summary = engine.harvest_all()

        after = engine.state
        assert summary.count == 20
        assert any(result.event_completed for result in summary.results)
        assert after.active_event is None
        assert after.money == 50 - 20 + 150
        texts = [note.text for note in received]
        assert "Event Started: Wheat Rush" in texts
        assert "Event Complete! Wheat Rush +150G +100XP" in texts


class TestConcurrentPlay:
    """Test many coroutines sharing one farm."""

    @pytest.mark.asyncio
    async def test_parallel_planting(self) -> None:
        """Concurrent plants on distinct cells all apply exactly once."""
        clock = Clock()
        engine = build_engine(clock=clock)

        async with FarmLoop(engine, tick_seconds=0.01, clock=clock) as loop:
            cells = await asyncio.gather(
                *(loop.submit(engine.plant, cell, ItemId.WHEAT) for cell in CENTRE_CELLS[:10])
            )
            clock.now += 5
            summary = await loop.submit(engine.harvest_all)

        assert sorted(cell[0] for cell in cells) == CENTRE_CELLS[:10]
        assert summary.count == 10
        state = engine.state
        assert state.money == 40
        assert state.count(ItemId.WHEAT) == 15
        assert grid.occupancy_violations(state.plots) == []
