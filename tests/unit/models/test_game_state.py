"""Tests for game state models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pixel_farm.models.enums import ItemId, MascotEffect, MascotId, WeatherType
from pixel_farm.models.game_state import ActiveEvent, GameState, Order, OrderLine, Plot
from pixel_farm.models.progression import LEVEL_XP


class TestPlot:
    """Tests for the Plot model."""

    def test_empty_plot(self) -> None:
        """Test a plot starts empty."""
        plot = Plot(id=0)
        assert plot.is_empty is True
        assert plot.is_root is False

    def test_root_plot(self) -> None:
        """Test a planted plot is a root."""
        plot = Plot(id=0, planted_crop=ItemId.WHEAT, plant_time=10.0)
        assert plot.is_root is True
        assert plot.is_empty is False

    def test_occupied_cell(self) -> None:
        """Test a covered cell is neither empty nor a root."""
        plot = Plot(id=1, occupied_by=0)
        assert plot.is_root is False
        assert plot.is_empty is False

    def test_tier_bounds(self) -> None:
        """Test tiers are limited to 0..5."""
        with pytest.raises(ValidationError):
            Plot(id=0, tier=6)

    def test_camel_case_aliases(self) -> None:
        """Test save-file keys are accepted and produced."""
        plot = Plot.model_validate({"id": 3, "plantedCrop": "CORN", "plantTime": 5.0, "isUnlocked": False})

        assert plot.planted_crop == ItemId.CORN
        assert plot.is_unlocked is False
        dumped = plot.model_dump(by_alias=True)
        assert "plantedCrop" in dumped
        assert "occupiedBy" in dumped


class TestOrder:
    """Tests for Order and OrderLine."""

    def test_requirements(self) -> None:
        """Test lines convert into a requirement mapping."""
        order = Order(
            id="order_1",
            items=[OrderLine(item=ItemId.WHEAT, count=4), OrderLine(item=ItemId.BREAD, count=1)],
            reward_money=30,
            reward_xp=10,
            expires_at=100.0,
        )
        assert order.requirements() == {ItemId.WHEAT: 4, ItemId.BREAD: 1}

    def test_expiry_is_strict(self) -> None:
        """Test an order is still open at exactly its expiry time."""
        order = Order(id="order_1", items=[], reward_money=0, reward_xp=0, expires_at=100.0)
        assert order.is_expired(100.0) is False
        assert order.is_expired(100.1) is True

    def test_count_must_be_positive(self) -> None:
        """Test zero-count lines are rejected."""
        with pytest.raises(ValidationError):
            OrderLine(item=ItemId.WHEAT, count=0)


class TestActiveEvent:
    """Tests for ActiveEvent."""

    def test_window_validated(self) -> None:
        """Test the end time cannot precede the start."""
        with pytest.raises(ValidationError):
            ActiveEvent(event_id="wheat_shortage", start_time=10.0, end_time=5.0)

    def test_progress_non_negative(self) -> None:
        """Test progress cannot go negative."""
        with pytest.raises(ValidationError):
            ActiveEvent(event_id="wheat_shortage", start_time=0.0, end_time=5.0, progress=-1)


class TestGameState:
    """Tests for the GameState aggregate."""

    def test_defaults(self) -> None:
        """Test a default state matches a fresh game."""
        state = GameState()

        assert state.money == 50
        assert state.xp == 0
        assert state.inventory == {ItemId.WHEAT: 5}
        assert state.weather == WeatherType.SUNNY
        assert state.game_time == 8.0
        assert state.expansion_level == 0
        assert state.active_event is None

    def test_level_derived_from_xp(self) -> None:
        """Test level and unlocks follow xp on every change."""
        state = GameState()
        assert state.level == 1
        assert ItemId.CORN not in state.unlocked_items

        state.xp = LEVEL_XP[2]

        assert state.level == 2
        assert ItemId.CORN in state.unlocked_items

    def test_money_cannot_go_negative(self) -> None:
        """Test assignment is validated."""
        state = GameState()
        with pytest.raises(ValidationError):
            state.money = -1

    def test_game_time_range(self) -> None:
        """Test the clock is limited to [0, 24)."""
        with pytest.raises(ValidationError):
            GameState(game_time=24.0)

    def test_active_mascot_must_be_owned(self) -> None:
        """Test an unowned mascot cannot be active."""
        with pytest.raises(ValidationError):
            GameState(active_mascot=MascotId.COW)

    def test_active_effect(self) -> None:
        """Test the active mascot's buff is exposed."""
        state = GameState(owned_mascots=[MascotId.PIG], active_mascot=MascotId.PIG)
        assert state.active_effect == MascotEffect.XP_BOOST
        assert GameState().active_effect is None

    def test_count_and_get_order(self) -> None:
        """Test inventory and order helpers."""
        order = Order(id="order_1", items=[], reward_money=0, reward_xp=0, expires_at=1.0)
        state = GameState(orders=[order])

        assert state.count(ItemId.WHEAT) == 5
        assert state.count(ItemId.CORN) == 0
        assert state.get_order("order_1") is not None
        assert state.get_order("order_2") is None

    def test_computed_fields_serialized(self) -> None:
        """Test level and unlocked items appear in dumps."""
        dumped = GameState().model_dump(mode="json", by_alias=True)

        assert dumped["level"] == 1
        assert dumped["unlockedItems"] == ["WHEAT", "LETTUCE"]
        assert dumped["lastSaveTime"] == 0.0
