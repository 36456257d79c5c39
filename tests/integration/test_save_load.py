"""Integration tests for save persistence.

Tests saving to disk, loading after time away and migrating old saves.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from pixel_farm.core.config import Settings, SimulationSettings, StorageSettings
from pixel_farm.core.exceptions import MalformedSaveError
from pixel_farm.engine.chance import Chance
from pixel_farm.engine.farm import FarmEngine, Notification, new_game_state
from pixel_farm.models.enums import ItemId, MascotId, NotificationKind
from pixel_farm.storage.save_file import SaveFile


START = 1_700_000_000.0
CENTRE = 6 * 18 + 6


def build_engine(now: float = START) -> FarmEngine:
    settings = Settings(
        _env_file=None,
        simulation=SimulationSettings(_env_file=None, order_spawn_chance=0.0, event_spawn_chance=0.0),
        storage=StorageSettings(_env_file=None),
    )
    return FarmEngine(settings=settings, chance=Chance(seed=5), clock=lambda: now)


class TestSaveAndResume:
    """Test a session saved to disk and resumed later."""

    def test_resume_after_two_hours(self, tmp_path: Path) -> None:
        """Crops finish while away, are reported, and can then be harvested."""
        save_file = SaveFile(tmp_path / "farm.json")

        # Play a little, then save
        engine = build_engine()
        engine.plant(CENTRE, ItemId.WHEAT)
        engine.plant(CENTRE + 1, ItemId.LETTUCE)
        engine.sell(ItemId.WHEAT)
        save_file.write(engine.save())

        # Come back two hours later
        later = START + 2 * 60 * 60
        resumed = build_engine(later)
        received: list[Notification] = []
        resumed.subscribe(received.append)
        report = resumed.load(save_file.read())

        assert report.ready_count == 2
        assert [note.kind for note in received] == [NotificationKind.OFFLINE] * 2
        assert received[1].text == "You were away for 120 minutes."

        state = resumed.state
        assert state.money == engine.state.money
        assert state.plots[CENTRE].planted_crop == ItemId.WHEAT
        assert state.last_save_time == later

        summary = resumed.harvest_all()
        assert summary.totals == {ItemId.WHEAT: 1, ItemId.LETTUCE: 1}

    def test_mascots_and_texture_persist(self, tmp_path: Path) -> None:
        """Owned mascots and cosmetic settings survive a save."""
        save_file = SaveFile(tmp_path / "farm.json")
        state = new_game_state(START)
        state.money = 5_000
        engine = FarmEngine(state, chance=Chance(seed=1), clock=lambda: START)
        engine.buy_mascot(MascotId.CHICKEN)
        engine.buy_mascot(MascotId.SHEEP)
        engine.equip_mascot(MascotId.SHEEP)
        engine.apply_texture("pine_forest.png")
        save_file.write(engine.save())

        resumed = build_engine()
        resumed.load(save_file.read())

        state = resumed.state
        assert state.owned_mascots == [MascotId.CHICKEN, MascotId.SHEEP]
        assert state.active_mascot == MascotId.SHEEP
        assert state.forest_texture == "pine_forest.png"


class TestLegacySaves:
    """Test loading saves from the 12x12 era."""

    def test_legacy_file_migrates(self, tmp_path: Path) -> None:
        """An old 144-plot save loads onto the 18x18 grid."""
        plots = [{"id": index, "plantedCrop": None, "plantTime": None} for index in range(144)]
        plots[13] = {"id": 13, "plantedCrop": "LETTUCE", "plantTime": START}
        path = tmp_path / "old.json"
        path.write_text(json.dumps({"money": 75, "xp": 20, "inventory": {"WHEAT": 1}, "plots": plots}))

        engine = build_engine(START + 60)
        engine.load(SaveFile(path).read())

        state = engine.state
        moved = (1 + 3) * 18 + (1 + 3)
        assert len(state.plots) == 324
        assert state.plots[moved].planted_crop == ItemId.LETTUCE
        assert state.expansion_level == 2
        assert state.money == 75

        # The migrated crop harvests like any other
        result = engine.harvest(moved)
        assert result.item_id == ItemId.LETTUCE


    def test_millisecond_file_reconciles(self, tmp_path: Path) -> None:
        """Crops in a millisecond-stamped save ripen and are reported."""
        plots = [{"id": index, "plantedCrop": None, "plantTime": None} for index in range(144)]
        plots[0] = {"id": 0, "plantedCrop": "WHEAT", "plantTime": (START - 2) * 1000}
        plots[1] = {"id": 1, "plantedCrop": "WHEAT", "plantTime": (START - 3600) * 1000}
        path = tmp_path / "old.json"
        path.write_text(json.dumps({"money": 10, "xp": 0, "lastSaveTime": START * 1000, "plots": plots}))

        engine = build_engine(START + 60)
        report = engine.load(SaveFile(path).read())

        # Only the wheat that finished after the save counts as grown while away
        assert report.ready_count == 1
        assert report.elapsed_seconds == 60
        assert engine.harvest_all().count == 2


class TestCorruptSaves:
    """Test that bad saves never replace a running game."""

    def test_corrupt_file(self, tmp_path: Path) -> None:
        """A truncated file is rejected before it reaches the engine."""
        path = tmp_path / "farm.json"
        path.write_text('{"money": 10, "plots": [', encoding="utf-8")

        with pytest.raises(MalformedSaveError):
            SaveFile(path).read()

    def test_invalid_snapshot_keeps_game(self, tmp_path: Path) -> None:
        """A well-formed file with bad contents leaves state untouched."""
        save_file = SaveFile(tmp_path / "farm.json")
        save_file.write({"money": 10, "plots": [{"id": 0}]})
        engine = build_engine()
        engine.plant(CENTRE, ItemId.WHEAT)
        before = engine.state

        with pytest.raises(MalformedSaveError):
            engine.load(save_file.read())

        assert engine.state == before
