"""Tests for the grid and occupancy model."""

from __future__ import annotations

import pytest

from pixel_farm.core.constants import GRID_SIZE, TOTAL_PLOTS
from pixel_farm.core.exceptions import LandLockedError, OutOfBoundsError, SpaceOccupiedError
from pixel_farm.engine import grid
from pixel_farm.models.enums import ItemId


def cell(row: int, col: int) -> int:
    return row * GRID_SIZE + col


# Crops covering each footprint shape in the catalog.
FOOTPRINT_CROPS = [ItemId.WHEAT, ItemId.SUNFLOWER, ItemId.PUMPKIN, ItemId.SPIRIT_TREE]


class TestTiers:
    """Tests for tier_of."""

    @pytest.mark.parametrize(
        ("row", "col", "tier"),
        [
            (5, 5, 0),
            (12, 12, 0),
            (8, 9, 0),
            (4, 4, 1),
            (13, 8, 1),
            (3, 10, 2),
            (8, 2, 3),
            (1, 1, 4),
            (0, 0, 5),
            (17, 17, 5),
            (0, 9, 5),
        ],
    )
    def test_ring_assignment(self, row: int, col: int, tier: int) -> None:
        """Test concentric ring membership."""
        assert grid.tier_of(cell(row, col)) == tier

    def test_ring_sizes(self) -> None:
        """Test ring 0 is 8x8 and each ring adds one cell per side."""
        tiers = [grid.tier_of(index) for index in range(TOTAL_PLOTS)]
        assert tiers.count(0) == 64
        assert tiers.count(1) == 10 * 10 - 64
        assert tiers.count(5) == TOTAL_PLOTS - 16 * 16


class TestBuildPlots:
    """Tests for grid construction and unlocking."""

    def test_initial_unlocks(self) -> None:
        """Test only ring 0 is unlocked at expansion level 0."""
        plots = grid.build_plots(expansion_level=0)

        assert len(plots) == TOTAL_PLOTS
        assert sum(plot.is_unlocked for plot in plots) == 64
        assert all(plot.id == index for index, plot in enumerate(plots))

    def test_full_expansion(self) -> None:
        """Test every plot is unlocked at the maximum level."""
        plots = grid.build_plots(expansion_level=5)
        assert all(plot.is_unlocked for plot in plots)

    def test_refresh_unlocks(self) -> None:
        """Test expanding unlocks exactly the next ring and keeps crops."""
        plots = grid.build_plots(expansion_level=0)
        grid.place(cell(6, 6), ItemId.WHEAT, plots, now=1.0)

        newly = grid.refresh_unlocks(plots, 1)

        assert newly == 36
        assert plots[cell(4, 4)].is_unlocked is True
        assert plots[cell(3, 3)].is_unlocked is False
        assert plots[cell(6, 6)].planted_crop == ItemId.WHEAT

    def test_grid_size_of(self) -> None:
        """Test grid size recovery from a plots list."""
        assert grid.grid_size_of(grid.build_plots()) == GRID_SIZE
        with pytest.raises(ValueError):
            grid.grid_size_of(grid.build_plots()[:10])


class TestPlacement:
    """Tests for placement validation."""

    def test_footprint_root_first(self) -> None:
        """Test footprint ordering."""
        assert grid.footprint(cell(6, 6), 2, 2) == [cell(6, 6), cell(6, 7), cell(7, 6), cell(7, 7)]

    def test_can_place_empty(self) -> None:
        """Test placing on unlocked empty land."""
        plots = grid.build_plots()
        assert grid.can_place(cell(6, 6), 2, 2, plots) is True

    def test_right_edge(self) -> None:
        """Test a footprint may not wrap past the right edge."""
        plots = grid.build_plots(expansion_level=5)
        error = grid.placement_error(cell(3, GRID_SIZE - 1), 2, 2, plots)
        assert isinstance(error, OutOfBoundsError)

    def test_bottom_edge(self) -> None:
        """Test a footprint may not run off the bottom."""
        plots = grid.build_plots(expansion_level=5)
        error = grid.placement_error(cell(GRID_SIZE - 1, 3), 1, 2, plots)
        assert isinstance(error, OutOfBoundsError)

    def test_index_out_of_range(self) -> None:
        """Test root indices outside the grid."""
        plots = grid.build_plots()
        assert isinstance(grid.placement_error(-1, 1, 1, plots), OutOfBoundsError)
        assert isinstance(grid.placement_error(TOTAL_PLOTS, 1, 1, plots), OutOfBoundsError)

    def test_locked_land(self) -> None:
        """Test a footprint touching locked land is rejected."""
        plots = grid.build_plots(expansion_level=0)
        error = grid.placement_error(cell(12, 12), 2, 2, plots)
        assert isinstance(error, LandLockedError)

    def test_occupied(self) -> None:
        """Test overlapping an existing footprint is rejected."""
        plots = grid.build_plots()
        grid.place(cell(6, 6), ItemId.PUMPKIN, plots, now=0.0)

        error = grid.placement_error(cell(7, 7), 1, 1, plots)

        assert isinstance(error, SpaceOccupiedError)
        assert error.details["index"] == cell(7, 7)


class TestPlaceAndClear:
    """Tests for place, clear and resolve_root."""

    def test_place_marks_cells(self) -> None:
        """Test the root holds the crop and the rest point at it."""
        plots = grid.build_plots()
        root = cell(6, 6)

        cells = grid.place(root, ItemId.PUMPKIN, plots, now=12.0)

        assert cells[0] == root
        assert plots[root].planted_crop == ItemId.PUMPKIN
        assert plots[root].plant_time == 12.0
        assert plots[root].occupied_by is None
        for covered in cells[1:]:
            assert plots[covered].occupied_by == root
            assert plots[covered].planted_crop is None
        assert grid.occupancy_violations(plots) == []

    def test_resolve_root(self) -> None:
        """Test occupied cells redirect to their root in one hop."""
        plots = grid.build_plots()
        root = cell(6, 6)
        grid.place(root, ItemId.PUMPKIN, plots, now=0.0)

        assert grid.resolve_root(cell(7, 7), plots) == root
        assert grid.resolve_root(root, plots) == root
        assert grid.resolve_root(cell(9, 9), plots) == cell(9, 9)

    def test_clear_empty_root(self) -> None:
        """Test clearing an empty plot is a no-op."""
        plots = grid.build_plots()
        assert grid.clear(cell(6, 6), plots) == []

    @pytest.mark.parametrize("crop", FOOTPRINT_CROPS)
    def test_place_clear_round_trip(self, crop: ItemId) -> None:
        """Test every valid placement clears back to an all-empty grid."""
        plots = grid.build_plots(expansion_level=5)
        width, height = grid.footprint_of(crop)

        for index in range(TOTAL_PLOTS):
            if not grid.can_place(index, width, height, plots):
                continue
            placed = grid.place(index, crop, plots, now=0.0)
            assert grid.occupancy_violations(plots) == []

            cleared = grid.clear(index, plots)

            assert cleared == placed
            assert all(plot.is_empty for plot in plots)

    def test_occupancy_violations_detected(self) -> None:
        """Test a dangling occupied cell is reported."""
        plots = grid.build_plots()
        plots[cell(6, 6)].occupied_by = cell(9, 9)

        problems = grid.occupancy_violations(plots)

        assert problems
        assert "points at empty plot" in problems[0]
