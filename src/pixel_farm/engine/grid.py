"""Grid and occupancy model.

The farm is a square lattice of plots stored as one row-major list. Crops
may span several cells: the top-left cell is the *root* and holds the crop,
every other covered cell stores the root's index in ``occupied_by``.

Land is divided into concentric rings (tiers) around the centre. Ring 0 is
the central box; each further ring grows the box by one cell per side. A
plot's ring never changes, only whether it is unlocked.

All functions here operate on a plots list in place or read it; they never
touch money or inventory. Callers must validate with ``placement_error`` or
``can_place`` before calling ``place``.
"""

from __future__ import annotations

from math import isqrt

from pixel_farm.core.constants import GRID_SIZE, INNER_RING_SIZE, MAX_TIER
from pixel_farm.core.exceptions import (
    LandLockedError,
    OutOfBoundsError,
    PlotError,
    SpaceOccupiedError,
)
from pixel_farm.core.logging import get_logger
from pixel_farm.models.catalog import ITEMS
from pixel_farm.models.enums import ItemId
from pixel_farm.models.game_state import Plot


logger = get_logger(__name__)


# =============================================================================
# Geometry
# =============================================================================


def grid_size_of(plots: list[Plot]) -> int:
    """Side length of a square plots list."""
    size = isqrt(len(plots))
    if size * size != len(plots):
        raise ValueError(f"plots list of length {len(plots)} is not square")
    return size


def tier_of(index: int, grid_size: int = GRID_SIZE) -> int:
    """Land ring of a plot index.

    Ring 0 is the central INNER_RING_SIZE box; a cell's ring is how many
    cells it lies outside that box along its worse axis, capped at MAX_TIER.

    Args:
        index: Row-major plot index.
        grid_size: Side length of the grid.

    Returns:
        Ring in 0..MAX_TIER.
    """
    x = index % grid_size
    y = index // grid_size
    low = (grid_size - INNER_RING_SIZE) // 2
    high = low + INNER_RING_SIZE - 1
    distance = max(low - x, x - high, low - y, y - high, 0)
    return min(distance, MAX_TIER)


def build_plots(expansion_level: int = 0, grid_size: int = GRID_SIZE) -> list[Plot]:
    """Create an empty grid with tiers and unlock flags set."""
    plots = []
    for index in range(grid_size * grid_size):
        tier = tier_of(index, grid_size)
        plots.append(Plot(id=index, tier=tier, is_unlocked=tier <= expansion_level))
    return plots


def refresh_unlocks(plots: list[Plot], expansion_level: int) -> int:
    """Re-derive every plot's unlocked flag from its fixed tier.

    Crop and occupancy state is left untouched.

    Returns:
        Number of plots that became unlocked.
    """
    newly_unlocked = 0
    for plot in plots:
        unlocked = plot.tier <= expansion_level
        if unlocked and not plot.is_unlocked:
            newly_unlocked += 1
        if plot.is_unlocked != unlocked:
            plot.is_unlocked = unlocked
    return newly_unlocked


def footprint_of(item_id: ItemId) -> tuple[int, int]:
    """(width, height) of a crop's footprint."""
    item = ITEMS[item_id]
    return item.width, item.height


def footprint(root_index: int, width: int, height: int, grid_size: int = GRID_SIZE) -> list[int]:
    """Indices covered by a width x height footprint, root first.

    Does not check bounds; see ``placement_error``.
    """
    return [
        root_index + row * grid_size + col
        for row in range(height)
        for col in range(width)
    ]


# =============================================================================
# Placement
# =============================================================================


def placement_error(
    root_index: int,
    width: int,
    height: int,
    plots: list[Plot],
) -> PlotError | None:
    """Explain why a footprint cannot be placed, or return None if it can.

    Checks run in order: root in range, footprint within the right and
    bottom edges, every covered cell unlocked, every covered cell empty.
    """
    grid_size = grid_size_of(plots)
    total = len(plots)

    if root_index < 0 or root_index >= total:
        return OutOfBoundsError("Plot index out of range", index=root_index)

    row, col = divmod(root_index, grid_size)
    if col + width > grid_size or row + height > grid_size:
        return OutOfBoundsError(
            "Not enough space!",
            index=root_index,
            details={"width": width, "height": height},
        )

    cells = footprint(root_index, width, height, grid_size)
    if any(cell >= total for cell in cells):
        return OutOfBoundsError("Not enough space!", index=root_index)

    for cell in cells:
        if not plots[cell].is_unlocked:
            return LandLockedError("This land is still locked!", index=cell)

    for cell in cells:
        plot = plots[cell]
        if plot.planted_crop is not None or plot.occupied_by is not None:
            return SpaceOccupiedError("Not enough space!", index=cell)

    return None


def can_place(root_index: int, width: int, height: int, plots: list[Plot]) -> bool:
    """Whether a footprint fits at root_index. No side effects."""
    return placement_error(root_index, width, height, plots) is None


def place(root_index: int, crop_id: ItemId, plots: list[Plot], now: float) -> list[int]:
    """Plant a crop with its root at root_index.

    Only valid after ``can_place`` succeeded against the same plots list.

    Returns:
        The covered indices, root first.
    """
    width, height = footprint_of(crop_id)
    cells = footprint(root_index, width, height, grid_size_of(plots))

    root = plots[root_index]
    root.planted_crop = crop_id
    root.plant_time = now
    root.is_withered = False
    root.occupied_by = None
    for cell in cells[1:]:
        plots[cell].occupied_by = root_index

    logger.debug("Footprint placed", root=root_index, crop=crop_id, cells=len(cells))
    return cells


def clear(root_index: int, plots: list[Plot]) -> list[int]:
    """Remove the crop rooted at root_index and free its whole footprint.

    Returns:
        The freed indices, root first. Empty if the root held no crop.
    """
    root = plots[root_index]
    if root.planted_crop is None:
        return []

    width, height = footprint_of(root.planted_crop)
    cells = footprint(root_index, width, height, grid_size_of(plots))

    root.planted_crop = None
    root.plant_time = None
    root.is_withered = False
    root.occupied_by = None
    for cell in cells[1:]:
        if cell < len(plots) and plots[cell].occupied_by == root_index:
            plots[cell].occupied_by = None
            plots[cell].planted_crop = None

    logger.debug("Footprint cleared", root=root_index, cells=len(cells))
    return cells


def resolve_root(index: int, plots: list[Plot]) -> int:
    """Redirect an occupied cell to its root.

    Terminates in one hop since only roots are targets of ``occupied_by``.
    """
    occupied_by = plots[index].occupied_by
    return index if occupied_by is None else occupied_by


# =============================================================================
# Invariant Audit
# =============================================================================


def occupancy_violations(plots: list[Plot]) -> list[str]:
    """List every breach of the occupancy invariant.

    Each plot must be empty, a crop root, or an occupied cell pointing at a
    root whose footprint covers it. An empty list means the grid is
    consistent.
    """
    problems: list[str] = []
    grid_size = grid_size_of(plots)
    total = len(plots)

    for plot in plots:
        if plot.planted_crop is not None and plot.occupied_by is not None:
            problems.append(f"plot {plot.id} is both a root and an occupied cell")
            continue
        if plot.occupied_by is None:
            continue

        root_index = plot.occupied_by
        if root_index >= total:
            problems.append(f"plot {plot.id} points outside the grid ({root_index})")
            continue
        root = plots[root_index]
        if root.occupied_by is not None:
            problems.append(f"plot {plot.id} points at non-root {root_index}")
            continue
        if root.planted_crop is None:
            problems.append(f"plot {plot.id} points at empty plot {root_index}")
            continue
        width, height = footprint_of(root.planted_crop)
        if plot.id not in footprint(root_index, width, height, grid_size)[1:]:
            problems.append(f"plot {plot.id} lies outside the footprint of {root_index}")

    for plot in plots:
        if not plot.is_root:
            continue
        width, height = footprint_of(plot.planted_crop)
        row, col = divmod(plot.id, grid_size)
        if col + width > grid_size or row + height > grid_size:
            problems.append(f"root {plot.id} footprint crosses the grid edge")
            continue
        for cell in footprint(plot.id, width, height, grid_size)[1:]:
            if plots[cell].occupied_by != plot.id:
                problems.append(f"root {plot.id} does not own covered cell {cell}")

    return problems


__all__ = [
    "grid_size_of",
    "tier_of",
    "build_plots",
    "refresh_unlocks",
    "footprint_of",
    "footprint",
    "placement_error",
    "can_place",
    "place",
    "clear",
    "resolve_root",
    "occupancy_violations",
]
