"""Pixel Farm - simulation core for an incremental farming game.

The core owns the game state and the rules that change it. Rendering,
input handling and texture generation live outside and talk to it through
FarmEngine's intents, its state snapshot and its notifications.

Example:
    >>> from pixel_farm import FarmEngine, SaveFile
    >>>
    >>> engine = FarmEngine()
    >>> engine.subscribe(lambda note: print(note.text))
    >>> engine.plant(114, "WHEAT")
    >>> SaveFile().write(engine.save())

Modules:
    core: Configuration, logging, constants and exceptions.
    models: Pydantic schemas, catalog data and progression.
    engine: Grid, modifiers, orders, events, weather and the FarmEngine.
    storage: Snapshot import/export, legacy migration and the save file.
"""

from __future__ import annotations

# Core
from pixel_farm.core.config import Settings, get_settings
from pixel_farm.core.exceptions import MalformedSaveError, PixelFarmError
from pixel_farm.core.logging import configure_logging, get_logger

# Models
from pixel_farm.models import GameState, ItemId, MascotId, NotificationKind, Plot

# Engine
from pixel_farm.engine import Chance, FarmEngine, FarmLoop, Notification, OfflineReport

# Storage
from pixel_farm.storage import SaveFile, export_snapshot, import_snapshot


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "PixelFarmError",
    "MalformedSaveError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "GameState",
    "Plot",
    "ItemId",
    "MascotId",
    "NotificationKind",
    # Engine
    "Chance",
    "FarmEngine",
    "FarmLoop",
    "Notification",
    "OfflineReport",
    # Storage
    "SaveFile",
    "export_snapshot",
    "import_snapshot",
]
