"""Storage module for Pixel Farm persistence.

Provides:
- Snapshot export/import with validation and 12x12 save migration
- A JSON save file on local disk
"""

from pixel_farm.storage.snapshot import (
    export_snapshot,
    import_snapshot,
    legacy_to_current,
    migrate_legacy_plots,
)
from pixel_farm.storage.save_file import SaveFile

__all__ = [
    "export_snapshot",
    "import_snapshot",
    "legacy_to_current",
    "migrate_legacy_plots",
    "SaveFile",
]
