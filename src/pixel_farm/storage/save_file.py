"""JSON save file on local disk.

A thin collaborator: it moves snapshot dicts to and from a file and leaves
validation to ``import_snapshot``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pixel_farm.core.config import get_settings
from pixel_farm.core.exceptions import MalformedSaveError
from pixel_farm.core.logging import get_logger


logger = get_logger(__name__)


class SaveFile:
    """A snapshot stored as a JSON document.

    Example:
        >>> save_file = SaveFile("saves/farm.json")
        >>> save_file.write(engine.save())
        >>> engine.load(save_file.read())
    """

    def __init__(self, path: str | Path | None = None) -> None:
        """Initialize the save file.

        Args:
            path: File location. If None, uses the configured save path.
        """
        if path is None:
            self.path = get_settings().storage.save_path
        else:
            self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def write(self, snapshot: dict[str, Any]) -> Path:
        """Write a snapshot, replacing any previous save.

        The document is written to a sibling temp file first and moved into
        place, so a crash mid-write leaves the old save intact.

        Returns:
            The path written to.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        temp_path.write_text(json.dumps(snapshot, indent=2), encoding="utf-8")
        temp_path.replace(self.path)

        logger.info("Game saved", path=str(self.path))
        return self.path

    def read(self) -> dict[str, Any]:
        """Read the stored snapshot.

        Raises:
            FileNotFoundError: If nothing has been saved yet.
            MalformedSaveError: If the file is not a JSON object.
        """
        text = self.path.read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedSaveError(
                "Invalid save file",
                details={"path": str(self.path), "reason": exc.msg},
            ) from exc

        if not isinstance(data, dict):
            raise MalformedSaveError(
                "Invalid save file",
                details={"path": str(self.path), "reason": "top level is not an object"},
            )

        logger.debug("Save file read", path=str(self.path))
        return data


__all__ = ["SaveFile"]
