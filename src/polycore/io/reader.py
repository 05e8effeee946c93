"""Polygon reader for loading JSON vertex files.

This module provides the PolygonReader class for loading polygon files
into the Polygon domain model.
"""

import json
from pathlib import Path
from typing import Any

from polycore.domain import Polygon
from polycore.exceptions import InvalidPolygonError, PolygonLoadError


class PolygonReader:
    """Loads polygon files.

    Example:
        reader = PolygonReader(Path("shape.json"))
        reader.load()
        polygon = reader.polygon

        with PolygonReader(Path("shape.json")) as reader:
            print(len(reader.polygon))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the polygon reader.

        Args:
            path: Path to the JSON polygon file
        """
        self._path = path
        self._polygon: Polygon | None = None

    def load(self) -> Polygon:
        """Load and validate the polygon file.

        Returns:
            The loaded polygon

        Raises:
            PolygonLoadError: If the file is missing, is not valid JSON or
                does not describe a valid polygon
        """
        if not self._path.is_file():
            raise PolygonLoadError(str(self._path), "file not found")

        try:
            data: Any = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise PolygonLoadError(str(self._path), str(e)) from e
        except json.JSONDecodeError as e:
            raise PolygonLoadError(str(self._path), f"invalid JSON: {e.msg}") from e

        if not isinstance(data, dict):
            raise PolygonLoadError(str(self._path), "top-level JSON value must be an object")

        try:
            self._polygon = Polygon.from_dict(data)
        except (InvalidPolygonError, TypeError) as e:
            raise PolygonLoadError(str(self._path), str(e)) from e

        return self._polygon

    @property
    def path(self) -> Path:
        """Path of the polygon file."""
        return self._path

    @property
    def polygon(self) -> Polygon:
        """Return the loaded polygon.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._polygon is None:
            raise RuntimeError("Polygon not loaded. Call load() first.")
        return self._polygon

    def close(self) -> None:
        """Release the loaded polygon."""
        self._polygon = None

    def __enter__(self) -> "PolygonReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
