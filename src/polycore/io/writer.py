"""Polygon writer for saving JSON vertex files."""

import json
from pathlib import Path

from polycore.domain import Polygon
from polycore.exceptions import PolygonSaveError


class PolygonWriter:
    """Writes polygons as JSON vertex files.

    Example:
        writer = PolygonWriter(Path("hull.json"))
        writer.save(polygon)
    """

    def __init__(self, output_path: Path, indent: int | None = 2) -> None:
        """Initialize the polygon writer.

        Args:
            output_path: Path where the polygon will be saved
            indent: JSON indentation (None for a single line)
        """
        self._output_path = output_path
        self._indent = indent

    def save(self, polygon: Polygon) -> Path:
        """Save a polygon to the output path.

        Args:
            polygon: Polygon to write

        Returns:
            The path that was written

        Raises:
            PolygonSaveError: If the file cannot be written
        """
        text = json.dumps(polygon.to_dict(), indent=self._indent)
        try:
            self._output_path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise PolygonSaveError(str(self._output_path), str(e)) from e
        return self._output_path
