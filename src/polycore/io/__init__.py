"""Polygon file I/O for polycore.

This module reads and writes polygon vertex files (JSON) and converts them
to and from the Polygon domain model.

Accepted layouts:
- {"points": [[x, y], ...], "accuracy": 1e-10}
- {"x": [...], "y": [...]}

Key classes:
- PolygonReader: Load a polygon file
- PolygonWriter: Save a polygon file
"""

from polycore.io.reader import PolygonReader
from polycore.io.writer import PolygonWriter

__all__ = [
    "PolygonReader",
    "PolygonWriter",
]
