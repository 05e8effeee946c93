"""Domain models for polycore.

This module contains the value types shared by every core algorithm:

- Point: An immutable 2D point
- Polygon: A closed polygon owning its vertex sequence
- MomentResult: Area, centroid, perimeter and moments of inertia
- CircleFit / EllipseFit: Radial fit results, tagged by FitKind
"""

from polycore.domain.polygon import DEFAULT_ACCURACY, Point, Polygon
from polycore.domain.results import CircleFit, EllipseFit, FitKind, FitResult, MomentResult

__all__: list[str] = [
    "DEFAULT_ACCURACY",
    # Enums
    "FitKind",
    # Core types
    "Point",
    "Polygon",
    # Results
    "CircleFit",
    "EllipseFit",
    "FitResult",
    "MomentResult",
]
