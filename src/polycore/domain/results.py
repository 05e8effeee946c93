"""Result types produced by the polygon core.

This module defines the value objects returned by core operations:
- MomentResult: Area, centroid, perimeter and second moments of area
- FitKind: Enum selecting the radial fit shape
- CircleFit / EllipseFit: Tagged radial fit results
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar


class FitKind(str, Enum):
    """Shape recovered by a radial fit."""

    CIRCLE = "circle"
    ELLIPSE = "ellipse"


@dataclass(frozen=True, slots=True)
class MomentResult:
    """Mass properties of a polygon.

    Global moments (ixx, iyy, ixy) are taken about the coordinate origin,
    centroidal moments (iuu, ivv, iuv) about axes through the centroid that
    are parallel to the coordinate axes.

    Attributes:
        area: Polygon area (always non-negative)
        centroid_x: X coordinate of the centroid
        centroid_y: Y coordinate of the centroid
        perimeter: Sum of all edge lengths, closing edge included
        ixx: Second moment of area about the X axis
        iyy: Second moment of area about the Y axis
        ixy: Product moment of area about the origin
        iuu: Centroidal second moment about the U (horizontal) axis
        ivv: Centroidal second moment about the V (vertical) axis
        iuv: Centroidal product moment
    """

    area: float
    centroid_x: float
    centroid_y: float
    perimeter: float
    ixx: float
    iyy: float
    ixy: float
    iuu: float
    ivv: float
    iuv: float

    @property
    def centroid(self) -> tuple[float, float]:
        """Centroid as an (x, y) tuple."""
        return (self.centroid_x, self.centroid_y)

    def as_tuple(self) -> tuple[float, ...]:
        """Return all values in declaration order."""
        return (
            self.area,
            self.centroid_x,
            self.centroid_y,
            self.perimeter,
            self.ixx,
            self.iyy,
            self.ixy,
            self.iuu,
            self.ivv,
            self.iuv,
        )

    def to_dict(self) -> dict[str, float]:
        """Serialize to dictionary."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CircleFit:
    """Circle recovered by a radial fit.

    Attributes:
        center_x: X coordinate of the circle center
        center_y: Y coordinate of the circle center
        radius: Circle radius
    """

    kind: ClassVar[FitKind] = FitKind.CIRCLE

    center_x: float
    center_y: float
    radius: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, including the fit kind."""
        return {"kind": self.kind.value, **asdict(self)}


@dataclass(frozen=True, slots=True)
class EllipseFit:
    """Ellipse recovered by a radial fit.

    Attributes:
        center_x: X coordinate of the ellipse center
        center_y: Y coordinate of the ellipse center
        semi_major: Length of the semi-major axis
        semi_minor: Length of the semi-minor axis
        rotation_degrees: Angle from the X axis to the major axis, in [0, 180)
    """

    kind: ClassVar[FitKind] = FitKind.ELLIPSE

    center_x: float
    center_y: float
    semi_major: float
    semi_minor: float
    rotation_degrees: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, including the fit kind."""
        return {"kind": self.kind.value, **asdict(self)}


FitResult = CircleFit | EllipseFit
