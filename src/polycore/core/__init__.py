"""Core algorithms for polycore.

This module contains the geometry core:

- Geometry primitives (tolerant comparison, point-in-polygon, intersections)
- Clipping of a polygon against a convex clipper (intersection and union)
- Convex hull extraction (gift wrapping)
- Boundary simplification (radial filter + Douglas-Peucker)
- Mass properties (area, centroid, perimeter, moments of inertia)
- Least-squares circle and ellipse fitting
- Rigid transforms (rotate, translate) and vertex slicing by box or circle

All functions are synchronous and hold no state between calls. Operations
that produce a polygon return a new instance, except simplify and the
transforms, which rewrite the polygon they are given.

Key functions:
- intersect / union: Clip a polygon against a convex polygon
- convex_hull: Hull vertices as (xs, ys), counter-clockwise
- simplify: Remove vertices within a distance tolerance
- polygon_moments: Area, centroid, perimeter and inertia
- radial_fit: Fit a circle or an ellipse to polygon vertices
- least_squares: Linear least-squares solve used by the fitters
"""

from polycore.core.clipping import clip_points, intersect, union
from polycore.core.fitting import fit_circle, fit_ellipse, radial_fit
from polycore.core.geometry import (
    approx_equal,
    closest_vertex,
    cross,
    line_polygon_intersections,
    point_in_polygon,
    point_on_polygon,
    point_on_segment,
    safe_norm2,
    segment_intersection,
)
from polycore.core.hull import convex_hull, convex_hull_points
from polycore.core.linalg import gauss_solve, least_squares, normal_equations
from polycore.core.moments import polygon_moments
from polycore.core.simplify import douglas_peucker, radial_filter, simplify, simplify_points
from polycore.core.transform import move_along, move_by, rotate, slice_box, slice_circle

__all__ = [
    # Geometry primitives
    "approx_equal",
    "closest_vertex",
    "cross",
    "line_polygon_intersections",
    "point_in_polygon",
    "point_on_polygon",
    "point_on_segment",
    "safe_norm2",
    "segment_intersection",
    # Clipping
    "clip_points",
    "intersect",
    "union",
    # Hull
    "convex_hull",
    "convex_hull_points",
    # Simplification
    "douglas_peucker",
    "radial_filter",
    "simplify",
    "simplify_points",
    # Transforms
    "move_along",
    "move_by",
    "rotate",
    "slice_box",
    "slice_circle",
    # Moments
    "polygon_moments",
    # Fitting
    "fit_circle",
    "fit_ellipse",
    "radial_fit",
    # Linear solver
    "gauss_solve",
    "least_squares",
    "normal_equations",
]
